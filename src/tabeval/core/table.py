"""
table.py

Lookup table types used by the transform functions T and U.

Classes:
    TableSample: One (x, t, u) record of a lookup table.
    Table: An ordered, read-only sequence of samples stored as three numpy columns.
"""

from dataclasses import dataclass, field
from typing import Iterable, Iterator, Tuple, Union

import numpy as np

from tabeval.data.constants import FileConstants


@dataclass(frozen=True)
class TableSample:
    """A single (x, t, u) record."""
    x: float
    t: float
    u: float


@dataclass(frozen=True, eq=False)
class Table:
    """
    Ordered sequence of samples for piecewise-linear interpolation.

    Samples keep the order in which they were supplied; nothing is sorted.
    The column arrays are made read-only so a loaded table cannot change.

    Attributes:
        x (np.ndarray): Abscissae in source order.
        t (np.ndarray): Values of the ``t`` column.
        u (np.ndarray): Values of the ``u`` column.
        source (str): Where the samples came from, for diagnostics.
    """
    x: np.ndarray = field(default_factory=lambda: np.empty(0))
    t: np.ndarray = field(default_factory=lambda: np.empty(0))
    u: np.ndarray = field(default_factory=lambda: np.empty(0))
    source: str = "<memory>"

    def __post_init__(self):
        columns = []
        for name in FileConstants.COLUMNS:
            column = np.array(getattr(self, name), dtype=np.float64).reshape(-1)
            column.setflags(write=False)
            object.__setattr__(self, name, column)
            columns.append(column)
        lengths = {len(column) for column in columns}
        if len(lengths) != 1:
            raise ValueError(f"Column length mismatch in table {self.source}: "
                             f"x({len(self.x)}), t({len(self.t)}), u({len(self.u)})")

    @classmethod
    def from_samples(cls, samples: Iterable[Union[TableSample, Tuple[float, float, float]]],
                     source: str = "<memory>") -> "Table":
        """Build a table from samples or plain (x, t, u) triples."""
        rows = [tuple(s) if not isinstance(s, TableSample) else (s.x, s.t, s.u) for s in samples]
        for row in rows:
            if len(row) != 3:
                raise ValueError(f"Table rows must be (x, t, u) triples, got {row!r}")
        if not rows:
            return cls(source=source)
        data = np.asarray(rows, dtype=np.float64)
        return cls(x=data[:, 0], t=data[:, 1], u=data[:, 2], source=source)

    def column(self, name: str) -> np.ndarray:
        """Return the ``t`` or ``u`` column."""
        if name not in FileConstants.COLUMNS[1:]:
            raise ValueError(f"Unknown table field '{name}', expected one of {FileConstants.COLUMNS[1:]}")
        return getattr(self, name)

    @property
    def is_empty(self) -> bool:
        return len(self.x) == 0

    def __len__(self) -> int:
        return len(self.x)

    def __getitem__(self, index: int) -> TableSample:
        return TableSample(float(self.x[index]), float(self.t[index]), float(self.u[index]))

    def __iter__(self) -> Iterator[TableSample]:
        for i in range(len(self)):
            yield self[i]
