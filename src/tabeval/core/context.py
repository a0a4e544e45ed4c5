import logging
import threading
from pathlib import Path
from typing import Callable, Dict, Optional, Union

from tabeval.core.table import Table
from tabeval.data.constants import FileConstants

logger = logging.getLogger(__name__)

# Source ids of the three input ranges
MID = "mid"
NEGATIVE_OUTER = "negative-outer"
POSITIVE_OUTER = "positive-outer"

DEFAULT_SOURCES: Dict[str, str] = {
    MID: FileConstants.MID_TABLE_FILE,
    NEGATIVE_OUTER: FileConstants.NEGATIVE_OUTER_TABLE_FILE,
    POSITIVE_OUTER: FileConstants.POSITIVE_OUTER_TABLE_FILE,
}

TableLoader = Callable[[Path], Table]


def _default_loader(path: Path) -> Table:
    from tabeval.parsing.io.table_loader import load_table
    return load_table(path)


class TableSlot:
    """
    Lazily loaded, load-once holder for one lookup table.

    The first successful load is cached for the lifetime of the slot. A failed
    load leaves the slot empty so the next access tries again.
    """

    def __init__(self, source_id: str, path: Path, loader: TableLoader = _default_loader):
        self.source_id = source_id
        self.path = path
        self._loader = loader
        self._table: Optional[Table] = None
        self._lock = threading.Lock()

    @property
    def is_loaded(self) -> bool:
        return self._table is not None

    def get(self) -> Table:
        """Return the cached table, loading it on first use."""
        table = self._table
        if table is not None:
            return table
        with self._lock:
            if self._table is None:
                logger.debug("Loading table slot '%s' from %s", self.source_id, self.path)
                self._table = self._loader(self.path)
            else:
                logger.debug("Table slot '%s' loaded concurrently", self.source_id)
            return self._table

    def __repr__(self):
        return f"TableSlot({self.source_id!r}, {str(self.path)!r}, loaded={self.is_loaded})"


class TableContext:
    """
    Owns the three lookup-table slots used by T and U.

    Args:
        data_dir: Directory containing the table files (default: current working directory)
        file_names: Optional override of the file name per source id
        loader: Callable reading one table file, mainly for tests
    """

    def __init__(self, data_dir: Optional[Union[str, Path]] = None,
                 file_names: Optional[Dict[str, str]] = None,
                 loader: TableLoader = _default_loader):
        self.data_dir = Path(data_dir) if data_dir is not None else Path.cwd()
        names = dict(DEFAULT_SOURCES)
        if file_names:
            unknown = set(file_names) - set(names)
            if unknown:
                raise ValueError(f"Unknown table source ids: {sorted(unknown)}. "
                                 f"Expected a subset of {sorted(names)}")
            names.update(file_names)
        self._slots: Dict[str, TableSlot] = {
            source_id: TableSlot(source_id, self.data_dir / file_name, loader)
            for source_id, file_name in names.items()
        }
        logger.debug("Created table context for %s", self.data_dir)

    def slot(self, source_id: str) -> TableSlot:
        try:
            return self._slots[source_id]
        except KeyError:
            raise ValueError(f"Unknown table source id '{source_id}'. "
                             f"Expected one of {sorted(self._slots)}") from None

    def table(self, source_id: str) -> Table:
        """Return the table for ``source_id``, loading it on first use."""
        return self.slot(source_id).get()

    @property
    def slots(self) -> Dict[str, TableSlot]:
        return dict(self._slots)
