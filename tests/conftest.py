"""Shared pytest fixtures for tabeval tests."""
import pytest
from pathlib import Path

from tabeval.core.context import TableContext
from tabeval.core.table import Table
from tabeval.data.constants import FileConstants


def write_table(path: Path, rows) -> Path:
    """Write (x, t, u) rows as a whitespace-separated table file."""
    path.write_text("".join(f"{x} {t} {u}\n" for x, t, u in rows), encoding="utf-8")
    return path


MID_ROWS = [(-1.0, 0.5, 1.5), (0.0, 1.0, 2.0), (1.0, 2.0, 1.0)]
NEGATIVE_OUTER_ROWS = [(-1.0, 0.2, 0.4), (0.0, 0.6, 0.8)]
POSITIVE_OUTER_ROWS = [(0.0, 0.3, 0.9), (1.0, 0.7, 0.1)]


@pytest.fixture
def data_dir(tmp_path):
    """Directory holding all three lookup tables."""
    write_table(tmp_path / FileConstants.MID_TABLE_FILE, MID_ROWS)
    write_table(tmp_path / FileConstants.NEGATIVE_OUTER_TABLE_FILE, NEGATIVE_OUTER_ROWS)
    write_table(tmp_path / FileConstants.POSITIVE_OUTER_TABLE_FILE, POSITIVE_OUTER_ROWS)
    return tmp_path


@pytest.fixture
def empty_data_dir(tmp_path):
    """Directory without any lookup table."""
    directory = tmp_path / "no_tables"
    directory.mkdir()
    return directory


@pytest.fixture
def context(data_dir):
    """Table context reading the fixture tables."""
    return TableContext(data_dir)


@pytest.fixture
def missing_tables_context(empty_data_dir):
    """Table context whose sources are all absent."""
    return TableContext(empty_data_dir)


@pytest.fixture
def constant_context():
    """Context where every table has t=1 and u=2 everywhere, so Srz is 2 when x > y and 1 otherwise."""
    table = Table.from_samples([(-1.0, 1.0, 2.0), (1.0, 1.0, 2.0)], source="constant")
    return TableContext(loader=lambda path: table)


@pytest.fixture
def sample_table():
    """The two-sample table [(0, 1, 2), (2, 3, 4)]."""
    return Table.from_samples([(0.0, 1.0, 2.0), (2.0, 3.0, 4.0)])


@pytest.fixture
def counting_loader():
    """Loader returning a fixed table and recording every path it reads."""
    class CountingLoader:
        def __init__(self):
            self.calls = []
            self.table = Table.from_samples([(-1.0, 0.0, 1.0), (1.0, 1.0, 0.0)], source="counting")

        def __call__(self, path):
            self.calls.append(path)
            return self.table

    return CountingLoader()


@pytest.fixture
def table_writer():
    """Helper writing (x, t, u) rows to a table file."""
    return write_table
