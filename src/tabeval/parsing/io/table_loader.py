import logging
from pathlib import Path
from typing import Tuple, Union

import numpy as np
import pandas as pd

from tabeval.core.exceptions import TableLoadError
from tabeval.core.table import Table
from tabeval.data.constants import FileConstants
from tabeval.parsing.validation.array_validator import is_monotonic

logger = logging.getLogger(__name__)


def load_table(source: Union[str, Path]) -> Table:
    """
    Reads an (x, t, u) lookup table from a whitespace-separated text file.

    Records are read in file order until the data is exhausted. Reading stops
    at the first record that is incomplete or not numeric; samples before it
    are kept. The samples are not sorted.
    Args:
        source: Path to the table file
    Returns:
        Table with the samples found, possibly empty
    Raises:
        TableLoadError: If the file is missing, is not a regular file, or cannot be read
    """
    file_path = Path(source)
    logger.debug("Loading lookup table from %s", file_path)
    if not file_path.exists():
        logger.warning("Cannot open file '%s'", file_path)
        raise TableLoadError(f"Table file not found: {file_path}", path=file_path)
    if not file_path.is_file():
        raise TableLoadError(f"Path is not a file: {file_path}", path=file_path)
    try:
        df = _read_table_file(file_path)
    except PermissionError as e:
        raise TableLoadError(f"Permission denied reading table {file_path}: {str(e)}", path=file_path) from e
    except (OSError, UnicodeDecodeError) as e:
        raise TableLoadError(f"Error reading table {file_path}: {str(e)}", path=file_path) from e
    x, t, u = _leading_numeric_records(df, str(file_path))
    if len(x) > 1:
        is_monotonic(x, name=f"Table x column ({file_path.name})", mode="non_decreasing")
    table = Table(x=x, t=t, u=u, source=str(file_path))
    logger.info("Loaded %d samples from %s", len(table), file_path)
    return table


def _read_table_file(file_path: Path) -> pd.DataFrame:
    """
    Read the raw records as a ragged frame; an empty file yields an empty frame.

    Every record keeps all of its fields, short records are padded with None,
    so the width of one line never decides how another line is read.
    """
    with open(file_path, 'r', encoding=FileConstants.DEFAULT_ENCODING) as f:
        records = [line.split(FileConstants.COMMENT_CHAR, 1)[0].split() for line in f]
    records = [fields for fields in records if fields]
    if not records:
        logger.warning("Table file %s contains no data", file_path)
        return pd.DataFrame()
    return pd.DataFrame(records)


def _leading_numeric_records(df: pd.DataFrame, file_path: str) -> Tuple[np.ndarray, np.ndarray, np.ndarray]:
    """Convert records to float columns, keeping only those before the first bad record."""
    n_cols = len(FileConstants.COLUMNS)
    if df.empty:
        empty = np.empty(0, dtype=np.float64)
        return empty, empty, empty
    numeric = df.apply(lambda col: pd.to_numeric(col, errors='coerce'))
    # Short records are padded with None, long records carry extra fields
    for i in range(df.shape[1], n_cols):
        numeric[i] = np.nan
    bad_rows = numeric.iloc[:, :n_cols].isna().any(axis=1).to_numpy()
    if df.shape[1] > n_cols:
        extra = df.iloc[:, n_cols:].notna().any(axis=1).to_numpy()
        bad_rows = bad_rows | extra
    if bad_rows.any():
        first_bad = int(np.argmax(bad_rows))
        record = " ".join(str(v) for v in df.iloc[first_bad].dropna().tolist())
        logger.warning("Stopped reading %s at record %d (%r); keeping %d samples",
                       file_path, first_bad + 1, record, first_bad)
        numeric = numeric.iloc[:first_bad]
    data = numeric.iloc[:, :n_cols].to_numpy(dtype=np.float64)
    return data[:, 0], data[:, 1], data[:, 2]
