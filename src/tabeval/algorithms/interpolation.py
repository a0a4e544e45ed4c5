import logging
from typing import Iterable, Union

import numpy as np

from tabeval.core.table import Table, TableSample
from tabeval.data.constants import ProcessingConstants

logger = logging.getLogger(__name__)


def interpolate(table: Union[Table, Iterable[TableSample]], query_x: float, field: str) -> float:
    """Piecewise-linear lookup of column ``field`` ('t' or 'u') at ``query_x``, clamped at both ends."""
    if not isinstance(table, Table):
        table = Table.from_samples(table)
    y_array = table.column(field)
    x_array = table.x
    if len(x_array) == 0:
        logger.debug("Empty table %s: returning %.1f", table.source, ProcessingConstants.EMPTY_TABLE_VALUE)
        return ProcessingConstants.EMPTY_TABLE_VALUE
    if query_x <= x_array[0]:
        logger.debug("x=%g at or below first sample %g, clamping", query_x, x_array[0])
        return float(y_array[0])
    if query_x >= x_array[-1]:
        logger.debug("x=%g at or above last sample %g, clamping", query_x, x_array[-1])
        return float(y_array[-1])
    # First sample in file order with query_x <= x
    bracket = query_x <= x_array[1:]
    if not bracket.any():
        logger.debug("No bracket for x=%g in %s: returning %.1f",
                     query_x, table.source, ProcessingConstants.EMPTY_TABLE_VALUE)
        return ProcessingConstants.EMPTY_TABLE_VALUE
    i = int(np.argmax(bracket)) + 1
    x0, x1 = x_array[i - 1], x_array[i]
    y0, y1 = y_array[i - 1], y_array[i]
    if x1 == x0:
        logger.debug("Duplicate abscissa %g at index %d, returning left value", x0, i)
        return float(y0)
    result = float(y0 + (y1 - y0) * (query_x - x0) / (x1 - x0))
    logger.debug("Interpolated %s(%g) between [%g, %g]: %.6f", field, query_x, x0, x1, result)
    return result
