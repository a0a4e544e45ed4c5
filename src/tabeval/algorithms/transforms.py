"""
Range-selected table lookups T and U, and the Srz combinator shared by
the primary and secondary algorithms.

``T`` and ``U`` raise ``TableLoadError`` when the table for the input range
cannot be loaded; the algorithm runners turn that into a ``TableUnavailable``
outcome.
"""

import logging
from typing import Tuple

from tabeval.algorithms.interpolation import interpolate
from tabeval.core.context import MID, NEGATIVE_OUTER, POSITIVE_OUTER, TableContext
from tabeval.data.constants import ProcessingConstants

logger = logging.getLogger(__name__)


def range_transform(x: float) -> Tuple[float, str]:
    """Map ``x`` to (transformed x, source id) for the three input ranges."""
    limit = ProcessingConstants.UNIT_RANGE_LIMIT
    if abs(x) <= limit:
        return x, MID
    if x < -limit:
        return 1.0 / x, NEGATIVE_OUTER
    return 1.0 / x, POSITIVE_OUTER


def _lookup(context: TableContext, x: float, field: str) -> float:
    transformed_x, source_id = range_transform(x)
    table = context.table(source_id)
    value = interpolate(table, transformed_x, field)
    logger.debug("%s(%g) via '%s' at %g = %.6f", field.upper(), x, source_id, transformed_x, value)
    return value


def T(context: TableContext, x: float) -> float:
    return _lookup(context, x, "t")


def U(context: TableContext, x: float) -> float:
    return _lookup(context, x, "u")


def srz(context: TableContext, x: float, y: float, z: float) -> float:
    if x > y:
        return T(context, x) + U(context, z) - T(context, y)
    return T(context, y) + U(context, y) - U(context, z)
