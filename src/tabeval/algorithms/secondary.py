"""
Algorithm 2: the relaxed variant of the primary formula.

``gold1`` and ``glr1`` never reject their arguments, so this algorithm can
only fail when a lookup table is unavailable.
"""

import logging

from tabeval.algorithms.transforms import srz
from tabeval.core.context import TableContext
from tabeval.core.exceptions import TableLoadError
from tabeval.core.outcomes import EvaluationRequest, Ok, Outcome, TableUnavailable
from tabeval.data.constants import AlgorithmCoefficients, ProcessingConstants

logger = logging.getLogger(__name__)


def gold1(x: float, y: float, z: float = 0.0) -> float:
    limit = ProcessingConstants.RELAXED_DIVISION_LIMIT
    if x > y and abs(y) > limit:
        return x / y
    if x <= y and abs(x) > limit:
        return y / x
    if x < y and abs(x) <= limit:
        return ProcessingConstants.RELAXED_SMALL_X_VALUE
    if abs(y) <= ProcessingConstants.DIVISION_EPSILON:
        return ProcessingConstants.RELAXED_ZERO_Y_VALUE
    return ProcessingConstants.RELAXED_DEFAULT_VALUE


def glr1(x: float, y: float, z: float = 0.0) -> float:
    if abs(x) < ProcessingConstants.GLR_UNIT_LIMIT:
        return x
    return y


def grs1(context: TableContext, x: float, y: float) -> float:
    w1, w2, w3 = AlgorithmCoefficients.GRS1_WEIGHTS
    scale = AlgorithmCoefficients.GRS1_SCALE
    term1 = w1 * srz(context, x + y, gold1(x, y), glr1(x, x * y))
    term2 = w2 * srz(context, x - y, gold1(y, x / AlgorithmCoefficients.GRS1_FIRST_DIVISOR), glr1(scale * x, x * y))
    term3 = w3 * srz(context, x, glr1(y, x / AlgorithmCoefficients.GRS1_SECOND_DIVISOR), gold1(scale * y, y))
    return term1 + term2 + term3


def fun_algorithm2(context: TableContext, x: float, y: float, z: float) -> float:
    return x * grs1(context, x, y) + y * grs1(context, y, z) + z * grs1(context, z, x)


def run_secondary(context: TableContext, request: EvaluationRequest) -> Outcome:
    """Evaluate Algorithm 2 for ``request``."""
    x, y, z = request.as_tuple()
    try:
        value = fun_algorithm2(context, x, y, z)
    except TableLoadError as e:
        return TableUnavailable(x, y, z, reason=str(e))
    logger.debug("Algorithm 2 result for (%g, %g, %g): %.6f", x, y, z, value)
    return Ok(value)
