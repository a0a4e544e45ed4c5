"""
Algorithm 1: the primary composed formula.

``gold`` and ``glr`` guard against near-zero denominators and small
radicands by raising ``PreconditionViolation``. ``run_primary`` evaluates
``fun`` and reports the result as an outcome carrying the top-level request.
"""

import logging
import math

from tabeval.algorithms.transforms import srz
from tabeval.core.context import TableContext
from tabeval.core.exceptions import PreconditionViolation, TableLoadError
from tabeval.core.outcomes import EvaluationRequest, Ok, Outcome, PreconditionFailure, TableUnavailable
from tabeval.data.constants import AlgorithmCoefficients, ErrorMessages, ProcessingConstants

logger = logging.getLogger(__name__)


def gold(x: float, y: float, z: float) -> float:
    eps = ProcessingConstants.DIVISION_EPSILON
    if x > y and abs(y) > eps:
        return x / y
    if x < y and abs(x) > eps:
        return y / x
    message = ErrorMessages.GOLD_FAILED.format(x=x, y=y)
    logger.debug("%s", message)
    raise PreconditionViolation(message)


def glr(x: float, y: float, z: float) -> float:
    if abs(x) < ProcessingConstants.GLR_UNIT_LIMIT:
        return x
    if abs(y) < ProcessingConstants.GLR_UNIT_LIMIT:
        return y
    radicand = x * x + y * y - ProcessingConstants.GLR_RADICAND_OFFSET
    if radicand > ProcessingConstants.GLR_MIN_RADICAND:
        return y / math.sqrt(radicand)
    message = ErrorMessages.GLR_FAILED.format(radicand=radicand)
    logger.debug("%s", message)
    raise PreconditionViolation(message)


def grs(context: TableContext, x: float, y: float, z: float) -> float:
    w1, w2, w3 = AlgorithmCoefficients.GRS_WEIGHTS
    div = AlgorithmCoefficients.GRS_DIVISOR
    scale = AlgorithmCoefficients.GRS_SCALE
    term1 = w1 * srz(context, x + y, gold(x, y, z), glr(x, x * y, z))
    term2 = w2 * srz(context, x - y, gold(y, x / div, z), glr(scale * x, x * y, z))
    term3 = w3 * srz(context, x - AlgorithmCoefficients.GRS_SHIFT, glr(y, x / div, z), gold(scale * y, y, z))
    return term1 + term2 + term3


def fun(context: TableContext, x: float, y: float, z: float) -> float:
    term1 = x * x * grs(context, y, z, z)
    term2 = y * y * grs(context, x, z, z)
    term3 = AlgorithmCoefficients.FUN_CROSS_WEIGHT * x * y * grs(context, x, z, z)
    return term1 + term2 + term3


def run_primary(context: TableContext, request: EvaluationRequest) -> Outcome:
    """Evaluate Algorithm 1 for ``request``."""
    x, y, z = request.as_tuple()
    try:
        value = fun(context, x, y, z)
    except PreconditionViolation as e:
        return PreconditionFailure(x, y, z, reason=str(e))
    except TableLoadError as e:
        return TableUnavailable(x, y, z, reason=str(e))
    logger.debug("Algorithm 1 result for (%g, %g, %g): %.6f", x, y, z, value)
    return Ok(value)
