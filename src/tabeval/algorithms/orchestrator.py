"""
Fallback chain over the three algorithms.

    TryPrimary --PreconditionFailure--> TrySecondary --any failure--> TryTertiary
        |                                                                 ^
        +------------------------TableUnavailable-------------------------+

Algorithm 3 cannot fail, so every request ends with a value.
"""

import logging
from enum import IntEnum
from typing import List

from tabeval.algorithms.primary import run_primary
from tabeval.algorithms.secondary import run_secondary
from tabeval.algorithms.tertiary import run_tertiary
from tabeval.core.context import TableContext
from tabeval.core.outcomes import (EvaluationRequest, EvaluationResult, Failure, Ok,
                                   PreconditionFailure, TableUnavailable)

logger = logging.getLogger(__name__)


class Algorithm(IntEnum):
    PRIMARY = 1
    SECONDARY = 2
    TERTIARY = 3


def _done(value: float, algorithm: Algorithm, request: EvaluationRequest,
          escalations: List[Failure]) -> EvaluationResult:
    logger.info("Algorithm %d completed successfully: %.6g", algorithm, value)
    return EvaluationResult(value=value, algorithm=algorithm, request=request,
                            escalations=tuple(escalations))


def evaluate_request(request: EvaluationRequest, context: TableContext) -> EvaluationResult:
    """Run the fallback chain for ``request`` using the tables owned by ``context``."""
    logger.debug("Evaluating x=%g, y=%g, z=%g", request.x, request.y, request.z)
    escalations: List[Failure] = []

    outcome = run_primary(context, request)
    if isinstance(outcome, Ok):
        return _done(outcome.value, Algorithm.PRIMARY, request, escalations)
    escalations.append(outcome)

    if isinstance(outcome, PreconditionFailure):
        logger.warning("Algorithm 1 failed, switching to Algorithm 2: %s", outcome.reason)
        outcome = run_secondary(context, outcome.request)
        if isinstance(outcome, Ok):
            return _done(outcome.value, Algorithm.SECONDARY, request, escalations)
        escalations.append(outcome)
        logger.warning("Algorithm 2 also failed, switching to Algorithm 3: %s", outcome.reason)
    elif isinstance(outcome, TableUnavailable):
        logger.warning("Algorithm 1 failed due to table loading error, switching to Algorithm 3: %s",
                       outcome.reason)
    else:
        raise TypeError(f"Unexpected outcome from Algorithm 1: {outcome!r}")

    final = run_tertiary(outcome.request)
    return _done(final.value, Algorithm.TERTIARY, request, escalations)
