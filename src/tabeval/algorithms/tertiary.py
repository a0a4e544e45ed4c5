"""Algorithm 3: closed-form terminal fallback."""

from tabeval.core.outcomes import EvaluationRequest, Ok
from tabeval.data.constants import AlgorithmCoefficients


def fun_algorithm3(x: float, y: float, z: float) -> float:
    return (AlgorithmCoefficients.TERTIARY_Z_WEIGHT * z
            + AlgorithmCoefficients.TERTIARY_Y_WEIGHT * y
            - AlgorithmCoefficients.TERTIARY_XY_WEIGHT * x * y)


def run_tertiary(request: EvaluationRequest) -> Ok:
    return Ok(fun_algorithm3(*request.as_tuple()))
