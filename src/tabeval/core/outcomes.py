"""
Request, outcome and result types for the fallback chain.

Each algorithm run produces exactly one outcome:

- ``Ok(value)`` when the formula evaluated,
- ``PreconditionFailure(x, y, z, reason)`` when a domain guard rejected the inputs,
- ``TableUnavailable(x, y, z, reason)`` when a lookup table could not be loaded.

Failure outcomes always carry the top-level request values, never the
intermediate arguments at which the guard tripped.
"""

from dataclasses import dataclass
from typing import Tuple, Union


@dataclass(frozen=True)
class EvaluationRequest:
    """The three input scalars of one evaluation."""
    x: float
    y: float
    z: float

    def as_tuple(self) -> Tuple[float, float, float]:
        return self.x, self.y, self.z


@dataclass(frozen=True)
class Ok:
    value: float


@dataclass(frozen=True)
class PreconditionFailure:
    x: float
    y: float
    z: float
    reason: str = ""

    @property
    def request(self) -> EvaluationRequest:
        return EvaluationRequest(self.x, self.y, self.z)


@dataclass(frozen=True)
class TableUnavailable:
    x: float
    y: float
    z: float
    reason: str = ""

    @property
    def request(self) -> EvaluationRequest:
        return EvaluationRequest(self.x, self.y, self.z)


Failure = Union[PreconditionFailure, TableUnavailable]
Outcome = Union[Ok, PreconditionFailure, TableUnavailable]


@dataclass(frozen=True)
class EvaluationResult:
    """
    Final value of the fallback chain.

    Attributes:
        value (float): The computed scalar.
        algorithm (int): Which algorithm produced it (1, 2 or 3).
        request (EvaluationRequest): The caller's inputs.
        escalations (tuple): Failure outcomes that caused each fallback step, in order.
    """
    value: float
    algorithm: int
    request: EvaluationRequest
    escalations: Tuple[Failure, ...] = ()

    @property
    def escalated(self) -> bool:
        return bool(self.escalations)
