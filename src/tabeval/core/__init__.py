"""Core data structures: lookup tables, table context, outcomes and exceptions."""

from .table import Table, TableSample
from .outcomes import (EvaluationRequest, EvaluationResult, Ok, PreconditionFailure,
                       TableUnavailable, Outcome, Failure)
from .exceptions import TabEvalError, InputParseError, TableLoadError, PreconditionViolation
from .context import TableContext, TableSlot, MID, NEGATIVE_OUTER, POSITIVE_OUTER

__all__ = [
    "Table",
    "TableSample",
    "EvaluationRequest",
    "EvaluationResult",
    "Ok",
    "PreconditionFailure",
    "TableUnavailable",
    "Outcome",
    "Failure",
    "TabEvalError",
    "InputParseError",
    "TableLoadError",
    "PreconditionViolation",
    "TableContext",
    "TableSlot",
    "MID",
    "NEGATIVE_OUTER",
    "POSITIVE_OUTER",
]
