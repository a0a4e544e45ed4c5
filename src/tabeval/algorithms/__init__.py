"""
Numerical algorithms of the fallback chain.

This package provides the table interpolation routine, the range-selected
lookups T and U, the three evaluation algorithms, and the orchestrator that
escalates from one algorithm to the next.
"""

from .interpolation import interpolate
from .transforms import range_transform, T, U, srz
from .primary import gold, glr, grs, fun, run_primary
from .secondary import gold1, glr1, grs1, fun_algorithm2, run_secondary
from .tertiary import fun_algorithm3, run_tertiary
from .orchestrator import Algorithm, evaluate_request

__all__ = [
    "interpolate",
    "range_transform",
    "T",
    "U",
    "srz",
    "gold",
    "glr",
    "grs",
    "fun",
    "run_primary",
    "gold1",
    "glr1",
    "grs1",
    "fun_algorithm2",
    "run_secondary",
    "fun_algorithm3",
    "run_tertiary",
    "Algorithm",
    "evaluate_request",
]
