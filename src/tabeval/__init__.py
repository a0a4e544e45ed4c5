"""
tabeval - Table-driven evaluation of fun(x, y, z) with algorithmic fallback.

This library evaluates a nested nonlinear expression over three real inputs.
The primary algorithm uses piecewise-linear lookup tables read from text
files; when one of its domain guards rejects the inputs, evaluation moves to
a relaxed secondary algorithm, and finally to a closed-form formula that
always succeeds.

Main Components:
- Core: Lookup tables, the table context, outcome types and exceptions
- Algorithms: Interpolation, T/U transforms, the three algorithms and the fallback chain
- Parsing: Table file loading, request parsing and the public API
- Data: Guard thresholds, coefficients and file conventions
"""

from importlib.metadata import version, PackageNotFoundError

try:
    __version__ = version("tabeval")
except PackageNotFoundError:
    __version__ = "0.1.0+unknown"  # Fallback version

# Core types
from .core.table import Table, TableSample
from .core.context import TableContext
from .core.outcomes import EvaluationRequest, EvaluationResult
from .core.exceptions import TabEvalError, InputParseError, TableLoadError

# Main API functions
from .parsing.api import evaluate, evaluate_text, get_default_context, reset_default_context
from .parsing.input_parser import parse_request
from .parsing.io.table_loader import load_table

# Algorithms
from .algorithms.interpolation import interpolate
from .algorithms.orchestrator import Algorithm, evaluate_request
from .algorithms.tertiary import fun_algorithm3

__all__ = [
    # Version
    '__version__',

    # Core classes
    'Table',
    'TableSample',
    'TableContext',
    'EvaluationRequest',
    'EvaluationResult',
    'TabEvalError',
    'InputParseError',
    'TableLoadError',

    # Main API
    'evaluate',
    'evaluate_text',
    'get_default_context',
    'reset_default_context',
    'parse_request',
    'load_table',

    # Algorithms
    'interpolate',
    'Algorithm',
    'evaluate_request',
    'fun_algorithm3'
]

# Package metadata
__description__ = "Table-driven expression evaluation with algorithmic fallback"
