import logging
import threading
from pathlib import Path
from typing import Iterable, Optional, Union

from tabeval.algorithms.orchestrator import evaluate_request
from tabeval.core.context import TableContext
from tabeval.core.outcomes import EvaluationResult
from tabeval.parsing.input_parser import parse_request

logger = logging.getLogger(__name__)

_default_context: Optional[TableContext] = None
_default_context_lock = threading.Lock()


def get_default_context() -> TableContext:
    """Return the shared context reading tables from the current working directory."""
    global _default_context
    with _default_context_lock:
        if _default_context is None:
            _default_context = TableContext()
        return _default_context


def reset_default_context(data_dir: Optional[Union[str, Path]] = None) -> TableContext:
    """Discard cached tables and start a fresh shared context."""
    global _default_context
    with _default_context_lock:
        _default_context = TableContext(data_dir)
        logger.info("Reset default table context to %s", _default_context.data_dir)
        return _default_context


def evaluate(x: float, y: float, z: float, context: Optional[TableContext] = None) -> EvaluationResult:
    """
    Evaluate the expression at (x, y, z), falling back to simpler algorithms as needed.

    This function is the main entry point. It never raises for domain problems:
    a rejected precondition or a missing lookup table moves evaluation to the
    next algorithm, and the last one always succeeds.
    Args:
        x, y, z: Input values
        context: Table context to use (default: shared context on the current working directory)
    Returns:
        EvaluationResult holding the value and the algorithm (1, 2 or 3) that produced it
    Raises:
        InputParseError: If any input is not a finite number
    Examples:
        result = evaluate(0.5, 1.0, 2.0)
        print(result.algorithm, result.value)

        context = TableContext('/path/to/tables')
        result = evaluate(0.0, 0.0, 0.0, context)
    """
    request = parse_request((x, y, z))
    return evaluate_request(request, context if context is not None else get_default_context())


def evaluate_text(text: Union[str, Iterable[str]], context: Optional[TableContext] = None) -> EvaluationResult:
    """Parse three numbers from ``text`` and evaluate them."""
    request = parse_request(text)
    return evaluate_request(request, context if context is not None else get_default_context())
