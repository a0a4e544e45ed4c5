import logging
import math
import re
from typing import Iterable, Union

from tabeval.core.exceptions import InputParseError
from tabeval.core.outcomes import EvaluationRequest
from tabeval.data.constants import ErrorMessages

logger = logging.getLogger(__name__)

REQUEST_SIZE = 3
_SEPARATOR = re.compile(r'[\s,;]+')


def parse_request(source: Union[str, Iterable[Union[str, float, int]]]) -> EvaluationRequest:
    """
    Build an evaluation request from user input.
    Args:
        source: Either a line of text holding three numbers separated by whitespace,
                commas or semicolons, or an iterable of three numbers / numeric strings
    Returns:
        EvaluationRequest with the three values as floats
    Raises:
        InputParseError: If the input does not hold exactly three finite numbers
    Examples:
        parse_request("0.5 1 2")
        parse_request(["0.5", "1", "2"])
    """
    if isinstance(source, str):
        tokens = [token for token in _SEPARATOR.split(source.strip()) if token]
    else:
        tokens = list(source)
    logger.debug("Parsing request tokens: %s", tokens)
    if len(tokens) != REQUEST_SIZE:
        raise InputParseError(ErrorMessages.WRONG_VALUE_COUNT.format(expected=REQUEST_SIZE, count=len(tokens)))
    x, y, z = (_to_float(token) for token in tokens)
    return EvaluationRequest(x, y, z)


def _to_float(token) -> float:
    if isinstance(token, bool):
        raise InputParseError(ErrorMessages.NOT_A_NUMBER.format(token=token))
    try:
        value = float(token)
    except (TypeError, ValueError) as e:
        raise InputParseError(ErrorMessages.NOT_A_NUMBER.format(token=token)) from e
    if not math.isfinite(value):
        raise InputParseError(ErrorMessages.NOT_FINITE.format(token=token))
    return value
