"""Processing constants for tabeval."""

from .processing_constants import ProcessingConstants, AlgorithmCoefficients, ErrorMessages, FileConstants

__all__ = [
    "ProcessingConstants",
    "AlgorithmCoefficients",
    "ErrorMessages",
    "FileConstants"
]
