"""
Constants and file conventions.

This package provides the guard thresholds, formula coefficients, error
message templates and lookup-table file names used throughout tabeval.
"""

from .constants.processing_constants import ProcessingConstants, AlgorithmCoefficients, ErrorMessages, FileConstants

__all__ = [
    "ProcessingConstants",
    "AlgorithmCoefficients",
    "ErrorMessages",
    "FileConstants"
]
