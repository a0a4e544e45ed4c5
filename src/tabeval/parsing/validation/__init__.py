"""Validation utilities for tabeval."""

from .array_validator import is_monotonic

__all__ = [
    "is_monotonic"
]
