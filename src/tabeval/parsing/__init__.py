"""
Input handling for tabeval.

This package reads lookup tables from text files, parses evaluation requests,
and exposes the public evaluation API.
"""

from .api import evaluate, evaluate_text, get_default_context, reset_default_context
from .input_parser import parse_request
from .io.table_loader import load_table

__all__ = [
    'evaluate',
    'evaluate_text',
    'get_default_context',
    'reset_default_context',
    'parse_request',
    'load_table'
]
