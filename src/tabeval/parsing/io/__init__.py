"""Lookup table file reading."""
