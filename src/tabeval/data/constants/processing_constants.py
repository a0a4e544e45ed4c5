from dataclasses import dataclass
from typing import Final


@dataclass(frozen=True)
class ProcessingConstants:
    """Guard thresholds used by the evaluation algorithms."""
    # Range selection for T/U
    UNIT_RANGE_LIMIT: Final[float] = 1.0
    # Algorithm 1 guards
    DIVISION_EPSILON: Final[float] = 1e-10
    GLR_UNIT_LIMIT: Final[float] = 1.0
    GLR_RADICAND_OFFSET: Final[float] = 4.0
    GLR_MIN_RADICAND: Final[float] = 0.1
    # Algorithm 2 guards
    RELAXED_DIVISION_LIMIT: Final[float] = 0.1
    RELAXED_SMALL_X_VALUE: Final[float] = 0.15
    RELAXED_ZERO_Y_VALUE: Final[float] = 0.1
    RELAXED_DEFAULT_VALUE: Final[float] = 0.0
    # Interpolation
    EMPTY_TABLE_VALUE: Final[float] = 0.0


@dataclass(frozen=True)
class AlgorithmCoefficients:
    """Weights of the three composed formulas."""
    # Algorithm 1 (Grs / fun)
    GRS_WEIGHTS: Final[tuple] = (0.1389, 1.8389, 0.83)
    GRS_SHIFT: Final[float] = 0.9
    GRS_DIVISOR: Final[float] = 5.0
    GRS_SCALE: Final[float] = 5.0
    FUN_CROSS_WEIGHT: Final[float] = 0.33
    # Algorithm 2 (Grs1)
    GRS1_WEIGHTS: Final[tuple] = (0.14, 1.83, 0.83)
    GRS1_FIRST_DIVISOR: Final[float] = 5.0
    GRS1_SECOND_DIVISOR: Final[float] = 4.0
    GRS1_SCALE: Final[float] = 4.0
    # Algorithm 3 (closed form)
    TERTIARY_Z_WEIGHT: Final[float] = 1.3498
    TERTIARY_Y_WEIGHT: Final[float] = 2.2362
    TERTIARY_XY_WEIGHT: Final[float] = 2.348


@dataclass(frozen=True)
class ErrorMessages:
    """Standardized error message templates."""
    GOLD_FAILED: Final[str] = "Gold() failed - division by zero or invalid condition (x={x}, y={y})"
    GLR_FAILED: Final[str] = "Glr() failed - radicand too small ({radicand})"
    TABLE_UNAVAILABLE: Final[str] = "Cannot load table '{source_id}' from '{path}'"
    WRONG_VALUE_COUNT: Final[str] = "Expected {expected} numeric values, got {count}"
    NOT_A_NUMBER: Final[str] = "Invalid numeric input: {token!r}"
    NOT_FINITE: Final[str] = "Input values must be finite, got {token!r}"


@dataclass(frozen=True)
class FileConstants:
    """Lookup table file conventions."""
    MID_TABLE_FILE: Final[str] = 'dat_X_1_1.dat'
    NEGATIVE_OUTER_TABLE_FILE: Final[str] = 'dat_X00_1.dat'
    POSITIVE_OUTER_TABLE_FILE: Final[str] = 'dat_X1_00.dat'
    DEFAULT_ENCODING: Final[str] = 'utf-8'
    COMMENT_CHAR: Final[str] = '#'
    COLUMNS: Final[tuple] = ('x', 't', 'u')
