"""Data quality checks for lookup tables."""

import logging
import numpy as np

logger = logging.getLogger(__name__)


def is_monotonic(arr: np.ndarray, name: str = "Array",
                 mode: str = "non_decreasing",
                 raise_error: bool = False) -> bool:
    """Check the ordering of an abscissa column and report the first violation."""
    if mode not in ("strictly_increasing", "non_decreasing"):
        raise ValueError(f"Unsupported monotonicity mode: {mode}")
    for i in range(1, len(arr)):
        diff = arr[i] - arr[i-1]
        violation = False
        if mode == "strictly_increasing" and diff <= 0:
            violation = True
        elif mode == "non_decreasing" and diff < 0:
            violation = True
        if violation:
            start_idx = max(0, i-2)
            end_idx = min(len(arr), i+3)
            context = "\nSurrounding values:\n"
            for j in range(start_idx, end_idx):
                context += f"Index {j}: {arr[j]:.10e}\n"
            error_msg = (
                f"{name} is not {mode.replace('_', ' ')} at index {i}:\n"
                f"Previous value ({i-1}): {arr[i-1]:.10e}\n"
                f"Current value ({i}): {arr[i]:.10e}\n"
                f"{context}"
            )
            if raise_error:
                raise ValueError(error_msg)
            logger.warning("%s", error_msg)
            return False
    logger.debug("%s is %s", name, mode.replace('_', ' '))
    return True
