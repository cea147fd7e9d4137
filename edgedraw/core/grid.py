"""Validation helpers for the 8-bit grids passed between pipeline stages."""

import numpy as np

from edgedraw.core.errors import PreconditionViolation


def require_grid(values: np.ndarray, name: str = 'grid') -> np.ndarray:
    """Return values as a 2-D uint8 array, raising if they cannot be one.

    uint8 input is returned as-is (no copy). Other numeric input must hold
    whole numbers in 0-255 and is converted.
    """
    arr = np.asarray(values)
    if arr.ndim != 2:
        raise PreconditionViolation(f'{name} must be 2-D, got shape {arr.shape}')
    if arr.size == 0:
        raise PreconditionViolation(f'{name} is empty ({arr.shape[1]}x{arr.shape[0]})')
    if arr.dtype == np.uint8:
        return arr
    if arr.dtype == np.bool_ or not np.issubdtype(arr.dtype, np.number):
        raise PreconditionViolation(f'{name} must be numeric 0-255, got dtype {arr.dtype}')
    # NaN fails the floor comparison as well as the range check
    if not np.array_equal(arr, np.floor(arr)) or arr.min() < 0 or arr.max() > 255:
        raise PreconditionViolation(f'{name} values must be whole numbers in 0-255')
    return arr.astype(np.uint8)


def interior(shape: tuple[int, ...]) -> bool:
    """True if a grid of this shape has at least one non-border pixel."""
    return shape[0] >= 3 and shape[1] >= 3
