"""Gradient magnitude and direction from an intensity grid.

Each interior pixel's 3x3 neighbourhood is cross-correlated with a
horizontal (KX) and vertical (KY) derivative kernel. Rows are y and grow
downward, so a positive Gy means intensity increases toward the bottom.

    magnitude = round(sqrt(Gx^2 + Gy^2)), saturated to 255
    direction = atan2(Gy, Gx) in degrees, (-180, 180]

The 1-pixel border is never assigned a gradient and stays 0: the edge of
the image is not an edge in the image.
"""

import numpy as np

from edgedraw.core.errors import PreconditionViolation
from edgedraw.core.grid import interior, require_grid
from edgedraw.core.types import GradientField


def _freeze(rows: list[list[int]]) -> np.ndarray:
    table = np.array(rows, dtype=np.int64)
    table.flags.writeable = False
    return table


SOBEL_X = _freeze([[-1, 0, 1], [-2, 0, 2], [-1, 0, 1]])
SOBEL_Y = _freeze([[-1, -2, -1], [0, 0, 0], [1, 2, 1]])

SCHARR_X = _freeze([[-3, 0, 3], [-10, 0, 10], [-3, 0, 3]])
SCHARR_Y = _freeze([[-3, -10, -3], [0, 0, 0], [3, 10, 3]])

KERNELS: dict[str, tuple[np.ndarray, np.ndarray]] = {
    'sobel': (SOBEL_X, SOBEL_Y),
    'scharr': (SCHARR_X, SCHARR_Y),
}


def kernel_pair(kernel: str) -> tuple[np.ndarray, np.ndarray]:
    """Return the (KX, KY) tables for a kernel name."""
    if kernel not in KERNELS:
        raise PreconditionViolation(f'Unknown kernel: {kernel}. Available: {", ".join(sorted(KERNELS))}')
    return KERNELS[kernel]


def partial_derivatives(intensity: np.ndarray, kernel: str = 'sobel') -> tuple[np.ndarray, np.ndarray]:
    """Integer (Gx, Gy) for the interior pixels, shape (H-2, W-2)."""
    kx, ky = kernel_pair(kernel)

    g = intensity.astype(np.int64)
    h, w = g.shape
    gx = np.zeros((h - 2, w - 2), dtype=np.int64)
    gy = np.zeros((h - 2, w - 2), dtype=np.int64)
    for dy in range(3):
        for dx in range(3):
            window = g[dy : dy + h - 2, dx : dx + w - 2]
            gx += kx[dy, dx] * window
            gy += ky[dy, dx] * window
    return gx, gy


def compute_gradient(intensity: np.ndarray, kernel: str = 'sobel') -> GradientField:
    """Compute the gradient field of an IntensityGrid.

    Grids smaller than 3x3 have no interior and yield all-zero fields.
    """
    grid = require_grid(intensity, 'intensity')
    kernel_pair(kernel)

    magnitude = np.zeros(grid.shape, dtype=np.uint8)
    direction = np.zeros(grid.shape, dtype=np.float64)
    if not interior(grid.shape):
        return GradientField(magnitude=magnitude, direction=direction)

    gx, gy = partial_derivatives(grid, kernel)
    strength = np.rint(np.sqrt((gx * gx + gy * gy).astype(np.float64)))
    magnitude[1:-1, 1:-1] = np.minimum(strength, 255).astype(np.uint8)
    # atan2 never yields -180 for integer input; clip guards the float scaling
    angles = np.degrees(np.arctan2(gy.astype(np.float64), gx.astype(np.float64)))
    direction[1:-1, 1:-1] = np.clip(angles, -180.0, 180.0)
    return GradientField(magnitude=magnitude, direction=direction)
