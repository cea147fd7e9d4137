"""Luminance grayscale, then a single-channel gradient (method 0).

Accepts an intensity grid (H, W) as-is. A colour grid (H, W, 3) or
(H, W, 4) is reduced to luminance first, alpha ignored:

    gray = 0.299 R + 0.587 G + 0.114 B   (truncated to 0-255)

The gradient stage then runs on the single channel.

Example:
    edgedraw detect photo.png edges.png --method 0
"""

import numpy as np

from edgedraw.core.errors import PreconditionViolation
from edgedraw.core.gradient import compute_gradient
from edgedraw.core.grid import require_grid
from edgedraw.core.types import GradientField, GradientPolicy

policy = GradientPolicy(
    name='grayscale',
    method=0,
    help='Luminance-weighted grayscale, then Sobel/Scharr gradient.',
)

# Per-mille weights summing to 1000, so (v, v, v) maps to v
LUMA_WEIGHTS = (299, 587, 114)


def to_intensity(image: np.ndarray) -> np.ndarray:
    """Return a uint8 IntensityGrid for a gray (H, W) or colour (H, W, 3|4) array."""
    arr = np.asarray(image)
    if arr.ndim == 2:
        return require_grid(arr, 'intensity')
    if arr.ndim != 3 or arr.shape[2] not in (3, 4):
        raise PreconditionViolation(f'Expected (H, W), (H, W, 3) or (H, W, 4) image, got shape {arr.shape}')
    if arr.shape[0] == 0 or arr.shape[1] == 0:
        raise PreconditionViolation(f'image is empty ({arr.shape[1]}x{arr.shape[0]})')

    rgb = arr[:, :, :3]
    if rgb.dtype != np.uint8:
        if rgb.dtype == np.bool_ or not np.issubdtype(rgb.dtype, np.number):
            raise PreconditionViolation(f'image must be numeric 0-255, got dtype {rgb.dtype}')
        if not np.isfinite(rgb).all() or rgb.min() < 0 or rgb.max() > 255:
            raise PreconditionViolation('image values must be in 0-255')
    r, g, b = (rgb[:, :, c].astype(np.int64) for c in range(3))
    gray = (LUMA_WEIGHTS[0] * r + LUMA_WEIGHTS[1] * g + LUMA_WEIGHTS[2] * b) // 1000
    return gray.astype(np.uint8)


@policy.run
def run(image: np.ndarray, kernel: str) -> tuple[np.ndarray, GradientField]:
    intensity = to_intensity(image)
    return intensity, compute_gradient(intensity, kernel)
