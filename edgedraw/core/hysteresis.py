"""Adaptive hysteresis thresholding with connected-edge tracing.

Thresholds calibrate themselves per image from the suppressed grid:

    high = mean + 2 * stddev
    low  = mean + stddev

Every pixel >= high seeds a strong edge (255). Strong pixels pull in any
8-connected neighbour >= low, transitively, so a weak edge survives only
when it is attached to a strong one. Whatever is not 255 afterwards is 0.

Tracing uses an explicit work-list rather than recursion, so stack use does
not grow with the length of an edge chain. Each pixel is marked at most
once, which bounds the pass at O(W*H).
"""

import math

import numpy as np

from edgedraw.core.errors import NumericDegeneracy, PreconditionViolation
from edgedraw.core.types import TrackResult

STRONG = 255

# A zero-magnitude pixel has no gradient; thresholds never drop below 1
MIN_THRESHOLD = 1
MAX_THRESHOLD = 255


def edge_statistics(edge: np.ndarray) -> tuple[float, float]:
    """Mean and population standard deviation of all pixel values.

    Sums are exact integers; only the final division is floating point.
    """
    n = int(np.size(edge))
    if n == 0:
        raise NumericDegeneracy('Cannot compute statistics of an empty grid')
    values = np.asarray(edge, dtype=np.int64)
    total = int(values.sum())
    total_sq = int((values * values).sum())
    mean = total / n
    variance = (n * total_sq - total * total) / (n * n)
    return mean, math.sqrt(variance)


def _saturate(value: float) -> int:
    return int(min(max(math.floor(value), MIN_THRESHOLD), MAX_THRESHOLD))


def adaptive_thresholds(mean: float, stddev: float) -> tuple[int, int]:
    """Return (low, high) saturated into the 8-bit range."""
    return _saturate(mean + stddev), _saturate(mean + 2 * stddev)


def _mark(edge: np.ndarray, y: int, x: int, low: int) -> None:
    """Mark (x, y) strong and grow the edge through neighbours >= low."""
    h, w = edge.shape
    edge[y, x] = STRONG
    pending = [(y, x)]
    while pending:
        cy, cx = pending.pop()
        for ny in range(max(cy - 1, 0), min(cy + 2, h)):
            for nx in range(max(cx - 1, 0), min(cx + 2, w)):
                value = edge[ny, nx]
                if value != STRONG and value >= low:
                    edge[ny, nx] = STRONG
                    pending.append((ny, nx))


def track_edges(edge: np.ndarray) -> TrackResult:
    """Threshold and trace the suppressed grid in place. Leaves it in {0, 255}."""
    if not isinstance(edge, np.ndarray) or edge.ndim != 2:
        raise PreconditionViolation('edge grid must be a 2-D numpy array')
    if edge.size == 0:
        raise NumericDegeneracy(f'edge grid is empty ({edge.shape[1]}x{edge.shape[0]})')
    if edge.dtype != np.uint8:
        raise PreconditionViolation(f'edge grid must be uint8 to be updated in place, got {edge.dtype}')

    mean, stddev = edge_statistics(edge)
    low, high = adaptive_thresholds(mean, stddev)

    # Seeds in raster order; an earlier seed's trace may already have claimed one
    for y, x in np.argwhere((edge >= high) & (edge != STRONG)):
        if edge[y, x] != STRONG:
            _mark(edge, int(y), int(x), low)

    edge[edge != STRONG] = 0
    return TrackResult(
        mean=mean,
        stddev=stddev,
        low=low,
        high=high,
        edge_pixels=int(np.count_nonzero(edge)),
    )
