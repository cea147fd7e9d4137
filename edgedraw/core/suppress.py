"""Non-maximum suppression: thin the gradient field to one-pixel ridges.

Each interior pixel is compared with its two neighbours along the gradient
direction. It keeps its magnitude when it is >= both, otherwise it becomes 0.
Ties keep the pixel, so a flat two-pixel maximum survives on both sides;
that is accepted imprecision, not a bug.
"""

import numpy as np

from edgedraw.core.direction import EAST_WEST, NE_SW, NORTH_SOUTH, NW_SE, classify_directions
from edgedraw.core.errors import PreconditionViolation
from edgedraw.core.grid import interior, require_grid

# (dx, dy) of the two neighbours compared for each orientation bin
NEIGHBOURS: dict[int, tuple[tuple[int, int], tuple[int, int]]] = {
    EAST_WEST: ((-1, 0), (1, 0)),
    NE_SW: ((-1, -1), (1, 1)),
    NORTH_SOUTH: ((0, -1), (0, 1)),
    NW_SE: ((1, -1), (-1, 1)),
}


def _shifted(grid: np.ndarray, dx: int, dy: int) -> np.ndarray:
    """Interior-sized view of grid offset by (dx, dy)."""
    h, w = grid.shape
    return grid[1 + dy : h - 1 + dy, 1 + dx : w - 1 + dx]


def suppress(magnitude: np.ndarray, direction: np.ndarray) -> np.ndarray:
    """Return a new EdgeGrid holding only local maxima along the gradient."""
    mag = require_grid(magnitude, 'magnitude')
    if np.shape(direction) != mag.shape:
        raise PreconditionViolation(
            f'magnitude {mag.shape} and direction {np.shape(direction)} grids differ in shape'
        )

    edge = np.zeros(mag.shape, dtype=np.uint8)
    if not interior(mag.shape):
        return edge

    bins = classify_directions(direction)[1:-1, 1:-1]
    centre = mag[1:-1, 1:-1]
    keep = np.zeros(centre.shape, dtype=bool)
    for b, (first, second) in NEIGHBOURS.items():
        local_max = (centre >= _shifted(mag, *first)) & (centre >= _shifted(mag, *second))
        keep |= (bins == b) & local_max

    edge[1:-1, 1:-1] = np.where(keep, centre, 0)
    return edge
