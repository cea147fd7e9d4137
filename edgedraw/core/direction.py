"""Discretize gradient angles into four orientation bins.

Gradient direction is symmetric under a 180 degree turn for edge purposes,
so negative angles are folded into [0, 180) first:

    0  E-W    [0, 22.5) and [157.5, 180]
    1  NE-SW  [22.5, 67.5)
    2  N-S    [67.5, 112.5)
    3  NW-SE  [112.5, 157.5)

Angles outside [-180, 180] (and NaN) never come out of the gradient stage;
seeing one is a caller bug and raises instead of guessing a bin.
"""

import math

import numpy as np

from edgedraw.core.errors import PreconditionViolation

EAST_WEST = 0
NE_SW = 1
NORTH_SOUTH = 2
NW_SE = 3

# Upper bounds (exclusive) of bins 0-3 after folding; above the last is bin 0 again
_EDGES = (22.5, 67.5, 112.5, 157.5)


def classify_direction(angle: float) -> int:
    """Return the orientation bin (0-3) for an angle in degrees."""
    if math.isnan(angle) or angle < -180 or angle > 180:
        raise PreconditionViolation(f'Angle out of range: {angle}')
    if angle < 0:
        angle += 180
    if angle < _EDGES[0] or angle >= _EDGES[3]:
        return EAST_WEST
    if angle < _EDGES[1]:
        return NE_SW
    if angle < _EDGES[2]:
        return NORTH_SOUTH
    return NW_SE


def classify_directions(direction: np.ndarray) -> np.ndarray:
    """Vectorized classify_direction over a DirectionGrid. Returns uint8 bins."""
    angles = np.asarray(direction, dtype=np.float64)
    bad = np.isnan(angles) | (angles < -180) | (angles > 180)
    if bad.any():
        first = tuple(int(i) for i in np.argwhere(bad)[0])
        raise PreconditionViolation(f'Angle out of range at index {first}: {angles[first]}')

    folded = np.where(angles < 0, angles + 180, angles)
    bins = np.full(folded.shape, EAST_WEST, dtype=np.uint8)
    bins[(folded >= _EDGES[0]) & (folded < _EDGES[1])] = NE_SW
    bins[(folded >= _EDGES[1]) & (folded < _EDGES[2])] = NORTH_SOUTH
    bins[(folded >= _EDGES[2]) & (folded < _EDGES[3])] = NW_SE
    return bins
