"""Tests for edgedraw.core.direction — angle to orientation bin."""

import numpy as np
import pytest
from edgedraw.core.direction import classify_direction, classify_directions
from edgedraw.core.errors import PreconditionViolation

BOUNDARIES = [
    (-180.0, 0),
    (-157.5, 1),
    (-112.5, 2),
    (-67.5, 3),
    (-22.5, 0),
    (0.0, 0),
    (22.5, 1),
    (67.5, 2),
    (112.5, 3),
    (157.5, 0),
    (180.0, 0),
]


class TestClassifyDirection:
    @pytest.mark.parametrize(('angle', 'expected'), BOUNDARIES)
    def test_boundaries(self, angle, expected):
        assert classify_direction(angle) == expected

    @pytest.mark.parametrize(
        ('angle', 'expected'),
        [(10.0, 0), (-10.0, 0), (45.0, 1), (-135.0, 1), (90.0, 2), (-90.0, 2), (135.0, 3), (-45.0, 3), (170.0, 0)],
    )
    def test_sector_centres(self, angle, expected):
        assert classify_direction(angle) == expected

    def test_just_below_boundary(self):
        assert classify_direction(22.4999) == 0
        assert classify_direction(157.4999) == 3

    @pytest.mark.parametrize('angle', [180.001, -180.5, 360.0, float('nan'), float('inf')])
    def test_out_of_domain_raises(self, angle):
        with pytest.raises(PreconditionViolation):
            classify_direction(angle)


class TestClassifyDirections:
    def test_matches_scalar(self):
        angles = np.concatenate([np.linspace(-180, 180, 721), [b for b, _ in BOUNDARIES]])
        grid = angles.reshape(1, -1)
        bins = classify_directions(grid)
        assert bins.shape == grid.shape
        assert bins.tolist()[0] == [classify_direction(float(a)) for a in angles]

    def test_out_of_domain_raises(self):
        grid = np.zeros((3, 3))
        grid[1, 2] = 200.0
        with pytest.raises(PreconditionViolation, match='out of range'):
            classify_directions(grid)

    def test_nan_raises(self):
        grid = np.zeros((2, 2))
        grid[0, 0] = np.nan
        with pytest.raises(PreconditionViolation):
            classify_directions(grid)
