"""Tests for edgedraw.core.suppress — non-maximum suppression."""

import numpy as np
import pytest
from edgedraw.core.errors import PreconditionViolation
from edgedraw.core.gradient import compute_gradient
from edgedraw.core.suppress import suppress


def _row(values: list[int]) -> np.ndarray:
    """3-row magnitude grid with values on the middle row."""
    mag = np.zeros((3, len(values)), dtype=np.uint8)
    mag[1] = values
    return mag


class TestAlongGradient:
    def test_keeps_only_peak(self):
        mag = _row([0, 10, 20, 10, 0])
        out = suppress(mag, np.zeros(mag.shape))
        assert out[1].tolist() == [0, 0, 20, 0, 0]

    def test_tie_keeps_both_sides_of_plateau(self):
        mag = _row([0, 20, 20, 0, 0])
        out = suppress(mag, np.zeros(mag.shape))
        assert out[1].tolist() == [0, 20, 20, 0, 0]

    def test_vertical_gradient_ignores_horizontal_neighbours(self):
        mag = _row([0, 10, 20, 10, 0])
        out = suppress(mag, np.full(mag.shape, 90.0))
        # Above and below are 0, so every interior pixel is a local maximum
        assert out[1].tolist() == [0, 10, 20, 10, 0]

    @pytest.mark.parametrize(
        ('angle', 'kept'),
        [(45.0, True), (-135.0, True), (135.0, False), (-45.0, False), (90.0, True), (0.0, True)],
    )
    def test_diagonal_neighbour_selection(self, angle, kept):
        # Only the top-right neighbour (x+1, y-1) is larger than the centre
        mag = np.array([[0, 0, 9], [0, 5, 0], [0, 0, 0]], dtype=np.uint8)
        out = suppress(mag, np.full(mag.shape, angle))
        assert out[1, 1] == (5 if kept else 0)

    def test_main_diagonal_neighbours_for_bin_1(self):
        mag = np.array([[9, 0, 0], [0, 5, 0], [0, 0, 0]], dtype=np.uint8)
        assert suppress(mag, np.full(mag.shape, 45.0))[1, 1] == 0
        assert suppress(mag, np.full(mag.shape, 135.0))[1, 1] == 5


class TestInvariants:
    def test_never_increases_magnitude(self):
        img = np.random.default_rng(5).integers(0, 256, size=(24, 31), dtype=np.uint8)
        field = compute_gradient(img)
        out = suppress(field.magnitude, field.direction)
        assert np.all(out <= field.magnitude)
        assert np.all((out == 0) | (out == field.magnitude))

    def test_border_is_zero(self):
        mag = np.full((4, 4), 50, dtype=np.uint8)
        out = suppress(mag, np.zeros(mag.shape))
        assert out[1:-1, 1:-1].tolist() == [[50, 50], [50, 50]]
        assert out[0].tolist() == [0, 0, 0, 0]
        assert out[:, 3].tolist() == [0, 0, 0, 0]

    def test_returns_new_grid(self):
        mag = _row([0, 10, 20, 10, 0])
        out = suppress(mag, np.zeros(mag.shape))
        assert out is not mag
        assert mag[1].tolist() == [0, 10, 20, 10, 0]


class TestPreconditions:
    def test_shape_mismatch(self):
        with pytest.raises(PreconditionViolation, match='differ in shape'):
            suppress(np.zeros((4, 4), dtype=np.uint8), np.zeros((4, 5)))

    def test_out_of_domain_angle(self):
        direction = np.zeros((3, 3))
        direction[1, 1] = 270.0
        with pytest.raises(PreconditionViolation):
            suppress(np.ones((3, 3), dtype=np.uint8), direction)

    def test_empty(self):
        with pytest.raises(PreconditionViolation):
            suppress(np.zeros((0, 0), dtype=np.uint8), np.zeros((0, 0)))
