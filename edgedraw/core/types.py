"""Shared types for edgedraw: GradientField, TrackResult, EdgeResult, GradientPolicy, Report."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field

import numpy as np

from edgedraw.core.errors import PreconditionViolation, UnsupportedMode


@dataclass
class GradientField:
    """Co-indexed magnitude (uint8) and direction (float degrees) grids."""

    magnitude: np.ndarray
    direction: np.ndarray

    def __post_init__(self) -> None:
        if self.magnitude.shape != self.direction.shape:
            raise PreconditionViolation(
                f'magnitude {self.magnitude.shape} and direction {self.direction.shape} grids differ in shape'
            )

    @property
    def shape(self) -> tuple[int, int]:
        return self.magnitude.shape


@dataclass
class TrackResult:
    """Statistics and thresholds used by one hysteresis pass."""

    mean: float
    stddev: float
    low: int  # saturated low threshold
    high: int  # saturated high threshold
    edge_pixels: int  # pixels equal to 255 after cleanup


@dataclass
class EdgeResult:
    """Every grid produced by one pipeline run."""

    intensity: np.ndarray
    gradient: GradientField
    suppressed: np.ndarray  # non-maximum suppression output, before tracking
    edges: np.ndarray  # binary {0, 255}
    track: TrackResult


class GradientPolicy:
    """A self-registering grayscale-derivation policy.

    Usage in a policy module:

        policy = GradientPolicy(name='grayscale', method=0, help='Luminance then gradient')

        @policy.run
        def run(image, kernel):
            ...
    """

    def __init__(self, name: str, method: int, help: str = ''):
        self.name = name
        self.method = method
        self.help = help
        self._run_fn: Callable | None = None

    def run(self, fn: Callable) -> Callable:
        """Decorator to register the gradient function."""
        self._run_fn = fn
        return fn

    def execute(self, image: np.ndarray, kernel: str) -> tuple[np.ndarray, GradientField]:
        """Return (intensity grid, gradient field) for the image."""
        if self._run_fn is None:
            raise UnsupportedMode(f'Gradient policy {self.name} has no run function')
        return self._run_fn(image, kernel)


@dataclass
class Report:
    """Accumulates run details for text/JSON output."""

    image_path: str = ''
    image_width: int = 0
    image_height: int = 0
    method: str = ''
    kernel: str = ''
    track: TrackResult | None = None
    files: dict[str, str] = field(default_factory=dict)

    def add_file(self, label: str, path: str) -> None:
        """Record an artefact written during the run."""
        self.files[label] = path

    @property
    def coverage(self) -> float:
        """Percentage of pixels marked as edges."""
        total = self.image_width * self.image_height
        if self.track is None or total == 0:
            return 0.0
        return round(self.track.edge_pixels / total * 100, 2)

