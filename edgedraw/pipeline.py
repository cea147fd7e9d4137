"""Canny-style edge extraction: gradient -> suppression -> hysteresis.

The gradient policy (method 0 grayscale, method 1 colour) is resolved once
when the pipeline is built, so selecting an unknown method fails before any
image is touched. The colour policy fails when run.

    pipeline = EdgePipeline(method=0)
    edges = pipeline.detect(image)        # uint8 (H, W), values {0, 255}
    result = pipeline.run(image)          # every intermediate grid too

The image should already be denoised (e.g. Gaussian blurred); no smoothing
happens here.
"""

from __future__ import annotations

import numpy as np

from edgedraw import registry
from edgedraw.core.gradient import kernel_pair
from edgedraw.core.hysteresis import track_edges
from edgedraw.core.suppress import suppress
from edgedraw.core.types import EdgeResult, GradientPolicy


class EdgePipeline:
    """Edge extractor bound to one gradient policy and derivative kernel."""

    def __init__(self, method: int | str = 0, kernel: str = 'sobel'):
        kernel_pair(kernel)
        self.policy: GradientPolicy = registry.resolve(method)
        self.kernel = kernel

    def run(self, image: np.ndarray) -> EdgeResult:
        """Run every stage and return all grids. The input is never modified."""
        intensity, gradient = self.policy.execute(image, self.kernel)
        suppressed = suppress(gradient.magnitude, gradient.direction)
        edges = suppressed.copy()
        track = track_edges(edges)
        return EdgeResult(
            intensity=intensity,
            gradient=gradient,
            suppressed=suppressed,
            edges=edges,
            track=track,
        )

    def detect(self, image: np.ndarray) -> np.ndarray:
        """Return only the binary EdgeGrid."""
        return self.run(image).edges


def extract_edges(image: np.ndarray, method: int | str = 0, kernel: str = 'sobel') -> np.ndarray:
    """Extract a binary edge map from a gray or colour image."""
    return EdgePipeline(method=method, kernel=kernel).detect(image)
