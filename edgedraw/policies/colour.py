"""Per-channel colour gradient, combined across R, G and B (method 1).

Not implemented. Selecting this policy raises UnsupportedMode instead of
returning an empty or zeroed edge map that would look like a valid result.
Use method 0 (grayscale) for colour images.

Example:
    edgedraw detect photo.png edges.png --method 1   # exits 1: not implemented
"""

import numpy as np

from edgedraw.core.errors import UnsupportedMode
from edgedraw.core.types import GradientField, GradientPolicy

policy = GradientPolicy(
    name='colour',
    method=1,
    help='Per-channel colour gradient (not implemented; always fails).',
)


@policy.run
def run(image: np.ndarray, kernel: str) -> tuple[np.ndarray, GradientField]:
    raise UnsupportedMode('colour gradient (method 1) is not implemented; use method 0 (grayscale)')
