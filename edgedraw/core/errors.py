"""Exception hierarchy for edgedraw.

Every failure is a caller bug (bad input or an unsupported mode). Nothing is
retried and nothing is masked: library code raises, the CLI reports.
"""


class EdgeDrawError(Exception):
    """Base class for every error raised by the edge pipeline."""


class PreconditionViolation(EdgeDrawError, ValueError):
    """Input grid, angle or option outside the documented domain."""


class NumericDegeneracy(PreconditionViolation):
    """Statistics requested over a grid with no pixels."""


class UnsupportedMode(EdgeDrawError, NotImplementedError):
    """Gradient policy selected that has no implementation."""
