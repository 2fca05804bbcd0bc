"""Exception hierarchy for BD-rate computations.

Every failure raised by the package derives from :class:`BDRateError`, which
is itself a :class:`ValueError`.  A computation either succeeds or raises
exactly one of these errors; nothing is retried internally.
"""

from __future__ import annotations


class BDRateError(ValueError):
    """Base class for all BD-rate failures."""


class InvalidInput(BDRateError):
    """Malformed sample sequences or parameters."""


class UnknownMethod(BDRateError):
    """Interpolation method outside the supported set."""

    def __init__(self, method: object) -> None:
        self.method = method
        super().__init__(f"Unknown method: {method}")


class NoOverlap(BDRateError):
    """The metric domains of the two curves do not intersect."""

    def __init__(self) -> None:
        super().__init__("Curves do not overlap. BD cannot be calculated.")


class InsufficientOverlap(BDRateError):
    """The curves overlap, but by less than the requested fraction."""

    def __init__(self, ratio: float, min_overlap: float) -> None:
        self.ratio = ratio
        self.min_overlap = min_overlap
        super().__init__(
            f"Insufficient curve overlap: {ratio:g}. Minimum overlap: {min_overlap:g}."
        )


class DegenerateCurve(BDRateError):
    """A curve cannot support a well defined interpolant."""


__all__ = [
    "BDRateError",
    "InvalidInput",
    "UnknownMethod",
    "NoOverlap",
    "InsufficientOverlap",
    "DegenerateCurve",
]
