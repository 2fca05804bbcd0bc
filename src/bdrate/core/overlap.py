"""Overlap checks between the metric domains of two curves."""

from __future__ import annotations

import logging

from ..errors import InsufficientOverlap, InvalidInput, NoOverlap
from ..types import OverlapWindow, PreparedCurve

logger = logging.getLogger(__name__)


def overlap_ratio(lo_a: float, hi_a: float, lo_b: float, hi_b: float) -> float:
    """Return the fraction of the union of two intervals covered by both.

    The result is ``max(min(hi) - max(lo), 0) / (max(hi) - min(lo))`` and lies
    in ``[0, 1]``.  A union of zero width yields ``0.0``.
    """

    total = max(hi_a, hi_b) - min(lo_a, lo_b)
    if total <= 0:
        return 0.0
    shared = max(min(hi_a, hi_b) - max(lo_a, lo_b), 0.0)
    return shared / total


def check_overlap(
    curve_a: PreparedCurve,
    curve_b: PreparedCurve,
    min_overlap: float,
) -> OverlapWindow:
    """Return the common metric window of two curves.

    Raises
    ------
    NoOverlap
        If the domains are disjoint or only touch at a point.
    InsufficientOverlap
        If the shared fraction of the combined domain is below
        ``min_overlap``.
    """

    if not 0.0 <= min_overlap <= 1.0:
        raise InvalidInput(f"min_overlap must lie in [0, 1], got {min_overlap}")

    lo = max(curve_a.x_min, curve_b.x_min)
    hi = min(curve_a.x_max, curve_b.x_max)
    ratio = overlap_ratio(curve_a.x_min, curve_a.x_max, curve_b.x_min, curve_b.x_max)
    logger.debug("overlap window [%g, %g], ratio %g", lo, hi, ratio)

    if ratio == 0:
        raise NoOverlap()
    if ratio < min_overlap:
        raise InsufficientOverlap(ratio, min_overlap)
    return OverlapWindow(lo=lo, hi=hi, ratio=ratio)


__all__ = ["overlap_ratio", "check_overlap"]
