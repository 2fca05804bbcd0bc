"""Core algorithms for the BD-rate computation."""

from .bdrate import BDRateResult, bd_rate, bd_rate_report
from .curve import prepare_curve
from .integrate import definite_integral, window_integral
from .overlap import check_overlap, overlap_ratio
from .spline import Interpolant, fit_spline

__all__ = [
    "BDRateResult",
    "bd_rate",
    "bd_rate_report",
    "prepare_curve",
    "check_overlap",
    "overlap_ratio",
    "Interpolant",
    "fit_spline",
    "definite_integral",
    "window_integral",
]
