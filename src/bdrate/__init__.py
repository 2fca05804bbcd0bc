"""Bjontegaard-Delta rate between two rate-quality curves."""

from .core import bd_rate, bd_rate_report
from .errors import (
    BDRateError,
    DegenerateCurve,
    InsufficientOverlap,
    InvalidInput,
    NoOverlap,
    UnknownMethod,
)
from .types import Method, OverlapWindow, PreparedCurve

__version__ = "0.1.0"

__all__ = [
    "bd_rate",
    "bd_rate_report",
    "BDRateError",
    "DegenerateCurve",
    "InsufficientOverlap",
    "InvalidInput",
    "NoOverlap",
    "UnknownMethod",
    "Method",
    "OverlapWindow",
    "PreparedCurve",
]
