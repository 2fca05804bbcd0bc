"""Definite integrals of fitted interpolants."""

from __future__ import annotations

from ..types import OverlapWindow
from .spline import Interpolant


def definite_integral(spline: Interpolant, lo: float, hi: float) -> float:
    """Integrate ``spline`` from ``lo`` to ``hi``."""

    return spline.integrate(lo, hi)


def window_integral(spline: Interpolant, window: OverlapWindow) -> float:
    """Integrate ``spline`` over an :class:`OverlapWindow`."""

    return definite_integral(spline, window.lo, window.hi)


__all__ = ["definite_integral", "window_integral"]
