"""Piecewise cubic interpolation of prepared curves.

Two interpolation methods are supported:

``akima``
    Akima spline (:class:`scipy.interpolate.Akima1DInterpolator`): a cubic
    Hermite interpolant whose knot slopes are a weighted average of the
    neighbouring secants, with ghost secants extrapolated at both ends.

``cubic``
    Natural cubic spline: continuous first and second derivatives at the
    interior knots and zero curvature at both ends.

Curves with only two samples reduce to the straight line through them for
either method.  The fitted pieces are :class:`scipy.interpolate.PPoly`
objects, which integrate exactly through their piecewise antiderivative.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Dict

import numpy as np
from scipy.interpolate import Akima1DInterpolator, CubicHermiteSpline, CubicSpline, PPoly

from ..errors import DegenerateCurve, InvalidInput
from ..types import Method, PreparedCurve

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Interpolant:
    """Fitted piecewise cubic over ``[x_min, x_max]`` of a curve."""

    method: Method
    ppoly: PPoly

    @property
    def x_min(self) -> float:
        return float(self.ppoly.x[0])

    @property
    def x_max(self) -> float:
        return float(self.ppoly.x[-1])

    @property
    def breakpoints(self) -> np.ndarray:
        return self.ppoly.x

    @property
    def coefficients(self) -> np.ndarray:
        """Segment coefficients, shape ``(4, n - 1)``, highest power first.

        Column ``j`` describes the cubic in the local variable
        ``x - breakpoints[j]``.
        """

        return self.ppoly.c

    def _check_bounds(self, *points: float) -> None:
        for p in points:
            if not self.x_min <= p <= self.x_max:
                raise InvalidInput(
                    f"{p:g} lies outside the interpolation domain [{self.x_min:g}, {self.x_max:g}]"
                )

    def __call__(self, x: float | np.ndarray, nu: int = 0) -> np.ndarray:
        """Evaluate the interpolant (or its ``nu``-th derivative) at ``x``."""

        arr = np.asarray(x, dtype=float)
        self._check_bounds(float(arr.min()), float(arr.max()))
        return self.ppoly(arr, nu)

    def integrate(self, a: float, b: float) -> float:
        """Return the definite integral of the interpolant from ``a`` to ``b``."""

        self._check_bounds(a, b)
        return float(self.ppoly.integrate(a, b))


def _secants(x: np.ndarray, y: np.ndarray) -> np.ndarray:
    return np.diff(y) / np.diff(x)


def _line(x: np.ndarray, y: np.ndarray) -> PPoly:
    return CubicHermiteSpline(x, y, np.full(x.size, _secants(x, y)[0]))


def _fit_akima(x: np.ndarray, y: np.ndarray) -> PPoly:
    if x.size == 2:
        return _line(x, y)
    return Akima1DInterpolator(x, y)


def _fit_cubic(x: np.ndarray, y: np.ndarray) -> PPoly:
    if x.size == 2:
        return _line(x, y)
    return CubicSpline(x, y, bc_type="natural")


_FITTERS: Dict[Method, Callable[[np.ndarray, np.ndarray], PPoly]] = {
    Method.AKIMA: _fit_akima,
    Method.CUBIC: _fit_cubic,
}


def fit_spline(curve: PreparedCurve, method: Method | str = Method.AKIMA) -> Interpolant:
    """Fit ``log10(rate)`` as a piecewise cubic function of the metric.

    Parameters
    ----------
    curve:
        Prepared curve with strictly ascending ``x``.
    method:
        ``"akima"`` or ``"cubic"``.

    Raises
    ------
    UnknownMethod
        If ``method`` is not supported.
    DegenerateCurve
        If the curve has fewer than two points or repeated/descending ``x``.
    """

    method = Method.parse(method)
    x = np.asarray(curve.x, dtype=float)
    y = np.asarray(curve.y, dtype=float)
    if x.shape != y.shape or x.ndim != 1:
        raise InvalidInput("curve x and y must be one-dimensional with the same length")
    if x.size < 2:
        raise DegenerateCurve(f"{method.value} interpolation needs at least 2 points, got {x.size}")
    if np.any(np.diff(x) <= 0):
        raise DegenerateCurve("curve metric values must be strictly ascending")

    ppoly = _FITTERS[method](x, y)
    logger.debug("fitted %s spline on %d knots", method.value, x.size)
    return Interpolant(method=method, ppoly=ppoly)


__all__ = ["Interpolant", "fit_spline"]
