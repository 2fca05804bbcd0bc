"""Preparation of raw rate-quality samples.

A raw curve is a pair of equal-length sequences in arbitrary order.  The
prepared form sorts the samples by ascending rate and takes the ``log10`` of
the rates so that the curve can be interpolated as ``log10(rate) = f(metric)``.
"""

from __future__ import annotations

import logging
from typing import Sequence

import numpy as np

from ..errors import DegenerateCurve, InvalidInput
from ..types import PreparedCurve

logger = logging.getLogger(__name__)

MIN_POINTS = 2


def _as_samples(values: Sequence[float], name: str) -> np.ndarray:
    try:
        arr = np.array(values, dtype=float)
    except (TypeError, ValueError) as exc:
        raise InvalidInput(f"{name} must contain numbers: {exc}") from exc
    if arr.ndim != 1:
        raise InvalidInput(f"{name} must be one-dimensional")
    if not np.all(np.isfinite(arr)):
        raise InvalidInput(f"{name} must contain only finite values")
    return arr


def prepare_curve(rate: Sequence[float], metric: Sequence[float]) -> PreparedCurve:
    """Sort ``(rate, metric)`` samples by rate and log-transform the rates.

    Parameters
    ----------
    rate:
        Bitrates of the samples.  Every value must be strictly positive.
    metric:
        Quality metric of each sample (PSNR, SSIM, ...).

    Returns
    -------
    PreparedCurve
        ``x`` holds the metrics and ``y`` the ``log10`` rates, both in order
        of ascending rate.  Ties in rate keep their input order.

    Raises
    ------
    InvalidInput
        If the lengths differ, fewer than two samples are given, or a rate is
        not positive.
    DegenerateCurve
        If the metrics are not strictly ascending once sorted by rate, i.e.
        duplicated metric values or a curve whose rate and metric do not grow
        together.
    """

    rate_arr = _as_samples(rate, "rate")
    metric_arr = _as_samples(metric, "metric")
    if rate_arr.size != metric_arr.size:
        raise InvalidInput(
            f"rate and metric must have the same length ({rate_arr.size} != {metric_arr.size})"
        )
    if rate_arr.size < MIN_POINTS:
        raise InvalidInput(f"a curve needs at least {MIN_POINTS} samples, got {rate_arr.size}")
    if np.any(rate_arr <= 0):
        raise InvalidInput("rates must be strictly positive")

    order = np.argsort(rate_arr, kind="stable")
    x = metric_arr[order]
    y = np.log10(rate_arr[order])

    steps = np.diff(x)
    if np.any(steps <= 0):
        i = int(np.argmax(steps <= 0))
        raise DegenerateCurve(
            "metric must increase strictly with rate; "
            f"got {x[i]:g} followed by {x[i + 1]:g}"
        )

    logger.debug("prepared curve with %d samples over [%g, %g]", x.size, x[0], x[-1])
    return PreparedCurve(x=x, y=y)


__all__ = ["MIN_POINTS", "prepare_curve"]
