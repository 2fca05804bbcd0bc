"""Bjontegaard-Delta rate between an anchor and a test curve.

Both curves are interpolated as ``log10(rate) = f(metric)`` and integrated
over the metric interval they share.  The mean log-rate difference over that
interval is converted back to a percentage:

.. math::

   \\mathrm{BD} = \\left(10^{\\frac{1}{hi - lo}\\int_{lo}^{hi} f_T - f_A} - 1\\right) \\cdot 100

A negative value means the test curve needs less bitrate than the anchor for
the same quality.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Sequence

from ..config import Settings
from ..errors import InvalidInput
from ..types import Method, OverlapWindow
from .curve import prepare_curve
from .integrate import window_integral
from .overlap import check_overlap
from .spline import fit_spline

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class BDRateResult:
    """Outcome of a BD-rate computation.

    Attributes
    ----------
    bd_rate:
        Bitrate difference of test versus anchor in percent.
    avg_log_diff:
        Mean difference of ``log10(rate)`` over the overlap window.
    window:
        Metric interval both curves were integrated over.
    method:
        Interpolation method used for both curves.
    """

    bd_rate: float
    avg_log_diff: float
    window: OverlapWindow
    method: Method


def bd_rate_report(
    anchor_rate: Sequence[float],
    anchor_metric: Sequence[float],
    test_rate: Sequence[float],
    test_metric: Sequence[float],
    min_overlap: float | None = None,
    method: Method | str | None = None,
    *,
    settings: Settings | None = None,
) -> BDRateResult:
    """Compute the BD-rate and keep the intermediate quantities.

    Parameters
    ----------
    anchor_rate, anchor_metric:
        Samples of the reference curve.
    test_rate, test_metric:
        Samples of the candidate curve.
    min_overlap:
        Minimum fraction of the combined metric range the curves must share.
        Defaults to ``settings.bdrate.min_overlap``.
    method:
        ``"akima"`` or ``"cubic"``.  Defaults to ``settings.bdrate.method``.
    settings:
        Optional :class:`~bdrate.config.Settings` instance providing default
        values.
    """

    if settings is None:
        settings = Settings()

    method = Method.parse(settings.bdrate.method if method is None else method)
    if min_overlap is None:
        min_overlap = settings.bdrate.min_overlap

    anchor = prepare_curve(anchor_rate, anchor_metric)
    test = prepare_curve(test_rate, test_metric)
    window = check_overlap(anchor, test, min_overlap)

    spline_anchor = fit_spline(anchor, method)
    spline_test = fit_spline(test, method)
    int_anchor = window_integral(spline_anchor, window)
    int_test = window_integral(spline_test, window)

    avg_log_diff = (int_test - int_anchor) / window.width
    try:
        value = float((10.0 ** avg_log_diff - 1.0) * 100.0)
    except OverflowError:
        raise InvalidInput(
            f"rate difference of 10**{avg_log_diff:g} is too large to express as a percentage"
        ) from None
    logger.debug(
        "integrals anchor=%g test=%g over [%g, %g]; bd-rate %g%%",
        int_anchor,
        int_test,
        window.lo,
        window.hi,
        value,
    )
    return BDRateResult(bd_rate=value, avg_log_diff=avg_log_diff, window=window, method=method)


def bd_rate(
    anchor_rate: Sequence[float],
    anchor_metric: Sequence[float],
    test_rate: Sequence[float],
    test_metric: Sequence[float],
    min_overlap: float | None = None,
    method: Method | str | None = None,
    *,
    settings: Settings | None = None,
) -> float:
    """Return the BD-rate of the test curve against the anchor, in percent.

    See :func:`bd_rate_report` for the parameters.
    """

    return bd_rate_report(
        anchor_rate,
        anchor_metric,
        test_rate,
        test_metric,
        min_overlap,
        method,
        settings=settings,
    ).bd_rate


__all__ = ["BDRateResult", "bd_rate", "bd_rate_report"]
