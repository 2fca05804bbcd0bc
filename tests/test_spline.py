import numpy as np
import pytest

from bdrate.core import definite_integral, fit_spline, prepare_curve, window_integral
from bdrate.errors import DegenerateCurve, InvalidInput, UnknownMethod
from bdrate.types import Method, OverlapWindow, PreparedCurve


def make_curve(x, y):
    return PreparedCurve(x=np.asarray(x, dtype=float), y=np.asarray(y, dtype=float))


CURVE = make_curve([30.0, 32.5, 34.0, 36.5, 39.0], [2.0, 2.3, 2.45, 2.8, 3.2])


@pytest.mark.parametrize("method", ["akima", "cubic", Method.AKIMA])
def test_passes_through_knots(method):
    spline = fit_spline(CURVE, method)
    np.testing.assert_allclose(spline(CURVE.x), CURVE.y, atol=1e-12)
    assert spline.x_min == 30.0
    assert spline.x_max == 39.0


def test_natural_boundary_condition():
    spline = fit_spline(CURVE, "cubic")
    np.testing.assert_allclose(spline([CURVE.x_min, CURVE.x_max], nu=2), [0.0, 0.0], atol=1e-10)
    # second derivative is continuous at the interior knots
    eps = 1e-9
    for k in CURVE.x[1:-1]:
        assert spline(k - eps, nu=2) == pytest.approx(spline(k + eps, nu=2), abs=1e-5)


def test_akima_knot_slopes_follow_weighted_secants():
    x, y = CURVE.x, CURVE.y
    m = np.diff(y) / np.diff(x)
    slopes = fit_spline(CURVE, "akima")(x, nu=1)
    # interior knot 2 uses m0..m3 directly
    w1 = abs(m[3] - m[2])
    w2 = abs(m[1] - m[0])
    assert slopes[2] == pytest.approx((w1 * m[1] + w2 * m[2]) / (w1 + w2))


def test_akima_flat_weights_stay_finite():
    # piecewise linear with a single kink: both weights vanish away from it
    x = np.array([0.0, 1.0, 2.0, 3.0, 4.0, 5.0, 6.0])
    y = np.array([0.0, 1.0, 2.0, 3.0, 5.0, 7.0, 9.0])
    slopes = fit_spline(PreparedCurve(x=x, y=y), "akima")(x, nu=1)
    assert slopes[0] == pytest.approx(1.0)
    assert slopes[-1] == pytest.approx(2.0)
    assert np.all(np.isfinite(slopes))


@pytest.mark.parametrize("method", ["akima", "cubic"])
def test_straight_line_is_reproduced(method):
    x = np.array([20.0, 25.0, 27.0, 33.0, 40.0])
    line = make_curve(x, 0.1 * x - 1.0)
    spline = fit_spline(line, method)
    grid = np.linspace(20.0, 40.0, 41)
    np.testing.assert_allclose(spline(grid), 0.1 * grid - 1.0, atol=1e-12)
    assert spline.integrate(20.0, 40.0) == pytest.approx(0.05 * (40**2 - 20**2) - 20.0)


@pytest.mark.parametrize("method", ["akima", "cubic"])
def test_two_points_degrade_to_line(method):
    spline = fit_spline(make_curve([10.0, 20.0], [1.0, 3.0]), method)
    assert spline(15.0) == pytest.approx(2.0)
    assert spline.integrate(10.0, 20.0) == pytest.approx(20.0)


@pytest.mark.parametrize("method", ["akima", "cubic"])
def test_integral_is_additive_and_antisymmetric(method):
    spline = fit_spline(CURVE, method)
    whole = spline.integrate(30.0, 39.0)
    parts = spline.integrate(30.0, 33.3) + spline.integrate(33.3, 39.0)
    assert whole == pytest.approx(parts)
    assert spline.integrate(39.0, 30.0) == pytest.approx(-whole)
    assert spline.integrate(31.0, 31.0) == pytest.approx(0.0)


def test_integral_matches_quadrature():
    spline = fit_spline(CURVE, "cubic")
    grid = np.linspace(31.0, 38.0, 20001)
    trapezoid = getattr(np, "trapezoid", None) or np.trapz
    expected = trapezoid(spline(grid), grid)
    assert definite_integral(spline, 31.0, 38.0) == pytest.approx(expected, rel=1e-8)


def test_window_integral():
    spline = fit_spline(CURVE, "akima")
    window = OverlapWindow(lo=31.0, hi=35.0, ratio=0.5)
    assert window_integral(spline, window) == pytest.approx(spline.integrate(31.0, 35.0))


def test_integration_outside_domain():
    spline = fit_spline(CURVE, "akima")
    with pytest.raises(InvalidInput):
        spline.integrate(29.0, 35.0)
    with pytest.raises(InvalidInput):
        spline(40.0)


def test_unknown_method():
    with pytest.raises(UnknownMethod):
        fit_spline(CURVE, "linear")


@pytest.mark.parametrize(
    "x, y",
    [
        ([30.0, 33.0, 33.0], [2.0, 2.1, 2.2]),
        ([30.0, 36.0, 33.0], [2.0, 2.1, 2.2]),
        ([30.0], [2.0]),
    ],
)
def test_degenerate_curves(x, y):
    with pytest.raises(DegenerateCurve):
        fit_spline(make_curve(x, y), "cubic")


def test_mismatched_arrays():
    with pytest.raises(InvalidInput):
        fit_spline(make_curve([30.0, 33.0, 36.0], [2.0, 2.1]), "akima")


def test_fit_prepared_curve():
    curve = prepare_curve([400, 100, 200], [36, 30, 33])
    spline = fit_spline(curve)
    assert spline.method is Method.AKIMA
    assert spline.coefficients.shape == (4, 2)
    np.testing.assert_array_equal(spline.breakpoints, [30, 33, 36])
