import pytest
import numpy as np
from circlefit.circle_fitting import UNFIT, Fitted
from circlefit.metrics import radial_deviations, residual_table, roundness


@pytest.fixture
def unit_fit():
    return Fitted(center_x=0.0, center_y=0.0, radius=1.0, rmse=0.0)


def test_radial_deviations(unit_fit):
    points = [(1.1, 0.0), (0.0, 0.9), (-1.0, 0.0), (0.0, -1.0)]

    rad, dev, theta = radial_deviations(points, unit_fit)

    np.testing.assert_allclose(rad, [1.1, 0.9, 1.0, 1.0])
    np.testing.assert_allclose(dev, [0.1, -0.1, 0.0, 0.0], atol=1e-12)
    np.testing.assert_allclose(theta, [0.0, np.pi/2, np.pi, 3*np.pi/2])


def test_roundness(unit_fit):
    points = [(1.1, 0.0), (0.0, 0.9), (-1.0, 0.0), (0.0, -1.05)]

    rnd = roundness(points, unit_fit)

    assert rnd["Rmax"] == pytest.approx(1.1)
    assert rnd["Rmin"] == pytest.approx(0.9)
    assert rnd["roundness_abs"] == pytest.approx(0.2)
    assert rnd["roundness_pct"] == pytest.approx(20.0)
    assert rnd["max_abs_deviation"] == pytest.approx(0.1)
    assert rnd["index_at_Rmax"] == 0
    assert rnd["index_at_Rmin"] == 1


def test_roundness_zero_radius_is_nan():
    fit = Fitted(center_x=0.0, center_y=0.0, radius=0.0, rmse=0.0)

    rnd = roundness([(0.0, 0.0), (0.0, 0.0)], fit)

    assert np.isnan(rnd["roundness_pct"])


def test_residual_table_columns(unit_fit):
    table = residual_table([(2.0, 0.0), (0.0, 1.0)], unit_fit)

    assert list(table.columns) == ["x", "y", "distance", "deviation", "theta"]
    assert table["deviation"].tolist() == pytest.approx([1.0, 0.0])


@pytest.mark.parametrize("func", [radial_deviations, roundness, residual_table])
def test_unfit_is_rejected(func):
    with pytest.raises(ValueError):
        func([(0, 0), (1, 0), (2, 0)], UNFIT)
