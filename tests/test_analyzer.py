import pytest
import numpy as np
import pandas as pd
from analyzer import CircleAnalyzer, Config
from circlefit.circle_fitting import Fitted, Unfit
from circlefit.data_io import sample_points


def test_analyze_points_sample_data():
    report = CircleAnalyzer().analyze_points(sample_points())

    assert report["n_points"] == 11
    assert isinstance(report["result"], Fitted)
    assert report["result"].radius == pytest.approx(1.0, abs=0.05)
    assert report["formatted"]["r"].count(".") == 1
    assert len(report["formatted"]["r"].split(".")[1]) == 4
    assert report["roundness"]["Rmax"] >= report["roundness"]["Rmin"]


def test_analyze_points_drops_non_finite_rows():
    points = [(1, 0), (0, 1), (np.nan, 3), (-1, 0), (0, -1)]

    report = CircleAnalyzer(Config(unit='mm')).analyze_points(points)

    assert report["n_points"] == 4
    assert report["formatted"]["r"] == "1.000"


def test_analyze_points_unfit():
    report = CircleAnalyzer().analyze_points([(0, 0), (1, 0), (2, 0)])

    assert isinstance(report["result"], Unfit)
    assert report["roundness"] is None
    assert report["formatted"]["cx"] == "—"


def test_analyze_file_writes_outputs(tmp_path, capsys):
    csv_path = tmp_path / "pts.csv"
    csv_path.write_text("x_mm,y_mm\n10,0\n0,10\n-10,0\n0,-10\n7.2,7.0\n")
    config = Config(unit='mm', draw_plot=True,
                    plot_path=str(tmp_path / "fit.png"),
                    residuals_path=str(tmp_path / "res.csv"))

    report = CircleAnalyzer(config).analyze_file(str(csv_path))

    assert isinstance(report["result"], Fitted)
    out = capsys.readouterr().out
    assert "Radius:" in out
    assert "Roundness:" in out
    assert (tmp_path / "fit.png").exists()
    residuals = pd.read_csv(tmp_path / "res.csv")
    assert len(residuals) == 5
    assert list(residuals.columns) == ["x", "y", "distance", "deviation", "theta"]


def test_analyze_file_unfit_skips_residuals(tmp_path):
    csv_path = tmp_path / "line.csv"
    csv_path.write_text("0,0\n1,1\n2,2\n")
    config = Config(residuals_path=str(tmp_path / "res.csv"))

    report = CircleAnalyzer(config).analyze_file(str(csv_path))

    assert isinstance(report["result"], Unfit)
    assert not (tmp_path / "res.csv").exists()


def test_unknown_unit_rejected():
    with pytest.raises(ValueError):
        CircleAnalyzer(Config(unit='cm'))
