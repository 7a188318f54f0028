from pathlib import Path

import pytest
from main import main, parse_args


def test_parse_args_defaults():
    args = parse_args(["a.csv"])

    assert args.files == ["a.csv"]
    assert args.unit == "in"
    assert args.plot is None
    assert args.residuals is None


def test_cli_reports_fit(tmp_path, capsys):
    path = tmp_path / "pts.csv"
    path.write_text("1,0\n0,1\n-1,0\n0,-1\n")

    status = main([str(path), "--unit", "mm"])

    assert status == 0
    assert "Radius:   1.000 mm" in capsys.readouterr().out


def test_cli_unfit_sets_status(tmp_path):
    path = tmp_path / "pts.csv"
    path.write_text("0,0\n1,0\n")

    assert main([str(path)]) == 1


def test_cli_missing_file(tmp_path, capsys):
    status = main([str(tmp_path / "nope.csv")])

    assert status == 1
    assert "Error processing" in capsys.readouterr().err


@pytest.mark.parametrize("flag, value", [("--plot", "fit.png"),
                                         ("--residuals", "res.csv")])
def test_single_output_path_needs_single_file(flag, value):
    with pytest.raises(SystemExit):
        parse_args(["a.csv", "b.csv", flag, value])


def test_multiple_files_without_outputs_are_accepted():
    assert parse_args(["a.csv", "b.csv"]).files == ["a.csv", "b.csv"]


def test_cli_write_failure_is_reported(tmp_path, capsys):
    path = tmp_path / "pts.csv"
    path.write_text("1,0\n0,1\n-1,0\n0,-1\n")
    plot = tmp_path / "nodir" / "fit.png"

    status = main([str(path), "--plot", str(plot)])

    assert status == 1
    err = capsys.readouterr().err
    assert f"Error processing {path}" in err
    assert "Error reading" not in err


def test_only_the_package_is_installed():
    tomllib = pytest.importorskip("tomllib")
    root = Path(__file__).resolve().parent.parent
    with open(root / "pyproject.toml", "rb") as f:
        config = tomllib.load(f)

    assert config["tool"]["setuptools"]["packages"] == ["circlefit"]
    assert "py-modules" not in config["tool"]["setuptools"]
