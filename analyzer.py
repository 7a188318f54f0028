"""
Main analysis module for fitting circles to measured point lists
"""
import logging
import numpy as np
from dataclasses import dataclass
from typing import Optional

from circlefit.circle_fitting import Fitted, fit_circle
from circlefit.data_io import finite_points, load_csv_points, save_residuals
from circlefit.formatting import Unit, format_result, result_summary
from circlefit.metrics import residual_table, roundness
from circlefit.visualization import save_fit_plot

logger = logging.getLogger(__name__)


@dataclass
class Config:
    """Analysis configuration parameters"""
    unit: str = 'in'
    draw_plot: bool = False
    plot_path: str = 'circle_fit.png'
    residuals_path: Optional[str] = None


class CircleAnalyzer:
    def __init__(self, config: Config = None):
        self.config = config or Config()
        self.unit = Unit(self.config.unit)

    def analyze_points(self, points) -> dict:
        """Fit one point list and collect everything a report needs"""
        pts = finite_points(points)
        result = fit_circle(pts)
        report = {
            "n_points": int(len(pts)),
            "points": pts,
            "result": result,
            "formatted": format_result(result, self.unit),
            "roundness": None,
        }
        if isinstance(result, Fitted):
            report["roundness"] = roundness(pts, result)
        return report

    def analyze_file(self, file_path: str) -> dict:
        """Process a CSV point file: fit, print, and write optional outputs"""
        points = load_csv_points(file_path)
        report = self.analyze_points(points)
        result = report["result"]

        print(f"\n{file_path}")
        print(result_summary(result, self.unit, report["n_points"]))
        if report["roundness"] is not None:
            rnd = report["roundness"]
            dp = self.unit.decimals
            print(f"Roundness: {rnd['roundness_abs']:.{dp}f} {self.unit.value} "
                  f"(Rmax {rnd['Rmax']:.{dp}f}, Rmin {rnd['Rmin']:.{dp}f})")

        if self.config.draw_plot:
            save_fit_plot(report["points"], result, self.unit, self.config.plot_path)
            print(f"Saved plot -> {self.config.plot_path}")

        if self.config.residuals_path:
            if isinstance(result, Fitted):
                save_residuals(residual_table(report["points"], result),
                               self.config.residuals_path)
                print(f"Saved residuals -> {self.config.residuals_path}")
            else:
                logger.warning("No fit for %s, residuals not written", file_path)

        return report
