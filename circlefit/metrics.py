"""
Per-point residual analysis against a fitted circle
"""
import numpy as np
import pandas as pd
from typing import Tuple

from .circle_fitting import Fitted, as_xy


def _require_fitted(result) -> Fitted:
    if not isinstance(result, Fitted):
        raise ValueError("Residuals need a fitted circle, got no fit")
    return result


def radial_deviations(points, result) -> Tuple[np.ndarray, np.ndarray, np.ndarray]:
    """
    Distance of every point from the fitted center, its deviation from the
    fitted radius and its polar angle in [0, 2*pi)
    Returns: distance, deviation, theta
    """
    fit = _require_fitted(result)
    XY = as_xy(points)
    dx = XY[:, 0] - fit.center_x
    dy = XY[:, 1] - fit.center_y
    rad = np.hypot(dx, dy)
    ang = (np.arctan2(dy, dx) + 2*np.pi) % (2*np.pi)
    return rad, rad - fit.radius, ang


def roundness(points, result) -> dict:
    """
    Roundness of the sampled profile around the fitted circle
    Returns: dict with Rmax, Rmin, roundness metrics and extreme point indices
    """
    fit = _require_fitted(result)
    rad, dev, _ = radial_deviations(points, fit)
    if rad.size == 0:
        raise ValueError("No points to measure")

    i_max = int(np.argmax(rad))
    i_min = int(np.argmin(rad))
    Rmax, Rmin = float(rad[i_max]), float(rad[i_min])
    round_abs = Rmax - Rmin
    round_pct = 100.0 * round_abs / fit.radius if fit.radius > 0 else np.nan

    return {
        "Rmax": Rmax,
        "Rmin": Rmin,
        "roundness_abs": round_abs,
        "roundness_pct": round_pct,
        "max_abs_deviation": float(np.max(np.abs(dev))),
        "index_at_Rmax": i_max,
        "index_at_Rmin": i_min,
    }


def residual_table(points, result) -> pd.DataFrame:
    """Tabulate every point with its distance, deviation and angle"""
    XY = as_xy(points)
    rad, dev, ang = radial_deviations(XY, result)
    return pd.DataFrame({
        "x": XY[:, 0],
        "y": XY[:, 1],
        "distance": rad,
        "deviation": dev,
        "theta": ang,
    })
