"""
Display units and text formatting of fit results
"""
import math
from enum import Enum

from .circle_fitting import Fitted

PLACEHOLDER = "—"


class Unit(str, Enum):
    """Display unit. Values are never converted, only labelled."""
    INCH = "in"
    MILLIMETER = "mm"

    @property
    def decimals(self) -> int:
        return 4 if self is Unit.INCH else 3

    @property
    def label(self) -> str:
        return f"({self.value})"


def format_value(value, decimals: int) -> str:
    if value is None:
        return PLACEHOLDER
    value = float(value)
    if not math.isfinite(value):
        return PLACEHOLDER
    return f"{value:.{decimals}f}"


def format_result(result, unit) -> dict:
    """
    Format a fit result for display at the unit's precision.
    Returns: dict with cx, cy, r, d, rmse strings; placeholders when unfit
    """
    unit = Unit(unit)
    keys = ("cx", "cy", "r", "d", "rmse")
    if not isinstance(result, Fitted):
        return {k: PLACEHOLDER for k in keys}
    values = (result.center_x, result.center_y, result.radius,
              result.diameter, result.rmse)
    return {k: format_value(v, unit.decimals) for k, v in zip(keys, values)}


def result_summary(result, unit, n_points: int = None) -> str:
    unit = Unit(unit)
    text = format_result(result, unit)
    lines = []
    if n_points is not None:
        lines.append(f"Points:   {n_points}")
    if not isinstance(result, Fitted):
        lines.append("No circle fit (need at least 3 non-collinear points)")
    lines += [
        f"Center X: {text['cx']} {unit.value}",
        f"Center Y: {text['cy']} {unit.value}",
        f"Radius:   {text['r']} {unit.value}",
        f"Diameter: {text['d']} {unit.value}",
        f"RMSE:     {text['rmse']} {unit.value}",
    ]
    return "\n".join(lines)
