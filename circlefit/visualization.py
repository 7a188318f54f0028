"""
Visualization utilities for circle fits
"""
import numpy as np
import matplotlib.pyplot as plt

from .circle_fitting import Fitted
from .formatting import Unit


def preview_bounds(points, result, pad_frac: float = 0.1):
    """
    Data window that shows every point and the whole fitted circle
    Returns: (xmin, xmax, ymin, ymax) or None when there is nothing to show
    """
    XY = np.asarray(points, dtype=float).reshape(-1, 2)
    if len(XY) == 0:
        return None
    xmin, ymin = XY.min(axis=0)
    xmax, ymax = XY.max(axis=0)
    if isinstance(result, Fitted):
        r = result.radius
        xmin = min(xmin, result.center_x - r)
        xmax = max(xmax, result.center_x + r)
        ymin = min(ymin, result.center_y - r)
        ymax = max(ymax, result.center_y + r)
    if not np.all(np.isfinite([xmin, xmax, ymin, ymax])):
        return None

    pad = pad_frac * max(xmax - xmin, ymax - ymin) or 1.0
    return (float(xmin - pad), float(xmax + pad),
            float(ymin - pad), float(ymax + pad))


def plot_fit(ax, points, result, unit=Unit.INCH):
    """Draw points, fitted circle and center marker on an existing axes"""
    unit = Unit(unit)
    XY = np.asarray(points, dtype=float).reshape(-1, 2)

    ax.scatter(XY[:, 0], XY[:, 1], s=16, c="#ff9500", zorder=3, label="points")

    if isinstance(result, Fitted):
        theta = np.linspace(0, 2*np.pi, 720)
        xc, yc, R = result.center_x, result.center_y, result.radius
        ax.plot(xc + R*np.cos(theta), yc + R*np.sin(theta),
                c="#34c759", linewidth=2, label="fitted circle")
        ax.scatter([xc], [yc], s=25, c="#0a84ff", zorder=4, label="center")

        dp = unit.decimals
        ax.annotate(f"C = ({xc:.{dp}f}, {yc:.{dp}f}) {unit.value}\n"
                    f"R = {R:.{dp}f} {unit.value}",
                    xy=(xc, yc), xytext=(8, 8), textcoords="offset points",
                    fontsize=9, color="#555555")

    bounds = preview_bounds(XY, result)
    if bounds is not None:
        xmin, xmax, ymin, ymax = bounds
        ax.set_xlim(xmin, xmax)
        ax.set_ylim(ymin, ymax)
    ax.set_aspect('equal', 'datalim')
    ax.grid(True)
    ax.set_xlabel(f"x {unit.label}")
    ax.set_ylabel(f"y {unit.label}")


def save_fit_plot(points, result, unit, output_path: str):
    """Plot a single fit to an image file"""
    fig, ax = plt.subplots(1, 1, figsize=(6, 6))
    plot_fit(ax, points, result, unit)
    ax.legend(loc="upper right")
    title = "Circle fit" if isinstance(result, Fitted) else "No fit"
    ax.set_title(f"{title} (n={len(np.asarray(points).reshape(-1, 2))})")
    try:
        plt.tight_layout()
        plt.savefig(output_path, dpi=200)
    finally:
        plt.close(fig)
