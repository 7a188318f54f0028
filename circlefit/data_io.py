"""
Point list loading and saving utilities
"""
import logging
import numpy as np
import pandas as pd

logger = logging.getLogger(__name__)

# Demo profile: eight points on the unit circle plus three slightly off it
SAMPLE_POINTS = [
    (1, 0), (0, 1), (-1, 0), (0, -1),
    (0.707, 0.707), (-0.707, 0.707), (-0.707, -0.707), (0.707, -0.707),
    (0.9, 0.2), (0.2, 0.95), (-0.3, -0.95),
]


def sample_points() -> np.ndarray:
    return np.asarray(SAMPLE_POINTS, dtype=np.float64)


def finite_points(points) -> np.ndarray:
    """Drop every row with a NaN or infinite coordinate"""
    XY = np.asarray(points, dtype=np.float64).reshape(-1, 2)
    return XY[np.all(np.isfinite(XY), axis=1)]


def load_csv_points(path: str) -> np.ndarray:
    """Load x,y points from a comma separated file with an optional header"""
    pts = []
    with open(path, "r", encoding="utf-8", errors="ignore") as f:
        lines = [ln.strip() for ln in f]
    lines = [ln for ln in lines if ln]
    for i, line in enumerate(lines):
        parts = [p.strip() for p in line.split(",")]
        if i == 0 and parts[0].lower().startswith("x"):
            continue
        if len(parts) < 2:
            logger.debug("Skipping line %d of %s: %r", i + 1, path, line)
            continue
        try:
            x, y = float(parts[0]), float(parts[1])
        except ValueError:
            logger.debug("Skipping line %d of %s: %r", i + 1, path, line)
            continue
        if np.isfinite(x) and np.isfinite(y):
            pts.append((x, y))
    if not pts:
        raise RuntimeError(f"No valid x,y lines found in {path}.")
    logger.info("Loaded %d points from %s", len(pts), path)
    return np.asarray(pts, dtype=np.float64)


def save_csv_points(points, path: str, unit: str = "in"):
    """Save points as CSV with a unit-tagged header (x_in,y_in / x_mm,y_mm)"""
    unit = getattr(unit, "value", unit)
    XY = np.asarray(points, dtype=np.float64).reshape(-1, 2)
    df = pd.DataFrame({f"x_{unit}": XY[:, 0], f"y_{unit}": XY[:, 1]})
    df.to_csv(path, index=False)
    logger.info("Saved %d points -> %s", len(df), path)


def save_residuals(table: pd.DataFrame, path: str):
    """Save a per-point residual table"""
    table.to_csv(path, index=False, float_format="%.6f")
    logger.info("Saved residuals -> %s", path)
