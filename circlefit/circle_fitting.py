"""
Algebraic circle fitting (Pratt-style, mean-centered moment solve)
"""
import numpy as np
from dataclasses import dataclass
from typing import NamedTuple, Optional, Tuple, Union

# Absolute tolerance on the moment-matrix determinant. Not normalised
# against the extent of the point cloud, so very small or very large
# coordinates shift where "degenerate" starts.
DET_TOLERANCE = 1e-12


class Point(NamedTuple):
    x: float
    y: float


@dataclass(frozen=True)
class Fitted:
    """A best-fit circle and its geometric RMS residual"""
    center_x: float
    center_y: float
    radius: float
    rmse: float

    @property
    def center(self) -> Tuple[float, float]:
        return self.center_x, self.center_y

    @property
    def diameter(self) -> float:
        return 2.0 * self.radius


@dataclass(frozen=True)
class Unfit:
    """No well-defined circle: too few points or degenerate geometry"""


UNFIT = Unfit()

FitResult = Union[Fitted, Unfit]


def as_xy(points) -> np.ndarray:
    """Convert an array-like of (x, y) pairs to an Nx2 float array"""
    pts = np.array(points, dtype=float)
    if pts.size == 0:
        return pts.reshape(0, 2)
    if pts.ndim != 2 or pts.shape[1] != 2:
        raise ValueError("Points must be an Nx2 array of (x, y) pairs")
    return pts


def fit_circle_pratt(x: np.ndarray, y: np.ndarray) -> Optional[Tuple[float, float, float]]:
    """
    Solve the centered normal equations for the circle center and radius.
    Returns: center_x, center_y, radius, or None when the moment matrix is singular
    """
    x = np.asarray(x, dtype=float).ravel()
    y = np.asarray(y, dtype=float).ravel()
    n = x.size
    xm, ym = x.mean(), y.mean()
    u, v = x - xm, y - ym
    Suu, Svv, Suv = np.sum(u*u), np.sum(v*v), np.sum(u*v)
    Suuu, Svvv = np.sum(u*u*u), np.sum(v*v*v)
    Suvv, Svuu = np.sum(u*v*v), np.sum(v*u*u)
    A = np.array([[Suu, Suv], [Suv, Svv]], float)
    b = 0.5*np.array([Suuu + Suvv, Svvv + Svuu], float)

    det = A[0, 0]*A[1, 1] - A[0, 1]*A[1, 0]
    if abs(det) < DET_TOLERANCE:
        return None
    uc = (b[0]*A[1, 1] - b[1]*A[0, 1]) / det
    vc = (-b[0]*A[1, 0] + b[1]*A[0, 0]) / det

    R = np.sqrt((Suu + Svv)/n + uc*uc + vc*vc)
    return float(uc + xm), float(vc + ym), float(R)


def geometric_rmse(x: np.ndarray, y: np.ndarray,
                   center_x: float, center_y: float, radius: float) -> float:
    """RMS of perpendicular point-to-circle distances"""
    x = np.asarray(x, dtype=float).ravel()
    y = np.asarray(y, dtype=float).ravel()
    d = np.hypot(x - center_x, y - center_y)
    return float(np.sqrt(np.sum((d - radius)**2) / x.size))


def fit_circle(points) -> FitResult:
    """
    Fit a circle to N >= 3 planar points.

    Points may be any Nx2 array-like (list of (x, y) tuples, list of Point,
    numpy array). Coordinates are assumed finite; the caller filters them.
    Returns Fitted(center_x, center_y, radius, rmse), or UNFIT when there are
    fewer than three points or the geometry is degenerate (coincident or
    collinear points).
    """
    pts = as_xy(points)
    if len(pts) < 3:
        return UNFIT

    x, y = pts[:, 0], pts[:, 1]
    solved = fit_circle_pratt(x, y)
    if solved is None:
        return UNFIT

    xc, yc, R = solved
    rmse = geometric_rmse(x, y, xc, yc, R)
    return Fitted(center_x=xc, center_y=yc, radius=R, rmse=rmse)
