# towercraft/generative/shapes.py
"""
SHAPE INTERPOLATOR: Blended Polygon Cross-Sections
==================================================

PURPOSE:
--------
Each floor's footprint is a closed 2D contour that morphs from the bottom
shape to the top shape as the tower rises. Blending two polygons with
different vertex counts point-by-point is awkward, so both shapes are
described in POLAR form instead: a radius as a function of angle.

POLYGON RADIUS:
---------------
For a regular n-gon whose vertices lie on the unit circle (one vertex at
theta = 0), the distance from the center to the boundary at angle theta is

    r(theta) = cos(pi/n) / cos((theta mod 2pi/n) - pi/n)

which is 1 at the vertices and cos(pi/n) at edge midpoints. A circle is
r(theta) = 1 everywhere.

Blending is then just a lerp of two radii at the same angle, so any pair of
shapes morphs smoothly and the contour always has the same point count.
"""

import logging

import numpy as np

from ..config import CONFIG
from ..kernel.easing import apply_curve, lerp

logger = logging.getLogger(__name__)

# Number of sides for each polygonal shape. 'circle' is handled separately.
POLYGON_SIDES = {
    'square': 4,
    'triangle': 3,
}

SHAPES = ('square', 'circle', 'triangle')


def polygon_radius(theta: float, shape: str) -> float:
    """
    Polar radius of a unit shape at angle theta (radians).

    Unknown shapes fall back to 'circle'.

    Example:
    --------
    >>> polygon_radius(0.0, 'square')       # on a vertex
    1.0
    >>> round(polygon_radius(np.pi / 4, 'square'), 6)   # edge midpoint
    0.707107
    """
    if shape == 'circle':
        return 1.0
    n = POLYGON_SIDES.get(shape)
    if n is None:
        logger.warning("Unknown shape kind %r, falling back to 'circle'", shape)
        return 1.0

    sector = 2.0 * np.pi / n
    local = np.mod(theta, sector) - np.pi / n
    return float(np.cos(np.pi / n) / np.cos(local))


def sample_contour(
    bottom_shape: str,
    top_shape: str,
    shape_curve: str,
    shape_t_raw: float,
    width: float,
    depth: float,
    segment_count: int = None,
) -> np.ndarray:
    """
    Sample the blended cross-section of one floor.

    Parameters:
    -----------
    bottom_shape, top_shape : str
        Shapes at t=0 and t=1
    shape_curve : str
        Easing applied to shape_t_raw before blending
    shape_t_raw : float
        Floor progress t
    width, depth : float
        Full footprint extents along local X and Z. Non-positive values give
        a degenerate (zero-area) contour rather than an error.
    segment_count : int
        Number of contour points, defaults to CONFIG.segment_count (64)

    Returns:
    --------
    np.ndarray
        (segment_count, 2) array of (u, v) points, counter-clockwise, starting
        at angle 0. The polygon is implicitly closed (last point joins the first).
    """
    if segment_count is None:
        segment_count = CONFIG.segment_count

    shape_t = apply_curve(shape_t_raw, shape_curve)
    half_w = width / 2.0
    half_d = depth / 2.0

    points = np.empty((segment_count, 2))
    for i in range(segment_count):
        theta = 2.0 * np.pi * i / segment_count
        r_bottom = polygon_radius(theta, bottom_shape)
        r_top = polygon_radius(theta, top_shape)
        r = lerp(r_bottom, r_top, shape_t)
        points[i, 0] = np.cos(theta) * r * half_w
        points[i, 1] = np.sin(theta) * r * half_d

    return points


def contour_area(contour: np.ndarray) -> float:
    """Signed area of a closed polygon (shoelace formula); positive for CCW."""
    x = contour[:, 0]
    y = contour[:, 1]
    return float(0.5 * (np.dot(x, np.roll(y, -1)) - np.dot(y, np.roll(x, -1))))
