# towercraft/generative/transforms.py
"""
TRANSFORM COMPOSER: Per-Floor Scale, Orientation, Position and Color
====================================================================

PURPOSE:
--------
Given a floor's progress t and the full TowerParams, compute where the slab
sits, how it is rotated, how big its footprint is and what color it gets.

THE BEND MODEL:
---------------
The tower's vertical spine is treated as an arc of a circle lying in a
vertical plane. With total spine height H and total arc angle A:

    radius = H / A

A point at arc angle a (measured from the base) sits at

    p(a) = (radius * (1 - cos a), radius * sin a, 0)

and the spine tangent there is (sin a, cos a, 0). Every floor is shifted by
minus half the end-to-end displacement p(A), so the tower stays centered on
the origin whatever the curvature. The whole bend plane is then yawed about
+Y by bend_direction.

When |A| is tiny the radius blows up, so that case takes an explicit
straight-spine branch instead of a limit computation.

ORIENTATION:
------------
    orientation = tilt * twist

twist is the per-axis rotation (X then Y then Z) expressed in the slab's own
frame; tilt then rotates the slab's up vector onto the spine tangent.
"""

from typing import Tuple

import numpy as np

from ..config import CONFIG
from ..kernel.easing import apply_curve, lerp
from ..kernel.quaternion import (
    Y_AXIS,
    quat_from_axis_angle,
    quat_from_euler_xyz,
    quat_from_unit_vectors,
    quat_multiply,
    quat_normalize,
    quat_rotate,
)
from ..model import RGB, TowerParams


def floor_progress(index: int, floor_count: int) -> float:
    """Normalized floor index; 0 for a single-floor tower."""
    floor_count = max(1, int(floor_count))
    if floor_count == 1:
        return 0.0
    return index / (floor_count - 1)


def compute_scale(t: float, params: TowerParams) -> float:
    """Footprint multiplier for progress t (X/Z only, never thickness)."""
    return lerp(params.scale_min, params.scale_max, apply_curve(t, params.scale_curve))


def compute_twist_angles(t: float, params: TowerParams) -> Tuple[float, float, float]:
    """Independent X, Y, Z twist angles in degrees, each with its own curve."""
    return (
        lerp(params.twist_x_min, params.twist_x_max, apply_curve(t, params.twist_x_curve)),
        lerp(params.twist_y_min, params.twist_y_max, apply_curve(t, params.twist_y_curve)),
        lerp(params.twist_z_min, params.twist_z_max, apply_curve(t, params.twist_z_curve)),
    )


def twist_quaternion(angles_deg: Tuple[float, float, float]) -> np.ndarray:
    """Compose per-axis twist (degrees) in fixed intrinsic X, Y, Z order."""
    ax, ay, az = np.radians(angles_deg)
    return quat_from_euler_xyz(ax, ay, az)


def spine_height(params: TowerParams) -> float:
    """Total spine height, floored at a small epsilon so it is never zero."""
    return max(raw_spine_height(params), CONFIG.height_epsilon)


def raw_spine_height(params: TowerParams) -> float:
    """Distance from the bottom slab to the top slab; 0 for a single floor."""
    return (params.effective_floor_count - 1) * params.floor_height


def _spine_point(t: float, bend_t: float, height: float, arc_height: float, total_angle: float):
    """
    Un-centered spine point and unit tangent in the bend plane (x, y).

    The straight branch uses the real height; only the arc radius uses the
    epsilon-floored arc_height.
    """
    if abs(total_angle) <= CONFIG.bend_epsilon:
        # Straight spine: no radius, no division
        return np.array([0.0, t * height, 0.0]), Y_AXIS.copy()

    radius = arc_height / total_angle
    angle = total_angle * bend_t
    position = np.array([radius * (1.0 - np.cos(angle)), radius * np.sin(angle), 0.0])
    tangent = np.array([np.sin(angle), np.cos(angle), 0.0])
    return position, tangent / np.linalg.norm(tangent)


def compute_bend(t: float, params: TowerParams) -> Tuple[np.ndarray, np.ndarray]:
    """
    Position and tilt of a floor on the bent spine.

    Returns:
    --------
    position : np.ndarray
        (3,) slab center, centered on the origin and yawed by bend_direction
    tilt : np.ndarray
        (4,) quaternion mapping +Y onto the yawed spine tangent
    """
    height = raw_spine_height(params)
    arc_height = spine_height(params)
    total_angle = np.radians(params.bend_angle)
    bend_t = apply_curve(t, params.bend_curve)

    local, tangent = _spine_point(t, bend_t, height, arc_height, total_angle)
    if height > 0.0:
        end, _ = _spine_point(1.0, 1.0, height, arc_height, total_angle)
        local = local - 0.5 * end
    # A single floor is the whole tower and already sits at the origin

    yaw = quat_from_axis_angle(Y_AXIS, np.radians(params.bend_direction))
    position = quat_rotate(yaw, local)
    tangent = quat_rotate(yaw, tangent)

    tilt = quat_from_unit_vectors(Y_AXIS, tangent)
    return position, tilt


def compute_color(t: float, params: TowerParams) -> RGB:
    """
    Blend bottom to top color with raw progress t; colors have no curve.

    Components are blended as given (sRGB values in [0, 1]) with no
    conversion to linear light, so the midpoint can look slightly darker
    than a renderer blending in linear space would show it.
    """
    return tuple(
        lerp(c0, c1, t) for c0, c1 in zip(params.color_bottom, params.color_top)
    )


def compose_floor(t: float, params: TowerParams):
    """
    Everything but the contour for one floor.

    Returns:
    --------
    (scale, twist_angles, orientation, position, color)
        orientation is a unit quaternion (w, x, y, z) as a tuple of floats,
        position and color are 3-tuples of floats.
    """
    scale = compute_scale(t, params)
    twist_angles = compute_twist_angles(t, params)
    position, tilt = compute_bend(t, params)

    # Tilt is applied after twist
    orientation = quat_normalize(quat_multiply(tilt, twist_quaternion(twist_angles)))

    return (
        float(scale),
        tuple(float(a) for a in twist_angles),
        tuple(float(c) for c in orientation),
        tuple(float(c) for c in position),
        tuple(float(c) for c in compute_color(t, params)),
    )
