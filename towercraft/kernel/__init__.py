# towercraft/kernel - Numeric core shared by all generators
"""
KERNEL: PURE NUMERIC BUILDING BLOCKS
====================================

Nothing in here knows what a tower is. The kernel provides:
- easing curves that reshape a normalized progress value
- quaternion helpers with a documented composition order

The generative modules combine these into floors.
"""

from .easing import apply_curve, apply_curve_array, clamp01, lerp, CURVES
from .quaternion import (
    quat_from_axis_angle,
    quat_from_euler_xyz,
    quat_from_unit_vectors,
    quat_multiply,
    quat_rotate,
    quat_to_matrix,
)

__all__ = [
    'apply_curve', 'apply_curve_array', 'clamp01', 'lerp', 'CURVES',
    'quat_from_axis_angle', 'quat_from_euler_xyz', 'quat_from_unit_vectors',
    'quat_multiply', 'quat_rotate', 'quat_to_matrix',
]
