# towercraft/model.py
"""
TOWER MODEL DEFINITIONS: TowerParams, FloorDescriptor, Tower
============================================================

PURPOSE:
--------
This module defines the data structures that flow through the generator:
- TowerParams: the full parameter set a tower is derived from
- FloorDescriptor: everything a renderer needs to draw one slab
- Tower: the ordered stack of floors, bottom to top

All three are frozen. A parameter edit never mutates a TowerParams in place;
it produces a new value (see TowerParams.with_changes) which is then fed to
a full rebuild. This keeps a Tower a pure function of the params it was
built from.

COORDINATE SYSTEM:
------------------
Y is up. Floors stack along +Y and the tower is centered on the origin.
A floor contour lives in the slab's local X/Z plane: contour point (u, v)
maps to local (u, y, v).
"""

from dataclasses import dataclass, field, fields, replace, asdict
from typing import Any, Dict, Literal, Tuple

import numpy as np

CurveKind = Literal['linear', 'smoothstep', 'easeInOutCubic']
ShapeKind = Literal['square', 'circle', 'triangle']

RGB = Tuple[float, float, float]


def hex_to_rgb(value: str) -> RGB:
    """
    Parse '#rrggbb' (or 'rrggbb') into an RGB triple with components in [0, 1].

    Raises:
    -------
    ValueError
        If the string is not six hex digits.
    """
    text = value.strip().lstrip('#')
    if len(text) != 6:
        raise ValueError(f"Expected a #rrggbb color, got {value!r}")
    try:
        r, g, b = (int(text[i:i + 2], 16) for i in (0, 2, 4))
    except ValueError:
        raise ValueError(f"Expected a #rrggbb color, got {value!r}") from None
    return (r / 255.0, g / 255.0, b / 255.0)


def rgb_to_hex(rgb: RGB) -> str:
    """Format an RGB triple with components in [0, 1] as '#rrggbb'."""
    channels = [int(round(min(max(c, 0.0), 1.0) * 255)) for c in rgb]
    return '#{:02x}{:02x}{:02x}'.format(*channels)


@dataclass(frozen=True)
class TowerParams:
    """
    Parameters defining a stacked-slab tower.

    Layout:
    -------
    floor_count : int
        Number of slabs (clamped to >= 1 at build time)
    floor_height : float
        Vertical spacing between consecutive slabs
    slab_width, slab_depth : float
        Footprint extents of an unscaled slab along local X and Z
    slab_thickness : float
        Slab thickness (never scaled)

    Shape blend:
    ------------
    shape_bottom, shape_top : str
        Cross-section at t=0 and t=1: 'square', 'circle' or 'triangle'
    shape_curve : str
        Easing applied to the blend factor

    Gradients (each min at the bottom floor, max at the top floor):
    ---------------------------------------------------------------
    scale_min, scale_max, scale_curve
        Uniform footprint multiplier
    twist_{x,y,z}_min, twist_{x,y,z}_max, twist_{x,y,z}_curve
        Rotation about each slab-local axis in degrees, composed X then Y then Z

    Bend:
    -----
    bend_angle : float
        Total arc angle of the spine in degrees (0 = straight)
    bend_direction : float
        Yaw of the bend plane about +Y in degrees
    bend_curve : str
        Easing of the arc angle along the tower

    Appearance (passed through to the renderer):
    --------------------------------------------
    color_bottom, color_top : RGB
        Linearly blended by raw floor progress (no curve)
    roughness, metalness : float
    """
    # Layout
    floor_count: int = 40
    floor_height: float = 0.7
    slab_width: float = 8.0
    slab_depth: float = 8.0
    slab_thickness: float = 0.4

    # Shape blend
    shape_bottom: ShapeKind = 'square'
    shape_top: ShapeKind = 'circle'
    shape_curve: CurveKind = 'smoothstep'

    # Scale gradient
    scale_min: float = 0.65
    scale_max: float = 1.25
    scale_curve: CurveKind = 'smoothstep'

    # Twist gradients (degrees)
    twist_x_min: float = 0.0
    twist_x_max: float = 0.0
    twist_x_curve: CurveKind = 'linear'
    twist_y_min: float = -15.0
    twist_y_max: float = 55.0
    twist_y_curve: CurveKind = 'smoothstep'
    twist_z_min: float = 0.0
    twist_z_max: float = 0.0
    twist_z_curve: CurveKind = 'linear'

    # Bend
    bend_angle: float = 0.0
    bend_direction: float = 0.0
    bend_curve: CurveKind = 'linear'

    # Appearance
    color_bottom: RGB = field(default_factory=lambda: hex_to_rgb('#2aa4ff'))
    color_top: RGB = field(default_factory=lambda: hex_to_rgb('#ff7b57'))
    roughness: float = 0.45
    metalness: float = 0.1

    def __post_init__(self):
        # Hex strings and lists are accepted anywhere a color is set
        for key in ('color_bottom', 'color_top'):
            object.__setattr__(self, key, _coerce_color(getattr(self, key)))

    @property
    def effective_floor_count(self) -> int:
        """floor_count clamped to at least one floor."""
        return max(1, int(self.floor_count))

    def with_changes(self, **changes: Any) -> 'TowerParams':
        """Return a copy with the given fields replaced."""
        return replace(self, **changes)

    def to_dict(self) -> Dict[str, Any]:
        """Plain-dict form with colors as '#rrggbb' strings."""
        data = asdict(self)
        data['color_bottom'] = rgb_to_hex(self.color_bottom)
        data['color_top'] = rgb_to_hex(self.color_top)
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'TowerParams':
        """
        Build params from a (possibly partial) dict; missing keys take defaults.

        Colors may be '#rrggbb' strings or RGB sequences (see __post_init__).

        Raises:
        -------
        ValueError
            On unknown keys or malformed colors.
        """
        known = {f.name for f in fields(cls)}
        unknown = set(data) - known
        if unknown:
            raise ValueError(f"Unknown tower parameters: {sorted(unknown)}")
        return cls(**data)


def _coerce_color(value: Any) -> RGB:
    """Accept '#rrggbb' or any 3-sequence of numbers."""
    if isinstance(value, str):
        return hex_to_rgb(value)
    r, g, b = value
    return (float(r), float(g), float(b))


@dataclass(frozen=True, eq=False)
class FloorDescriptor:
    """
    One derived slab of the tower.

    Parameters:
    -----------
    index : int
        Floor number, 0 at the bottom
    progress : float
        Normalized floor index t in [0, 1] (0 for a single-floor tower)
    contour : np.ndarray
        (N, 2) read-only closed polygon of the cross-section, unscaled
    scale : float
        Uniform footprint multiplier applied to the contour
    twist_angles : Tuple[float, float, float]
        Twist about slab-local X, Y, Z in degrees, before composition
    orientation : Tuple[float, float, float, float]
        Unit quaternion (w, x, y, z): bend tilt applied after twist
    position : Tuple[float, float, float]
        Slab center relative to the tower center
    color : RGB
        Interpolated slab color
    """
    index: int
    progress: float
    contour: np.ndarray
    scale: float
    twist_angles: Tuple[float, float, float]
    orientation: Tuple[float, float, float, float]
    position: Tuple[float, float, float]
    color: RGB

    def __eq__(self, other):
        if not isinstance(other, FloorDescriptor):
            return NotImplemented
        return (
            self.index == other.index
            and self.progress == other.progress
            and self.scale == other.scale
            and self.twist_angles == other.twist_angles
            and self.orientation == other.orientation
            and self.position == other.position
            and self.color == other.color
            and np.array_equal(self.contour, other.contour)
        )

    __hash__ = None


@dataclass(frozen=True)
class Tower:
    """
    The complete stack of floors derived from one TowerParams.

    A Tower is only ever handed out fully built; there is no API for
    appending floors to an existing one.
    """
    params: TowerParams
    floors: Tuple[FloorDescriptor, ...]

    def __len__(self) -> int:
        return len(self.floors)

    def __iter__(self):
        return iter(self.floors)

    def __getitem__(self, i: int) -> FloorDescriptor:
        return self.floors[i]

    @property
    def total_height(self) -> float:
        """Spine length from the bottom slab center to the top slab center."""
        return (self.params.effective_floor_count - 1) * self.params.floor_height

    def bounds(self) -> Tuple[np.ndarray, np.ndarray]:
        """
        Axis-aligned (min, max) corners of all slab centers.

        Slab extents are not included; use the mesh builder for exact bounds.
        """
        pts = np.array([f.position for f in self.floors], dtype=float)
        return pts.min(axis=0), pts.max(axis=0)
