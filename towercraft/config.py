# towercraft/config.py
"""
Application configuration and defaults.
"""

from dataclasses import dataclass, fields
from typing import Dict, List, Tuple


@dataclass
class TowerConfig:
    """Global configuration for the tower generator and its hosts."""

    # App metadata
    app_name: str = "TowerCraft"
    app_subtitle: str = "Parametric Stacked-Slab Tower Generator"
    version: str = "0.1.0"

    # Generator constants (not user-exposed)
    segment_count: int = 64        # points per floor contour
    bend_epsilon: float = 1e-4     # |bend angle| in radians below which the spine is straight
    height_epsilon: float = 1e-6   # floor for the spine height of a single-floor tower

    # Slider ranges for host-side validation
    floor_count_range: Tuple[int, int] = (1, 200)
    floor_height_range: Tuple[float, float] = (0.2, 2.0)
    slab_width_range: Tuple[float, float] = (2.0, 20.0)
    slab_depth_range: Tuple[float, float] = (2.0, 20.0)
    slab_thickness_range: Tuple[float, float] = (0.1, 1.2)
    scale_range: Tuple[float, float] = (0.2, 2.0)
    twist_range: Tuple[float, float] = (-180.0, 180.0)
    bend_angle_range: Tuple[float, float] = (-180.0, 180.0)
    bend_direction_range: Tuple[float, float] = (0.0, 360.0)
    material_range: Tuple[float, float] = (0.0, 1.0)

    # Available options
    curves: List[str] = None
    shapes: List[str] = None

    def __post_init__(self):
        if self.curves is None:
            self.curves = ['linear', 'smoothstep', 'easeInOutCubic']
        if self.shapes is None:
            self.shapes = ['square', 'circle', 'triangle']

    def param_ranges(self) -> Dict[str, Tuple[float, float]]:
        """Map each numeric TowerParams field to its allowed (lo, hi) range."""
        ranges = {
            'floor_count': self.floor_count_range,
            'floor_height': self.floor_height_range,
            'slab_width': self.slab_width_range,
            'slab_depth': self.slab_depth_range,
            'slab_thickness': self.slab_thickness_range,
            'scale_min': self.scale_range,
            'scale_max': self.scale_range,
            'bend_angle': self.bend_angle_range,
            'bend_direction': self.bend_direction_range,
            'roughness': self.material_range,
            'metalness': self.material_range,
        }
        for axis in ('x', 'y', 'z'):
            ranges[f'twist_{axis}_min'] = self.twist_range
            ranges[f'twist_{axis}_max'] = self.twist_range
        return ranges

    def check_ranges(self, params) -> List[str]:
        """
        Return a list of human-readable range violations for a TowerParams.

        The generator clamps what it must; this is for hosts that want to
        reject slider values outside the supported design space.
        """
        problems = []
        ranges = self.param_ranges()
        for f in fields(params):
            if f.name in ranges:
                lo, hi = ranges[f.name]
                value = getattr(params, f.name)
                if not lo <= value <= hi:
                    problems.append(f"{f.name}={value} outside [{lo}, {hi}]")
            elif f.name.endswith('_curve'):
                value = getattr(params, f.name)
                if value not in self.curves:
                    problems.append(f"{f.name}={value!r} not one of {self.curves}")
            elif f.name.startswith('shape_'):
                value = getattr(params, f.name)
                if value not in self.shapes:
                    problems.append(f"{f.name}={value!r} not one of {self.shapes}")
        return problems


# Global config instance
CONFIG = TowerConfig()
