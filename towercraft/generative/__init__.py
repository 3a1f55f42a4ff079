# towercraft/generative - Parametric Tower Generator
"""
GENERATIVE: Parametric Stacked-Slab Towers
==========================================

This package turns a TowerParams into a Tower: an ordered list of floor
descriptors (contour, scale, orientation, position, color).

Modules:
--------
- shapes:     polar-radius shape blending for floor contours
- transforms: scale, twist, bend and color per floor
- tower:      build_tower() and the stateful TowerAssembler

USAGE:
------
    from towercraft.generative import build_tower
    from towercraft.model import TowerParams

    params = TowerParams(
        floor_count=30,
        shape_bottom='triangle', shape_top='circle',
        twist_y_min=0.0, twist_y_max=90.0,
        bend_angle=25.0, bend_direction=45.0,
    )

    tower = build_tower(params)
    for floor in tower:
        print(floor.index, floor.position, floor.scale)
"""

from .shapes import sample_contour, polygon_radius, contour_area
from .transforms import compose_floor, floor_progress
from .tower import build_tower, build_floor, TowerAssembler

__all__ = [
    'sample_contour', 'polygon_radius', 'contour_area',
    'compose_floor', 'floor_progress',
    'build_tower', 'build_floor', 'TowerAssembler',
]
