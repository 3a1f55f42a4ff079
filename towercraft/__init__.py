# towercraft - Parametric Stacked-Slab Tower Generator
"""
TOWERCRAFT: A Parametric Tower Form Generator
=============================================

This package provides:
- A deterministic generator mapping a small parameter set to a stack of
  floor descriptors (contour, scale, orientation, position, color)
- A slab mesh builder for turning floors into triangle meshes
- Plotly / matplotlib visualization and pandas-based exports

ARCHITECTURE:
-------------
    kernel/         Pure numeric core (easing curves, quaternions)
    model.py        TowerParams, FloorDescriptor, Tower
    generative/     Shape blending, per-floor transforms, tower assembly
    mesh.py         Contour extrusion and world placement
    export.py       Floor schedule, CSV/JSON export, summaries
    viz/            3D viewer and gradient plots
    config.py       Constants, slider ranges, option lists
"""

from .model import TowerParams, FloorDescriptor, Tower
from .generative import build_tower, TowerAssembler

__version__ = "0.1.0"

__all__ = ['TowerParams', 'FloorDescriptor', 'Tower', 'build_tower', 'TowerAssembler']
