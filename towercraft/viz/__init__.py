# towercraft/viz - Visualization Tools
"""
VIZ: Visualization for Generated Towers
=======================================

This package provides visualization tools:
- viz3d: interactive 3D slab stack (Plotly)
- profiles: per-floor gradient plots (matplotlib)
"""

from .viz3d import plot_tower_3d, create_tower_figure
from .profiles import plot_tower_profiles

__all__ = ['plot_tower_3d', 'create_tower_figure', 'plot_tower_profiles']
