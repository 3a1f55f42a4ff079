# towercraft/viz/profiles.py
"""
GRADIENT PROFILES: How Each Parameter Varies Up the Tower
=========================================================

A 2x2 matplotlib sheet plotting, against floor number:
- footprint scale
- twist angle per axis
- slab center offset from the vertical axis (bend)
- the three easing curves themselves, for reference
"""

import logging
import os
from typing import Optional

import matplotlib.pyplot as plt
import numpy as np

from ..kernel.easing import CURVES, apply_curve_array
from ..model import Tower

logger = logging.getLogger(__name__)


def plot_tower_profiles(
    tower: Tower,
    outpath: Optional[str] = None,
    title: str = "Tower Gradient Profiles",
):
    """
    Plot per-floor gradients of a tower.

    Parameters:
    -----------
    tower : Tower
        The tower to plot
    outpath : Optional[str]
        If provided, save the figure as an image and close it
    title : str
        Figure title

    Returns:
    --------
    matplotlib.figure.Figure
        The figure (already closed if it was saved)
    """
    floors = np.array([f.index for f in tower.floors])
    scales = np.array([f.scale for f in tower.floors])
    twists = np.array([f.twist_angles for f in tower.floors])
    positions = np.array([f.position for f in tower.floors])
    offsets = np.hypot(positions[:, 0], positions[:, 2])

    fig, axes = plt.subplots(2, 2, figsize=(12, 8))
    fig.suptitle(title, fontsize=14, fontweight='bold')

    ax = axes[0, 0]
    ax.plot(floors, scales, color='steelblue', linewidth=2)
    ax.set_title('Footprint scale')
    ax.set_xlabel('Floor')
    ax.set_ylabel('Scale')
    ax.grid(True, alpha=0.3)

    ax = axes[0, 1]
    for k, (axis, color) in enumerate(zip('XYZ', ('tab:red', 'tab:green', 'tab:blue'))):
        ax.plot(floors, twists[:, k], color=color, linewidth=2, label=f'Twist {axis}')
    ax.set_title('Twist')
    ax.set_xlabel('Floor')
    ax.set_ylabel('Angle (deg)')
    ax.legend()
    ax.grid(True, alpha=0.3)

    ax = axes[1, 0]
    ax.plot(floors, offsets, color='darkorange', linewidth=2)
    ax.set_title('Horizontal offset from axis (bend)')
    ax.set_xlabel('Floor')
    ax.set_ylabel('Offset')
    ax.grid(True, alpha=0.3)

    ax = axes[1, 1]
    t = np.linspace(0.0, 1.0, 101)
    for name in CURVES:
        ax.plot(t, apply_curve_array(t, name), linewidth=2, label=name)
    ax.set_title('Easing curves')
    ax.set_xlabel('t')
    ax.set_ylabel('f(t)')
    ax.legend()
    ax.grid(True, alpha=0.3)

    plt.tight_layout()

    if outpath:
        os.makedirs(os.path.dirname(outpath) if os.path.dirname(outpath) else '.', exist_ok=True)
        plt.savefig(outpath, dpi=150, bbox_inches='tight')
        plt.close(fig)  # Close to free memory
        logger.info("Profile plot saved to: %s", outpath)

    return fig
