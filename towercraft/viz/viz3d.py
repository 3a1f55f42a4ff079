# towercraft/viz/viz3d.py
"""
3D VISUALIZATION: Interactive Tower Viewer
==========================================

PURPOSE:
--------
Render a Tower with Plotly: one Mesh3d trace per slab, colored by the
floor's interpolated color, with an optional spine line through the slab
centers. Figures can be shown inline or exported to standalone HTML.

AXES:
-----
The generator is Y-up; Plotly's 3D scene is Z-up. Tower (x, y, z) is drawn
as Plotly (x, -z, y), a proper rotation about X, so the tower stands upright
without mirroring its twist.
"""

import logging
import os
from typing import Optional

import numpy as np
import plotly.graph_objects as go

from ..generative.tower import floor_positions
from ..mesh import build_tower_meshes
from ..model import Tower, rgb_to_hex

logger = logging.getLogger(__name__)


def _material_lighting(roughness: float, metalness: float) -> dict:
    """Approximate a PBR roughness/metalness pair with Plotly's Phong lighting."""
    return dict(
        ambient=0.55,
        diffuse=0.8,
        specular=0.05 + 1.5 * metalness,
        roughness=min(max(roughness, 0.0), 1.0),
        fresnel=0.2,
    )


def create_tower_figure(
    tower: Tower,
    title: str = "Parametric Tower",
    show_spine: bool = True,
    opacity: float = 1.0,
) -> go.Figure:
    """
    Create a Plotly figure for a tower.

    Parameters:
    -----------
    tower : Tower
        The tower to draw
    title : str
        Plot title
    show_spine : bool
        Draw a line through the slab centers
    opacity : float
        Slab opacity

    Returns:
    --------
    go.Figure
        Plotly figure object (can be shown or saved)
    """
    fig = go.Figure()
    params = tower.params
    lighting = _material_lighting(params.roughness, params.metalness)

    # =========================================================================
    # DRAW SLABS
    # =========================================================================

    meshes = build_tower_meshes(tower)
    for floor, mesh in zip(tower.floors, meshes):
        v = mesh.vertices
        f = mesh.faces
        fig.add_trace(go.Mesh3d(
            x=v[:, 0], y=-v[:, 2], z=v[:, 1],
            i=f[:, 0], j=f[:, 1], k=f[:, 2],
            color=rgb_to_hex(floor.color),
            opacity=opacity,
            flatshading=True,
            lighting=lighting,
            name=f'Floor {floor.index}',
            showlegend=False,
            hovertext=(
                f"Floor {floor.index}: scale={floor.scale:.2f}, "
                f"twist=({floor.twist_angles[0]:.0f}, {floor.twist_angles[1]:.0f}, "
                f"{floor.twist_angles[2]:.0f}) deg"
            ),
            hoverinfo='text',
        ))

    # =========================================================================
    # DRAW SPINE
    # =========================================================================

    if show_spine:
        centers = floor_positions(tower)
        fig.add_trace(go.Scatter3d(
            x=centers[:, 0], y=-centers[:, 2], z=centers[:, 1],
            mode='lines+markers',
            line=dict(color='darkgray', width=3),
            marker=dict(size=2, color='darkgray'),
            name='Spine',
            hoverinfo='skip',
        ))

    # =========================================================================
    # LAYOUT
    # =========================================================================

    all_v = np.vstack([m.vertices for m in meshes])
    lo = all_v.min(axis=0)
    hi = all_v.max(axis=0)
    mid = (lo + hi) / 2
    max_range = max(float((hi - lo).max()), 1.0)

    fig.update_layout(
        title=dict(text=title, font=dict(size=16)),
        scene=dict(
            xaxis=dict(title='X', range=[mid[0] - max_range / 2, mid[0] + max_range / 2]),
            yaxis=dict(title='-Z', range=[-mid[2] - max_range / 2, -mid[2] + max_range / 2]),
            zaxis=dict(title='Y (up)', range=[lo[1] - 0.5, hi[1] + 0.5]),
            aspectmode='data',
            camera=dict(eye=dict(x=1.5, y=1.5, z=0.8)),
        ),
        showlegend=show_spine,
        margin=dict(l=0, r=0, t=40, b=0),
    )

    return fig


def plot_tower_3d(
    tower: Tower,
    title: str = "Parametric Tower",
    outpath: Optional[str] = None,
    show: bool = True,
    **kwargs
) -> go.Figure:
    """
    Create and optionally display/save a 3D tower visualization.

    Parameters:
    -----------
    tower, title:
        See create_tower_figure()
    outpath : Optional[str]
        If provided, save as HTML file
    show : bool
        Whether to display the figure (default: True)
    **kwargs:
        Additional arguments passed to create_tower_figure()
    """
    fig = create_tower_figure(tower, title=title, **kwargs)

    if outpath:
        os.makedirs(os.path.dirname(outpath) if os.path.dirname(outpath) else '.', exist_ok=True)
        fig.write_html(outpath)
        logger.info("3D visualization saved to: %s", outpath)

    if show:
        fig.show()

    return fig
