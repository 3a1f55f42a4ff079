# towercraft/mesh.py
"""
SLAB MESH BUILDER: Extruding Floor Contours into Solids
=======================================================

PURPOSE:
--------
Turn a floor's 2D contour plus the slab thickness into a closed triangle
mesh, then place that mesh in tower space using the floor's scale,
orientation and position.

TRIANGULATION:
--------------
Contours produced by the shape interpolator are star-shaped about the
origin (every point is visible from the center along its own angle), so
each cap is a simple fan around a center vertex. The side wall is one quad
per contour edge, split into two triangles.

Vertex layout for an N-point contour:
    0 .. N-1      bottom ring  (y = -thickness/2)
    N .. 2N-1     top ring     (y = +thickness/2)
    2N            bottom center
    2N+1          top center

Faces are wound counter-clockwise seen from outside for a CCW contour.
"""

from dataclasses import dataclass
from typing import List

import numpy as np

from .kernel.quaternion import quat_to_matrix
from .model import FloorDescriptor, Tower


@dataclass(frozen=True)
class SlabMesh:
    """
    Triangle mesh of one slab.

    vertices : np.ndarray
        (V, 3) float positions
    faces : np.ndarray
        (F, 3) int vertex indices
    """
    vertices: np.ndarray
    faces: np.ndarray

    @property
    def n_vertices(self) -> int:
        return len(self.vertices)

    @property
    def n_faces(self) -> int:
        return len(self.faces)


def extrude_contour(contour: np.ndarray, thickness: float) -> SlabMesh:
    """
    Extrude a closed 2D contour into a slab centered on y=0.

    Contour point (u, v) becomes local (u, +-thickness/2, v).

    Raises:
    -------
    ValueError
        If contour is not an (N, 2) array with N >= 3.
    """
    contour = np.asarray(contour, dtype=float)
    if contour.ndim != 2 or contour.shape[1] != 2 or len(contour) < 3:
        raise ValueError(f"Contour must be an (N, 2) array with N >= 3, got shape {contour.shape}")

    n = len(contour)
    half = thickness / 2.0

    bottom = np.column_stack([contour[:, 0], np.full(n, -half), contour[:, 1]])
    top = np.column_stack([contour[:, 0], np.full(n, half), contour[:, 1]])
    vertices = np.vstack([bottom, top, [[0.0, -half, 0.0]], [[0.0, half, 0.0]]])

    bottom_center = 2 * n
    top_center = 2 * n + 1

    faces = []
    for i in range(n):
        j = (i + 1) % n
        # Contour is CCW in (u, v), which maps to clockwise seen from +y
        faces.append((top_center, j + n, i + n))
        faces.append((bottom_center, i, j))
        # Side quad
        faces.append((i, i + n, j + n))
        faces.append((i, j + n, j))

    return SlabMesh(vertices=vertices, faces=np.array(faces, dtype=int))


def place_floor_mesh(mesh: SlabMesh, floor: FloorDescriptor) -> SlabMesh:
    """
    Transform a slab mesh from local to tower space.

    Order: footprint scale (X/Z only), then orientation, then translation.
    """
    local = mesh.vertices * np.array([floor.scale, 1.0, floor.scale])
    rotation = quat_to_matrix(floor.orientation)
    world = local @ rotation.T + np.asarray(floor.position)
    return SlabMesh(vertices=world, faces=mesh.faces)


def build_floor_mesh(floor: FloorDescriptor, thickness: float) -> SlabMesh:
    """Extrude and place one floor."""
    return place_floor_mesh(extrude_contour(floor.contour, thickness), floor)


def build_tower_meshes(tower: Tower) -> List[SlabMesh]:
    """World-space meshes for every floor, bottom to top."""
    thickness = tower.params.slab_thickness
    return [build_floor_mesh(floor, thickness) for floor in tower.floors]
