# towercraft/generative/tower.py
"""
TOWER ASSEMBLER: From Parameters to a Complete Stack of Floors
==============================================================

PURPOSE:
--------
Iterate the floors, call the easing, shape and transform modules for each,
and package the result as an immutable Tower.

Two entry points:
- build_tower(params): pure function, no state at all
- TowerAssembler: owns the "current" params and Tower for a host (REST app,
  demo script, viewer) and handles the rebuild lifecycle

REBUILD LIFECYCLE (GENERATIONS):
--------------------------------
Each rebuild produces a new generation. The new Tower is computed in full
first, then published, then the previous generation is handed to every
release callback exactly once so renderer-side resources (meshes, figures,
GPU buffers) can be freed. Observers never see a half-built tower.

The assembler is NOT thread-safe. Hosts must serialize calls to rebuild,
update and reset, and must not read `tower` while a rebuild is running.
"""

import logging
from typing import Callable, List, Optional

import numpy as np

from ..config import CONFIG
from ..model import FloorDescriptor, Tower, TowerParams
from .shapes import sample_contour
from .transforms import compose_floor, floor_progress

logger = logging.getLogger(__name__)

ReleaseCallback = Callable[[Tower, int], None]
RebuildCallback = Callable[[Tower, int], None]


def build_floor(index: int, params: TowerParams) -> FloorDescriptor:
    """Compute the descriptor of a single floor."""
    t = floor_progress(index, params.effective_floor_count)

    contour = sample_contour(
        params.shape_bottom,
        params.shape_top,
        params.shape_curve,
        t,
        params.slab_width,
        params.slab_depth,
        CONFIG.segment_count,
    )
    contour.setflags(write=False)

    scale, twist_angles, orientation, position, color = compose_floor(t, params)

    return FloorDescriptor(
        index=index,
        progress=t,
        contour=contour,
        scale=scale,
        twist_angles=twist_angles,
        orientation=orientation,
        position=position,
        color=color,
    )


def build_tower(params: TowerParams) -> Tower:
    """
    Generate a complete tower from parameters.

    This is the main entry point for tower generation. The result depends
    only on `params`: calling it twice with equal params gives equal towers.

    Parameters:
    -----------
    params : TowerParams
        Design parameters. floor_count < 1 is treated as 1.

    Returns:
    --------
    Tower
        Floors ordered bottom (index 0) to top.

    Example:
    --------
    >>> tower = build_tower(TowerParams(floor_count=3))
    >>> [round(f.progress, 2) for f in tower]
    [0.0, 0.5, 1.0]
    """
    floors = tuple(build_floor(i, params) for i in range(params.effective_floor_count))
    return Tower(params=params, floors=floors)


class TowerAssembler:
    """
    Owns the current parameter set and the current Tower.

    Every parameter change goes through a full rebuild; there is no
    incremental update path. reset() restores the default snapshot taken at
    construction and rebuilds.

    Example:
    --------
    >>> assembler = TowerAssembler()
    >>> tower = assembler.update(floor_count=10, bend_angle=30.0)
    >>> len(tower)
    10
    >>> assembler.reset() == build_tower(TowerParams())
    True
    """

    def __init__(self, defaults: Optional[TowerParams] = None, build: bool = True):
        self._defaults = defaults if defaults is not None else TowerParams()
        self._params = self._defaults
        self._tower: Optional[Tower] = None
        self._generation = 0
        self._release_callbacks: List[ReleaseCallback] = []
        self._rebuild_callbacks: List[RebuildCallback] = []
        if build:
            self.rebuild()

    @property
    def defaults(self) -> TowerParams:
        return self._defaults

    @property
    def params(self) -> TowerParams:
        return self._params

    @property
    def tower(self) -> Optional[Tower]:
        return self._tower

    @property
    def generation(self) -> int:
        """Number of towers built so far; 0 before the first rebuild."""
        return self._generation

    def on_release(self, callback: ReleaseCallback) -> None:
        """Register callback(old_tower, old_generation), called once per retired generation."""
        self._release_callbacks.append(callback)

    def on_rebuild(self, callback: RebuildCallback) -> None:
        """Register callback(new_tower, new_generation), called after each publish."""
        self._rebuild_callbacks.append(callback)

    def rebuild(self, params: Optional[TowerParams] = None) -> Tower:
        """
        Replace the current tower with one built from `params`.

        With no argument, rebuilds from the current params. If the build
        raises, the current params and tower are left untouched.
        """
        if params is None:
            params = self._params

        new_tower = build_tower(params)

        old_tower, old_generation = self._tower, self._generation
        self._params = params
        self._tower = new_tower
        self._generation += 1
        logger.debug(
            "Built tower generation %d (%d floors)", self._generation, len(new_tower)
        )

        if old_tower is not None:
            for callback in self._release_callbacks:
                callback(old_tower, old_generation)
        for callback in self._rebuild_callbacks:
            callback(new_tower, self._generation)

        return new_tower

    def update(self, **changes) -> Tower:
        """Apply parameter edits and rebuild."""
        return self.rebuild(self._params.with_changes(**changes))

    def reset(self) -> Tower:
        """Restore the default parameter snapshot verbatim and rebuild."""
        logger.info("Resetting tower parameters to defaults")
        return self.rebuild(self._defaults)

    def release(self) -> None:
        """Retire the current tower without building a new one (host shutdown)."""
        if self._tower is None:
            return
        old_tower, old_generation = self._tower, self._generation
        self._tower = None
        for callback in self._release_callbacks:
            callback(old_tower, old_generation)


def floor_positions(tower: Tower) -> np.ndarray:
    """(n, 3) array of slab centers, bottom to top."""
    return np.array([f.position for f in tower.floors], dtype=float)
