# api/main.py
"""
FastAPI backend for TowerCraft - exposes the tower generator as a REST API.

The app owns the single writable parameter set through one module-level
TowerAssembler. Endpoints are `async def` with no awaits inside, so they
run one at a time on the event loop and rebuilds are never concurrent.
"""

import logging
from typing import Any, Dict, List, Literal, Optional

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import StreamingResponse
from pydantic import BaseModel, Field

from towercraft.config import CONFIG
from towercraft.export import export_schedule_csv, tower_metrics
from towercraft.generative import TowerAssembler, build_tower
from towercraft.logging_config import setup_logging
from towercraft.model import Tower, TowerParams, rgb_to_hex

logger = logging.getLogger("towercraft.api")

app = FastAPI(
    title="TowerCraft API",
    description="Parametric stacked-slab tower generator",
    version=CONFIG.version,
)

# CORS for frontend
app.add_middleware(
    CORSMiddleware,
    allow_origins=["http://localhost:3000", "http://127.0.0.1:3000"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

assembler = TowerAssembler()


# =============================================================================
# Request/Response Models
# =============================================================================

Curve = Literal['linear', 'smoothstep', 'easeInOutCubic']
Shape = Literal['square', 'circle', 'triangle']
HEX_COLOR = r'^#[0-9a-fA-F]{6}$'

_R = CONFIG


class TowerParamsModel(BaseModel):
    """Full tower parameter set with slider-range validation."""
    floor_count: int = Field(40, ge=_R.floor_count_range[0], le=_R.floor_count_range[1])
    floor_height: float = Field(0.7, ge=_R.floor_height_range[0], le=_R.floor_height_range[1])
    slab_width: float = Field(8.0, ge=_R.slab_width_range[0], le=_R.slab_width_range[1])
    slab_depth: float = Field(8.0, ge=_R.slab_depth_range[0], le=_R.slab_depth_range[1])
    slab_thickness: float = Field(0.4, ge=_R.slab_thickness_range[0], le=_R.slab_thickness_range[1])

    shape_bottom: Shape = 'square'
    shape_top: Shape = 'circle'
    shape_curve: Curve = 'smoothstep'

    scale_min: float = Field(0.65, ge=_R.scale_range[0], le=_R.scale_range[1])
    scale_max: float = Field(1.25, ge=_R.scale_range[0], le=_R.scale_range[1])
    scale_curve: Curve = 'smoothstep'

    twist_x_min: float = Field(0.0, ge=_R.twist_range[0], le=_R.twist_range[1])
    twist_x_max: float = Field(0.0, ge=_R.twist_range[0], le=_R.twist_range[1])
    twist_x_curve: Curve = 'linear'
    twist_y_min: float = Field(-15.0, ge=_R.twist_range[0], le=_R.twist_range[1])
    twist_y_max: float = Field(55.0, ge=_R.twist_range[0], le=_R.twist_range[1])
    twist_y_curve: Curve = 'smoothstep'
    twist_z_min: float = Field(0.0, ge=_R.twist_range[0], le=_R.twist_range[1])
    twist_z_max: float = Field(0.0, ge=_R.twist_range[0], le=_R.twist_range[1])
    twist_z_curve: Curve = 'linear'

    bend_angle: float = Field(0.0, ge=_R.bend_angle_range[0], le=_R.bend_angle_range[1])
    bend_direction: float = Field(0.0, ge=_R.bend_direction_range[0], le=_R.bend_direction_range[1])
    bend_curve: Curve = 'linear'

    color_bottom: str = Field('#2aa4ff', pattern=HEX_COLOR)
    color_top: str = Field('#ff7b57', pattern=HEX_COLOR)
    roughness: float = Field(0.45, ge=_R.material_range[0], le=_R.material_range[1])
    metalness: float = Field(0.1, ge=_R.material_range[0], le=_R.material_range[1])


class TowerParamsPatch(BaseModel):
    """Partial edit: only the fields that are set are applied."""
    floor_count: Optional[int] = Field(None, ge=_R.floor_count_range[0], le=_R.floor_count_range[1])
    floor_height: Optional[float] = Field(None, ge=_R.floor_height_range[0], le=_R.floor_height_range[1])
    slab_width: Optional[float] = Field(None, ge=_R.slab_width_range[0], le=_R.slab_width_range[1])
    slab_depth: Optional[float] = Field(None, ge=_R.slab_depth_range[0], le=_R.slab_depth_range[1])
    slab_thickness: Optional[float] = Field(None, ge=_R.slab_thickness_range[0], le=_R.slab_thickness_range[1])

    shape_bottom: Optional[Shape] = None
    shape_top: Optional[Shape] = None
    shape_curve: Optional[Curve] = None

    scale_min: Optional[float] = Field(None, ge=_R.scale_range[0], le=_R.scale_range[1])
    scale_max: Optional[float] = Field(None, ge=_R.scale_range[0], le=_R.scale_range[1])
    scale_curve: Optional[Curve] = None

    twist_x_min: Optional[float] = Field(None, ge=_R.twist_range[0], le=_R.twist_range[1])
    twist_x_max: Optional[float] = Field(None, ge=_R.twist_range[0], le=_R.twist_range[1])
    twist_x_curve: Optional[Curve] = None
    twist_y_min: Optional[float] = Field(None, ge=_R.twist_range[0], le=_R.twist_range[1])
    twist_y_max: Optional[float] = Field(None, ge=_R.twist_range[0], le=_R.twist_range[1])
    twist_y_curve: Optional[Curve] = None
    twist_z_min: Optional[float] = Field(None, ge=_R.twist_range[0], le=_R.twist_range[1])
    twist_z_max: Optional[float] = Field(None, ge=_R.twist_range[0], le=_R.twist_range[1])
    twist_z_curve: Optional[Curve] = None

    bend_angle: Optional[float] = Field(None, ge=_R.bend_angle_range[0], le=_R.bend_angle_range[1])
    bend_direction: Optional[float] = Field(None, ge=_R.bend_direction_range[0], le=_R.bend_direction_range[1])
    bend_curve: Optional[Curve] = None

    color_bottom: Optional[str] = Field(None, pattern=HEX_COLOR)
    color_top: Optional[str] = Field(None, pattern=HEX_COLOR)
    roughness: Optional[float] = Field(None, ge=_R.material_range[0], le=_R.material_range[1])
    metalness: Optional[float] = Field(None, ge=_R.material_range[0], le=_R.material_range[1])


class FloorData(BaseModel):
    """Per-floor descriptor for renderers."""
    index: int
    progress: float
    scale: float
    twist_angles: List[float]
    orientation: List[float]
    position: List[float]
    color: str
    contour: Optional[List[List[float]]] = None


class TowerResult(BaseModel):
    """Complete tower response."""
    generation: Optional[int] = None
    params: Dict[str, Any]
    metrics: Dict[str, float]
    floors: List[FloorData]


# =============================================================================
# Helpers
# =============================================================================

def _to_params(data: Dict[str, Any]) -> TowerParams:
    try:
        return TowerParams.from_dict(data)
    except ValueError as e:
        raise HTTPException(status_code=422, detail=str(e))


def _tower_result(tower: Tower, generation: Optional[int], contours: bool) -> TowerResult:
    floors = [
        FloorData(
            index=f.index,
            progress=f.progress,
            scale=f.scale,
            twist_angles=list(f.twist_angles),
            orientation=list(f.orientation),
            position=list(f.position),
            color=rgb_to_hex(f.color),
            contour=f.contour.round(6).tolist() if contours else None,
        )
        for f in tower.floors
    ]
    return TowerResult(
        generation=generation,
        params=tower.params.to_dict(),
        metrics=tower_metrics(tower),
        floors=floors,
    )


# =============================================================================
# Endpoints
# =============================================================================

@app.get("/")
async def root():
    """Health check."""
    return {"status": "ok", "service": "TowerCraft API", "generation": assembler.generation}


@app.get("/api/params")
async def get_params():
    """Current parameter set."""
    return assembler.params.to_dict()


@app.get("/api/params/defaults")
async def get_defaults():
    """Default parameter snapshot used by reset."""
    return assembler.defaults.to_dict()


@app.put("/api/params", response_model=TowerResult)
async def replace_params(body: TowerParamsModel, contours: bool = False):
    """Replace the whole parameter set and rebuild."""
    tower = assembler.rebuild(_to_params(body.model_dump()))
    return _tower_result(tower, assembler.generation, contours)


@app.patch("/api/params", response_model=TowerResult)
async def edit_params(body: TowerParamsPatch, contours: bool = False):
    """Apply a partial edit and rebuild."""
    changes = body.model_dump(exclude_unset=True, exclude_none=True)
    merged = {**assembler.params.to_dict(), **changes}
    tower = assembler.rebuild(_to_params(merged))
    logger.info("Edited %s -> generation %d", sorted(changes), assembler.generation)
    return _tower_result(tower, assembler.generation, contours)


@app.post("/api/params/reset", response_model=TowerResult)
async def reset_params(contours: bool = False):
    """Restore defaults and rebuild."""
    tower = assembler.reset()
    return _tower_result(tower, assembler.generation, contours)


@app.get("/api/tower", response_model=TowerResult)
async def get_tower(contours: bool = True):
    """Current tower."""
    return _tower_result(assembler.tower, assembler.generation, contours)


@app.post("/api/tower/preview", response_model=TowerResult)
async def preview_tower(body: TowerParamsModel, contours: bool = True):
    """Build a tower from the body without touching the current state."""
    tower = build_tower(_to_params(body.model_dump()))
    return _tower_result(tower, None, contours)


@app.get("/api/export/csv")
async def export_csv():
    """Export the current floor schedule as CSV."""
    csv_text = export_schedule_csv(assembler.tower)
    return StreamingResponse(
        iter([csv_text]),
        media_type="text/csv",
        headers={"Content-Disposition": "attachment; filename=tower_schedule.csv"}
    )


if __name__ == "__main__":
    import uvicorn
    setup_logging(log_file=None)
    uvicorn.run(app, host="0.0.0.0", port=8000)
