# towercraft/export.py
"""
Export helpers: floor schedule (DataFrame / CSV), model JSON, text summary.
"""

import json
from pathlib import Path
from typing import Any, Dict, Optional, Union

import pandas as pd

from .generative.shapes import contour_area
from .model import Tower, rgb_to_hex


def floor_schedule(tower: Tower) -> pd.DataFrame:
    """
    One row per floor with its derived geometry.

    Columns: floor, progress, scale, twist_x/y/z_deg, x, y, z,
    qw, qx, qy, qz, color, footprint_area.
    footprint_area is the scaled contour area (scale^2 * contour area).
    """
    rows = []
    for floor in tower.floors:
        tx, ty, tz = floor.twist_angles
        x, y, z = floor.position
        qw, qx, qy, qz = floor.orientation
        rows.append({
            'floor': floor.index,
            'progress': floor.progress,
            'scale': floor.scale,
            'twist_x_deg': tx,
            'twist_y_deg': ty,
            'twist_z_deg': tz,
            'x': x,
            'y': y,
            'z': z,
            'qw': qw,
            'qx': qx,
            'qy': qy,
            'qz': qz,
            'color': rgb_to_hex(floor.color),
            'footprint_area': floor.scale ** 2 * abs(contour_area(floor.contour)),
        })
    return pd.DataFrame(rows)


def export_schedule_csv(tower: Tower, outpath: Optional[Union[str, Path]] = None) -> str:
    """
    Write the floor schedule as CSV.

    Returns the CSV text; also writes it to `outpath` when given.
    """
    csv_text = floor_schedule(tower).to_csv(index=False, float_format='%.6f')
    if outpath:
        outpath = Path(outpath)
        outpath.parent.mkdir(parents=True, exist_ok=True)
        outpath.write_text(csv_text)
    return csv_text


def tower_to_dict(tower: Tower, include_contours: bool = True) -> Dict[str, Any]:
    """JSON-ready dict of params and floors."""
    floors = []
    for floor in tower.floors:
        data = {
            'index': floor.index,
            'progress': floor.progress,
            'scale': floor.scale,
            'twist_angles': list(floor.twist_angles),
            'orientation': list(floor.orientation),
            'position': list(floor.position),
            'color': rgb_to_hex(floor.color),
        }
        if include_contours:
            data['contour'] = floor.contour.round(6).tolist()
        floors.append(data)

    return {
        'version': '1.0',
        'type': 'tower',
        'parameters': tower.params.to_dict(),
        'metrics': tower_metrics(tower),
        'floors': floors,
    }


def generate_model_json(tower: Tower, include_contours: bool = True) -> str:
    """Serialize a tower to a JSON string."""
    return json.dumps(tower_to_dict(tower, include_contours), indent=2)


def tower_metrics(tower: Tower) -> Dict[str, float]:
    """Summary numbers derived from the schedule."""
    df = floor_schedule(tower)
    thickness = tower.params.slab_thickness
    return {
        'n_floors': int(len(df)),
        'total_height': float(tower.total_height),
        'min_scale': float(df['scale'].min()),
        'max_scale': float(df['scale'].max()),
        'total_floor_area': float(df['footprint_area'].sum()),
        'slab_volume': float(df['footprint_area'].sum() * thickness),
        'max_offset': float((df['x'] ** 2 + df['z'] ** 2).pow(0.5).max()),
    }


def generate_summary_text(tower: Tower) -> str:
    """Generate a text summary of the tower."""
    p = tower.params
    m = tower_metrics(tower)
    lines = [
        "TOWER DESIGN SUMMARY",
        "=" * 40,
        "",
        "LAYOUT",
        f"  Floors:        {m['n_floors']}",
        f"  Floor height:  {p.floor_height:.2f}",
        f"  Total height:  {m['total_height']:.2f}",
        f"  Slab:          {p.slab_width:.1f} x {p.slab_depth:.1f} x {p.slab_thickness:.2f}",
        f"  Shape:         {p.shape_bottom} -> {p.shape_top} ({p.shape_curve})",
        "",
        "GRADIENTS",
        f"  Scale:         {p.scale_min:.2f} -> {p.scale_max:.2f} ({p.scale_curve})",
        f"  Twist X:       {p.twist_x_min:.0f} -> {p.twist_x_max:.0f} deg ({p.twist_x_curve})",
        f"  Twist Y:       {p.twist_y_min:.0f} -> {p.twist_y_max:.0f} deg ({p.twist_y_curve})",
        f"  Twist Z:       {p.twist_z_min:.0f} -> {p.twist_z_max:.0f} deg ({p.twist_z_curve})",
        f"  Bend:          {p.bend_angle:.0f} deg toward {p.bend_direction:.0f} deg ({p.bend_curve})",
        "",
        "QUANTITIES",
        f"  Floor area:    {m['total_floor_area']:.1f}",
        f"  Slab volume:   {m['slab_volume']:.1f}",
        f"  Max offset:    {m['max_offset']:.2f}",
    ]
    return "\n".join(lines)
