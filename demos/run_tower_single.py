#!/usr/bin/env python3
"""
RUN_TOWER_SINGLE: Generate, Inspect and Export a Parametric Tower
=================================================================

This demo shows the complete parameters-to-outputs workflow:
1. Define design parameters (command-line flags over the defaults)
2. Check them against the supported slider ranges
3. Generate the tower (floor descriptors)
4. Export the floor schedule
5. Plot gradient profiles
6. Visualize in 3D

Run with:
    python demos/run_tower_single.py
    python demos/run_tower_single.py --floors 60 --bend-angle 35 --bend-direction 45 \\
        --shape-bottom triangle --shape-top circle --twist-y 0 120

Outputs:
    artifacts/tower_schedule.csv  - One row per floor
    artifacts/tower_profiles.png  - Scale / twist / bend profiles
    artifacts/tower_3d.html       - Interactive 3D visualization
    artifacts/towercraft.log      - Run log
"""

import argparse
import logging
import os
import sys

from towercraft.config import CONFIG
from towercraft.export import export_schedule_csv, generate_summary_text
from towercraft.generative import TowerAssembler
from towercraft.logging_config import DEFAULT_LOG_FILE, setup_logging
from towercraft.model import TowerParams, hex_to_rgb
from towercraft.viz import plot_tower_3d, plot_tower_profiles


def print_header(text: str):
    """Print a formatted section header."""
    print("\n" + "=" * 70)
    print(f"  {text}")
    print("=" * 70)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description='Generate a parametric stacked-slab tower and export it',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python demos/run_tower_single.py --floors 60 --twist-y 0 180
  python demos/run_tower_single.py --bend-angle 40 --bend-curve easeInOutCubic

This will generate:
  - artifacts/tower_schedule.csv
  - artifacts/tower_profiles.png
  - artifacts/tower_3d.html
  - artifacts/towercraft.log
        """
    )
    d = TowerParams()

    parser.add_argument('--floors', type=int, default=d.floor_count, help='Number of floors')
    parser.add_argument('--floor-height', type=float, default=d.floor_height)
    parser.add_argument('--width', type=float, default=d.slab_width, help='Slab width')
    parser.add_argument('--depth', type=float, default=d.slab_depth, help='Slab depth')
    parser.add_argument('--thickness', type=float, default=d.slab_thickness, help='Slab thickness')

    parser.add_argument('--shape-bottom', choices=CONFIG.shapes, default=d.shape_bottom)
    parser.add_argument('--shape-top', choices=CONFIG.shapes, default=d.shape_top)
    parser.add_argument('--shape-curve', choices=CONFIG.curves, default=d.shape_curve)

    parser.add_argument('--scale', type=float, nargs=2, metavar=('MIN', 'MAX'),
                        default=(d.scale_min, d.scale_max))
    parser.add_argument('--scale-curve', choices=CONFIG.curves, default=d.scale_curve)

    for axis in ('x', 'y', 'z'):
        parser.add_argument(
            f'--twist-{axis}', type=float, nargs=2, metavar=('MIN', 'MAX'),
            default=(getattr(d, f'twist_{axis}_min'), getattr(d, f'twist_{axis}_max')),
            help=f'Twist about {axis.upper()} in degrees, bottom and top',
        )
        parser.add_argument(f'--twist-{axis}-curve', choices=CONFIG.curves,
                            default=getattr(d, f'twist_{axis}_curve'))

    parser.add_argument('--bend-angle', type=float, default=d.bend_angle, help='Total bend (deg)')
    parser.add_argument('--bend-direction', type=float, default=d.bend_direction, help='Bend yaw (deg)')
    parser.add_argument('--bend-curve', choices=CONFIG.curves, default=d.bend_curve)

    parser.add_argument('--color-bottom', default='#2aa4ff')
    parser.add_argument('--color-top', default='#ff7b57')

    parser.add_argument('--outdir', default='artifacts', help='Output directory (default: artifacts)')
    parser.add_argument('--show', action='store_true', help='Open the 3D view in a browser')
    parser.add_argument('--verbose', action='store_true', help='Debug logging')
    parser.add_argument('--log-file', default=None,
                        help='Run log path (default: <outdir>/towercraft.log)')
    return parser


def params_from_args(args) -> TowerParams:
    return TowerParams(
        floor_count=args.floors,
        floor_height=args.floor_height,
        slab_width=args.width,
        slab_depth=args.depth,
        slab_thickness=args.thickness,
        shape_bottom=args.shape_bottom,
        shape_top=args.shape_top,
        shape_curve=args.shape_curve,
        scale_min=args.scale[0],
        scale_max=args.scale[1],
        scale_curve=args.scale_curve,
        twist_x_min=args.twist_x[0],
        twist_x_max=args.twist_x[1],
        twist_x_curve=args.twist_x_curve,
        twist_y_min=args.twist_y[0],
        twist_y_max=args.twist_y[1],
        twist_y_curve=args.twist_y_curve,
        twist_z_min=args.twist_z[0],
        twist_z_max=args.twist_z[1],
        twist_z_curve=args.twist_z_curve,
        bend_angle=args.bend_angle,
        bend_direction=args.bend_direction,
        bend_curve=args.bend_curve,
        color_bottom=hex_to_rgb(args.color_bottom),
        color_top=hex_to_rgb(args.color_top),
    )


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    log_file = args.log_file or os.path.join(args.outdir, os.path.basename(DEFAULT_LOG_FILE))
    setup_logging(logging.DEBUG if args.verbose else logging.INFO, log_file=log_file)

    print_header(f"{CONFIG.app_name.upper()}: {CONFIG.app_subtitle}")

    # =========================================================================
    # STEP 1: DEFINE DESIGN PARAMETERS
    # =========================================================================
    print_header("STEP 1: Design Parameters")

    try:
        params = params_from_args(args)
    except ValueError as e:
        print(f"  Invalid color: {e}")
        return 2

    problems = CONFIG.check_ranges(params)
    if problems:
        print("  Parameters outside the supported design space:")
        for p in problems:
            print(f"    - {p}")
        return 2

    # =========================================================================
    # STEP 2: GENERATE GEOMETRY
    # =========================================================================
    print_header("STEP 2: Generate Tower")

    assembler = TowerAssembler(defaults=params)
    tower = assembler.tower
    print(generate_summary_text(tower))

    # =========================================================================
    # STEP 3: EXPORT
    # =========================================================================
    print_header("STEP 3: Export")

    schedule_path = f"{args.outdir}/tower_schedule.csv"
    export_schedule_csv(tower, schedule_path)
    print(f"  Floor schedule exported to: {schedule_path}")

    profiles_path = f"{args.outdir}/tower_profiles.png"
    plot_tower_profiles(tower, outpath=profiles_path)
    print(f"  Profiles saved to: {profiles_path}")

    html_path = f"{args.outdir}/tower_3d.html"
    plot_tower_3d(tower, title=f"{CONFIG.app_name}: {len(tower)} floors",
                  outpath=html_path, show=args.show)
    print(f"  3D view saved to: {html_path}")

    assembler.release()
    return 0


if __name__ == "__main__":
    sys.exit(main())
