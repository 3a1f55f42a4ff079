# File: tests/test_model_config.py
"""
Test TowerParams helpers and the configuration ranges.
"""

import pytest

from towercraft.config import CONFIG, TowerConfig
from towercraft.model import TowerParams, hex_to_rgb, rgb_to_hex


def test_default_params():
    p = TowerParams()
    assert p.floor_count == 40
    assert p.floor_height == 0.7
    assert (p.slab_width, p.slab_depth, p.slab_thickness) == (8.0, 8.0, 0.4)
    assert (p.scale_min, p.scale_max, p.scale_curve) == (0.65, 1.25, 'smoothstep')
    assert (p.twist_y_min, p.twist_y_max) == (-15.0, 55.0)
    assert rgb_to_hex(p.color_bottom) == '#2aa4ff'


def test_params_are_frozen():
    p = TowerParams()
    with pytest.raises(Exception):  # dataclasses.FrozenInstanceError
        p.floor_count = 3


def test_with_changes_returns_new_value():
    p = TowerParams()
    q = p.with_changes(floor_count=3, bend_angle=10.0)
    assert q.floor_count == 3 and q.bend_angle == 10.0
    assert p.floor_count == 40
    assert q.with_changes(floor_count=40, bend_angle=0.0) == p


def test_hex_colors():
    assert hex_to_rgb('#ff0000') == (1.0, 0.0, 0.0)
    assert hex_to_rgb('00ff00') == (0.0, 1.0, 0.0)
    assert rgb_to_hex((0.0, 0.0, 1.0)) == '#0000ff'
    assert rgb_to_hex(hex_to_rgb('#2aa4ff')) == '#2aa4ff'
    for bad in ('#fff', '#gg0000', 'blue'):
        with pytest.raises(ValueError):
            hex_to_rgb(bad)


def test_from_dict():
    p = TowerParams.from_dict({'floor_count': 12, 'color_top': '#000000', 'color_bottom': [1, 1, 1]})
    assert p.floor_count == 12
    assert p.color_top == (0.0, 0.0, 0.0)
    assert p.color_bottom == (1.0, 1.0, 1.0)
    assert p.bend_angle == TowerParams().bend_angle

    with pytest.raises(ValueError, match="Unknown tower parameters"):
        TowerParams.from_dict({'floors': 12})


def test_to_dict_round_trip():
    p = TowerParams(shape_bottom='triangle', twist_z_max=33.0)
    assert TowerParams.from_dict(p.to_dict()) == p


def test_config_constants():
    assert CONFIG.segment_count == 64
    assert CONFIG.bend_epsilon == 1e-4
    assert CONFIG.curves == ['linear', 'smoothstep', 'easeInOutCubic']
    assert CONFIG.shapes == ['square', 'circle', 'triangle']


def test_defaults_are_inside_ranges():
    assert CONFIG.check_ranges(TowerParams()) == []


def test_range_violations_are_reported():
    params = TowerParams(floor_count=500, roughness=1.5, shape_top='hexagon', twist_x_curve='bouncy')
    problems = TowerConfig().check_ranges(params)
    assert len(problems) == 4
    assert any(p.startswith('floor_count=500') for p in problems)
    assert any('hexagon' in p for p in problems)
    assert any('bouncy' in p for p in problems)


def test_colors_are_coerced_on_construction():
    """Hex strings and lists work wherever a color is set, not only in from_dict."""
    p = TowerParams(color_bottom='#ffffff', color_top=[0, 0, 1])
    assert p.color_bottom == (1.0, 1.0, 1.0)
    assert p.color_top == (0.0, 0.0, 1.0)

    q = p.with_changes(color_top='#ff0000')
    assert q.color_top == (1.0, 0.0, 0.0)
    assert q == TowerParams(color_bottom=(1.0, 1.0, 1.0), color_top=(1.0, 0.0, 0.0))

    with pytest.raises(ValueError):
        TowerParams(color_top='#12345')
