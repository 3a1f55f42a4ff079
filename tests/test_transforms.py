# File: tests/test_transforms.py
"""
Test per-floor scale, twist, bend and color.

TEST PHILOSOPHY:
---------------
The bend model has a closed form, so positions and tangents are checked
against hand-computed values, not just "something came out".
"""

import numpy as np
import pytest

from towercraft.generative.transforms import (
    compose_floor,
    compute_bend,
    compute_color,
    compute_scale,
    compute_twist_angles,
    floor_progress,
    spine_height,
    twist_quaternion,
)
from towercraft.kernel.quaternion import quat_rotate
from towercraft.model import TowerParams

UP = np.array([0.0, 1.0, 0.0])

NEUTRAL = dict(
    twist_x_min=0.0, twist_x_max=0.0,
    twist_y_min=0.0, twist_y_max=0.0,
    twist_z_min=0.0, twist_z_max=0.0,
    bend_angle=0.0,
)


def test_floor_progress():
    assert floor_progress(0, 1) == 0.0
    assert floor_progress(0, 5) == 0.0
    assert floor_progress(2, 5) == 0.5
    assert floor_progress(4, 5) == 1.0
    assert floor_progress(0, 0) == 0.0  # clamped to a single floor


class TestScale:
    def test_linear_scale_scenario(self):
        """3 floors, scale 0.5 -> 1.5 linear: 0.5, 1.0, 1.5."""
        params = TowerParams(floor_count=3, floor_height=1.0, scale_min=0.5, scale_max=1.5,
                             scale_curve='linear', **NEUTRAL)
        scales = [compute_scale(floor_progress(i, 3), params) for i in range(3)]
        assert scales == pytest.approx([0.5, 1.0, 1.5])

    def test_scale_uses_its_curve(self):
        params = TowerParams(scale_min=0.0, scale_max=1.0, scale_curve='easeInOutCubic')
        assert compute_scale(0.25, params) == pytest.approx(0.0625)


class TestTwist:
    def test_axes_are_independent(self):
        """Each axis has its own range and curve."""
        params = TowerParams(
            twist_x_min=0.0, twist_x_max=10.0, twist_x_curve='linear',
            twist_y_min=0.0, twist_y_max=100.0, twist_y_curve='easeInOutCubic',
            twist_z_min=-20.0, twist_z_max=20.0, twist_z_curve='smoothstep',
        )
        ax, ay, az = compute_twist_angles(0.25, params)
        assert ax == pytest.approx(2.5)
        assert ay == pytest.approx(6.25)
        assert az == pytest.approx(-20.0 + 40.0 * 0.15625)

    def test_y_twist_rotates_slab_about_up(self):
        """+90 deg about Y sends local +X to -Z and leaves up alone."""
        q = twist_quaternion((0.0, 90.0, 0.0))
        np.testing.assert_allclose(quat_rotate(q, [1.0, 0.0, 0.0]), [0.0, 0.0, -1.0], atol=1e-12)
        np.testing.assert_allclose(quat_rotate(q, UP), UP, atol=1e-12)

    def test_composition_order_is_x_then_y_then_z(self):
        """With X=90, Y=90 the result is Rx @ Ry, not Ry @ Rx."""
        q = twist_quaternion((90.0, 90.0, 0.0))
        # Rx(90) @ Ry(90) @ (0,0,1) = (1,0,0); the other order would give (0,-1,0)
        np.testing.assert_allclose(quat_rotate(q, [0.0, 0.0, 1.0]), [1.0, 0.0, 0.0], atol=1e-12)


class TestBend:
    def test_straight_spine_is_centered(self):
        """No bend: x = z = 0, y spans -H/2 .. +H/2 linearly."""
        params = TowerParams(floor_count=5, floor_height=2.0, bend_direction=33.0, **NEUTRAL)
        H = spine_height(params)
        assert H == pytest.approx(8.0)
        for i in range(5):
            t = floor_progress(i, 5)
            pos, tilt = compute_bend(t, params)
            assert pos[0] == pytest.approx(0.0, abs=1e-12)
            assert pos[2] == pytest.approx(0.0, abs=1e-12)
            assert pos[1] == pytest.approx(-H / 2 + t * H)
            np.testing.assert_allclose(quat_rotate(tilt, UP), UP, atol=1e-12)

    def test_tiny_bend_takes_straight_branch(self):
        """|angle| below the epsilon never divides by it."""
        params = TowerParams(floor_count=3, floor_height=1.0, **{**NEUTRAL, 'bend_angle': 1e-9})
        pos, _ = compute_bend(1.0, params)
        np.testing.assert_allclose(pos, [0.0, 1.0, 0.0], atol=1e-12)

    def test_quarter_arc(self):
        """90 deg bend over H=10: radius 20/pi, ends at +-(R/2, R/2, 0)."""
        params = TowerParams(floor_count=11, floor_height=1.0, bend_curve='linear',
                             **{**NEUTRAL, 'bend_angle': 90.0})
        R = 10.0 / (np.pi / 2)

        bottom, tilt_bottom = compute_bend(0.0, params)
        top, tilt_top = compute_bend(1.0, params)

        np.testing.assert_allclose(bottom, [-R / 2, -R / 2, 0.0], atol=1e-9)
        np.testing.assert_allclose(top, [R / 2, R / 2, 0.0], atol=1e-9)
        np.testing.assert_allclose(quat_rotate(tilt_bottom, UP), UP, atol=1e-9)
        np.testing.assert_allclose(quat_rotate(tilt_top, UP), [1.0, 0.0, 0.0], atol=1e-9)

    def test_bend_direction_yaws_the_plane(self):
        """bend_direction=90 swings the bend from +X to -Z."""
        params = TowerParams(floor_count=11, floor_height=1.0,
                             **{**NEUTRAL, 'bend_angle': 90.0, 'bend_direction': 90.0})
        R = 10.0 / (np.pi / 2)
        top, tilt = compute_bend(1.0, params)
        np.testing.assert_allclose(top, [0.0, R / 2, -R / 2], atol=1e-9)
        np.testing.assert_allclose(quat_rotate(tilt, UP), [0.0, 0.0, -1.0], atol=1e-9)

    @pytest.mark.parametrize("curve", ['linear', 'smoothstep', 'easeInOutCubic'])
    @pytest.mark.parametrize("angle", [-120.0, 45.0, 170.0])
    def test_spine_is_centered_for_any_curvature(self, curve, angle):
        """Bottom and top slab centers are mirror images through the origin."""
        params = TowerParams(floor_count=20, bend_curve=curve, bend_direction=15.0,
                             **{**NEUTRAL, 'bend_angle': angle})
        bottom, _ = compute_bend(0.0, params)
        top, _ = compute_bend(1.0, params)
        np.testing.assert_allclose(bottom, -top, atol=1e-9)

    def test_arc_keeps_floor_spacing_along_spine(self):
        """Linear bend: consecutive slab centers are equally spaced along the arc."""
        params = TowerParams(floor_count=9, floor_height=1.0, bend_curve='linear',
                             **{**NEUTRAL, 'bend_angle': 120.0})
        pts = np.array([compute_bend(floor_progress(i, 9), params)[0] for i in range(9)])
        chords = np.linalg.norm(np.diff(pts, axis=0), axis=1)
        np.testing.assert_allclose(chords, chords[0])


class TestCompose:
    def test_tilt_is_applied_after_twist(self):
        """A Y twist spins the slab about its own up; the up axis still follows the spine."""
        params = TowerParams(floor_count=11, floor_height=1.0, bend_curve='linear',
                             **{**NEUTRAL, 'bend_angle': 90.0, 'twist_y_min': 40.0, 'twist_y_max': 40.0})
        _, _, orientation, _, _ = compose_floor(1.0, params)
        np.testing.assert_allclose(quat_rotate(orientation, UP), [1.0, 0.0, 0.0], atol=1e-9)

    def test_outputs_are_plain_floats(self):
        scale, twist, orientation, position, color = compose_floor(0.5, TowerParams())
        assert isinstance(scale, float)
        assert all(isinstance(c, float) for c in orientation + position + color + twist)
        assert np.linalg.norm(orientation) == pytest.approx(1.0)


def test_color_uses_raw_progress():
    """Colors blend linearly in t even when every other gradient is eased."""
    params = TowerParams(color_bottom=(0.0, 0.0, 0.0), color_top=(1.0, 0.5, 0.0),
                         scale_curve='easeInOutCubic', bend_curve='smoothstep')
    assert compute_color(0.25, params) == pytest.approx((0.25, 0.125, 0.0))


def test_color_blends_stored_srgb_values():
    """The midpoint is the plain average of the stored components, no linearization."""
    params = TowerParams(color_bottom='#000000', color_top='#808080')
    mid = compute_color(0.5, params)
    assert mid == pytest.approx((128 / 255 / 2,) * 3)
