# File: tests/test_shapes.py
"""
Test the polar-radius shape functions and contour blending.
"""

import numpy as np
import pytest

from towercraft.generative.shapes import contour_area, polygon_radius, sample_contour


def test_circle_radius_is_exactly_one():
    """'circle' ignores the angle entirely."""
    for theta in np.linspace(-7.0, 7.0, 57):
        assert polygon_radius(theta, 'circle') == 1.0


@pytest.mark.parametrize("shape,n", [('square', 4), ('triangle', 3)])
def test_polygon_radius_is_periodic(shape, n):
    """An n-gon's radius repeats every 2pi/n."""
    period = 2 * np.pi / n
    for theta in np.linspace(0.0, 2 * np.pi, 37):
        assert polygon_radius(theta + period, shape) == pytest.approx(polygon_radius(theta, shape))


@pytest.mark.parametrize("shape,n", [('square', 4), ('triangle', 3)])
def test_polygon_vertices_and_edge_midpoints(shape, n):
    """Radius is 1 on a vertex and cos(pi/n) at an edge midpoint."""
    assert polygon_radius(0.0, shape) == pytest.approx(1.0)
    assert polygon_radius(np.pi / n, shape) == pytest.approx(np.cos(np.pi / n))


def test_unknown_shape_falls_back_to_circle():
    assert polygon_radius(0.4, 'hexagon') == 1.0


def test_contour_point_count_and_first_point():
    """Contour has segment_count points, the first at angle 0."""
    contour = sample_contour('square', 'circle', 'linear', 0.0, 8.0, 6.0)
    assert contour.shape == (64, 2)
    np.testing.assert_allclose(contour[0], [4.0, 0.0], atol=1e-12)


@pytest.mark.parametrize("curve", ['linear', 'smoothstep', 'easeInOutCubic'])
@pytest.mark.parametrize("t", [0.0, 0.3, 0.5, 1.0])
def test_circle_to_circle_has_unit_radius(curve, t):
    """Two circles blend to a constant-radius disc whatever the curve or t."""
    contour = sample_contour('circle', 'circle', curve, t, 2.0, 2.0)
    np.testing.assert_allclose(np.hypot(contour[:, 0], contour[:, 1]), 1.0)


def test_blend_endpoints_match_pure_shapes():
    """t=0 gives the bottom shape, t=1 the top shape."""
    bottom = sample_contour('triangle', 'circle', 'smoothstep', 0.0, 2.0, 2.0)
    top = sample_contour('triangle', 'circle', 'smoothstep', 1.0, 2.0, 2.0)
    thetas = 2 * np.pi * np.arange(64) / 64

    np.testing.assert_allclose(
        np.hypot(bottom[:, 0], bottom[:, 1]),
        [polygon_radius(th, 'triangle') for th in thetas],
    )
    np.testing.assert_allclose(np.hypot(top[:, 0], top[:, 1]), 1.0)


def test_blend_is_eased():
    """The blend factor goes through the shape curve."""
    lin = sample_contour('square', 'circle', 'linear', 0.25, 2.0, 2.0)
    eased = sample_contour('square', 'circle', 'easeInOutCubic', 0.25, 2.0, 2.0)
    explicit = sample_contour('square', 'circle', 'linear', 0.0625, 2.0, 2.0)
    np.testing.assert_allclose(eased, explicit)
    assert not np.allclose(lin, eased)


def test_zero_width_is_degenerate_not_an_error():
    contour = sample_contour('square', 'triangle', 'linear', 0.5, 0.0, 4.0)
    np.testing.assert_allclose(contour[:, 0], 0.0)
    assert contour_area(contour) == pytest.approx(0.0)


def test_contour_area_of_square():
    """A square with vertices on the unit circle has area 2 (and the contour is CCW)."""
    contour = sample_contour('square', 'square', 'linear', 0.0, 2.0, 2.0)
    assert contour_area(contour) == pytest.approx(2.0)
