"""Tests for the Viewer model: coordinate laws, gestures and concrete scenarios."""

import dataclasses

import pytest

from PanZoomViewer.core.constants import ZOOM_IN_COEF, ZOOM_OUT_COEF
from PanZoomViewer.core.viewer import Viewer

VIEWERS = [
    Viewer.with_size((800, 600)),
    Viewer(size=(800, 600), origin=(120.0, -45.0), scale=0.25),
    Viewer(size=(1920, 1080), origin=(-3000.5, 12.75), scale=7.0),
    Viewer(size=(1, 1), origin=(1e-3, 1e3), scale=1e-4),
]

POINTS = [(0.0, 0.0), (400.0, 300.0), (-12.5, 987.25), (1e4, -3.0)]


def test_with_size_defaults():
    v = Viewer.with_size((800, 600))
    assert v.size == (800.0, 600.0)
    assert v.origin == (0.0, 0.0)
    assert v.scale == 1.0


def test_fields_are_normalised_to_floats():
    v = Viewer(size=[10, 20], origin=[1, 2], scale=3)
    assert v.size == (10.0, 20.0)
    assert v.origin == (1.0, 2.0)
    assert isinstance(v.scale, float)


def test_viewer_is_immutable_value():
    v = Viewer.with_size((800, 600))
    with pytest.raises(dataclasses.FrozenInstanceError):
        v.scale = 2.0
    assert v == Viewer(size=(800, 600), origin=(0, 0), scale=1)
    assert hash(v) == hash(Viewer.with_size((800.0, 600.0)))


def test_operations_return_new_values(shifted_viewer):
    before = dataclasses.astuple(shifted_viewer)
    shifted_viewer.pan((5, 5))
    shifted_viewer.zoom_in()
    shifted_viewer.fit_image((100, 100))
    shifted_viewer.resize((10, 10))
    assert dataclasses.astuple(shifted_viewer) == before


def test_resize_keeps_origin_and_scale(shifted_viewer):
    resized = shifted_viewer.resize((1024, 768))
    assert resized.size == (1024.0, 768.0)
    assert resized.origin == shifted_viewer.origin
    assert resized.scale == shifted_viewer.scale


def test_coordinates_at_viewer_origin_is_origin(shifted_viewer):
    assert shifted_viewer.coordinates_at((0, 0)) == shifted_viewer.origin


def test_coordinates_at_is_affine(shifted_viewer):
    assert shifted_viewer.coordinates_at((10, 4)) == pytest.approx((-37.5 + 25.0, 112.25 + 10.0))


def test_coordinates_at_center(shifted_viewer):
    expected = shifted_viewer.coordinates_at((320, 240))
    assert shifted_viewer.coordinates_at_center() == pytest.approx(expected)


@pytest.mark.parametrize("viewer", VIEWERS)
@pytest.mark.parametrize("point", POINTS)
def test_round_trip_law(viewer, point):
    image_point = viewer.coordinates_at(point)
    assert viewer.coordinates_in_viewer(image_point) == pytest.approx(point, rel=1e-9, abs=1e-6)


def test_inverse_with_shifted_origin_divides_full_difference():
    v = Viewer(size=(100, 100), origin=(10.0, 20.0), scale=2.0)
    # (30 - 10) / 2, (60 - 20) / 2
    assert v.coordinates_in_viewer((30.0, 60.0)) == (10.0, 20.0)


def test_visible_rect(shifted_viewer):
    x, y, w, h = shifted_viewer.visible_rect()
    assert (x, y) == shifted_viewer.origin
    assert (w, h) == pytest.approx((640 * 2.5, 480 * 2.5))


def test_translate(shifted_viewer):
    moved = shifted_viewer.translate((10.0, -2.25))
    assert moved.origin == pytest.approx((-27.5, 110.0))
    assert moved.scale == shifted_viewer.scale
    assert moved.size == shifted_viewer.size


@pytest.mark.parametrize("viewer", VIEWERS)
@pytest.mark.parametrize("point", POINTS)
def test_center_law(viewer, point):
    centered = viewer.center_at_coordinates(point)
    assert centered.coordinates_at_center() == pytest.approx(point, rel=1e-9, abs=1e-6)
    assert centered.scale == viewer.scale


@pytest.mark.parametrize("viewer", VIEWERS)
@pytest.mark.parametrize("delta", [(10.0, 0.0), (-3.5, 7.25), (0.0, 0.0)])
def test_pan_consistency(viewer, delta):
    px, py = delta
    assert viewer.pan(delta) == viewer.translate((-viewer.scale * px, -viewer.scale * py))


def test_pan_keeps_image_point_under_pointer(shifted_viewer):
    pointer = (100.0, 50.0)
    grabbed = shifted_viewer.coordinates_at(pointer)
    dragged = shifted_viewer.pan((12.0, -8.0))
    assert dragged.coordinates_at((112.0, 42.0)) == pytest.approx(grabbed)


def test_pan_scales_delta():
    v = Viewer(size=(800, 600), scale=2.0)
    panned = v.pan((10, 0))
    assert panned.origin == (-20.0, 0.0)


@pytest.mark.parametrize("content", [(400, 300), (1000, 300), (200, 900), (1, 1)])
def test_fit_containment(content):
    v = Viewer(size=(800, 600), origin=(55.0, -10.0), scale=3.0)
    cw, ch = content
    fitted = v.fit_image(content, 1.0)
    x, y, w, h = fitted.visible_rect()

    assert fitted.coordinates_at_center() == pytest.approx((cw / 2, ch / 2))
    assert x <= 1e-9 and y <= 1e-9
    assert x + w >= cw - 1e-9 and y + h >= ch - 1e-9
    # The binding axis touches both edges
    assert w == pytest.approx(cw) or h == pytest.approx(ch)


def test_fit_with_margin_enlarges_binding_axis():
    v = Viewer.with_size((800, 600))
    fitted = v.fit_image((1000, 300), 1.2)
    _, _, w, h = fitted.visible_rect()
    assert w == pytest.approx(1.2 * 1000)
    assert fitted.coordinates_at_center() == pytest.approx((500, 150))


def test_fit_default_margin_is_exact():
    v = Viewer.with_size((800, 600))
    assert v.fit_image((400, 300)) == v.fit_image((400, 300), 1.0)


def test_fit_on_zero_size_surface_divides_by_zero():
    with pytest.raises(ZeroDivisionError):
        Viewer.with_size((0, 600)).fit_image((400, 300))


def test_rescale_centered_keeps_center(shifted_viewer):
    center = shifted_viewer.coordinates_at_center()
    rescaled = shifted_viewer.rescale_centered(0.125)
    assert rescaled.scale == 0.125
    assert rescaled.coordinates_at_center() == pytest.approx(center)


@pytest.mark.parametrize("viewer", VIEWERS)
@pytest.mark.parametrize("new_scale", [0.01, 1.0, 42.0])
def test_anchor_invariance(viewer, new_scale):
    anchor = viewer.coordinates_at((17.0, 23.0))
    before = viewer.coordinates_in_viewer(anchor)
    rescaled = viewer.rescale_fix_point(new_scale, anchor)
    assert rescaled.scale == new_scale
    assert rescaled.coordinates_in_viewer(anchor) == pytest.approx(before, rel=1e-9, abs=1e-6)
    assert rescaled.coordinates_at(before) == pytest.approx(anchor, rel=1e-9, abs=1e-6)


def test_anchor_outside_surface_with_shifted_origin():
    v = Viewer(size=(800, 600), origin=(250.0, -80.0), scale=0.5)
    anchor = (-100.0, 900.0)
    rescaled = v.rescale_fix_point(4.0, anchor)
    assert rescaled.coordinates_in_viewer(anchor) == pytest.approx(v.coordinates_in_viewer(anchor))


def test_zoom_coefficients():
    assert ZOOM_IN_COEF == pytest.approx(2 / 3)
    assert ZOOM_OUT_COEF == 1 / ZOOM_IN_COEF
    assert ZOOM_OUT_COEF == pytest.approx(1.5)


def test_zoom_symmetry(shifted_viewer):
    back = shifted_viewer.zoom_in().zoom_out()
    assert back.scale == pytest.approx(shifted_viewer.scale)
    assert back.coordinates_at_center() == pytest.approx(shifted_viewer.coordinates_at_center())


def test_zoom_steps_are_geometric():
    v = Viewer.with_size((800, 600))
    scales = [v.scale]
    for _ in range(4):
        v = v.zoom_in()
        scales.append(v.scale)
    ratios = [b / a for a, b in zip(scales, scales[1:])]
    assert ratios == pytest.approx([ZOOM_IN_COEF] * 4)


def test_zoom_toward_keeps_anchor(shifted_viewer):
    anchor = shifted_viewer.coordinates_at((100.0, 400.0))
    zoomed = shifted_viewer.zoom_toward(anchor)
    assert zoomed.scale == pytest.approx(shifted_viewer.scale * ZOOM_IN_COEF)
    assert zoomed.coordinates_in_viewer(anchor) == pytest.approx((100.0, 400.0))


def test_zoom_away_from_keeps_anchor(shifted_viewer):
    anchor = shifted_viewer.coordinates_at((600.0, 10.0))
    zoomed = shifted_viewer.zoom_away_from(anchor)
    assert zoomed.scale == pytest.approx(shifted_viewer.scale * ZOOM_OUT_COEF)
    assert zoomed.coordinates_in_viewer(anchor) == pytest.approx((600.0, 10.0))


def test_scenario_fit_then_zoom_in():
    v0 = Viewer.with_size((800, 600))
    assert v0.origin == (0.0, 0.0)
    assert v0.scale == 1.0

    fitted = v0.fit_image((400, 300), 1.0)
    assert fitted.scale == 0.5
    assert fitted.origin == pytest.approx((0.0, 0.0))

    zoomed = fitted.zoom_in()
    assert zoomed.scale == pytest.approx(1 / 3)
    assert zoomed.origin == pytest.approx((200 - 400 / 3, 50.0))
    assert zoomed.origin[0] == pytest.approx(66.67, abs=0.01)
    assert zoomed.coordinates_at_center() == pytest.approx((200.0, 150.0))
