from __future__ import annotations

import pytest

from shapekit.render.gradients import (
    TRANSPARENT,
    LinearGradient,
    RadialGradient,
    parse_color,
)


def test_parse_color_forms() -> None:
    assert parse_color("red") == (255, 0, 0, 255)
    assert parse_color("#00ff0080") == (0, 255, 0, 128)
    assert parse_color((1, 2, 3)) == (1, 2, 3, 255)
    assert parse_color("transparent") == TRANSPARENT
    with pytest.raises(ValueError):
        parse_color("not-a-color")
    with pytest.raises(ValueError):
        parse_color(None)


def test_stop_offset_out_of_range_rejected() -> None:
    g = LinearGradient(0, 0, 10, 0)
    with pytest.raises(ValueError):
        g.add_color_stop(1.5, "red")
    with pytest.raises(ValueError):
        g.add_color_stop(-0.1, "red")
    assert g.stops == []


def test_linear_interpolation_and_padding() -> None:
    g = LinearGradient(0, 0, 100, 0)
    g.add_color_stop(0.0, "black")
    g.add_color_stop(1.0, "white")
    assert g.color_at(-50, 3) == (0, 0, 0, 255)
    assert g.color_at(150, 3) == (255, 255, 255, 255)
    mid = g.color_at(50, 99)
    assert mid[0] in (127, 128) and mid[3] == 255


def test_stops_sorted_and_equal_offsets_keep_order() -> None:
    g = LinearGradient(0, 0, 10, 0)
    g.add_color_stop(1.0, "blue")
    g.add_color_stop(0.5, "red")
    g.add_color_stop(0.5, "lime")
    assert [o for o, _ in g.stops] == [0.5, 0.5, 1.0]
    assert g.stops[0][1] == (255, 0, 0, 255)
    assert g.stops[1][1] == (0, 255, 0, 255)


def test_zero_length_linear_is_transparent() -> None:
    g = LinearGradient(5, 5, 5, 5)
    g.add_color_stop(0, "red")
    assert g.color_at(5, 5) == TRANSPARENT


def test_no_stops_is_transparent() -> None:
    assert LinearGradient(0, 0, 1, 0).color_at(0.5, 0) == TRANSPARENT


def test_radial_concentric() -> None:
    g = RadialGradient(50, 50, 0, 50, 50, 40)
    g.add_color_stop(0, "red")
    g.add_color_stop(1, "blue")
    assert g.color_at(50, 50) == (255, 0, 0, 255)
    assert g.color_at(90, 50) == (0, 0, 255, 255)
    assert g.color_at(200, 50) == (0, 0, 255, 255)
    assert g.t_at(70, 50) == pytest.approx(0.5)


def test_radial_identical_circles_paint_nothing() -> None:
    g = RadialGradient(0, 0, 10, 0, 0, 10)
    g.add_color_stop(0, "red")
    assert g.color_at(3, 3) == TRANSPARENT


def test_radial_negative_radius_rejected() -> None:
    with pytest.raises(ValueError):
        RadialGradient(0, 0, -1, 0, 0, 10)
