import dataclasses

import pytest

from jeditr.style import Border, BorderRadius, Color, Padding, Style


def test_rgb_is_opaque():
    color = Color.rgb(0.25, 0.5, 0.75)
    assert (color.r, color.g, color.b) == (0.25, 0.5, 0.75)
    assert color.a == 1.0


def test_rgba_keeps_alpha():
    color = Color.rgba(0.1, 0.2, 0.3, 0.4)
    assert color == Color(0.1, 0.2, 0.3, 0.4)


def test_named_colors():
    assert Color.TRANSPARENT == Color.rgba(0.0, 0.0, 0.0, 0.0)
    assert Color.BLACK == Color.rgb(0.0, 0.0, 0.0)
    assert Color.WHITE == Color.rgb(1.0, 1.0, 1.0)
    assert Color.BLACK.a == Color.WHITE.a


def test_color_is_immutable():
    color = Color.rgb(0.2, 0.3, 0.4)
    with pytest.raises(dataclasses.FrozenInstanceError):
        color.r = 0.0
    assert color.r == 0.2


def test_padding_uniform():
    padding = Padding.uniform(7.5)
    assert padding.top == padding.right == padding.bottom == padding.left == 7.5


def test_padding_horizontal_vertical():
    padding = Padding.horizontal_vertical(3.0, 9.0)
    assert padding.left == padding.right == 3.0
    assert padding.top == padding.bottom == 9.0


def test_border_radius_uniform():
    radius = BorderRadius.uniform(4.0)
    corners = {radius.top_left, radius.top_right, radius.bottom_left, radius.bottom_right}
    assert corners == {4.0}


def test_border_holds_parts():
    radius = BorderRadius.uniform(6.0)
    border = Border(Color.WHITE, 3.0, radius)
    assert border.color == Color.WHITE
    assert border.width == 3.0
    assert border.radius == radius


def test_style_default():
    style = Style()
    assert style.padding == Padding.uniform(0.0)
    assert style.background == Color.BLACK
    assert style.border == Border(Color.BLACK, 1.0, BorderRadius.uniform(2.0))


def test_style_default_border_values():
    border = Style().border
    assert border.width == 1.0
    assert border.color == Color.BLACK
    assert border.radius.top_left == 2.0
    assert border.radius.bottom_right == 2.0