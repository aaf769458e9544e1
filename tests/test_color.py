"""Tests for color parsing and color math primitives."""

import pytest

from pyqt_brandtheme.theming import Color, InvalidColorFormat, contrast_ratio


@pytest.mark.parametrize("value, expected", [
    ("#5469d4", "#5469d4"),
    ("#5469D4", "#5469d4"),
    ("5469d4", "#5469d4"),
    ("  #abc ", "#aabbcc"),
    ("rgb(84, 105, 212)", "#5469d4"),
    ("RGB(100%, 0%, 0%)", "#ff0000"),
    ("hsl(0, 0%, 100%)", "#ffffff"),
])
def test_parse_normalizes_to_hex(value, expected):
    assert Color.parse(value).to_hex() == expected


@pytest.mark.parametrize("value", ["", "not-a-color", "#12345", "#ggg", "rgb(1, 2)", None, 42])
def test_parse_rejects_malformed_input(value):
    with pytest.raises(InvalidColorFormat) as exc_info:
        Color.parse(value)
    assert exc_info.value.value == value


def test_invalid_color_format_is_a_value_error():
    with pytest.raises(ValueError):
        Color.parse("nope")


def test_parse_reads_alpha():
    assert Color.parse("rgba(0, 0, 0, 0.5)").to_hex8() == "#00000080"
    assert Color.parse("#11223380").a == pytest.approx(128 / 255)
    assert Color.parse("hsla(0,0%,0%,0.87)").a == pytest.approx(0.87)


def test_parse_returns_existing_color_unchanged():
    color = Color.from_rgb(1, 2, 3)
    assert Color.parse(color) is color


def test_channels_are_clamped():
    color = Color(300, -5, 128)
    assert color.to_rgb() == (255, 0, 128)


def test_colors_are_immutable():
    color = Color.parse("#5469d4")
    with pytest.raises(AttributeError):
        color.r = 0


def test_lighten_and_darken_clamp_at_the_boundaries():
    assert Color.parse("#ffffff").lighten(10).to_hex() == "#ffffff"
    assert Color.parse("#000000").darken(10).to_hex() == "#000000"
    assert Color.parse("#5469d4").lighten(100).to_hex() == "#ffffff"
    assert Color.parse("#5469d4").darken(100).to_hex() == "#000000"


def test_lighten_gray_moves_lightness_by_percentage_points():
    assert Color.parse("#000000").lighten(52).to_hex() == "#858585"
    assert Color.parse("#000000").lighten(37).to_hex() == "#5e5e5e"


def test_derivations_return_new_colors():
    base = Color.parse("#5469d4")
    lighter = base.lighten(10)
    assert lighter is not base
    assert base.to_hex() == "#5469d4"
    assert lighter.brightness() > base.brightness()
    assert base.darken(10).brightness() < base.brightness()


def test_saturate_keeps_lightness():
    base = Color.parse("#808080")
    saturated = base.saturate(30)
    assert saturated.to_hsl()[1] == pytest.approx(0.3, abs=1e-3)
    assert saturated.to_hsl()[2] == pytest.approx(base.to_hsl()[2], abs=1e-3)


def test_saturate_clamps_at_full_saturation():
    assert Color.parse("#ff0000").saturate(50).to_hex() == "#ff0000"


def test_set_alpha_serializes_to_hex8():
    assert Color.parse("#000000").set_alpha(0.78).to_hex8() == "#000000c7"
    assert Color.parse("#ffffff").set_alpha(2).a == 1.0


def test_rgb_string():
    assert Color.parse("#5469d4").to_rgb_string() == "rgb(84, 105, 212)"
    assert Color.parse("#5469d4").set_alpha(0.5).to_rgb_string() == "rgba(84, 105, 212, 0.5)"


def test_relative_luminance_extremes():
    assert Color.parse("#000").relative_luminance() == 0.0
    assert Color.parse("#fff").relative_luminance() == pytest.approx(1.0)


def test_contrast_ratio_is_symmetric_and_bounded():
    assert contrast_ratio("#000", "#fff") == pytest.approx(21.0)
    assert contrast_ratio("#5469d4", "#fafafa") == pytest.approx(contrast_ratio("#fafafa", "#5469d4"))
    assert contrast_ratio("#5469d4", "#5469d4") == pytest.approx(1.0)


def test_is_dark_threshold():
    # Perceived brightness of #808080 is exactly 128
    assert Color.parse("#808080").is_light()
    assert Color.parse("#7f7f7f").is_dark()


@pytest.mark.parametrize("value", ["#000000", "#ffffff", "#111827", "#fafafa", "#5469d4", "#bbbafa", "#ff3b5b"])
def test_light_and_dark_are_mutually_exclusive(value):
    color = Color.parse(value)
    assert color.is_dark() != color.is_light()


def test_to_qcolor(qapp):
    qcolor = Color.parse("#5469d480").to_qcolor()
    assert qcolor.name() == "#5469d4"
    assert qcolor.alpha() == 128
