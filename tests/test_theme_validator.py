"""Tests for light/dark suitability checks."""

import pytest

from pyqt_brandtheme.theming import (
    Color,
    is_suitable_background,
    is_suitable_dark_background,
    is_suitable_dark_text,
    is_suitable_light_background,
    is_suitable_light_text,
    is_suitable_text,
)


def test_backgrounds():
    assert is_suitable_dark_background("#111827")
    assert not is_suitable_dark_background("#ffffff")
    assert is_suitable_light_background("#fafafa")
    assert not is_suitable_light_background("#141735")


def test_text_is_the_inverse_of_background():
    assert is_suitable_dark_text("#ffffff")
    assert not is_suitable_dark_text("#000000")
    assert is_suitable_light_text("#000000")
    assert not is_suitable_light_text("#ffffff")


@pytest.mark.parametrize("value", ["#000000", "#ffffff", "#7f7f7f", "#808080", "#5469d4"])
def test_dispatchers_match_mode_checks(value):
    assert is_suitable_background(value, True) == is_suitable_dark_background(value)
    assert is_suitable_background(value, False) == is_suitable_light_background(value)
    assert is_suitable_text(value, True) == is_suitable_dark_text(value)
    assert is_suitable_text(value, False) == is_suitable_light_text(value)
    assert is_suitable_dark_background(value) != is_suitable_light_background(value)


def test_accepts_color_instances():
    assert is_suitable_dark_background(Color.parse("#111827"))


@pytest.mark.parametrize("value", [None, "", "not-a-color", "#12"])
def test_unusable_input_is_never_suitable(value):
    assert not is_suitable_dark_background(value)
    assert not is_suitable_light_background(value)
    assert not is_suitable_dark_text(value)
    assert not is_suitable_light_text(value)
