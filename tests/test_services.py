"""Tests for settings storage and private labelling."""

import logging

from pyqt_brandtheme.services import BrandingPolicy, PrivateLabellingService, SettingsThemeStorage
from pyqt_brandtheme.theming import ColorScheme


def test_settings_storage_round_trip(settings_path):
    storage = SettingsThemeStorage(settings_path)
    assert storage.get_item("theme") is None

    storage.set_item("theme", "light-theme")
    assert SettingsThemeStorage(settings_path).get_item("theme") == "light-theme"

    storage.remove_item("theme")
    assert SettingsThemeStorage(settings_path).get_item("theme") is None


def test_policy_from_label_policy_json():
    policy = BrandingPolicy.from_dict({
        "primaryColor": "#5282c1",
        "primaryColorDark": "",
        "backgroundColor": "#141735",
        "fontColor": "#ffffff",
        "warnColor": "#ff3b5b",
        "logoUrl": "https://example.com/logo.png",
        "hideLoginNameSuffix": True,
    })

    assert policy.primary_color == "#5282c1"
    assert policy.primary_color_dark is None
    assert policy.background_color == "#141735"
    assert policy.font_color == "#ffffff"
    assert policy.warn_color == "#ff3b5b"

    light = policy.scheme_overrides(False)
    assert light.primary == "#5282c1"
    assert policy.scheme_overrides(True).primary == ""


def test_defaults_are_applied_to_both_modes(context, surface):
    PrivateLabellingService(context).apply_defaults()

    for is_dark, scheme in ((True, ColorScheme.create_dark_theme()), (False, ColorScheme.create_light_theme())):
        mode = "dark" if is_dark else "light"
        assert surface.get_property(f"--theme-{mode}-primary-500") == scheme.primary
        assert surface.get_property(f"--theme-{mode}-warn-500") == scheme.warn
        assert surface.get_property(f"--theme-{mode}-background-500") == scheme.background
        assert surface.get_property(f"--theme-{mode}-text") == scheme.text


def test_policy_overrides_and_validation(context, surface, caplog):
    policy = BrandingPolicy.from_dict({
        "backgroundColor": "#141735",
        "fontColor": "#ffffff",
        "primaryColor": "#5282c1",
        "warnColor": "#ff3b5b",
    })

    with caplog.at_level(logging.INFO):
        PrivateLabellingService(context).apply_policy(policy)

    # Light mode: primary and warn accepted, dark background and white text rejected
    assert surface.get_property("--theme-light-primary-500") == "#5282c1"
    assert surface.get_property("--theme-light-warn-500") == "#ff3b5b"
    assert surface.get_property("--theme-light-background-500") == "#fafafa"
    assert surface.get_property("--theme-light-text") == "#000000"
    assert "Background (#141735)" in caplog.text
    assert "Text color (#ffffff)" in caplog.text

    # Dark mode: nothing supplied, defaults stay
    assert surface.get_property("--theme-dark-primary-500") == "#bbbafa"
    assert surface.get_property("--theme-dark-background-500") == "#111827"
    assert surface.get_property("--theme-dark-text") == "#ffffff"


def test_dark_policy_colors_are_applied(context, surface):
    PrivateLabellingService(context).apply_policy(BrandingPolicy(
        primary_color_dark="#a5b4fc",
        background_color_dark="#0f172a",
        font_color_dark="#e5e7eb",
    ))

    assert surface.get_property("--theme-dark-primary-500") == "#a5b4fc"
    assert surface.get_property("--theme-dark-background-500") == "#0f172a"
    assert surface.get_property("--theme-dark-text") == "#e5e7eb"
    assert surface.get_property("--theme-dark-secondary-text") == "#e5e7ebc7"


def test_malformed_policy_color_falls_back_with_warning(context, surface, caplog):
    with caplog.at_level(logging.WARNING, logger="pyqt_brandtheme.services.private_labelling_service"):
        PrivateLabellingService(context).apply_policy(BrandingPolicy(primary_color="indigo-ish"))

    assert surface.get_property("--theme-light-primary-500") == "#5469d4"
    assert "indigo-ish" in caplog.text


def test_empty_policy_keeps_defaults(context, surface):
    service = PrivateLabellingService(context)
    service.apply_policy_dict(None)
    defaults = surface.properties()

    service.apply_policy_dict({})
    assert surface.properties() == defaults
    service.apply_policy(BrandingPolicy())
    assert surface.properties() == defaults
