"""
Service layer.

Storage and branding services that connect the theming engine to the
application's persisted settings and its organization's label policy.
"""

from .settings_storage import SettingsThemeStorage
from .private_labelling_service import BrandingPolicy, PrivateLabellingService

__all__ = [
    "SettingsThemeStorage",
    "BrandingPolicy",
    "PrivateLabellingService",
]
