"""Theming exceptions."""


class ThemeError(Exception):
    """Base class for theming failures."""


class InvalidColorFormat(ThemeError, ValueError):
    """Raised when a value cannot be parsed as a color."""

    def __init__(self, value):
        self.value = value
        super().__init__(f"Invalid color format: {value!r}")
