"""
Live style surface.

Holds CSS-variable-style custom properties (``--theme-dark-primary-500`` and
friends) that the stylesheet and palette builders read from. Batched writes
are applied in one step and announced with a single signal.
"""

import logging
from typing import Dict, Mapping, Optional

from PyQt6.QtCore import QObject, pyqtSignal

logger = logging.getLogger(__name__)


class StyleSurface(QObject):
    """Mutable map of custom style properties with change notification."""

    # Emits the names written by one set_property/set_properties call
    properties_changed = pyqtSignal(list)
    cleared = pyqtSignal()

    def __init__(self, parent: Optional[QObject] = None):
        super().__init__(parent)
        self._properties: Dict[str, str] = {}

    def set_property(self, name: str, value: str) -> None:
        """Write a single property."""
        self.set_properties({name: value})

    def set_properties(self, values: Mapping[str, str]) -> None:
        """
        Write several properties as one batch.

        Args:
            values: Property name to value mapping
        """
        if not values:
            return
        self._properties.update(values)
        logger.debug("Wrote %d style properties", len(values))
        self.properties_changed.emit(list(values))

    def get_property(self, name: str, default: Optional[str] = None) -> Optional[str]:
        return self._properties.get(name, default)

    def properties(self, prefix: Optional[str] = None) -> Dict[str, str]:
        """Return a copy of the properties, optionally filtered by name prefix."""
        if prefix is None:
            return dict(self._properties)
        return {k: v for k, v in self._properties.items() if k.startswith(prefix)}

    def clear(self) -> None:
        self._properties.clear()
        self.cleared.emit()

    def __contains__(self, name: str) -> bool:
        return name in self._properties
