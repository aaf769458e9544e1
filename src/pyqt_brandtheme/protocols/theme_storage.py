"""Persistent storage protocol for theme state."""

from abc import ABC, abstractmethod
from typing import Optional


class ThemeStorage(ABC):
    """Durable key/value store the theme mode is persisted to.

    Implementations must survive process restarts; a fresh instance pointed at
    the same backing store must read back what a previous one wrote.
    """

    @abstractmethod
    def get_item(self, key: str) -> Optional[str]:
        """Return the stored value for key, or None if absent."""

    @abstractmethod
    def set_item(self, key: str, value: str) -> None:
        """Store value under key."""

    @abstractmethod
    def remove_item(self, key: str) -> None:
        """Remove key if present."""
