"""
Property change notification for view models.
"""

import logging
from typing import Any, Callable, List

logger = logging.getLogger(__name__)

PropertyChangedCallback = Callable[[Any, str], None]


class ObservableObject:
    """Base class for objects whose properties are bound by a UI layer."""

    def __init__(self):
        self._property_changed: List[PropertyChangedCallback] = []

    def subscribe(self, callback: PropertyChangedCallback) -> None:
        """Register callback(sender, property_name)."""
        if callback not in self._property_changed:
            self._property_changed.append(callback)

    def unsubscribe(self, callback: PropertyChangedCallback) -> None:
        if callback in self._property_changed:
            self._property_changed.remove(callback)

    def notify_property_changed(self, name: str) -> None:
        for callback in list(self._property_changed):
            try:
                callback(self, name)
            except Exception as e:
                logger.error(f"Property changed callback error for {name}: {e}")

    def set_property(self, name: str, value: Any) -> bool:
        """
        Set the backing field ``_<name>`` and notify if the value changed.

        Returns:
            True if the value changed.
        """
        field = f"_{name}"
        if hasattr(self, field) and getattr(self, field) == value:
            return False
        setattr(self, field, value)
        self.notify_property_changed(name)
        return True
