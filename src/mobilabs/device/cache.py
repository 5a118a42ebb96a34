"""
Process-wide current device.

The device is resolved on first access and kept for the life of the
process.
"""

import logging
import threading
from typing import Callable, Optional

from mobilabs.core.config import load_config
from mobilabs.device.models import Device
from mobilabs.device.registry import DeviceRegistry
from mobilabs.platform.host import get_host_platform

logger = logging.getLogger(__name__)


class DeviceCache:
    """Lazily resolves a Device exactly once."""

    def __init__(self, factory: Callable[[], Device]):
        """
        Args:
            factory: Called once, on the first current() call, to build the device.
        """
        self._factory = factory
        self._lock = threading.Lock()
        self._device: Optional[Device] = None

    @property
    def is_resolved(self) -> bool:
        return self._device is not None

    def current(self) -> Device:
        """Return the device, resolving it on first use."""
        device = self._device
        if device is not None:
            return device

        with self._lock:
            if self._device is None:
                self._device = self._factory()
                logger.debug(f"Current device resolved: {self._device.name}")
            return self._device


_cache_lock = threading.Lock()
_cache_instance: Optional[DeviceCache] = None


def get_device_cache() -> DeviceCache:
    """Get the default DeviceCache, backed by the configured host platform."""
    global _cache_instance
    if _cache_instance is None:
        with _cache_lock:
            if _cache_instance is None:
                config = load_config()
                registry = DeviceRegistry(get_host_platform(config), config)
                _cache_instance = DeviceCache(registry.detect)
    return _cache_instance


def current_device() -> Device:
    """Convenience function to get the current device."""
    return get_device_cache().current()
