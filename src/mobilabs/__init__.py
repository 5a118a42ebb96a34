"""
MobiLabs - Mobile UI helpers

Device identification and capability handles for Apple hardware
identifiers, plus MVVM commands and observable properties.

Supports:
- iPhone, iPod touch and iPad hardware identifiers
- Simulator fallback for anything else
"""

__version__ = "0.3.0"
__author__ = "MobiLabs Team"

from mobilabs.core.config import Config
from mobilabs.device.cache import DeviceCache, current_device
from mobilabs.device.models import Device, DeviceKind
from mobilabs.device.registry import DeviceRegistry

__all__ = [
    "Config",
    "Device",
    "DeviceCache",
    "DeviceKind",
    "DeviceRegistry",
    "current_device",
    "__version__",
]
