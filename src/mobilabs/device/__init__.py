"""
Device identification and capabilities.

Maps the platform's raw hardware identifier to a concrete device variant
with its battery, motion sensor and dialer handles, and caches the result
for the life of the process.
"""

from mobilabs.device.identifier import (
    DeviceFamily,
    ParsedIdentifier,
    format_identifier,
    parse,
)
from mobilabs.device.capabilities import (
    Accelerometer,
    Battery,
    BatteryStatus,
    Display,
    Gyroscope,
    MediaPicker,
    MotionSensor,
    PhoneService,
    PowerStatus,
    TextToSpeechService,
    Vector3,
)
from mobilabs.device.models import Device, DeviceKind, model_name
from mobilabs.device.registry import DeviceRegistry
from mobilabs.device.cache import DeviceCache, current_device, get_device_cache

__all__ = [
    # Identifier parsing
    "DeviceFamily",
    "ParsedIdentifier",
    "format_identifier",
    "parse",
    # Capabilities
    "Accelerometer",
    "Battery",
    "BatteryStatus",
    "Display",
    "Gyroscope",
    "MediaPicker",
    "MotionSensor",
    "PhoneService",
    "PowerStatus",
    "TextToSpeechService",
    "Vector3",
    # Variants
    "Device",
    "DeviceKind",
    "model_name",
    # Resolution
    "DeviceRegistry",
    "DeviceCache",
    "current_device",
    "get_device_cache",
]
