"""
Device variants.

A Device is a closed, tagged record: its kind is one of PHONE, POD, PAD
or SIMULATOR, and every hardware capability is an optional handle.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Optional, Tuple

from mobilabs.core.errors import UnsupportedOperationError
from mobilabs.device.capabilities import (
    Accelerometer,
    Battery,
    Display,
    Gyroscope,
    MediaPicker,
    PhoneService,
)
from mobilabs.device.identifier import DeviceFamily

MANUFACTURER = "Apple"
SIMULATOR_NAME = "Simulator"


class DeviceKind(Enum):
    """Concrete device variants."""
    PHONE = "phone"
    POD = "pod"
    PAD = "pad"
    SIMULATOR = "simulator"


FAMILY_KINDS: Dict[DeviceFamily, DeviceKind] = {
    DeviceFamily.PHONE: DeviceKind.PHONE,
    DeviceFamily.POD: DeviceKind.POD,
    DeviceFamily.PAD: DeviceKind.PAD,
}


PHONE_MODELS: Dict[Tuple[int, int], str] = {
    (1, 1): "iPhone",
    (1, 2): "iPhone 3G",
    (2, 1): "iPhone 3GS",
    (3, 1): "iPhone 4",
    (3, 2): "iPhone 4",
    (3, 3): "iPhone 4",
    (4, 1): "iPhone 4S",
    (5, 1): "iPhone 5",
    (5, 2): "iPhone 5",
    (5, 3): "iPhone 5c",
    (5, 4): "iPhone 5c",
    (6, 1): "iPhone 5s",
    (6, 2): "iPhone 5s",
    (7, 1): "iPhone 6 Plus",
    (7, 2): "iPhone 6",
    (8, 1): "iPhone 6s",
    (8, 2): "iPhone 6s Plus",
    (8, 4): "iPhone SE",
    (9, 1): "iPhone 7",
    (9, 2): "iPhone 7 Plus",
    (9, 3): "iPhone 7",
    (9, 4): "iPhone 7 Plus",
    (10, 1): "iPhone 8",
    (10, 2): "iPhone 8 Plus",
    (10, 3): "iPhone X",
    (10, 4): "iPhone 8",
    (10, 5): "iPhone 8 Plus",
    (10, 6): "iPhone X",
}

POD_MODELS: Dict[Tuple[int, int], str] = {
    (1, 1): "iPod touch",
    (2, 1): "iPod touch (2nd generation)",
    (3, 1): "iPod touch (3rd generation)",
    (4, 1): "iPod touch (4th generation)",
    (5, 1): "iPod touch (5th generation)",
    (7, 1): "iPod touch (6th generation)",
    (9, 1): "iPod touch (7th generation)",
}

PAD_MODELS: Dict[Tuple[int, int], str] = {
    (1, 1): "iPad",
    (2, 1): "iPad 2",
    (2, 2): "iPad 2",
    (2, 3): "iPad 2",
    (2, 4): "iPad 2",
    (2, 5): "iPad mini",
    (2, 6): "iPad mini",
    (2, 7): "iPad mini",
    (3, 1): "iPad (3rd generation)",
    (3, 2): "iPad (3rd generation)",
    (3, 3): "iPad (3rd generation)",
    (3, 4): "iPad (4th generation)",
    (3, 5): "iPad (4th generation)",
    (3, 6): "iPad (4th generation)",
    (4, 1): "iPad Air",
    (4, 2): "iPad Air",
    (4, 3): "iPad Air",
    (4, 4): "iPad mini 2",
    (4, 5): "iPad mini 2",
    (4, 6): "iPad mini 2",
    (4, 7): "iPad mini 3",
    (4, 8): "iPad mini 3",
    (4, 9): "iPad mini 3",
    (5, 1): "iPad mini 4",
    (5, 2): "iPad mini 4",
    (5, 3): "iPad Air 2",
    (5, 4): "iPad Air 2",
}

MODEL_NAMES: Dict[DeviceKind, Dict[Tuple[int, int], str]] = {
    DeviceKind.PHONE: PHONE_MODELS,
    DeviceKind.POD: POD_MODELS,
    DeviceKind.PAD: PAD_MODELS,
}

_KIND_PREFIX = {
    DeviceKind.PHONE: "iPhone",
    DeviceKind.POD: "iPod",
    DeviceKind.PAD: "iPad",
}


def model_name(kind: DeviceKind, major: Optional[int], minor: Optional[int]) -> str:
    """Marketing name for a hardware version, e.g. (PHONE, 6, 1) -> "iPhone 5s"."""
    if kind == DeviceKind.SIMULATOR:
        return SIMULATOR_NAME
    name = MODEL_NAMES[kind].get((major, minor))
    if name is None:
        name = f"{_KIND_PREFIX[kind]} {major},{minor}"
    return name


@dataclass(frozen=True)
class Device:
    """A resolved device and its capability handles."""
    kind: DeviceKind
    name: str
    hardware_version: str
    firmware_version: str
    major: Optional[int] = None
    minor: Optional[int] = None
    battery: Optional[Battery] = None
    accelerometer: Optional[Accelerometer] = None
    gyroscope: Optional[Gyroscope] = None
    phone_service: Optional[PhoneService] = None
    media_picker: Optional[MediaPicker] = None
    display: Optional[Display] = None
    device_id: Optional[str] = None

    @property
    def manufacturer(self) -> str:
        return MANUFACTURER

    @property
    def id(self) -> str:
        """
        Platform-unique device id.

        Raises:
            UnsupportedOperationError: If the platform has no stable id.
        """
        if self.device_id is None:
            raise UnsupportedOperationError("Device.id")
        return self.device_id

    @property
    def is_simulator(self) -> bool:
        return self.kind == DeviceKind.SIMULATOR

    @property
    def has_gyroscope(self) -> bool:
        return self.gyroscope is not None

    @property
    def can_dial(self) -> bool:
        return self.phone_service is not None

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for display and logging."""
        return {
            "kind": self.kind.value,
            "name": self.name,
            "manufacturer": self.manufacturer,
            "hardware_version": self.hardware_version,
            "firmware_version": self.firmware_version,
            "major": self.major,
            "minor": self.minor,
            "id": self.device_id,
            "capabilities": {
                "battery": self.battery is not None,
                "accelerometer": self.accelerometer is not None,
                "gyroscope": self.gyroscope is not None,
                "phone": self.phone_service is not None,
                "media_picker": self.media_picker is not None,
                "display": self.display is not None,
            },
        }
