"""
Device variant registry.

Builds the concrete Device for a parsed hardware identifier and attaches
its capability handles.
"""

import logging
from typing import Optional, TYPE_CHECKING

from mobilabs.core.config import Config
from mobilabs.device.capabilities import Accelerometer, Battery, Gyroscope, PhoneService
from mobilabs.device.identifier import ParsedIdentifier, format_identifier, parse
from mobilabs.device.models import (
    FAMILY_KINDS,
    SIMULATOR_NAME,
    Device,
    DeviceKind,
    model_name,
)

if TYPE_CHECKING:
    from mobilabs.platform.host import HostPlatform

logger = logging.getLogger(__name__)


class DeviceRegistry:
    """Resolves hardware identifiers into Device variants."""

    def __init__(self, platform: "HostPlatform", config: Optional[Config] = None):
        """
        Initialize the registry.

        Args:
            platform: Host platform queried for identifier, firmware and sensors.
            config: Optional configuration. Defaults are used if None.
        """
        self._platform = platform
        self._config = config or Config()

    @property
    def platform(self) -> "HostPlatform":
        return self._platform

    def detect(self) -> Device:
        """Read the raw identifier from the platform and resolve it."""
        raw = self._platform.get_raw_hardware_identifier()
        identifier = parse(raw)
        if not identifier.is_known:
            logger.info(f"Unrecognized hardware identifier {raw!r}, using simulator")
        return self.resolve(identifier)

    def resolve(self, identifier: ParsedIdentifier) -> Device:
        """
        Build the Device for an identifier.

        Unknown identifiers resolve to the simulator. Every device gets a
        battery and an accelerometer; a gyroscope only when the platform
        reports one; a phone dialer only on phones.
        """
        kind = FAMILY_KINDS.get(identifier.family, DeviceKind.SIMULATOR)
        sensors = self._config.sensors

        if kind == DeviceKind.SIMULATOR:
            major = minor = None
            hardware_version = identifier.raw or SIMULATOR_NAME
        else:
            major, minor = identifier.major, identifier.minor
            hardware_version = format_identifier(identifier)

        gyroscope = None
        if self._platform.is_gyroscope_supported():
            gyroscope = Gyroscope(self._platform, sensors.gyroscope_interval_seconds)

        phone_service = None
        if kind == DeviceKind.PHONE:
            phone_service = PhoneService(self._platform, self._config.phone.url_scheme)

        device = Device(
            kind=kind,
            name=model_name(kind, major, minor),
            hardware_version=hardware_version,
            firmware_version=self._platform.get_system_version(),
            major=major,
            minor=minor,
            battery=Battery(self._platform),
            accelerometer=Accelerometer(self._platform, sensors.accelerometer_interval_seconds),
            gyroscope=gyroscope,
            phone_service=phone_service,
            display=self._platform.get_display_metrics(),
            device_id=self._platform.get_device_id(),
        )

        logger.info(
            f"Resolved device: kind={device.kind.value}, name={device.name}, "
            f"gyroscope={device.has_gyroscope}"
        )
        return device
