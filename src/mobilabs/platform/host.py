"""
Host platform boundary.

The device core never performs system calls itself. Everything it needs
from the running platform (raw hardware identifier, gyroscope support,
firmware version, sensor readings, URL launching) goes through a
HostPlatform implementation, which tests replace with doubles.
"""

import logging
import platform as plat
import subprocess
import sys
from abc import ABC, abstractmethod
from typing import List, Optional

import psutil

from mobilabs.core.config import Config, PlatformConfig
from mobilabs.core.errors import PlatformError, UnsupportedOperationError
from mobilabs.device.capabilities import BatteryStatus, Display, PowerStatus, Vector3
from mobilabs.platform.sysctl import HW_MACHINE, get_system_property

logger = logging.getLogger(__name__)

STANDARD_GRAVITY = Vector3(0.0, 0.0, -1.0)


class HostPlatform(ABC):
    """Abstract host platform interface."""

    @abstractmethod
    def get_raw_hardware_identifier(self) -> str:
        """Vendor-defined hardware string, e.g. "iPhone8,1"."""
        pass

    @abstractmethod
    def is_gyroscope_supported(self) -> bool:
        pass

    @abstractmethod
    def get_system_version(self) -> str:
        pass

    @abstractmethod
    def get_device_id(self) -> Optional[str]:
        """Platform-unique device id, or None when the platform has none."""
        pass

    @abstractmethod
    def get_display_metrics(self) -> Optional[Display]:
        pass

    @abstractmethod
    def read_acceleration(self) -> Vector3:
        pass

    @abstractmethod
    def read_rotation_rate(self) -> Vector3:
        pass

    @abstractmethod
    def open_url(self, url: str) -> bool:
        """Hand a URL to the system. Returns False if nothing handled it."""
        pass

    def read_battery(self) -> Optional[BatteryStatus]:
        """Read battery state through psutil. None when there is no battery."""
        try:
            battery = psutil.sensors_battery()
        except (AttributeError, NotImplementedError, OSError) as e:
            logger.debug(f"Battery information unavailable: {e}")
            return None

        if battery is None:
            return None

        level = int(round(battery.percent))
        if battery.power_plugged is None:
            status = PowerStatus.UNKNOWN
        elif battery.power_plugged:
            status = PowerStatus.FULL if level >= 100 else PowerStatus.CHARGING
        else:
            status = PowerStatus.DISCHARGING

        return BatteryStatus(level=level, status=status)


class DarwinPlatform(HostPlatform):
    """Platform implementation for Apple hosts, backed by sysctl."""

    def __init__(self, config: Optional[PlatformConfig] = None):
        self._config = config or PlatformConfig()

    def get_raw_hardware_identifier(self) -> str:
        return get_system_property(HW_MACHINE)

    def is_gyroscope_supported(self) -> bool:
        return self._config.gyroscope_supported

    def get_system_version(self) -> str:
        return plat.mac_ver()[0] or plat.release()

    def get_device_id(self) -> Optional[str]:
        return None

    def get_display_metrics(self) -> Optional[Display]:
        return None

    def read_acceleration(self) -> Vector3:
        raise UnsupportedOperationError("Accelerometer.read")

    def read_rotation_rate(self) -> Vector3:
        raise UnsupportedOperationError("Gyroscope.read")

    def open_url(self, url: str) -> bool:
        try:
            result = subprocess.run(
                ["open", url],
                capture_output=True,
                timeout=5
            )
        except (OSError, subprocess.TimeoutExpired) as e:
            raise PlatformError("open_url", str(e)) from e
        return result.returncode == 0


class SimulatedPlatform(HostPlatform):
    """
    Platform implementation driven entirely by configuration.

    Used off-device and in development. The accelerometer rests at
    standard gravity and the gyroscope reports no rotation. Opened URLs
    are recorded instead of launched.
    """

    def __init__(self, config: Optional[PlatformConfig] = None):
        self._config = config or PlatformConfig()
        self.opened_urls: List[str] = []

    def get_raw_hardware_identifier(self) -> str:
        return self._config.hardware_identifier

    def is_gyroscope_supported(self) -> bool:
        return self._config.gyroscope_supported

    def get_system_version(self) -> str:
        return self._config.firmware_version or plat.release()

    def get_device_id(self) -> Optional[str]:
        return self._config.device_id

    def get_display_metrics(self) -> Optional[Display]:
        display = self._config.display
        if display is None:
            return None
        return Display(
            width=display.width,
            height=display.height,
            xdpi=display.xdpi,
            ydpi=display.ydpi,
            scale=display.scale,
        )

    def read_acceleration(self) -> Vector3:
        return STANDARD_GRAVITY

    def read_rotation_rate(self) -> Vector3:
        return Vector3(0.0, 0.0, 0.0)

    def open_url(self, url: str) -> bool:
        logger.info(f"Simulated platform opening {url}")
        self.opened_urls.append(url)
        return True


def get_host_platform(config: Optional[Config] = None) -> HostPlatform:
    """Pick the host platform implementation for the configured backend."""
    platform_config = config.platform if config else PlatformConfig()
    backend = platform_config.backend

    if backend == "auto":
        backend = "darwin" if sys.platform == "darwin" else "simulated"

    if backend == "darwin":
        return DarwinPlatform(platform_config)
    if backend == "simulated":
        return SimulatedPlatform(platform_config)

    raise ValueError(f"Unknown platform backend: {backend}")
