"""
Host platform boundary.

Platform-specific queries (hardware identifier, gyroscope support,
firmware version, sensor readings, URL launching) live behind the
HostPlatform interface so the device core stays platform-agnostic.
"""

from mobilabs.platform.host import (
    DarwinPlatform,
    HostPlatform,
    SimulatedPlatform,
    get_host_platform,
)
from mobilabs.platform.sysctl import get_system_property

__all__ = [
    "DarwinPlatform",
    "HostPlatform",
    "SimulatedPlatform",
    "get_host_platform",
    "get_system_property",
]
