"""
Pytest configuration and shared fixtures for MobiLabs tests.
"""

import os
import sys
import tempfile
from pathlib import Path
from typing import Generator
from unittest.mock import MagicMock

import pytest

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from mobilabs.core.config import PlatformConfig
from mobilabs.device.capabilities import BatteryStatus, PowerStatus, Vector3
from mobilabs.platform.host import HostPlatform, SimulatedPlatform


# ============================================================================
# Temporary Directory Fixtures
# ============================================================================

@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Create a temporary directory for test files."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def temp_config_file(temp_dir: Path) -> Path:
    """Create a temporary config file."""
    config_path = temp_dir / "config.yaml"
    config_path.write_text("""
version: 1
platform:
  backend: simulated
  hardware_identifier: iPhone6,1
  gyroscope_supported: true
  firmware_version: "7.1"
  device_id: test-device-001
sensors:
  accelerometer_interval_seconds: 0.05
phone:
  url_scheme: tel
""")
    return config_path


# ============================================================================
# Mock Platform Fixtures
# ============================================================================

@pytest.fixture
def mock_platform():
    """Mock host platform reporting an iPhone 6s with a gyroscope."""
    platform = MagicMock(spec=HostPlatform)
    platform.get_raw_hardware_identifier.return_value = "iPhone8,1"
    platform.is_gyroscope_supported.return_value = True
    platform.get_system_version.return_value = "9.3"
    platform.get_device_id.return_value = None
    platform.get_display_metrics.return_value = None
    platform.read_acceleration.return_value = Vector3(0.0, 0.0, -1.0)
    platform.read_rotation_rate.return_value = Vector3(0.0, 0.0, 0.0)
    platform.read_battery.return_value = BatteryStatus(level=80, status=PowerStatus.DISCHARGING)
    platform.open_url.return_value = True
    return platform


@pytest.fixture
def simulated_platform():
    """Simulated platform for an iPod touch without a gyroscope."""
    return SimulatedPlatform(PlatformConfig(
        backend="simulated",
        hardware_identifier="iPod5,1",
        gyroscope_supported=False,
        firmware_version="8.0",
    ))


# ============================================================================
# Configuration Fixtures
# ============================================================================

@pytest.fixture
def sample_config():
    """Return a sample configuration dictionary."""
    return {
        "version": 1,
        "platform": {
            "backend": "simulated",
            "hardware_identifier": "iPad4,1",
            "gyroscope_supported": True,
            "firmware_version": "8.1",
            "device_id": "ipad-air-001",
            "display": {
                "width": 1536,
                "height": 2048,
                "xdpi": 264.0,
                "ydpi": 264.0,
                "scale": 2.0,
            },
        },
        "sensors": {
            "accelerometer_interval_seconds": 0.02,
            "gyroscope_interval_seconds": 0.05,
        },
        "phone": {
            "url_scheme": "telprompt",
        },
        "sample": {
            "number_to_call": "555-0100",
            "text_to_speak": "Testing",
            "item_count": 3,
        },
        "logging": {
            "level": "DEBUG",
        },
    }


# ============================================================================
# Clean Environment Fixture
# ============================================================================

@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    """Ensure clean environment for each test."""
    for key in list(os.environ.keys()):
        if key.startswith("MOBILABS_"):
            monkeypatch.delenv(key, raising=False)
