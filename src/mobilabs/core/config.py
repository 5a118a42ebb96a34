"""
Configuration management for MobiLabs.

Handles loading and access to configuration settings.
"""

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

logger = logging.getLogger(__name__)


# Default configuration paths
CONFIG_PATHS = [
    "/etc/mobilabs/config.yaml",
    os.path.expanduser("~/.config/mobilabs/config.yaml"),
    "config.yaml",
]

# Overrides the search above when set
CONFIG_ENV_VAR = "MOBILABS_CONFIG"


@dataclass
class DisplayConfig:
    """Display metrics reported by the simulated platform."""
    width: int = 750
    height: int = 1334
    xdpi: float = 326.0
    ydpi: float = 326.0
    scale: float = 2.0


@dataclass
class PlatformConfig:
    """Host platform selection and simulated hardware values."""
    backend: str = "auto"  # 'darwin', 'simulated', 'auto'
    hardware_identifier: str = "x86_64"
    gyroscope_supported: bool = False
    firmware_version: str = ""
    device_id: Optional[str] = None
    display: Optional[DisplayConfig] = field(default_factory=DisplayConfig)


@dataclass
class SensorConfig:
    """Motion sensor sampling intervals."""
    accelerometer_interval_seconds: float = 0.1
    gyroscope_interval_seconds: float = 0.1


@dataclass
class PhoneConfig:
    """Phone dialer configuration."""
    url_scheme: str = "tel"


@dataclass
class SampleConfig:
    """Sample application defaults."""
    number_to_call: str = "+1 (855) 926-2746"
    text_to_speak: str = "Hello from MobiLabs"
    item_count: int = 10
    image_name: str = "ad16.jpg"
    timer_interval_seconds: float = 1.0


@dataclass
class LoggingConfig:
    """Logging configuration."""
    level: str = "WARNING"


@dataclass
class Config:
    """Main configuration class."""
    version: int = 1
    platform: PlatformConfig = field(default_factory=PlatformConfig)
    sensors: SensorConfig = field(default_factory=SensorConfig)
    phone: PhoneConfig = field(default_factory=PhoneConfig)
    sample: SampleConfig = field(default_factory=SampleConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Config":
        """Create Config from dictionary."""
        config = cls()

        if "version" in data:
            config.version = data["version"]

        if "platform" in data:
            platform_data = dict(data["platform"])
            display = platform_data.pop("display", {})
            config.platform = PlatformConfig(**platform_data)
            config.platform.display = DisplayConfig(**display) if display is not None else None

        if "sensors" in data:
            config.sensors = SensorConfig(**data["sensors"])

        if "phone" in data:
            config.phone = PhoneConfig(**data["phone"])

        if "sample" in data:
            config.sample = SampleConfig(**data["sample"])

        if "logging" in data:
            config.logging = LoggingConfig(**data["logging"])

        return config

    def to_dict(self) -> Dict[str, Any]:
        """Convert Config to dictionary."""
        display = self.platform.display
        return {
            "version": self.version,
            "platform": {
                "backend": self.platform.backend,
                "hardware_identifier": self.platform.hardware_identifier,
                "gyroscope_supported": self.platform.gyroscope_supported,
                "firmware_version": self.platform.firmware_version,
                "device_id": self.platform.device_id,
                "display": None if display is None else {
                    "width": display.width,
                    "height": display.height,
                    "xdpi": display.xdpi,
                    "ydpi": display.ydpi,
                    "scale": display.scale,
                },
            },
            "sensors": {
                "accelerometer_interval_seconds": self.sensors.accelerometer_interval_seconds,
                "gyroscope_interval_seconds": self.sensors.gyroscope_interval_seconds,
            },
            "phone": {
                "url_scheme": self.phone.url_scheme,
            },
            "sample": {
                "number_to_call": self.sample.number_to_call,
                "text_to_speak": self.sample.text_to_speak,
                "item_count": self.sample.item_count,
                "image_name": self.sample.image_name,
                "timer_interval_seconds": self.sample.timer_interval_seconds,
            },
            "logging": {
                "level": self.logging.level,
            },
        }

    def save(self, path: Optional[str] = None):
        """Save configuration to file."""
        if path is None:
            path = CONFIG_PATHS[0]

        Path(path).parent.mkdir(parents=True, exist_ok=True)

        with open(path, "w") as f:
            yaml.dump(self.to_dict(), f, default_flow_style=False)


def load_config(path: Optional[str] = None) -> Config:
    """
    Load configuration from file.

    Args:
        path: Path to config file. If None, uses $MOBILABS_CONFIG or
            searches default locations.

    Returns:
        Config object with loaded or default settings.
    """
    if path is None:
        path = os.environ.get(CONFIG_ENV_VAR)

    if path is not None:
        paths_to_try = [path]
    else:
        paths_to_try = CONFIG_PATHS

    for config_path in paths_to_try:
        if os.path.exists(config_path):
            try:
                with open(config_path) as f:
                    data = yaml.safe_load(f)
                    if data:
                        return Config.from_dict(data)
            except (OSError, yaml.YAMLError, TypeError) as e:
                logger.warning(f"Failed to load config from {config_path}: {e}")

    return Config()

