"""
MobiLabs sample application.

Resolves the current device and prints what it found.
"""

import argparse
import logging
import sys
from typing import List, Optional

from mobilabs.core.config import Config, load_config
from mobilabs.core.errors import MobiLabsError, UnsupportedOperationError
from mobilabs.device.cache import DeviceCache
from mobilabs.device.registry import DeviceRegistry
from mobilabs.platform.host import get_host_platform
from mobilabs.sample.view_model import MainViewModel

logger = logging.getLogger(__name__)


def build_view_model(config: Config) -> MainViewModel:
    """Resolve the device for the configured platform and wrap it."""
    registry = DeviceRegistry(get_host_platform(config), config)
    cache = DeviceCache(registry.detect)
    return MainViewModel(cache.current(), config=config.sample)


def describe(view_model: MainViewModel) -> List[str]:
    """Human-readable lines describing the device."""
    device = view_model.device
    lines = [
        view_model.device_name,
        view_model.device_manufacturer,
        f"Hardware version: {device.hardware_version}",
        f"Firmware version: {device.firmware_version}",
    ]

    try:
        lines.append(f"Id: {device.id}")
    except UnsupportedOperationError as e:
        lines.append(f"Id: unavailable ({e})")

    if device.battery is not None:
        try:
            battery = device.battery
            lines.append(f"Battery: {battery.level}% ({battery.charging_state.value})")
        except UnsupportedOperationError:
            lines.append("Battery: unavailable")

    lines.append(f"Gyroscope: {'yes' if device.has_gyroscope else 'no'}")
    lines.append(f"Phone: {'yes' if device.can_dial else 'no'}")

    if device.display is not None:
        display = device.display
        lines.append(
            f"Display: {display.width}x{display.height} @ {display.xdpi:g} dpi"
        )

    return lines


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    parser = argparse.ArgumentParser(description="MobiLabs sample application")
    parser.add_argument(
        "-c", "--config",
        help="Path to configuration file",
        default=None
    )
    parser.add_argument(
        "--dial",
        help="Number to dial on phone devices",
        default=None
    )
    parser.add_argument(
        "-v", "--verbose",
        help="Enable verbose logging",
        action="store_true"
    )
    parser.add_argument(
        "--debug",
        help="Enable debug logging",
        action="store_true"
    )

    args = parser.parse_args(argv)
    config = load_config(args.config)

    if args.debug:
        log_level = logging.DEBUG
    elif args.verbose:
        log_level = logging.INFO
    else:
        log_level = getattr(logging, config.logging.level.upper(), logging.WARNING)
    logging.basicConfig(
        level=log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )

    try:
        view_model = build_view_model(config)
        for line in describe(view_model):
            print(line)

        if args.dial is not None:
            view_model.number_to_call = args.dial
            if not view_model.call_command.can_execute():
                print("Dialing is not available")
                return 1
            view_model.call_command.execute()
            print(f"Dialed {args.dial}")
    except (MobiLabsError, ValueError) as e:
        logger.error(f"Sample app failed: {e}")
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
