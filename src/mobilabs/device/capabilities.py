"""
Device capability objects.

Each capability is an independently owned handle attached to a Device.
A device without the hardware simply has no handle for it.
"""

import logging
import re
import threading
import time
from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import Callable, List, Optional, TYPE_CHECKING

from mobilabs.core.errors import PlatformError, UnsupportedOperationError

if TYPE_CHECKING:
    from mobilabs.platform.host import HostPlatform

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Vector3:
    """A three-axis sensor reading."""
    x: float
    y: float
    z: float


class PowerStatus(Enum):
    """Battery charging states."""
    CHARGING = "charging"
    DISCHARGING = "discharging"
    FULL = "full"
    UNKNOWN = "unknown"


@dataclass(frozen=True)
class BatteryStatus:
    """Battery state reported by the platform."""
    level: int
    status: PowerStatus = PowerStatus.UNKNOWN


@dataclass(frozen=True)
class Display:
    """Display metrics."""
    width: int
    height: int
    xdpi: float
    ydpi: float
    scale: float = 1.0

    @property
    def width_inches(self) -> float:
        return self.width / self.xdpi if self.xdpi else 0.0

    @property
    def height_inches(self) -> float:
        return self.height / self.ydpi if self.ydpi else 0.0


class Battery:
    """Battery charge level and charging state."""

    def __init__(self, platform: "HostPlatform"):
        self._platform = platform

    def _read(self, operation: str) -> BatteryStatus:
        status = self._platform.read_battery()
        if status is None:
            raise UnsupportedOperationError(operation)
        return status

    @property
    def level(self) -> int:
        """Charge level, 0-100."""
        return self._read("Battery.level").level

    @property
    def charging_state(self) -> PowerStatus:
        return self._read("Battery.charging_state").status

    @property
    def is_charging(self) -> bool:
        return self._read("Battery.is_charging").status in (
            PowerStatus.CHARGING,
            PowerStatus.FULL,
        )


ReadingCallback = Callable[[Vector3], None]


class MotionSensor:
    """
    Polled motion sensor.

    start() takes one reading on the calling thread, so an unsupported
    sensor raises there, then samples on a daemon thread and delivers
    readings to subscribers. start() while running and stop() while
    stopped are no-ops.
    """

    name = "MotionSensor"
    stop_timeout = 1.0

    def __init__(self, read: Callable[[], Vector3], interval: float = 0.1):
        self._read = read
        self._interval = interval
        self._lock = threading.Lock()
        self._callbacks: List[ReadingCallback] = []
        self._stop_event: Optional[threading.Event] = None
        self._thread: Optional[threading.Thread] = None
        self._latest: Optional[Vector3] = None

    @property
    def is_active(self) -> bool:
        with self._lock:
            return self._thread is not None

    @property
    def interval(self) -> float:
        return self._interval

    @property
    def latest(self) -> Optional[Vector3]:
        """Most recent reading, or None before the first sample."""
        return self._latest

    def subscribe(self, callback: ReadingCallback) -> None:
        with self._lock:
            if callback not in self._callbacks:
                self._callbacks.append(callback)

    def unsubscribe(self, callback: ReadingCallback) -> None:
        with self._lock:
            if callback in self._callbacks:
                self._callbacks.remove(callback)

    def start(self, interval: Optional[float] = None) -> None:
        """
        Start sampling.

        Args:
            interval: Seconds between samples. Defaults to the configured interval.

        Raises:
            UnsupportedOperationError: If the platform cannot read this sensor.
        """
        with self._lock:
            if self._thread is not None:
                return

            if interval is not None:
                self._interval = max(0.001, interval)

            self._latest = self._read()

            self._stop_event = threading.Event()
            self._thread = threading.Thread(
                target=self._sample_loop,
                args=(self._stop_event,),
                name=f"{self.name}-sampler",
                daemon=True,
            )
            self._thread.start()

        logger.debug(f"{self.name} started: interval={self._interval}s")

    def stop(self) -> None:
        """
        Stop sampling. Safe to call when never started.

        Waits up to stop_timeout seconds for the sampler to exit. A
        subscriber still running past that may deliver one more reading
        after stop() returns; a warning is logged when that happens.
        """
        with self._lock:
            thread = self._thread
            stop_event = self._stop_event
            self._thread = None
            self._stop_event = None

        if thread is None:
            return

        stop_event.set()
        if thread is not threading.current_thread():
            thread.join(timeout=self.stop_timeout)
            if thread.is_alive():
                logger.warning(
                    f"{self.name} sampler still running {self.stop_timeout}s after stop"
                )
        logger.debug(f"{self.name} stopped")

    def _sample_loop(self, stop_event: threading.Event) -> None:
        try:
            while not stop_event.is_set():
                started = time.monotonic()
                try:
                    reading = self._read()
                except Exception as e:
                    logger.error(f"{self.name} read failed, stopped sampling: {e}")
                    break

                self._latest = reading
                with self._lock:
                    callbacks = list(self._callbacks)

                for callback in callbacks:
                    try:
                        callback(reading)
                    except Exception as e:
                        logger.error(f"{self.name} callback error: {e}")

                elapsed = time.monotonic() - started
                stop_event.wait(max(0.0, self._interval - elapsed))
        finally:
            with self._lock:
                if self._stop_event is stop_event:
                    self._thread = None
                    self._stop_event = None


class Accelerometer(MotionSensor):
    """Acceleration in g along each axis."""

    name = "Accelerometer"

    def __init__(self, platform: "HostPlatform", interval: float = 0.1):
        super().__init__(platform.read_acceleration, interval)


class Gyroscope(MotionSensor):
    """Rotation rate in radians per second around each axis."""

    name = "Gyroscope"

    def __init__(self, platform: "HostPlatform", interval: float = 0.1):
        super().__init__(platform.read_rotation_rate, interval)


_DIALABLE = re.compile(r"[^0-9+*#,]")


class PhoneService:
    """Phone dialer. Callers must not dial an empty number."""

    def __init__(self, platform: "HostPlatform", url_scheme: str = "tel"):
        self._platform = platform
        self._url_scheme = url_scheme

    @staticmethod
    def normalize_number(number: str) -> str:
        """Strip everything that cannot be dialed: "+1 (855) 926-2746" -> "+18559262746"."""
        return _DIALABLE.sub("", number)

    def dial(self, number: str) -> None:
        """
        Dial a number through the platform URL handler.

        Raises:
            PlatformError: If the platform refuses the dial URL.
        """
        url = f"{self._url_scheme}:{self.normalize_number(number)}"
        logger.info(f"Dialing {url}")
        if not self._platform.open_url(url):
            raise PlatformError("dial", f"platform could not open {url}")


class TextToSpeechService(ABC):
    """Text-to-speech collaborator interface."""

    @abstractmethod
    def speak(self, text: str) -> None:
        pass


class MediaPicker(ABC):
    """Photo and video picker collaborator interface."""

    @property
    @abstractmethod
    def is_camera_available(self) -> bool:
        pass

    @abstractmethod
    def select_photo(self) -> Optional[str]:
        """Return the path of the chosen photo, or None if cancelled."""
        pass
