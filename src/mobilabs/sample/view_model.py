"""
Main view model of the sample application.
"""

import logging
import threading
from typing import List, Optional

from mobilabs.core.config import SampleConfig
from mobilabs.device.capabilities import PhoneService, TextToSpeechService
from mobilabs.device.models import Device
from mobilabs.mvvm.command import Command, ParameterCommand
from mobilabs.mvvm.observable import ObservableObject

logger = logging.getLogger(__name__)

TIMER_MESSAGE = "This text was updated using the Device Timer"


class MainViewModel(ObservableObject):
    """Exposes device details, the device timer and the call, search and speak commands."""

    def __init__(
        self,
        device: Device,
        tts: Optional[TextToSpeechService] = None,
        config: Optional[SampleConfig] = None,
    ):
        super().__init__()
        config = config or SampleConfig()
        self._device = device
        self._tts = tts
        self._number_to_call = config.number_to_call
        self._text_to_speak = config.text_to_speak
        self._device_timer_info = ""
        self._device_ui_thread_info = ""
        self._items: List[str] = [f"item {i}" for i in range(config.item_count)]
        self._images: List[str] = [config.image_name] * config.item_count
        self._timer_interval = config.timer_interval_seconds
        self._timer_lock = threading.Lock()
        self._timer: Optional[threading.Timer] = None
        self.search_results: List[str] = []

        self.call_command = Command(self._call, self._can_call)
        self.speak_command = Command(self._speak, lambda: self._tts is not None)
        self.search_command = ParameterCommand(self._search, lambda text: bool(text))

    @property
    def device(self) -> Device:
        return self._device

    @property
    def device_manufacturer(self) -> str:
        return f"Device was manufactured by {self._device.manufacturer}"

    @property
    def device_name(self) -> str:
        return f"Device is called {self._device.name}"

    @property
    def number_to_call(self) -> str:
        return self._number_to_call

    @number_to_call.setter
    def number_to_call(self, value: str) -> None:
        if self.set_property("number_to_call", value):
            self.call_command.raise_can_execute_changed()

    @property
    def text_to_speak(self) -> str:
        return self._text_to_speak

    @text_to_speak.setter
    def text_to_speak(self, value: str) -> None:
        self.set_property("text_to_speak", value)

    @property
    def device_timer_info(self) -> str:
        return self._device_timer_info

    @device_timer_info.setter
    def device_timer_info(self, value: str) -> None:
        self.set_property("device_timer_info", value)

    @property
    def device_ui_thread_info(self) -> str:
        return self._device_ui_thread_info

    @device_ui_thread_info.setter
    def device_ui_thread_info(self, value: str) -> None:
        self.set_property("device_ui_thread_info", value)

    @property
    def items(self) -> List[str]:
        return self._items

    @items.setter
    def items(self, value: List[str]) -> None:
        self.set_property("items", value)

    @property
    def images(self) -> List[str]:
        return self._images

    @images.setter
    def images(self, value: List[str]) -> None:
        self.set_property("images", value)

    @property
    def is_timer_running(self) -> bool:
        with self._timer_lock:
            return self._timer is not None

    def start_timer(self, interval: Optional[float] = None) -> None:
        """
        Start a repeating timer that updates device_timer_info.

        The first tick fires after one interval. Starting a running timer
        is a no-op.
        """
        with self._timer_lock:
            if self._timer is not None:
                return
            if interval is not None:
                self._timer_interval = max(0.001, interval)
            self._schedule()
        logger.debug(f"Device timer started: interval={self._timer_interval}s")

    def stop_timer(self) -> None:
        """Cancel the timer. Safe to call when not running."""
        with self._timer_lock:
            timer = self._timer
            self._timer = None
        if timer is not None:
            timer.cancel()
            logger.debug("Device timer stopped")

    def _schedule(self) -> None:
        timer = threading.Timer(self._timer_interval, self._tick)
        timer.daemon = True
        self._timer = timer
        timer.start()

    def _tick(self) -> None:
        with self._timer_lock:
            if self._timer is not threading.current_thread():
                return
            self._schedule()
        self.device_timer_info = TIMER_MESSAGE

    def _can_call(self) -> bool:
        if not self._device.can_dial or not self._number_to_call:
            return False
        return bool(PhoneService.normalize_number(self._number_to_call))

    def _call(self) -> None:
        self._device.phone_service.dial(self._number_to_call)

    def _speak(self) -> None:
        self._tts.speak(self._text_to_speak)

    def _search(self, text: str) -> None:
        self.search_results = [item for item in self._items if text in item]
        logger.debug(f"Search {text!r}: {len(self.search_results)} results")
        self.notify_property_changed("search_results")
