"""
Commands for UI bindings.

A command pairs an action with an enablement predicate. The predicate is
evaluated on every can_execute() and execute() call, because it usually
depends on state that changes under it (text input, device handles).
Executing a disabled command does nothing.
"""

import logging
from abc import ABC, abstractmethod
from typing import Any, Callable, List, Optional

logger = logging.getLogger(__name__)


class CommandBase(ABC):
    """Abstract command interface."""

    def __init__(self):
        self._can_execute_changed: List[Callable[["CommandBase"], None]] = []

    @abstractmethod
    def can_execute(self, parameter: Any = None) -> bool:
        pass

    @abstractmethod
    def _invoke(self, parameter: Any) -> None:
        pass

    def execute(self, parameter: Any = None) -> None:
        """Run the action if the command is currently enabled."""
        if not self.can_execute(parameter):
            logger.debug(f"Skipping disabled command {self!r}")
            return
        self._invoke(parameter)

    def add_can_execute_changed(self, callback: Callable[["CommandBase"], None]) -> None:
        if callback not in self._can_execute_changed:
            self._can_execute_changed.append(callback)

    def remove_can_execute_changed(self, callback: Callable[["CommandBase"], None]) -> None:
        if callback in self._can_execute_changed:
            self._can_execute_changed.remove(callback)

    def raise_can_execute_changed(self) -> None:
        """Tell bindings to query can_execute() again."""
        for callback in list(self._can_execute_changed):
            try:
                callback(self)
            except Exception as e:
                logger.error(f"can_execute_changed callback error: {e}")


class Command(CommandBase):
    """Command around a zero-argument action. The parameter is ignored."""

    def __init__(
        self,
        execute: Callable[[], None],
        can_execute: Optional[Callable[[], bool]] = None,
    ):
        super().__init__()
        self._execute = execute
        self._can_execute = can_execute

    def can_execute(self, parameter: Any = None) -> bool:
        if self._can_execute is None:
            return True
        return bool(self._can_execute())

    def _invoke(self, parameter: Any) -> None:
        self._execute()


class ParameterCommand(CommandBase):
    """Command around a one-argument action."""

    def __init__(
        self,
        execute: Callable[[Any], None],
        can_execute: Optional[Callable[[Any], bool]] = None,
    ):
        super().__init__()
        self._execute = execute
        self._can_execute = can_execute

    def can_execute(self, parameter: Any = None) -> bool:
        if self._can_execute is None:
            return True
        return bool(self._can_execute(parameter))

    def _invoke(self, parameter: Any) -> None:
        self._execute(parameter)
