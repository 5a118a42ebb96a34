"""
Tests for mobilabs.mvvm.command module.
"""

from unittest.mock import MagicMock

from mobilabs.mvvm.command import Command, ParameterCommand


class TestCommand:
    """Tests for zero-argument Command."""

    def test_execute_enabled(self):
        """Test the action runs when enabled."""
        action = MagicMock()
        command = Command(action, lambda: True)
        command.execute()
        action.assert_called_once_with()

    def test_execute_disabled_is_noop(self):
        """Test a disabled command does nothing and does not raise."""
        action = MagicMock()
        command = Command(action, lambda: False)
        command.execute()
        action.assert_not_called()

    def test_no_predicate(self):
        """Test a command without predicate is always enabled."""
        action = MagicMock()
        command = Command(action)
        assert command.can_execute() is True
        command.execute("ignored")
        action.assert_called_once_with()

    def test_predicate_reevaluated(self):
        """Test can_execute is never cached."""
        state = {"enabled": False}
        predicate = MagicMock(side_effect=lambda: state["enabled"])
        command = Command(MagicMock(), predicate)

        assert command.can_execute() is False
        state["enabled"] = True
        assert command.can_execute() is True
        assert predicate.call_count == 2

    def test_truthy_predicate_coerced(self):
        """Test predicate results are returned as bool."""
        command = Command(MagicMock(), lambda: "yes")
        assert command.can_execute() is True


class TestParameterCommand:
    """Tests for one-argument ParameterCommand."""

    def test_execute_with_parameter(self):
        """Test the parameter reaches the action and predicate."""
        action = MagicMock()
        predicate = MagicMock(return_value=True)
        command = ParameterCommand(action, predicate)

        command.execute("query")

        predicate.assert_called_once_with("query")
        action.assert_called_once_with("query")

    def test_predicate_blocks(self):
        """Test the predicate is evaluated per parameter."""
        action = MagicMock()
        command = ParameterCommand(action, lambda text: bool(text))

        command.execute("")
        command.execute(None)
        action.assert_not_called()

        command.execute("item")
        action.assert_called_once_with("item")


class TestCanExecuteChanged:
    """Tests for can_execute_changed notifications."""

    def test_raise(self):
        """Test listeners are called with the command."""
        command = Command(MagicMock())
        listener = MagicMock()
        command.add_can_execute_changed(listener)
        command.add_can_execute_changed(listener)

        command.raise_can_execute_changed()
        listener.assert_called_once_with(command)

    def test_remove(self):
        """Test removed listeners are not called."""
        command = Command(MagicMock())
        listener = MagicMock()
        command.add_can_execute_changed(listener)
        command.remove_can_execute_changed(listener)

        command.raise_can_execute_changed()
        listener.assert_not_called()

    def test_listener_error(self):
        """Test a failing listener does not block others."""
        command = Command(MagicMock())
        good = MagicMock()
        command.add_can_execute_changed(MagicMock(side_effect=RuntimeError("boom")))
        command.add_can_execute_changed(good)

        command.raise_can_execute_changed()
        good.assert_called_once_with(command)
