"""
Tests for mobilabs.mvvm.observable module.
"""

from unittest.mock import MagicMock

from mobilabs.mvvm.observable import ObservableObject


class Person(ObservableObject):
    def __init__(self):
        super().__init__()
        self._name = "Ann"

    @property
    def name(self):
        return self._name

    @name.setter
    def name(self, value):
        self.set_property("name", value)


class TestObservableObject:
    """Tests for ObservableObject class."""

    def test_notifies_on_change(self):
        """Test subscribers hear about changed values."""
        person = Person()
        callback = MagicMock()
        person.subscribe(callback)

        person.name = "Bob"

        assert person.name == "Bob"
        callback.assert_called_once_with(person, "name")

    def test_no_notification_without_change(self):
        """Test setting the same value is silent."""
        person = Person()
        callback = MagicMock()
        person.subscribe(callback)

        assert person.set_property("name", "Ann") is False
        callback.assert_not_called()

    def test_new_backing_field(self):
        """Test set_property creates missing backing fields."""
        person = Person()
        assert person.set_property("age", 30) is True
        assert person._age == 30

    def test_unsubscribe(self):
        """Test unsubscribed callbacks are not called."""
        person = Person()
        callback = MagicMock()
        person.subscribe(callback)
        person.unsubscribe(callback)

        person.name = "Bob"
        callback.assert_not_called()

    def test_callback_error(self):
        """Test a failing subscriber does not block others."""
        person = Person()
        good = MagicMock()
        person.subscribe(MagicMock(side_effect=ValueError("boom")))
        person.subscribe(good)

        person.name = "Bob"
        good.assert_called_once_with(person, "name")
