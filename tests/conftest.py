# ==============================================
# Pytest Configuration and Fixtures
# ==============================================
#
# This file contains shared fixtures for all tests.
#
# FIXTURES:
# ---------
# - config       → BinderConfig with defaults, independent of the environment
# - converter    → TypeConverter using that config
# - holder       → SettingsHolder instance mixing every declaration style
# - binder       → PropertiesBinder bound to `holder`
# - sample_raw   → A complete raw property map for SettingsHolder
#
# ==============================================

from typing import Annotated, Optional

import pytest

from propbind import (
    BinderConfig,
    Int8,
    Int16,
    Int32,
    Int64,
    PropertiesBinder,
    Property,
    TypeConverter,
    property_getter,
)


class SettingsHolder:
    """
    Exercises every way a property can be declared:
      - public attributes with and without defaults
      - a private attribute reached through a decorated getter and a guessed setter
      - a private attribute with an explicitly named setter and a guessed getter
      - a private collection attribute with guessed accessors
    """

    test_byte: Annotated[Int8, Property(default="16")]
    test_short: Annotated[Optional[Int16], Property(default="3500")]
    test_long: Annotated[Optional[Int64], Property(default="28540939849")]
    required_string: Annotated[Optional[str], Property()]
    test_string: Annotated[Optional[str], Property()]
    _test_int: Annotated[Int32, Property()]
    _test_double: Annotated[float, Property(setter="my_set_test_double")]
    numbers: Annotated[Optional[tuple[Int32, ...]], Property(default="")]
    _emails: Annotated[Optional[set[str]], Property()]

    def __init__(self):
        self.test_byte = 0
        self.test_short = None
        self.test_long = None
        self.required_string = None
        self.test_string = None
        self._test_int = 0
        self._test_double = 0.0
        self.numbers = None
        self._emails = None

    @property_getter(name="test_int")
    def my_get_test_int(self) -> Int32:
        return self._test_int

    def set_test_int(self, value: Int32) -> None:
        self._test_int = value

    def my_set_test_double(self, value: float) -> None:
        self._test_double = value

    def get_test_double(self) -> float:
        return self._test_double

    def get_emails(self) -> Optional[set[str]]:
        return self._emails

    def set_emails(self, value: set[str]) -> None:
        self._emails = value


@pytest.fixture
def config():
    """Default configuration, not read from the environment."""
    return BinderConfig()


@pytest.fixture
def converter(config):
    return TypeConverter(config)


@pytest.fixture
def holder():
    return SettingsHolder()


@pytest.fixture
def binder(holder, converter):
    return PropertiesBinder(holder, converter=converter)


@pytest.fixture
def sample_raw():
    """Raw property map with every required key present."""
    return {
        "test_string": "This is a test",
        "test_int": "42",
        "emails": "test@test.com,dude@test.com,fake@blah.org",
        "test_double": "432.234",
        "required_string": "This string is *required*",
    }
