# ==============================================
# Tests for SchemaIntrospector
# ==============================================
#
# Covers registry construction for the shared SettingsHolder and
# every way a declaration can be rejected.
# ==============================================

from decimal import Decimal
from typing import Annotated

import pytest

from propbind import (
    Int32,
    Property,
    SchemaError,
    SchemaIntrospector,
    property_getter,
    property_setter,
)
from propbind.introspection import (
    AccessorPair,
    CollectionType,
    DirectField,
    ScalarKind,
    ScalarType,
    Shape,
)


@pytest.fixture
def introspector():
    return SchemaIntrospector()


# ==============================================
# Registry for the shared holder
# ==============================================

class TestRegistry:

    def test_property_names(self, introspector, holder):
        registry = introspector.introspect(holder)
        assert list(registry) == [
            "test_byte",
            "test_short",
            "test_long",
            "required_string",
            "test_string",
            "test_int",
            "test_double",
            "numbers",
            "emails",
        ]

    def test_direct_fields(self, introspector, holder):
        registry = introspector.introspect(holder)
        for name in ("test_byte", "test_short", "test_long", "required_string", "test_string", "numbers"):
            assert registry[name].storage == DirectField(name)

    def test_decorated_getter_and_guessed_setter(self, introspector, holder):
        storage = introspector.introspect(holder)["test_int"].storage
        assert storage == AccessorPair(
            getter=holder.my_get_test_int,
            setter=holder.set_test_int,
            attribute="_test_int",
        )

    def test_explicit_setter_and_guessed_getter(self, introspector, holder):
        storage = introspector.introspect(holder)["test_double"].storage
        assert storage.getter == holder.get_test_double
        assert storage.setter == holder.my_set_test_double

    def test_guessed_collection_accessors(self, introspector, holder):
        storage = introspector.introspect(holder)["emails"].storage
        assert storage.getter == holder.get_emails
        assert storage.setter == holder.set_emails

    def test_defaults(self, introspector, holder):
        registry = introspector.introspect(holder)
        defaults = {name: d.default for name, d in registry.items() if d.default is not None}
        assert defaults == {
            "test_byte": "16",
            "test_short": "3500",
            "test_long": "28540939849",
            "numbers": "",
        }
        assert registry["required_string"].required

    def test_value_types(self, introspector, holder):
        registry = introspector.introspect(holder)
        assert registry["test_byte"].value_type == ScalarType(ScalarKind.INT8)
        assert registry["test_int"].value_type == ScalarType(ScalarKind.INT32)
        assert registry["test_double"].value_type == ScalarType(ScalarKind.FLOAT64)
        assert registry["numbers"].value_type == CollectionType(Shape.ARRAY, ScalarKind.INT32)
        assert registry["emails"].value_type == CollectionType(Shape.SET, ScalarKind.STRING)

    def test_registry_is_read_only(self, introspector, holder):
        registry = introspector.introspect(holder)
        with pytest.raises(TypeError):
            registry["extra"] = registry["test_int"]

    def test_double_underscore_attribute(self, introspector):
        class Vault:
            __pin: Annotated[Int32, Property()]

            def set_pin(self, value: int) -> None:
                self.__pin = value

            def get_pin(self) -> int:
                return self.__pin

        registry = introspector.introspect(Vault())
        assert list(registry) == ["pin"]
        assert registry["pin"].storage.attribute == "_Vault__pin"
        assert registry["pin"].value_type == ScalarType(ScalarKind.INT64)

    def test_introspection_does_not_touch_object(self, introspector, holder):
        before = dict(vars(holder))
        introspector.introspect(holder)
        assert vars(holder) == before


# ==============================================
# Method-only declarations
# ==============================================

class TestMethodDeclarations:

    def test_setter_and_getter_without_field(self, introspector):
        class Window:
            def __init__(self):
                self._size = (0, 0)

            @property_setter(default="640x480")
            def set_size(self, value: str) -> None:
                self._size = tuple(int(v) for v in value.split("x"))

            @property_getter()
            def get_size(self) -> str:
                return "x".join(str(v) for v in self._size)

        registry = introspector.introspect(Window())
        descriptor = registry["size"]
        assert descriptor.default == "640x480"
        assert descriptor.value_type == ScalarType(ScalarKind.STRING)
        assert isinstance(descriptor.storage, AccessorPair)
        assert descriptor.storage.attribute is None

    def test_camel_case_methods(self, introspector):
        class Legacy:
            @property_getter()
            def getMaxUsers(self) -> int:
                return 3

        assert list(introspector.introspect(Legacy())) == ["maxUsers"]

    def test_getter_only_is_read_only(self, introspector):
        class Status:
            @property_getter(name="uptime")
            def report(self) -> float:
                return 1.5

        descriptor = introspector.introspect(Status())["uptime"]
        assert descriptor.readable
        assert not descriptor.writable

    def test_decorated_method_wins_over_guess(self, introspector):
        class Account:
            _id: Annotated[int, Property()]

            def get_id(self) -> int:
                return -1

            @property_getter(name="id")
            def load_id(self) -> int:
                return self._id

            def set_id(self, value: int) -> None:
                self._id = value

        account = Account()
        storage = introspector.introspect(account)["id"].storage
        assert storage.getter == account.load_id

    def test_setter_annotation_used_when_getter_unannotated(self, introspector):
        class Counter:
            _count: Annotated[str, Property()]

            def get_count(self):
                return self._count

            def set_count(self, value: Int32) -> None:
                self._count = value

        registry = introspector.introspect(Counter())
        assert registry["count"].value_type == ScalarType(ScalarKind.INT32)


# ==============================================
# Rejected declarations
# ==============================================

class TestSchemaErrors:

    def test_no_setter_for_private_field(self, introspector):
        class NoSetterDefined:
            _test_int: Annotated[int, Property()]

            def get_test_int(self) -> int:
                return self._test_int

        with pytest.raises(SchemaError, match="setter") as excinfo:
            introspector.introspect(NoSetterDefined())
        assert excinfo.value.property_name == "test_int"
        assert "four ways" in str(excinfo.value)

    def test_no_getter_for_private_field(self, introspector):
        class NoGetterDefined:
            _test_int: Annotated[int, Property()]

            def set_test_int(self, value: int) -> None:
                self._test_int = value

        with pytest.raises(SchemaError, match="getter"):
            introspector.introspect(NoGetterDefined())

    def test_private_accessors_are_not_guessed(self, introspector):
        class PrivateAccessTest:
            _test_int: Annotated[int, Property()]

            def _get_test_int(self) -> int:
                return self._test_int

            def _set_test_int(self, value: int) -> None:
                self._test_int = value

        with pytest.raises(SchemaError):
            introspector.introspect(PrivateAccessTest())

    def test_bad_getter_arity(self, introspector):
        class BadGetterTest:
            _test_int: Annotated[int, Property()]

            def get_test_int(self, superfluous: int) -> int:
                return self._test_int

            def set_test_int(self, value: int) -> None:
                self._test_int = value

        with pytest.raises(SchemaError, match="unexpected number of parameters"):
            introspector.introspect(BadGetterTest())

    def test_bad_setter_arity(self, introspector):
        class BadSetterTest:
            _test_int: Annotated[int, Property()]

            def get_test_int(self) -> int:
                return self._test_int

            def set_test_int(self, value: int, superfluous: int) -> None:
                self._test_int = value

        with pytest.raises(SchemaError, match=r"\(2\)"):
            introspector.introspect(BadSetterTest())

    def test_explicit_setter_must_exist(self, introspector):
        class Misnamed:
            level: Annotated[int, Property(setter="change_level")]

        with pytest.raises(SchemaError, match="change_level"):
            introspector.introspect(Misnamed())

    def test_explicit_getter_naming_a_property_is_rejected_unread(self, introspector):
        class Gauge:
            reads = 0
            level: Annotated[int, Property(getter="current")]

            @property
            def current(self) -> int:
                type(self).reads += 1
                return 3

        with pytest.raises(SchemaError, match="current"):
            introspector.introspect(Gauge())
        assert Gauge.reads == 0

    def test_undetermined_type(self, introspector):
        class Untyped:
            @property_getter(name="value")
            def read(self):
                return 1

        with pytest.raises(SchemaError, match="Unable to determine the type"):
            introspector.introspect(Untyped())

    def test_unsupported_type(self, introspector):
        class Money:
            amount: Annotated[Decimal, Property()]

        with pytest.raises(SchemaError, match="Unsupported type"):
            introspector.introspect(Money())

    def test_setter_only_has_no_read_path(self, introspector):
        class WriteOnly:
            @property_setter(name="password")
            def store(self, value: str) -> None:
                pass

        with pytest.raises(SchemaError, match="no way to be read"):
            introspector.introspect(WriteOnly())
