# ==============================================
# Descriptor (Data Classes)
# ==============================================
#
# PURPOSE:
#   Data classes that represent the OUTPUT of introspection:
#   the resolved type of a property, where its value lives,
#   and the immutable registry holding one descriptor per property.
#
# WHY THIS FILE EXISTS:
#   Separating data classes from logic keeps the introspector clean.
#   These classes are also used by Topic 2 (Conversion) to dispatch
#   on a value type, and by Topic 3 (Binding) to read and write values.
#
# ENUMS:
# ------
# - ScalarKind(Enum): BOOL, INT8, INT16, INT32, INT64, FLOAT32, FLOAT64, STRING
# - Shape(Enum): ARRAY, SET, ORDERED_LIST
#
# CLASSES:
# --------
# - ScalarType / CollectionType / CustomType (frozen dataclasses)
#     The tagged union of value types. ValueType is their Union alias.
#
# - DirectField / AccessorPair (frozen dataclasses)
#     The storage path of a property. Both expose:
#       - readable / writable  → which directions are possible
#       - read(obj) / write(obj, value)
#
# - PropertyDescriptor (frozen dataclass)
#     name, value_type, storage, default
#
# - PropertyRegistry
#     Read-only mapping of property name → PropertyDescriptor.
#
# ==============================================

from enum import Enum
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Callable, Dict, Iterator, Mapping, Optional, Union


class ScalarKind(Enum):
    """
    Primitive kinds supported natively by the conversion engine.

    Integer kinds carry a bit width so parsed values can be range checked.
    """
    BOOL = "bool"
    INT8 = "int8"
    INT16 = "int16"
    INT32 = "int32"
    INT64 = "int64"
    FLOAT32 = "float32"
    FLOAT64 = "float64"
    STRING = "string"

    @property
    def bits(self) -> Optional[int]:
        return _INT_BITS.get(self)

    @property
    def is_integer(self) -> bool:
        return self in _INT_BITS

    @property
    def is_float(self) -> bool:
        return self in (ScalarKind.FLOAT32, ScalarKind.FLOAT64)


_INT_BITS = {
    ScalarKind.INT8: 8,
    ScalarKind.INT16: 16,
    ScalarKind.INT32: 32,
    ScalarKind.INT64: 64,
}


class Shape(Enum):
    """
    Container kind of a collection property.

    - ARRAY: fixed-size ordered sequence (tuple)
    - SET: unordered, deduplicated (set)
    - ORDERED_LIST: ordered, keeps duplicates (list)
    """
    ARRAY = "array"
    SET = "set"
    ORDERED_LIST = "list"


@dataclass(frozen=True)
class ScalarType:
    kind: ScalarKind

    def __str__(self) -> str:
        return self.kind.value


@dataclass(frozen=True)
class CollectionType:
    shape: Shape
    element_kind: ScalarKind

    def __str__(self) -> str:
        return f"{self.shape.value}<{self.element_kind.value}>"


@dataclass(frozen=True)
class CustomType:
    """A non-builtin type converted by a codec registered on the converter."""
    py_type: type

    def __str__(self) -> str:
        return self.py_type.__qualname__


ValueType = Union[ScalarType, CollectionType, CustomType]


# ======================================
# Storage paths
# ======================================
@dataclass(frozen=True)
class DirectField:
    """Value lives in an attribute of the bound object."""
    attribute: str

    @property
    def readable(self) -> bool:
        return True

    @property
    def writable(self) -> bool:
        return True

    def read(self, obj: Any) -> Any:
        # An attribute that was declared but never assigned reads as absent
        return getattr(obj, self.attribute, None)

    def write(self, obj: Any, value: Any) -> None:
        setattr(obj, self.attribute, value)

    def describe(self) -> str:
        return f"field {self.attribute}"


@dataclass(frozen=True)
class AccessorPair:
    """
    Value is reached through bound accessor methods.

    `attribute` is the declared field, if any. It is used for the
    direction that has no accessor.
    """
    getter: Optional[Callable[[], Any]] = None
    setter: Optional[Callable[[Any], Any]] = None
    attribute: Optional[str] = None

    @property
    def readable(self) -> bool:
        return self.getter is not None or self.attribute is not None

    @property
    def writable(self) -> bool:
        return self.setter is not None or self.attribute is not None

    def read(self, obj: Any) -> Any:
        if self.getter is not None:
            return self.getter()
        return getattr(obj, self.attribute, None)

    def write(self, obj: Any, value: Any) -> None:
        if self.setter is not None:
            self.setter(value)
        else:
            setattr(obj, self.attribute, value)

    def describe(self) -> str:
        parts = []
        parts.append(f"get={self.getter.__name__}" if self.getter else "get=-")
        parts.append(f"set={self.setter.__name__}" if self.setter else "set=-")
        if self.attribute:
            parts.append(f"field={self.attribute}")
        return "accessors " + " ".join(parts)


Storage = Union[DirectField, AccessorPair]


@dataclass(frozen=True)
class PropertyDescriptor:
    """
    Resolved metadata for a single property.

    This is what the SchemaIntrospector produces and what the binder
    uses to move values between the object and the text format.
    """

    # --- Identity ---
    name: str  # Key used in the text format
    value_type: ValueType

    # --- Where the value lives ---
    storage: Storage

    # --- Default raw string (None = required) ---
    default: Optional[str] = None

    @property
    def required(self) -> bool:
        return self.default is None

    @property
    def readable(self) -> bool:
        return self.storage.readable

    @property
    def writable(self) -> bool:
        return self.storage.writable

    def to_dict(self) -> Dict[str, Any]:
        """
        Summarize the descriptor for display.

        Returns:
            A JSON-serializable dictionary representation
        """
        return {
            "name": self.name,
            "type": str(self.value_type),
            "storage": self.storage.describe(),
            "default": self.default,
            "required": self.required,
        }


class PropertyRegistry(Mapping[str, PropertyDescriptor]):
    """
    Immutable mapping of property name to descriptor for one bound object.

    Built once by the SchemaIntrospector; re-binding requires a new registry.
    """

    def __init__(self, descriptors: Mapping[str, PropertyDescriptor]):
        self._descriptors = MappingProxyType(dict(descriptors))

    def __getitem__(self, name: str) -> PropertyDescriptor:
        return self._descriptors[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._descriptors)

    def __len__(self) -> int:
        return len(self._descriptors)

    def __repr__(self) -> str:
        return f"PropertyRegistry({list(self._descriptors)!r})"

    def writable(self) -> Iterator[PropertyDescriptor]:
        """Descriptors that apply_properties can write."""
        return (d for d in self._descriptors.values() if d.writable)

    def readable(self) -> Iterator[PropertyDescriptor]:
        """Descriptors that extract_properties can read."""
        return (d for d in self._descriptors.values() if d.readable)
