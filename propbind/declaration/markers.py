# ==============================================
# Declaration Markers
# ==============================================
#
# PURPOSE:
#   The metadata a class uses to declare "this is configuration".
#   The introspector only reads these markers; it never needs to
#   know how a class was written beyond them.
#
# USAGE:
# ------
#   from typing import Annotated
#   from propbind import Property, property_getter, property_setter, Int32
#
#   class Account:
#       id: Annotated[Int32, Property()]
#       name: Annotated[str, Property(default="anonymous")]
#       _secret: Annotated[str, Property(setter="store_secret")]
#
#       @property_getter(name="secret")
#       def reveal_secret(self) -> str: ...
#
#       def store_secret(self, value: str) -> None: ...
#
# MARKERS:
# --------
# - Property(name, default, getter, setter)   → on annotated attributes
# - @property_getter(name)                    → on zero-argument methods
# - @property_setter(name, default)           → on one-argument methods
# - REQUIRED                                  → "no default" sentinel
#
# ==============================================

from dataclasses import dataclass
from typing import Any, Callable, Optional


class _Required:
    """Sentinel type for properties without a default value."""

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "REQUIRED"

    def __bool__(self) -> bool:
        return False


REQUIRED = _Required()

# Attribute names under which method markers are stored on functions
GETTER_MARKER = "__propbind_getter__"
SETTER_MARKER = "__propbind_setter__"


@dataclass(frozen=True)
class Property:
    """
    Marks an annotated attribute as a property.

    Attributes:
        name: Key in the text format. Defaults to the attribute name
            without leading underscores.
        default: Raw string used when the key is missing. REQUIRED means
            the key must be present.
        getter: Name of a method to read the value through.
        setter: Name of a method to write the value through.
    """
    name: Optional[str] = None
    default: Any = REQUIRED
    getter: Optional[str] = None
    setter: Optional[str] = None

    def __post_init__(self):
        if self.default is not REQUIRED and not isinstance(self.default, str):
            raise TypeError(
                f"Property default must be a raw string, got {type(self.default).__name__}"
            )


@dataclass(frozen=True)
class GetterMarker:
    name: Optional[str] = None


@dataclass(frozen=True)
class SetterMarker:
    name: Optional[str] = None
    default: Any = REQUIRED


def property_getter(name: Optional[str] = None) -> Callable[[Callable], Callable]:
    """
    Mark a method as the getter of a property.

    Args:
        name: Property name. If omitted it is derived from the method name
            by stripping a "get" prefix.
    """
    def decorator(func: Callable) -> Callable:
        setattr(func, GETTER_MARKER, GetterMarker(name=name))
        return func
    return decorator


def property_setter(
    name: Optional[str] = None,
    default: Any = REQUIRED,
) -> Callable[[Callable], Callable]:
    """
    Mark a method as the setter of a property.

    Args:
        name: Property name. If omitted it is derived from the method name
            by stripping a "set" prefix.
        default: Raw string applied when the key is missing.
    """
    if default is not REQUIRED and not isinstance(default, str):
        raise TypeError(
            f"Setter default must be a raw string, got {type(default).__name__}"
        )

    def decorator(func: Callable) -> Callable:
        setattr(func, SETTER_MARKER, SetterMarker(name=name, default=default))
        return func
    return decorator
