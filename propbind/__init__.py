# ==============================================
# propbind: bind key=value properties to objects
# ==============================================
#
# Package Structure (4 Topics + CLI):
#
# propbind/
# ├── declaration/    # Markers a class declares its properties with
# ├── introspection/  # Topic 1: Build the immutable property registry
# ├── conversion/     # Topic 2: Raw string ↔ typed value
# ├── binding/        # Topic 3: apply_properties / extract_properties
# ├── formats/        # Topic 4: key=value text reader / writer
# ├── errors.py       # Error taxonomy
# ├── config.py       # Configuration management
# └── cli.py          # Command line entry point
#
# ==============================================

from .declaration import (
    REQUIRED,
    Float32,
    Float64,
    Int8,
    Int16,
    Int32,
    Int64,
    Property,
    property_getter,
    property_setter,
)
from .introspection import (
    CollectionType,
    CustomType,
    PropertyDescriptor,
    PropertyRegistry,
    ScalarKind,
    ScalarType,
    SchemaIntrospector,
    Shape,
)
from .conversion import Codec, TypeConverter
from .binding import PropertiesBinder, bind
from .config import BinderConfig, get_config
from .errors import (
    ConversionError,
    FormatError,
    InvocationError,
    MissingValueError,
    ParseError,
    PropertyError,
    SchemaError,
)

__version__ = "0.1.0"

__all__ = [
    "REQUIRED",
    "Property",
    "property_getter",
    "property_setter",
    "Int8",
    "Int16",
    "Int32",
    "Int64",
    "Float32",
    "Float64",
    "CollectionType",
    "CustomType",
    "PropertyDescriptor",
    "PropertyRegistry",
    "ScalarKind",
    "ScalarType",
    "SchemaIntrospector",
    "Shape",
    "Codec",
    "TypeConverter",
    "PropertiesBinder",
    "bind",
    "BinderConfig",
    "get_config",
    "ConversionError",
    "FormatError",
    "InvocationError",
    "MissingValueError",
    "ParseError",
    "PropertyError",
    "SchemaError",
]
