# ==============================================
# TOPIC 1: INTROSPECTION
# ==============================================
#
# This package turns a class's declarations into the immutable
# PropertyRegistry that binding works from. It runs once per
# bound object.
#
# Modules:
# --------
# - descriptor.py     → Value types, storage paths, descriptors, registry
# - naming.py         → Property name ↔ accessor name conventions
# - type_resolver.py  → Type annotation → ValueType
# - introspector.py   → Scan a class and build the registry
#
# ==============================================

from .descriptor import (
    AccessorPair,
    CollectionType,
    CustomType,
    DirectField,
    PropertyDescriptor,
    PropertyRegistry,
    ScalarKind,
    ScalarType,
    Shape,
    ValueType,
)
from .naming import NameResolver
from .type_resolver import TypeResolver
from .introspector import SchemaIntrospector

__all__ = [
    "AccessorPair",
    "CollectionType",
    "CustomType",
    "DirectField",
    "NameResolver",
    "PropertyDescriptor",
    "PropertyRegistry",
    "ScalarKind",
    "ScalarType",
    "SchemaIntrospector",
    "Shape",
    "TypeResolver",
    "ValueType",
]
