# ==============================================
# TypeConverter
# ==============================================
#
# PURPOSE:
#   Convert between the raw strings of the text format and typed
#   values, for every ValueType a descriptor can carry.
#
# CLASS: TypeConverter
# --------------------
#   Holds the codecs registered by the caller for non-builtin types
#   and the separator used for collections.
#
#   Methods:
#   --------
#   - register_codec(py_type, parse, format=str) -> None
#       Teach the converter a non-builtin type. There is no implicit
#       "construct it from a string" fallback.
#
#   - parse(value_type, text) -> Any
#       Raises ConversionError with the target type and the full raw string.
#
#   - stringify(value_type, value) -> str
#       Raises ValueError when a collection element cannot be encoded.
#
#   - supported_types() -> list
#       Built-in scalar kinds plus the registered custom types.
#
# COLLECTION ENCODING:
# --------------------
#   "a,b,c"  → tuple / set / list depending on the shape
#   ""       → empty collection (not one empty element)
#   "a,,b"   → empty tokens are skipped
#   There is no escaping; an element containing the separator cannot
#   be written back and is rejected on stringify.
#
# ==============================================

import logging
from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Optional

from ..config import BinderConfig, get_config
from ..errors import ConversionError
from ..introspection.descriptor import (
    CollectionType,
    CustomType,
    ScalarKind,
    ScalarType,
    Shape,
    ValueType,
)
from ..introspection.type_resolver import TypeResolver
from .scalars import ScalarCodec

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Codec:
    """Caller-supplied parse/format pair for one non-builtin type."""
    parse: Callable[[str], Any]
    format: Callable[[Any], str] = str


class TypeConverter:
    """
    Type-keyed dispatch between raw strings and typed values.
    """

    SHAPE_CONTAINERS = {
        Shape.ARRAY: tuple,
        Shape.SET: set,
        Shape.ORDERED_LIST: list,
    }

    def __init__(self, config: Optional[BinderConfig] = None):
        """
        Initialize the converter.

        Args:
            config: Optional configuration. If None, loads from environment.
        """
        self.config = config or get_config()
        self._codecs: Dict[type, Codec] = {}

    # ======================================
    # Registration
    # ======================================
    def register_codec(
        self,
        py_type: type,
        parse: Callable[[str], Any],
        format: Callable[[Any], str] = str,
    ) -> None:
        """
        Register an explicit serializer/deserializer pair.

        Args:
            py_type: The type properties are annotated with
            parse: Builds a value from its raw string
            format: Renders a value as its raw string
        """
        if py_type in TypeResolver.SCALAR_TYPES:
            raise ValueError(f"{py_type.__name__} is a built-in scalar and cannot be overridden")
        self._codecs[py_type] = Codec(parse=parse, format=format)
        logger.debug("Registered codec for %s", py_type.__qualname__)

    def type_resolver(self) -> TypeResolver:
        """A TypeResolver that knows this converter's custom types."""
        return TypeResolver(custom_types=self._codecs)

    def supported_types(self) -> List[Any]:
        return list(ScalarKind) + list(self._codecs)

    # ======================================
    # Text → value
    # ======================================
    def parse(self, value_type: ValueType, text: str) -> Any:
        """
        Convert a raw string to a value of `value_type`.

        Args:
            value_type: Target type from a PropertyDescriptor
            text: The raw string

        Returns:
            The typed value

        Raises:
            ConversionError: If the text does not fit the type
        """
        if isinstance(value_type, ScalarType):
            try:
                return ScalarCodec.parse(value_type.kind, text)
            except ValueError as e:
                raise ConversionError(value_type, text, str(e)) from e

        if isinstance(value_type, CollectionType):
            return self._parse_collection(value_type, text)

        if isinstance(value_type, CustomType):
            codec = self._codec(value_type)
            try:
                return codec.parse(text)
            except Exception as e:
                raise ConversionError(value_type, text, str(e)) from e

        raise TypeError(f"unknown value type {value_type!r}")

    def _parse_collection(self, value_type: CollectionType, text: str) -> Any:
        container = self.SHAPE_CONTAINERS[value_type.shape]
        if text == "":
            return container()

        elements = []
        for token in text.split(self.config.separator):
            if token == "":
                continue
            try:
                elements.append(ScalarCodec.parse(value_type.element_kind, token))
            except ValueError as e:
                # Report the whole raw string, not just the offending token
                raise ConversionError(
                    value_type, text, f"element '{token}': {e}"
                ) from e
        return container(elements)

    # ======================================
    # Value → text
    # ======================================
    def stringify(self, value_type: ValueType, value: Any) -> str:
        """
        Render a value as its raw string.

        Args:
            value_type: Declared type of the property
            value: Current, non-None value

        Returns:
            The text form of the value

        Raises:
            ValueError: If a collection element cannot be encoded
        """
        if isinstance(value_type, ScalarType):
            return ScalarCodec.format(value_type.kind, value)

        if isinstance(value_type, CollectionType):
            return self._stringify_collection(value_type, value)

        if isinstance(value_type, CustomType):
            return self._codec(value_type).format(value)

        raise TypeError(f"unknown value type {value_type!r}")

    def _stringify_collection(self, value_type: CollectionType, value: Any) -> str:
        separator = self.config.separator
        parts = []
        for element in value:
            text = ScalarCodec.format(value_type.element_kind, element)
            if self.config.strict_elements:
                if separator in text:
                    raise ValueError(
                        f"element '{text}' contains the separator '{separator}'"
                    )
                if text == "":
                    raise ValueError("empty elements cannot be written back")
            parts.append(text)
        return separator.join(parts)

    def _codec(self, value_type: CustomType) -> Codec:
        try:
            return self._codecs[value_type.py_type]
        except KeyError:
            raise TypeError(f"no codec registered for {value_type}") from None
