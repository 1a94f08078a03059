# ==============================================
# PropertiesBinder
# ==============================================
#
# PURPOSE:
#   Move values between a bound object and a flat
#   {key: raw string} mapping, in both directions.
#
# WHY THIS CLASS EXISTS:
#   It is the one object application code talks to. It builds the
#   registry once on construction (Topic 1) and then reuses it with
#   the converter (Topic 2) on every apply/extract call.
#
# CLASS: PropertiesBinder
# -----------------------
#   Constructor:
#   ------------
#   - __init__(obj, converter=None, config=None)
#       Raises SchemaError if the object's declarations are invalid.
#
#   Methods:
#   --------
#   - apply_properties(raw: Mapping[str, str]) -> None
#       text → object. Missing keys fall back to defaults. Fails fast on
#       the first missing / unparseable / failing property; values
#       already written are not rolled back.
#
#   - extract_properties() -> dict[str, str]
#       object → text. Properties whose value is None are omitted.
#
#   - describe() -> dict[str, dict]
#       Registry summary for display.
#
# ==============================================

import logging
from typing import Any, Dict, Mapping, Optional

from ..config import BinderConfig, get_config
from ..conversion.converter import TypeConverter
from ..errors import (
    UNKNOWN_VALUE,
    ConversionError,
    FormatError,
    InvocationError,
    MissingValueError,
    ParseError,
)
from ..introspection.descriptor import AccessorPair, PropertyRegistry
from ..introspection.introspector import SchemaIntrospector

logger = logging.getLogger(__name__)


class PropertiesBinder:
    """
    Loads raw property values into an object and extracts them back.

    Example:
        binder = PropertiesBinder(account)
        binder.apply_properties({"id": "24", "name": "Douglas Adams"})
        account.id = 42
        binder.extract_properties()  # {"id": "42", "name": "Douglas Adams"}
    """

    def __init__(
        self,
        obj: Any,
        converter: Optional[TypeConverter] = None,
        config: Optional[BinderConfig] = None,
    ):
        """
        Bind an object.

        Args:
            obj: The object whose properties are loaded and stored
            converter: Converter with any custom codecs. A default one
                is created if omitted.
            config: Optional configuration. If None, loads from environment.
                When a converter is given, the converter's config applies.

        Raises:
            ValueError: If both converter and config are given and disagree
            SchemaError: If any declared property cannot be resolved
        """
        if converter is not None:
            if config is not None and config != converter.config:
                raise ValueError(
                    "config differs from converter.config; "
                    "build the TypeConverter with this config instead"
                )
        else:
            converter = TypeConverter(config or get_config())

        self._obj = obj
        self._converter = converter

        introspector = SchemaIntrospector(self._converter.type_resolver())
        self._registry = introspector.introspect(obj)

    @property
    def obj(self) -> Any:
        """The object this binder reads and manipulates."""
        return self._obj

    @property
    def registry(self) -> PropertyRegistry:
        return self._registry

    @property
    def converter(self) -> TypeConverter:
        return self._converter

    # ======================================
    # text → object
    # ======================================
    def apply_properties(self, raw: Mapping[str, str]) -> None:
        """
        Set every writable property of the bound object from `raw`.

        Args:
            raw: Mapping of property name to raw string, e.g. the output
                of propbind.formats.loads()

        Raises:
            MissingValueError: A required property is absent from `raw`
            ParseError: A raw string could not be converted
            InvocationError: A setter raised
        """
        for descriptor in self._registry.writable():
            name = descriptor.name
            raw_value = raw.get(name)
            if raw_value is None:
                raw_value = descriptor.default
                if raw_value is None:
                    raise MissingValueError(name)
                logger.debug("Property %s missing, using default '%s'", name, raw_value)

            try:
                value = self._converter.parse(descriptor.value_type, raw_value)
            except ConversionError as e:
                raise ParseError(descriptor.value_type, name, raw_value) from e

            storage = descriptor.storage
            if isinstance(storage, AccessorPair) and storage.setter is not None:
                try:
                    storage.write(self._obj, value)
                except Exception as e:
                    raise InvocationError(name, raw_value, value) from e
            else:
                storage.write(self._obj, value)

            logger.debug("Applied property %s = %r", name, value)

    # ======================================
    # object → text
    # ======================================
    def extract_properties(self) -> Dict[str, str]:
        """
        Read every readable property of the bound object as raw strings.

        Returns:
            Mapping of property name to raw string, without the
            properties whose current value is None

        Raises:
            InvocationError: A getter raised
            FormatError: A value cannot be represented in the text format
        """
        extracted: Dict[str, str] = {}

        for descriptor in self._registry.readable():
            name = descriptor.name
            storage = descriptor.storage

            if isinstance(storage, AccessorPair) and storage.getter is not None:
                try:
                    value = storage.read(self._obj)
                except Exception as e:
                    raise InvocationError(name, UNKNOWN_VALUE, None) from e
            else:
                value = storage.read(self._obj)

            if value is None:
                continue

            try:
                extracted[name] = self._converter.stringify(descriptor.value_type, value)
            except (TypeError, ValueError) as e:
                raise FormatError(name, value, str(e)) from e

        logger.debug("Extracted %d of %d properties", len(extracted), len(self._registry))
        return extracted

    def describe(self) -> Dict[str, Dict[str, Any]]:
        """Summary of the registry, keyed by property name."""
        return {name: d.to_dict() for name, d in self._registry.items()}


def bind(obj: Any, converter: Optional[TypeConverter] = None) -> PropertiesBinder:
    """Shorthand for PropertiesBinder(obj, converter)."""
    return PropertiesBinder(obj, converter=converter)
