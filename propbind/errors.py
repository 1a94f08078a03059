# ==============================================
# Errors
# ==============================================
#
# PURPOSE:
#   Every failure the binding engine can surface to the caller.
#   Nothing here is retried or swallowed by the engine itself.
#
# HIERARCHY:
# ----------
# - PropertyError(Exception)        → base, carries property_name
#     - SchemaError                 → registry could not be built
#     - MissingValueError           → required property absent during apply
#     - ParseError                  → raw string could not be converted
#     - InvocationError             → getter/setter raised
#     - FormatError                 → value cannot be written back as text
#
# - ConversionError(ValueError)     → raised by the converter, which does not
#                                     know property names. The binder always
#                                     wraps it into a ParseError.
#
# ==============================================

from typing import Any, Optional


# Raw value recorded on InvocationError when a getter fails during extraction
UNKNOWN_VALUE = "-UNKNOWN-"


class PropertyError(Exception):
    """Base class for all property binding failures."""

    def __init__(self, property_name: Optional[str], message: str):
        super().__init__(message)
        self.property_name = property_name


class SchemaError(PropertyError):
    """Raised when a property cannot be resolved while building the registry."""

    @staticmethod
    def help_message(prefix: str, property_name: str) -> str:
        """
        Build the remediation text attached to accessor resolution failures.

        Args:
            prefix: "get" or "set"
            property_name: The property that could not be resolved

        Returns:
            Multi-line help text listing the ways to fix the declaration
        """
        role = f"{prefix}ter"
        return (
            "There are four ways to solve this problem:\n"
            f" 1. Create a public {role} method named '{prefix}_{property_name}'\n"
            f" 2. Name a custom {role} in the field marker, "
            f"e.g. Property({role}=\"my_{role}\")\n"
            f" 3. Decorate the desired method with @property_{role}\n"
            " 4. Declare the Property on a public attribute (no leading underscore)\n"
            " NOTE: accessors must follow these parameter conventions:\n"
            "   SETTER: def set_name(self, value) -> None\n"
            "   GETTER: def get_name(self) -> <type>\n"
        )


class MissingValueError(PropertyError):
    """Raised when a required property has neither a value nor a default."""

    def __init__(self, property_name: str):
        super().__init__(
            property_name,
            f"The required property '{property_name}' was not defined and has "
            "no default value to fall back on.",
        )


class ParseError(PropertyError):
    """Raised when the raw string of a property cannot be converted to its type."""

    def __init__(self, value_type: Any, property_name: str, raw_value: str):
        super().__init__(
            property_name,
            f"The property named '{property_name}' could not be converted from "
            f"the string '{raw_value}' to {value_type}.\n"
            "Either the string is malformed or the type has no registered codec. "
            "Register a codec on the converter, or expose the property through "
            "@property_getter/@property_setter methods of type str and do the "
            "conversion there.",
        )
        self.value_type = value_type
        self.raw_value = raw_value


class InvocationError(PropertyError):
    """Raised when a getter or setter raises while being invoked."""

    def __init__(self, property_name: str, raw_value: str, value: Any):
        super().__init__(
            property_name,
            f"Invoking the accessor of property '{property_name}' failed "
            f"(raw value: '{raw_value}').",
        )
        self.raw_value = raw_value
        self.value = value


class FormatError(PropertyError):
    """Raised when a value cannot be represented in the text format."""

    def __init__(self, property_name: str, value: Any, reason: str):
        super().__init__(
            property_name,
            f"The property named '{property_name}' cannot be written as text: {reason}",
        )
        self.value = value


class ConversionError(ValueError):
    """Raised by the converter when a raw string does not fit the target type."""

    def __init__(self, value_type: Any, raw_value: str, reason: str = ""):
        message = f"cannot convert '{raw_value}' to {value_type}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)
        self.value_type = value_type
        self.raw_value = raw_value
