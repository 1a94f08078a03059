# ==============================================
# NameResolver
# ==============================================
#
# PURPOSE:
#   Translate between property names and accessor method names
#   so a declaration only has to spell a name once.
#
# WHY THIS CLASS EXISTS:
#   A property can be reached through methods written in either
#   Python or camelCase style:
#     - "set_timeout" / "get_timeout"   → timeout
#     - "setTimeout"  / "getTimeout"    → timeout
#   Both directions are needed: decorated methods need a property name,
#   and fields without explicit accessors need candidate method names.
#
# CLASS: NameResolver
# -------------------
#   Stateless utility class.
#
#   Methods:
#   --------
#   - property_name_from_method(prefix, method_name) -> str
#       Strip a "set"/"get" prefix. Malformed names are returned unchanged.
#
#   - property_name_from_attribute(attribute, owners=()) -> str
#       Drop leading underscores (Python privacy is not part of the name).
#
#   - accessor_candidates(prefix, property_name) -> list[str]
#       Conventional method names to try, in order.
#
#   - is_public(name) -> bool
#
# RULES:
# ------
#   1. set_x_y      → x_y
#   2. setXY        → xY     (first remaining character lower-cased)
#   3. settle       → settle (no separator / capital after prefix: malformed)
#   4. _private     → private
#   5. _Cls__secret → secret (undo name mangling for the declaring class)
#
# ==============================================

import re
from typing import Iterable, List


class NameResolver:
    """
    Converts between property names and accessor method names.
    """

    _CAMEL_PREFIX = re.compile(r'^(get|set)([A-Z])(.*)$')
    _SNAKE_PREFIX = re.compile(r'^(get|set)_([A-Za-z0-9_]+)$')

    @classmethod
    def property_name_from_method(cls, prefix: str, method_name: str) -> str:
        """
        Guess the property name behind an accessor method.

        Args:
            prefix: "get" or "set"
            method_name: Name of the decorated method

        Returns:
            The property name, or the method name itself if it does not
            follow either convention for this prefix
        """
        match = cls._SNAKE_PREFIX.match(method_name)
        if match and match.group(1) == prefix:
            return match.group(2)

        match = cls._CAMEL_PREFIX.match(method_name)
        if match and match.group(1) == prefix:
            return match.group(2).lower() + match.group(3)

        # "Malformed" name
        return method_name

    @staticmethod
    def property_name_from_attribute(attribute: str, owners: Iterable[str] = ()) -> str:
        """
        Derive a property name from a declared attribute.

        Args:
            attribute: Attribute name, possibly with leading underscores
            owners: Names of the classes that may have declared it. A
                name-mangled "_Owner__secret" is read back as "__secret".

        Returns:
            The attribute name without leading underscores
        """
        for owner in owners:
            mangled_prefix = f"_{owner.lstrip('_')}__"
            if owner.lstrip('_') and attribute.startswith(mangled_prefix):
                attribute = attribute[len(mangled_prefix) - 2:]
                break
        stripped = attribute.lstrip('_')
        return stripped or attribute

    @staticmethod
    def accessor_candidates(prefix: str, property_name: str) -> List[str]:
        """
        Conventional accessor names for a property, most Pythonic first.

        Args:
            prefix: "get" or "set"
            property_name: The property name

        Returns:
            Method names to look up, e.g. ["set_timeout", "setTimeout"]
        """
        candidates = [f"{prefix}_{property_name}"]
        if property_name:
            camel = prefix + property_name[0].upper() + property_name[1:]
            if camel not in candidates:
                candidates.append(camel)
        return candidates

    @staticmethod
    def is_public(name: str) -> bool:
        return not name.startswith('_')
