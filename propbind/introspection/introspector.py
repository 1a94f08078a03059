# ==============================================
# SchemaIntrospector
# ==============================================
#
# PURPOSE:
#   Scan a bound object's class for declared properties and build
#   the immutable PropertyRegistry that the binder works from.
#
# WHY THIS CLASS EXISTS:
#   Properties can be declared three ways, and all three can mix:
#     - an annotated attribute:   timeout: Annotated[Int32, Property()]
#     - a decorated setter:       @property_setter() def set_timeout(self, v)
#     - a decorated getter:       @property_getter() def get_timeout(self)
#   Resolving which path reads and which path writes each property is
#   done ONCE here, so apply/extract never look up methods by name.
#
# ALGORITHM:
# ----------
#   1. Decorated setters → property name (override or stripped "set" prefix)
#   2. Decorated getters → property name (override or stripped "get" prefix)
#   3. Annotated attributes → property name (override or attribute name).
#      Missing accessors are resolved from the marker's explicit method
#      names or guessed from the property name. A private attribute with
#      no accessor for a direction is a SchemaError.
#   4. Validate accessor arity and resolve the value type:
#      getter return → setter parameter → attribute annotation.
#
#   Decorated methods always win over accessors guessed from an attribute.
#
# ==============================================

import inspect
import logging
import typing
from typing import Any, Callable, Dict, List, Optional

from ..declaration.markers import GETTER_MARKER, REQUIRED, SETTER_MARKER, Property
from ..errors import SchemaError
from .descriptor import AccessorPair, DirectField, PropertyDescriptor, PropertyRegistry, ValueType
from .naming import NameResolver
from .type_resolver import TypeResolver

logger = logging.getLogger(__name__)


class SchemaIntrospector:
    """
    Builds a PropertyRegistry for one object instance.
    """

    def __init__(self, type_resolver: Optional[TypeResolver] = None):
        """
        Initialize the introspector.

        Args:
            type_resolver: Maps annotations to value types. Pass one that
                knows the custom types registered on your converter.
        """
        self.type_resolver = type_resolver or TypeResolver()
        self.names = NameResolver()

    def introspect(self, obj: Any) -> PropertyRegistry:
        """
        Resolve every declared property of `obj`.

        Args:
            obj: The object to bind

        Returns:
            The immutable registry for this object

        Raises:
            SchemaError: If any property cannot be read, written or typed
        """
        cls = type(obj)

        setters: Dict[str, Callable] = {}
        getters: Dict[str, Callable] = {}
        defaults: Dict[str, str] = {}
        fields: Dict[str, str] = {}
        field_types: Dict[str, Any] = {}
        method_order: List[str] = []

        # --- Steps 1 & 2: decorated methods ---
        for attr_name in dir(cls):
            func = self._marked_function(cls, attr_name)
            if func is None:
                continue

            setter_marker = getattr(func, SETTER_MARKER, None)
            if setter_marker is not None:
                name = setter_marker.name or self.names.property_name_from_method("set", attr_name)
                setters[name] = getattr(obj, attr_name)
                if setter_marker.default is not REQUIRED:
                    defaults[name] = setter_marker.default
                if name not in method_order:
                    method_order.append(name)

            getter_marker = getattr(func, GETTER_MARKER, None)
            if getter_marker is not None:
                name = getter_marker.name or self.names.property_name_from_method("get", attr_name)
                getters[name] = getattr(obj, attr_name)
                if name not in method_order:
                    method_order.append(name)

        # --- Step 3: annotated attributes ---
        for attr_name, annotation, marker in self._declared_fields(cls):
            name = marker.name or self.names.property_name_from_attribute(
                attr_name, owners=[c.__name__ for c in cls.__mro__]
            )
            fields[name] = attr_name
            field_types[name] = annotation
            public = self.names.is_public(attr_name)

            if name not in setters:
                setter = self._resolve_accessor(obj, "set", name, marker.setter)
                if setter is None and not public:
                    raise SchemaError(
                        name,
                        f"Could not resolve a setter for the property named '{name}'\n"
                        + SchemaError.help_message("set", name),
                    )
                if setter is not None:
                    setters[name] = setter

            if name not in getters:
                getter = self._resolve_accessor(obj, "get", name, marker.getter)
                if getter is None and not public:
                    raise SchemaError(
                        name,
                        f"Could not resolve a getter for the property named '{name}'\n"
                        + SchemaError.help_message("get", name),
                    )
                if getter is not None:
                    getters[name] = getter

            if marker.default is not REQUIRED:
                defaults[name] = marker.default

        # --- Step 4: validate and type every property ---
        ordered = list(fields) + [n for n in method_order if n not in fields]
        descriptors: Dict[str, PropertyDescriptor] = {}
        for name in ordered:
            getter = getters.get(name)
            setter = setters.get(name)
            attribute = fields.get(name)

            self._check_arity(name, setter, 1, "setter")
            self._check_arity(name, getter, 0, "getter")

            value_type = self._resolve_type(name, getter, setter, field_types.get(name))

            if getter is None and setter is None:
                storage = DirectField(attribute)
            else:
                storage = AccessorPair(getter=getter, setter=setter, attribute=attribute)

            if not storage.readable:
                raise SchemaError(
                    name,
                    f"The property named '{name}' has a setter but no way to be read.\n"
                    + SchemaError.help_message("get", name),
                )

            descriptor = PropertyDescriptor(
                name=name,
                value_type=value_type,
                storage=storage,
                default=defaults.get(name),
            )
            descriptors[name] = descriptor
            logger.debug("Resolved property %s: %s", name, descriptor.to_dict())

        logger.debug("Built registry for %s with %d properties", cls.__qualname__, len(descriptors))
        return PropertyRegistry(descriptors)

    # ======================================
    # Helpers
    # ======================================
    @staticmethod
    def _marked_function(cls: type, attr_name: str) -> Optional[Callable]:
        member = inspect.getattr_static(cls, attr_name, None)
        func = getattr(member, "__func__", member)
        if not callable(func):
            return None
        if hasattr(func, SETTER_MARKER) or hasattr(func, GETTER_MARKER):
            return func
        return None

    @staticmethod
    def _declared_fields(cls: type):
        try:
            hints = typing.get_type_hints(cls, include_extras=True)
        except (NameError, TypeError) as e:
            raise SchemaError(
                None, f"Unable to evaluate the annotations of {cls.__qualname__}: {e}"
            ) from e

        for attr_name, annotation in hints.items():
            if typing.get_origin(annotation) is not typing.Annotated:
                continue
            markers = [m for m in typing.get_args(annotation)[1:] if isinstance(m, Property)]
            if markers:
                yield attr_name, annotation, markers[-1]

    def _resolve_accessor(
        self, obj: Any, prefix: str, name: str, explicit: Optional[str]
    ) -> Optional[Callable]:
        cls = type(obj)

        if explicit:
            member = inspect.getattr_static(obj, explicit, None)
            method = None
            if member is not None and not isinstance(member, property):
                method = getattr(obj, explicit)
            if not callable(method):
                raise SchemaError(
                    name,
                    f"The {prefix}ter '{explicit}' named for the property '{name}' "
                    f"is not a method of {cls.__qualname__}.\n"
                    + SchemaError.help_message(prefix, name),
                )
            return method

        for candidate in self.names.accessor_candidates(prefix, name):
            if not self.names.is_public(candidate):
                continue
            member = inspect.getattr_static(cls, candidate, None)
            if member is None or isinstance(member, property):
                continue
            method = getattr(obj, candidate)
            if callable(method):
                return method
        return None

    @staticmethod
    def _check_arity(name: str, method: Optional[Callable], expected: int, role: str) -> None:
        if method is None:
            return
        try:
            count = len(inspect.signature(method).parameters)
        except (TypeError, ValueError) as e:
            raise SchemaError(
                name, f"Unable to inspect the {role} of the property named '{name}': {e}"
            ) from e

        if count != expected:
            raise SchemaError(
                name,
                f"The {role} for the '{name}' property with the name "
                f"'{method.__name__}' accepts an unexpected number of parameters "
                f"({count}).\n"
                f"You must specify a {role} that accepts {expected} parameter(s) "
                "or declare the Property on a public attribute.",
            )

    def _resolve_type(
        self,
        name: str,
        getter: Optional[Callable],
        setter: Optional[Callable],
        field_annotation: Any,
    ) -> ValueType:
        candidates = []
        if getter is not None:
            candidates.append(self._hints(name, getter).get("return"))
        if setter is not None:
            parameter = next(iter(inspect.signature(setter).parameters))
            candidates.append(self._hints(name, setter).get(parameter))
        candidates.append(field_annotation)

        for annotation in candidates:
            try:
                value_type = self.type_resolver.resolve(annotation)
            except ValueError as e:
                raise SchemaError(
                    name, f"Unsupported type for the property named '{name}': {e}"
                ) from e
            if value_type is not None:
                return value_type

        raise SchemaError(
            name,
            f"Unable to determine the type of the property named '{name}'.\n"
            "Annotate the getter's return type, the setter's parameter, "
            "or the attribute.",
        )

    @staticmethod
    def _hints(name: str, method: Callable) -> Dict[str, Any]:
        func = getattr(method, "__func__", method)
        try:
            return typing.get_type_hints(func, include_extras=True)
        except (NameError, TypeError) as e:
            raise SchemaError(
                name, f"Unable to evaluate the annotations of '{func.__name__}': {e}"
            ) from e
