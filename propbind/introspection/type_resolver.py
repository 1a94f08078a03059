import types
from typing import Annotated, Any, Iterable, Optional, Union, get_args, get_origin

from .descriptor import CollectionType, CustomType, ScalarKind, ScalarType, Shape, ValueType


class TypeResolver:
    SCALAR_TYPES = {
        bool: ScalarKind.BOOL,
        int: ScalarKind.INT64,
        float: ScalarKind.FLOAT64,
        str: ScalarKind.STRING,
    }

    # Python base type each kind may be attached to through Annotated
    KIND_BASES = {
        ScalarKind.BOOL: bool,
        ScalarKind.INT8: int,
        ScalarKind.INT16: int,
        ScalarKind.INT32: int,
        ScalarKind.INT64: int,
        ScalarKind.FLOAT32: float,
        ScalarKind.FLOAT64: float,
        ScalarKind.STRING: str,
    }

    COLLECTION_SHAPES = {
        list: Shape.ORDERED_LIST,
        set: Shape.SET,
        tuple: Shape.ARRAY,
    }

    def __init__(self, custom_types: Iterable[type] = ()):
        self.custom_types = frozenset(custom_types)

    def resolve(self, annotation: Any) -> Optional[ValueType]:
        """
        Map a type annotation to a ValueType.

        Returns None when there is no annotation at all and raises
        ValueError when the annotation is present but unsupported.
        """
        if annotation is None or annotation is Any:
            return None

        annotation = self._unwrap_optional(annotation)

        kind = self._scalar_kind(annotation)
        if kind is not None:
            return ScalarType(kind)

        base = self._strip_annotated(annotation)
        if base in self.custom_types:
            return CustomType(base)

        origin = get_origin(base)
        if origin in self.COLLECTION_SHAPES:
            return self._collection(origin, get_args(base), annotation)

        if base in self.COLLECTION_SHAPES:
            raise ValueError(
                f"collection type {base.__name__} needs an element type, "
                f"e.g. {base.__name__}[str]"
            )

        raise ValueError(
            f"unsupported type {annotation!r}; register a codec for it on the converter"
        )

    def _collection(self, origin: type, args: tuple, annotation: Any) -> CollectionType:
        shape = self.COLLECTION_SHAPES[origin]

        if origin is tuple:
            if len(args) != 2 or args[1] is not Ellipsis:
                raise ValueError(
                    f"{annotation!r}: arrays are declared as tuple[X, ...]"
                )
            args = args[:1]

        if len(args) != 1:
            raise ValueError(f"{annotation!r}: expected exactly one element type")

        element = args[0]
        element_kind = self._scalar_kind(element)
        if element_kind is None:
            if get_origin(self._strip_annotated(element)) in self.COLLECTION_SHAPES:
                raise ValueError(f"{annotation!r}: nested collections are not supported")
            raise ValueError(
                f"{annotation!r}: collection elements must be scalar types, got {element!r}"
            )
        return CollectionType(shape, element_kind)

    def _scalar_kind(self, annotation: Any) -> Optional[ScalarKind]:
        if get_origin(annotation) is Annotated:
            base, *metadata = get_args(annotation)
            kinds = [m for m in metadata if isinstance(m, ScalarKind)]
            if kinds:
                kind = kinds[-1]
                if self.KIND_BASES[kind] is not base:
                    raise ValueError(
                        f"{kind.value} cannot annotate {getattr(base, '__name__', base)}"
                    )
                return kind
            annotation = base

        if isinstance(annotation, type):
            return self.SCALAR_TYPES.get(annotation)
        return None

    @staticmethod
    def _strip_annotated(annotation: Any) -> Any:
        if get_origin(annotation) is Annotated:
            return get_args(annotation)[0]
        return annotation

    @classmethod
    def _unwrap_optional(cls, annotation: Any) -> Any:
        stripped = cls._strip_annotated(annotation)
        if get_origin(stripped) in (Union, types.UnionType):
            members = [a for a in get_args(stripped) if a is not type(None)]
            if len(members) != 1:
                raise ValueError(f"{annotation!r}: unions of several types are not supported")
            if stripped is not annotation:
                # Keep the outer metadata, e.g. Annotated[Optional[int], ...]
                return Annotated[(members[0], *get_args(annotation)[1:])]
            return members[0]
        return annotation
