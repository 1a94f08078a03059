"""
Sized scalar aliases.

Python has a single int and a single float type. These aliases carry the
exact ScalarKind in their Annotated metadata so a declaration can state the
width it expects, e.g. ``port: Annotated[Int16, Property()]`` or
``weights: Annotated[list[Float32], Property()]``.
"""

from typing import Annotated

from ..introspection.descriptor import ScalarKind

Int8 = Annotated[int, ScalarKind.INT8]
Int16 = Annotated[int, ScalarKind.INT16]
Int32 = Annotated[int, ScalarKind.INT32]
Int64 = Annotated[int, ScalarKind.INT64]
Float32 = Annotated[float, ScalarKind.FLOAT32]
Float64 = Annotated[float, ScalarKind.FLOAT64]

__all__ = ["Int8", "Int16", "Int32", "Int64", "Float32", "Float64"]
