# ==============================================
# DECLARATION
# ==============================================
#
# The markers a class uses to declare its properties.
# This is the input contract of the introspector.
#
# Modules:
# --------
# - markers.py  → Property, property_getter, property_setter, REQUIRED
# - types.py    → Sized scalar aliases (Int8 ... Float64)
#
# ==============================================

from .markers import REQUIRED, Property, property_getter, property_setter
from .types import Float32, Float64, Int8, Int16, Int32, Int64

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
]
