# ==============================================
# TOPIC 2: CONVERSION
# ==============================================
#
# This package converts raw strings to typed values and back,
# driven by the ValueType of a property descriptor.
#
# Modules:
# --------
# - scalars.py    → Parse/format table for the built-in scalar kinds
# - converter.py  → TypeConverter: scalars, collections, custom codecs
#
# ==============================================

from .scalars import ScalarCodec
from .converter import Codec, TypeConverter

__all__ = ["Codec", "ScalarCodec", "TypeConverter"]
