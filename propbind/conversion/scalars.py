import math
import re
from typing import Any, Callable, Dict

from ..introspection.descriptor import ScalarKind


class ScalarCodec:
    BOOL_TRUE_VARIANTS = {"true", "yes"}
    BOOL_FALSE_VARIANTS = {"false", "no"}

    FLOAT32_MAX = 3.4028234663852886e38

    INT_PATTERN = re.compile(r'[+-]?[0-9]+')

    @classmethod
    def parse(cls, kind: ScalarKind, text: str) -> Any:
        """Raises ValueError when `text` is not a valid `kind`."""
        return _PARSERS[kind](text)

    @classmethod
    def format(cls, kind: ScalarKind, value: Any) -> str:
        return _FORMATTERS[kind](value)

    @classmethod
    def parse_bool(cls, text: str) -> bool:
        lowered = text.strip().lower()
        if lowered in cls.BOOL_TRUE_VARIANTS:
            return True
        if lowered in cls.BOOL_FALSE_VARIANTS:
            return False
        raise ValueError(f"'{text}' is not a boolean")

    @staticmethod
    def int_parser(kind: ScalarKind) -> Callable[[str], int]:
        low = -(1 << (kind.bits - 1))
        high = (1 << (kind.bits - 1)) - 1

        def parse_int(text: str) -> int:
            if not ScalarCodec.INT_PATTERN.fullmatch(text):
                raise ValueError(f"'{text}' is not an integer")
            value = int(text)
            if not low <= value <= high:
                raise ValueError(f"{value} is out of range for {kind.value} [{low}, {high}]")
            return value

        return parse_int

    @staticmethod
    def parse_float(text: str) -> float:
        # float() also takes "1_0.5" and surrounding whitespace
        if "_" in text or text != text.strip():
            raise ValueError(f"'{text}' is not a number")
        return float(text)

    @classmethod
    def parse_float32(cls, text: str) -> float:
        value = cls.parse_float(text)
        if math.isfinite(value) and abs(value) > cls.FLOAT32_MAX:
            raise ValueError(f"{value} is out of range for float32")
        return value

    @staticmethod
    def format_bool(value: Any) -> str:
        return "true" if value else "false"

    @staticmethod
    def format_int(value: Any) -> str:
        return str(int(value))

    @staticmethod
    def format_float(value: Any) -> str:
        return repr(float(value))


_PARSERS: Dict[ScalarKind, Callable[[str], Any]] = {
    ScalarKind.BOOL: ScalarCodec.parse_bool,
    ScalarKind.INT8: ScalarCodec.int_parser(ScalarKind.INT8),
    ScalarKind.INT16: ScalarCodec.int_parser(ScalarKind.INT16),
    ScalarKind.INT32: ScalarCodec.int_parser(ScalarKind.INT32),
    ScalarKind.INT64: ScalarCodec.int_parser(ScalarKind.INT64),
    ScalarKind.FLOAT32: ScalarCodec.parse_float32,
    ScalarKind.FLOAT64: ScalarCodec.parse_float,
    ScalarKind.STRING: str,
}

_FORMATTERS: Dict[ScalarKind, Callable[[Any], str]] = {
    ScalarKind.BOOL: ScalarCodec.format_bool,
    ScalarKind.INT8: ScalarCodec.format_int,
    ScalarKind.INT16: ScalarCodec.format_int,
    ScalarKind.INT32: ScalarCodec.format_int,
    ScalarKind.INT64: ScalarCodec.format_int,
    ScalarKind.FLOAT32: ScalarCodec.format_float,
    ScalarKind.FLOAT64: ScalarCodec.format_float,
    ScalarKind.STRING: str,
}
