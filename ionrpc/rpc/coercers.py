"""Argument coercers applied to positional RPC params before dispatch.

Signature tags map onto a closed set of variants:

    str    text representation
    int    leading decimal number, ``int`` when integral
    float  leading decimal number, always ``float``
    bool   ``True``, ``"1"`` or case-insensitive ``"true"``; nothing else
    obj    JSON text is parsed, anything else passes through

Numeric coercers never raise: unparseable input becomes ``float("nan")``,
which callers detect with :func:`is_invalid_number`. Text and object
coercion raise :class:`CoercionError` when conversion is impossible
(``None`` as text, malformed JSON). Floats render as ``NaN``,
``Infinity``, plain integers below 1e21 and exponent form from there on;
tiny fractions use Python's exponent cutoff (``1e-05``). Text rendering of
dicts and lists is whatever ``str()`` produces and is not a stable contract.
"""

from __future__ import annotations

import json
import math
import re
from enum import Enum
from typing import Any, Callable

from ionrpc.rpc.errors import CoercionError

_LEADING_NUMBER = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")

INVALID_NUMBER = float("nan")

_EXPONENT_THRESHOLD = 1e21


class ArgType(str, Enum):
    STR = "str"
    INT = "int"
    FLOAT = "float"
    BOOL = "bool"
    OBJ = "obj"

    @classmethod
    def from_tag(cls, tag: str) -> "ArgType":
        """Unknown tags (``string`` included) fall back to ``STR``."""
        try:
            return cls(tag)
        except ValueError:
            return cls.STR


def is_invalid_number(value: Any) -> bool:
    return isinstance(value, float) and math.isnan(value)


def to_text(value: Any) -> str:
    if value is None:
        raise CoercionError("cannot convert None to text")
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float):
        return _float_text(value)
    return str(value)


def _float_text(value: float) -> str:
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    # integral values switch to exponent form at 1e21, e.g. "1e+21"
    if value.is_integer() and abs(value) < _EXPONENT_THRESHOLD:
        return str(int(value))
    return repr(value)


def _parse_number(value: Any) -> float:
    if isinstance(value, bool):
        # bools are not numbers on the wire; "true"/"false" do not parse
        return INVALID_NUMBER
    if isinstance(value, (int, float)):
        return float(value)
    if value is None:
        return INVALID_NUMBER
    match = _LEADING_NUMBER.match(str(value).lstrip())
    if not match:
        return INVALID_NUMBER
    try:
        return float(match.group(0))
    except (OverflowError, ValueError):
        return INVALID_NUMBER


def to_int(value: Any) -> int | float:
    if isinstance(value, int) and not isinstance(value, bool):
        return value
    number = _parse_number(value)
    if math.isfinite(number) and number.is_integer():
        return int(number)
    return number


def to_float(value: Any) -> float:
    return _parse_number(value)


def to_bool(value: Any) -> bool:
    if value is True or value == "1":
        return True
    if value is None or value is False:
        return False
    if isinstance(value, str):
        return value.lower() == "true"
    return str(value).lower() == "true"


def to_obj(value: Any) -> Any:
    if isinstance(value, str):
        try:
            return json.loads(value)
        except json.JSONDecodeError as exc:
            raise CoercionError(f"invalid JSON argument: {exc}") from exc
    return value


COERCERS: dict[ArgType, Callable[[Any], Any]] = {
    ArgType.STR: to_text,
    ArgType.INT: to_int,
    ArgType.FLOAT: to_float,
    ArgType.BOOL: to_bool,
    ArgType.OBJ: to_obj,
}


def resolve(tag: str | ArgType) -> Callable[[Any], Any]:
    """Return the coercer for a signature tag."""
    arg_type = tag if isinstance(tag, ArgType) else ArgType.from_tag(tag)
    return COERCERS[arg_type]


def coerce(tag: str | ArgType, value: Any) -> Any:
    return resolve(tag)(value)
