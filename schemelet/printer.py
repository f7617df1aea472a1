"""Convert runtime values to their printed form."""

from __future__ import annotations

import json
import math
from decimal import Decimal

from schemelet import SchemeValue
from schemelet.types.null import NullType
from schemelet.types.procedure import PrimitiveProcedure, Procedure


def format_number(value: float) -> str:
    """Shortest round-trip text; integral values drop the fractional part (2.0 -> 2)."""
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    if value == int(value) and abs(value) < 1e21:
        return str(int(value))
    text = repr(value)
    if 'e' not in text:
        return text
    mantissa, exponent = text.split('e')
    power = int(exponent)
    # exponent form only below 1e-6 or from 1e21 up, without padding zeros
    if -7 < power < 21:
        return format(Decimal(text), 'f')
    return f"{mantissa}e{'+' if power > 0 else '-'}{abs(power)}"


def stringify(value: SchemeValue) -> str:
    if value is False:
        return "#f"
    if value is True:
        return "#t"
    if isinstance(value, (list, NullType)):
        return "(" + " ".join(stringify(v) for v in value) + ")"
    if isinstance(value, PrimitiveProcedure):
        return "PrimitiveProcedure"
    if isinstance(value, Procedure):
        return "Procedure"
    if isinstance(value, str):
        return value
    if isinstance(value, (int, float)):
        return format_number(float(value))
    if value is None:
        return "undefined"
    return json.dumps(value, default=repr)
