from __future__ import annotations

import json
import math
from collections.abc import Mapping
from decimal import Decimal
from typing import Any, Optional

from .accessors import get_sequence
from .constants import CONST_KEY, ENUM_KEY


def format_number(value: float) -> str:
    """Format a float like JavaScript's ``Number#toString``.

    Shortest round-trip digits; plain notation for magnitudes in
    ``[1e-6, 1e21)``, exponent notation (``1e-7``, ``1.5e+21``) outside it.
    """
    if math.isnan(value):
        return 'NaN'
    if math.isinf(value):
        return 'Infinity' if value > 0 else '-Infinity'
    if value == 0:
        return '0'

    sign = '-' if value < 0 else ''
    _, digit_tuple, exponent = Decimal(repr(abs(value))).as_tuple()
    digits = ''.join(map(str, digit_tuple)).rstrip('0')
    exponent += len(digit_tuple) - len(digits)
    k = len(digits)
    n = exponent + k

    if k <= n <= 21:
        text = digits + '0' * (n - k)
    elif 0 < n <= 21:
        text = digits[:n] + '.' + digits[n:]
    elif -6 < n <= 0:
        text = '0.' + '0' * -n + digits
    else:
        mantissa = digits if k == 1 else digits[0] + '.' + digits[1:]
        text = f'{mantissa}e{"+" if n - 1 >= 0 else "-"}{abs(n - 1)}'
    return sign + text


def to_string_form(value: Any) -> str:
    """Render a value the way a JSON document or a JavaScript UI would show it.

    Name-table keys, order tokens and fallback labels are all compared through
    this form, so ``1``, ``1.0`` and ``'1'`` are the same key and ``True``
    matches ``'true'``. The comparison is intentionally lossy.
    """
    if isinstance(value, str):
        return value
    if value is None:
        return 'null'
    if isinstance(value, bool):
        return 'true' if value else 'false'
    if isinstance(value, float):
        return format_number(value)
    if isinstance(value, int):
        return str(value)
    try:
        return json.dumps(value, ensure_ascii=False, separators=(',', ':'))
    except (TypeError, ValueError):
        return str(value)


def to_constant(schema: Any) -> Optional[Any]:
    """Return the single value a branch schema can take, if it pins one.

    ``const`` wins (even when it is ``None``); otherwise a one-entry ``enum``
    supplies the value; otherwise there is no constant and ``None`` comes back.
    """
    if not isinstance(schema, Mapping):
        return None
    if CONST_KEY in schema:
        return schema[CONST_KEY]
    enum_values = get_sequence(schema, ENUM_KEY)
    if enum_values is not None and len(enum_values) == 1:
        return enum_values[0]
    return None
