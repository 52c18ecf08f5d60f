"""Identifier handling shared by nodes and edges.

Identifiers are strings or numbers. Two identifiers are equal when their
canonical string forms are equal, so ``1``, ``1.0`` and ``"1"`` all name the
same node. Floats follow JavaScript number formatting (``1e+21``,
``0.00001``, ``Infinity``); integers use ``str()``.
"""

from __future__ import annotations

import math
from decimal import Decimal
from typing import Any, Union

from .errors import InvalidArgument

Identifier = Union[str, int, float]


def is_identifier(value: Any) -> bool:
    # bool is an int subclass but never a valid identifier
    if isinstance(value, bool):
        return False
    return isinstance(value, (str, int, float))


def canonical_id(value: Any) -> str:
    """Return the canonical string key for an identifier.

    Raises:
        InvalidArgument: if ``value`` is None or not a string or number.
    """
    if value is None:
        raise InvalidArgument("Identifier is missing.")
    if not is_identifier(value):
        raise InvalidArgument(
            f"Identifier must be a string or a number, got {type(value).__name__}."
        )

    if isinstance(value, str):
        return value
    if isinstance(value, float):
        return _float_to_str(value)
    return str(value)


def _float_to_str(value: float) -> str:
    # Same digits and layout as JavaScript's Number#toString
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    if value == 0:
        return "0"

    sign, digit_tuple, exponent = Decimal(repr(value)).as_tuple()
    digits = "".join(str(d) for d in digit_tuple)
    stripped = digits.rstrip("0")
    exponent += len(digits) - len(stripped)
    digits = stripped

    k = len(digits)
    n = exponent + k
    if k <= n <= 21:
        text = digits + "0" * (n - k)
    elif 0 < n <= 21:
        text = f"{digits[:n]}.{digits[n:]}"
    elif -6 < n <= 0:
        text = "0." + "0" * -n + digits
    else:
        e = n - 1
        mantissa = digits if k == 1 else f"{digits[0]}.{digits[1:]}"
        text = f"{mantissa}e{'+' if e >= 0 else '-'}{abs(e)}"
    return "-" + text if sign else text


def ids_equal(first: Any, second: Any) -> bool:
    return canonical_id(first) == canonical_id(second)
