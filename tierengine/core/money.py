from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from typing import Any


def to_decimal(x: Any) -> Any:
    """float -> Decimal via str() so 1.1 stays 1.1; other values pass through."""
    if isinstance(x, bool):
        return x
    if isinstance(x, float):
        return Decimal(str(x))
    return x


def round_half_up(x: Decimal) -> int:
    return int(x.quantize(Decimal("1"), rounding=ROUND_HALF_UP))


def fmt_num(x: Decimal | int) -> str:
    """Decimal('3.0') -> '3', Decimal('1.50') -> '1.5', Decimal('100') -> '100'."""
    try:
        d = Decimal(x).normalize()
    except InvalidOperation:
        return str(x)
    return format(d, "f")
