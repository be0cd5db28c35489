"""
Conversions between decimal token amounts and integer wei.

Balances are always ints; Decimal is only used at the input/display edge.
"""
from decimal import Decimal, DecimalException, InvalidOperation, ROUND_DOWN, localcontext
from typing import Iterable, Optional, Union
from ..protocol.config.params import DECIMALS

AmountInput = Union[str, int, float, Decimal, None]

# Wide enough for any uint256 plus decimals
_PRECISION = 100

def to_wei(value: AmountInput, decimals: int = DECIMALS) -> Optional[int]:
    """
    Converts a decimal amount to wei, truncating extra precision.

    Returns None if the value cannot be parsed, is not finite, or
    overflows the decimal range once scaled.
    """
    if value is None or isinstance(value, bool):
        return None
    try:
        # str() first so floats convert by their shortest repr, not binary expansion
        dec = Decimal(value.strip() if isinstance(value, str) else str(value))
    except (InvalidOperation, ValueError):
        return None
    if not dec.is_finite():
        return None
    with localcontext() as ctx:
        ctx.prec = _PRECISION
        try:
            return int(dec.scaleb(decimals).to_integral_value(rounding=ROUND_DOWN))
        except DecimalException:
            return None

def from_wei(value: Optional[int], decimals: int = DECIMALS) -> Decimal:
    if not value:
        return Decimal(0)
    with localcontext() as ctx:
        ctx.prec = _PRECISION
        return Decimal(value).scaleb(-decimals)

def from_wei_rounded(value: Optional[int], decimals: int = DECIMALS, display_decimals: int = 2) -> Decimal:
    """from_wei, rounded down to display_decimals places."""
    with localcontext() as ctx:
        ctx.prec = _PRECISION
        quantum = Decimal(1).scaleb(-display_decimals)
        return from_wei(value, decimals).quantize(quantum, rounding=ROUND_DOWN)

def big_int_mean(values: Iterable[int]) -> int:
    """Integer mean (floor division); 0 for no values."""
    values = list(values)
    if not values:
        return 0
    return sum(values) // len(values)
