from decimal import Decimal, ROUND_HALF_UP
from typing import Annotated, Optional, Union

from pydantic import AfterValidator, Field

# Numeric(10, 2) columns
CENTS = Decimal("0.01")
MAX_AMOUNT = 100_000_000


def to_decimal(value: Optional[Union[float, int, Decimal]]) -> Optional[Decimal]:
    """Convert an API number into the fixed-precision value stored in the db.

    Goes through ``str`` so 1234.56 is stored as Decimal("1234.56") rather
    than the binary float expansion.
    """
    if value is None:
        return None
    if not isinstance(value, Decimal):
        value = Decimal(str(value))
    return value.quantize(CENTS, rounding=ROUND_HALF_UP)


def to_number(value: Optional[Union[Decimal, float, int, str]]) -> Optional[float]:
    """Convert a stored decimal back into a plain number for responses."""
    if value is None:
        return None
    return float(value)


def check_stored_range(value: float) -> float:
    # 99999999.999 passes lt=MAX_AMOUNT but rounds to 100000000.00
    if abs(to_decimal(value)) >= MAX_AMOUNT:
        raise ValueError(f"amount must round to less than {MAX_AMOUNT} in magnitude")
    return value


# non-finite values never reach to_decimal
Amount = Annotated[
    float,
    Field(allow_inf_nan=False, gt=-MAX_AMOUNT, lt=MAX_AMOUNT),
    AfterValidator(check_stored_range),
]
NonNegativeAmount = Annotated[
    float,
    Field(allow_inf_nan=False, ge=0, lt=MAX_AMOUNT),
    AfterValidator(check_stored_range),
]
PositiveAmount = Annotated[
    float,
    Field(allow_inf_nan=False, gt=0, lt=MAX_AMOUNT),
    AfterValidator(check_stored_range),
]
