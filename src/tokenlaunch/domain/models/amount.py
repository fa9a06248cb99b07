"""FixedAmount — on-chain token quantities as scaled integers.

Indexer amounts arrive as decimal strings of integers scaled by 10^18.
They are parsed once at the boundary into ``FixedAmount`` and all comparisons,
sums and fee math run on the integer. Conversion to ``Decimal`` is exact
(integer divmod + string formatting), so it never passes through a binary
float and never hits the 28-digit default ``decimal`` context.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import Any

from pydantic import GetCoreSchemaHandler
from pydantic_core import core_schema

from tokenlaunch.domain.errors import AmountParseError

TOKEN_DECIMALS = 18
WEI_PER_TOKEN = 10**TOKEN_DECIMALS


@dataclass(frozen=True, order=True)
class FixedAmount:
    """A token quantity in wei (smallest unit, 18 decimals)."""

    wei: int

    @classmethod
    def parse(cls, raw: object) -> FixedAmount:
        """Parse an int or a decimal-integer string. Raises AmountParseError otherwise."""
        if isinstance(raw, FixedAmount):
            return raw
        if isinstance(raw, bool):
            raise AmountParseError(raw)
        if isinstance(raw, int):
            return cls(raw)
        if isinstance(raw, str):
            text = raw.strip()
            digits = text[1:] if text[:1] in ("+", "-") else text
            if digits.isascii() and digits.isdigit():
                return cls(int(text))
        raise AmountParseError(raw)

    @classmethod
    def from_decimal(cls, value: Decimal | int | float | str) -> FixedAmount:
        """Scale a human-readable amount to wei, truncating anything below 1 wei."""
        try:
            amount = value if isinstance(value, Decimal) else Decimal(str(value))
        except ArithmeticError as exc:
            raise AmountParseError(value) from exc
        if not amount.is_finite():
            raise AmountParseError(value)

        sign, digits, exponent = amount.as_tuple()
        coefficient = int("".join(map(str, digits)) or "0")
        shift = exponent + TOKEN_DECIMALS
        if shift >= 0:
            wei = coefficient * 10**shift
        else:
            wei = coefficient // 10 ** (-shift)
        return cls(-wei if sign else wei)

    @classmethod
    def zero(cls) -> FixedAmount:
        return cls(0)

    @property
    def is_positive(self) -> bool:
        return self.wei > 0

    def to_decimal(self) -> Decimal:
        """Exact human-readable value (wei / 10^18)."""
        whole, frac = divmod(abs(self.wei), WEI_PER_TOKEN)
        frac_text = f"{frac:0{TOKEN_DECIMALS}d}".rstrip("0")
        text = f"{whole}.{frac_text}" if frac_text else str(whole)
        return Decimal(f"-{text}" if self.wei < 0 else text)

    def format(self, places: int = 4) -> str:
        """Presentation-only rendering with a fixed number of decimal places."""
        return f"{self.to_decimal():.{places}f}"

    def __add__(self, other: object) -> FixedAmount:
        if not isinstance(other, FixedAmount):
            return NotImplemented
        return FixedAmount(self.wei + other.wei)

    def __sub__(self, other: object) -> FixedAmount:
        if not isinstance(other, FixedAmount):
            return NotImplemented
        return FixedAmount(self.wei - other.wei)

    def __str__(self) -> str:
        return str(self.wei)

    @classmethod
    def __get_pydantic_core_schema__(cls, source_type: Any, handler: GetCoreSchemaHandler) -> core_schema.CoreSchema:
        # Model fields typed FixedAmount accept the raw indexer string directly.
        return core_schema.no_info_plain_validator_function(
            cls.parse,
            serialization=core_schema.plain_serializer_function_ser_schema(str, when_used="json"),
        )


def sum_amounts(amounts: list[FixedAmount]) -> FixedAmount:
    """Sum in the integer domain."""
    return FixedAmount(sum((a.wei for a in amounts), 0))
