"""Platform fee math — pure functions, no I/O.

The platform charges 50 basis points on every bonding-curve trade. The wei
variants run in integer arithmetic (floor division), the Decimal variants in
human units; both agree to 1 wei. Decimal math runs with enough precision
to stay exact however many digits the amount carries.
"""

from decimal import Decimal, InvalidOperation, localcontext

from tokenlaunch.domain.enums.trade import TradeSide, TradingMode
from tokenlaunch.domain.models.amount import FixedAmount
from tokenlaunch.domain.models.fee import FeeBreakdown, FeeBreakdownWei, FeeContext

PLATFORM_FEE_BPS = 50
BASIS_POINTS_DIVISOR = 10000
PLATFORM_FEE_PERCENTAGE = Decimal(PLATFORM_FEE_BPS) * 100 / BASIS_POINTS_DIVISOR  # 0.5

QUOTE_FEE_CURRENCY = "AWE"
BASE_FEE_CURRENCY = "TOKEN"


def _to_decimal(value: Decimal | int | float | str | None) -> Decimal:
    """Coerce a presentation-layer number to Decimal. Unparseable or missing → 0."""
    if value is None or isinstance(value, bool):
        return Decimal(0)
    try:
        result = value if isinstance(value, Decimal) else Decimal(str(value).strip())
    except InvalidOperation:
        return Decimal(0)
    return result if result.is_finite() else Decimal(0)


def _exact_precision(value: Decimal, fee_bps: int) -> int:
    # digits of base * fee_bps, plus headroom for the basis-point shift and base + fee
    return len(value.as_tuple().digits) + len(str(abs(fee_bps))) + 10


def calculate_platform_fee(
    base_amount: Decimal | int | float | None,
    fee_bps: int = PLATFORM_FEE_BPS,
) -> Decimal:
    """Fee on a human-unit amount. Non-positive or missing amounts pay nothing."""
    base = _to_decimal(base_amount)
    if base <= 0:
        return Decimal(0)
    with localcontext() as ctx:
        ctx.prec = _exact_precision(base, fee_bps)
        return base * fee_bps / BASIS_POINTS_DIVISOR


def calculate_platform_fee_wei(
    base_amount: FixedAmount | int,
    fee_bps: int = PLATFORM_FEE_BPS,
) -> FixedAmount:
    """Fee on a wei amount, floor-divided in the integer domain."""
    wei = base_amount.wei if isinstance(base_amount, FixedAmount) else int(base_amount)
    if wei <= 0:
        return FixedAmount.zero()
    return FixedAmount(wei * fee_bps // BASIS_POINTS_DIVISOR)


def calculate_total_with_fee(
    base_amount: Decimal | int | float | None,
    fee_bps: int = PLATFORM_FEE_BPS,
) -> FeeBreakdown:
    base = _to_decimal(base_amount)
    fee = calculate_platform_fee(base, fee_bps)
    with localcontext() as ctx:
        ctx.prec = _exact_precision(base, fee_bps)
        total = base + fee
    return FeeBreakdown(base_amount=base, fee_amount=fee, total_amount=total)


def calculate_total_with_fee_wei(
    base_amount: FixedAmount | int,
    fee_bps: int = PLATFORM_FEE_BPS,
) -> FeeBreakdownWei:
    base = base_amount if isinstance(base_amount, FixedAmount) else FixedAmount(int(base_amount))
    fee = calculate_platform_fee_wei(base, fee_bps)
    return FeeBreakdownWei(base_amount=base, fee_amount=fee, total_amount=base + fee)


def format_fee_percentage(fee_bps: int = PLATFORM_FEE_BPS) -> str:
    percentage = Decimal(fee_bps) * 100 / BASIS_POINTS_DIVISOR
    return f"{percentage.normalize():f}%"


def get_fee_context(
    input_amount: Decimal | int | float | None,
    calculated_amount: str | None,
    side: TradeSide,
    mode: TradingMode,
    fee_bps: int = PLATFORM_FEE_BPS,
    quote_currency: str = QUOTE_FEE_CURRENCY,
) -> FeeContext:
    """Pick the amount the fee is charged on and compute the breakdown.

    EXACT_IN charges the fee on what the user typed (``input_amount``).
    EXACT_OUT charges it on the quoted counterpart (``calculated_amount``,
    a decimal string from the quote). Buys pay the fee in the quote currency,
    sells in the launched token.
    """
    side = TradeSide(side)
    mode = TradingMode(mode)

    if mode == TradingMode.EXACT_IN:
        base = _to_decimal(input_amount)
    else:
        base = _to_decimal(calculated_amount)
    fee_currency = quote_currency if side == TradeSide.BUY else BASE_FEE_CURRENCY

    if base <= 0:
        return FeeContext(fee_currency=fee_currency)

    breakdown = calculate_total_with_fee(base, fee_bps)
    return FeeContext(
        fee_amount=breakdown.fee_amount,
        fee_currency=fee_currency,
        base_amount=breakdown.base_amount,
        total_amount=breakdown.total_amount,
        should_show_fees=True,
    )


def explain_fee(amount: Decimal | int | float, fee_bps: int = PLATFORM_FEE_BPS) -> dict:
    """Step-by-step fee breakdown for support tooling."""
    breakdown = calculate_total_with_fee(amount, fee_bps)
    base = breakdown.base_amount
    return {
        "input_amount": base,
        "platform_fee_percentage": format_fee_percentage(fee_bps),
        "platform_fee_bps": fee_bps,
        "fee_amount": breakdown.fee_amount,
        "total_amount": breakdown.total_amount,
        "fee_ratio": breakdown.fee_amount / base if base > 0 else Decimal(0),
        "formula": f"({base} * {fee_bps}) / {BASIS_POINTS_DIVISOR}",
    }
