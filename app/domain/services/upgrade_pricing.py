from __future__ import annotations

from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal

from app.domain.entities.plan import normalize_plan_type
from app.domain.exceptions import PricingError


LIFETIME_MONTHS = 0
# Referencia de preco cheio do vitalicio: ~5 anos de mensalidade.
LIFETIME_REFERENCE_MONTHS = 60

_CENTS = Decimal("0.01")


@dataclass(frozen=True)
class PlanPricing:
    monthly: Decimal
    lifetime: Decimal


@dataclass(frozen=True)
class DurationOption:
    months: int
    label: str
    discount: Decimal
    popular: bool = False


@dataclass(frozen=True)
class PriceQuote:
    plan_type: str
    months: int
    original_price: Decimal
    final_price: Decimal
    savings: Decimal
    discount_percent: int


PLAN_PRICING: dict[str, PlanPricing] = {
    "PRO": PlanPricing(monthly=Decimal("19.90"), lifetime=Decimal("990")),
    "DIAMOND": PlanPricing(monthly=Decimal("49.90"), lifetime=Decimal("2190")),
}

DURATION_OPTIONS: tuple[DurationOption, ...] = (
    DurationOption(months=1, label="1 mês", discount=Decimal("0")),
    DurationOption(months=3, label="3 meses", discount=Decimal("0.05")),
    DurationOption(months=6, label="6 meses", discount=Decimal("0.10")),
    DurationOption(months=12, label="12 meses", discount=Decimal("0.20"), popular=True),
    DurationOption(months=24, label="2 anos", discount=Decimal("0.40")),
    DurationOption(months=36, label="3 anos", discount=Decimal("0.50")),
    DurationOption(months=LIFETIME_MONTHS, label="Vitalício", discount=Decimal("1")),
)


def _round_cents(value: Decimal) -> Decimal:
    return value.quantize(_CENTS, rounding=ROUND_HALF_UP)


def _percent(value: Decimal) -> int:
    return int((value * 100).quantize(Decimal("1"), rounding=ROUND_HALF_UP))


def get_plan_pricing(plan_type: str) -> PlanPricing:
    pricing = PLAN_PRICING.get(normalize_plan_type(plan_type))
    if pricing is None:
        raise PricingError(f"Plan '{plan_type}' cannot be purchased.")
    return pricing


def calculate_price(plan_type: str, months: int) -> PriceQuote:
    pricing = get_plan_pricing(plan_type)
    canonical = normalize_plan_type(plan_type)

    if months == LIFETIME_MONTHS:
        original = pricing.monthly * LIFETIME_REFERENCE_MONTHS
        return PriceQuote(
            plan_type=canonical,
            months=months,
            original_price=_round_cents(original),
            final_price=_round_cents(pricing.lifetime),
            savings=_round_cents(original - pricing.lifetime),
            discount_percent=_percent(1 - pricing.lifetime / original),
        )

    if months < 0:
        raise PricingError("months must be zero (lifetime) or positive.")

    discount = next(
        (option.discount for option in DURATION_OPTIONS if option.months == months),
        Decimal("0"),
    )
    original = pricing.monthly * months
    final = original * (1 - discount)
    return PriceQuote(
        plan_type=canonical,
        months=months,
        original_price=_round_cents(original),
        final_price=_round_cents(final),
        savings=_round_cents(original - final),
        discount_percent=_percent(discount),
    )
