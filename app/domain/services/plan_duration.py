from __future__ import annotations

import calendar
from datetime import datetime, timedelta

from app.domain.entities.plan import GrantDuration
from app.domain.exceptions import InvalidGrantDurationError


def add_months(value: datetime, months: int) -> datetime:
    month_index = value.month - 1 + months
    year = value.year + month_index // 12
    month = month_index % 12 + 1
    last_day = calendar.monthrange(year, month)[1]
    return value.replace(year=year, month=month, day=min(value.day, last_day))


def add_years(value: datetime, years: int) -> datetime:
    return add_months(value, years * 12)


def validate_grant_duration(duration: GrantDuration) -> None:
    variants = [
        name
        for name, present in (
            ("days", duration.days is not None),
            ("months", duration.months is not None),
            ("years", duration.years is not None),
            ("lifetime", duration.lifetime),
        )
        if present
    ]
    if len(variants) != 1:
        raise InvalidGrantDurationError(
            "Exactly one of days, months, years or lifetime must be provided."
        )
    if variants[0] == "lifetime":
        return
    amount = getattr(duration, variants[0])
    if isinstance(amount, bool) or not isinstance(amount, int) or amount <= 0:
        raise InvalidGrantDurationError(f"{variants[0]} must be a positive integer.")


def compute_expiration(duration: GrantDuration, *, now: datetime) -> datetime | None:
    """Retorna a nova data de expiracao contada a partir de ``now``.

    ``None`` significa vitalicio. Meses e anos usam aritmetica de calendario:
    31/jan + 1 mes cai no ultimo dia de fevereiro.
    """
    validate_grant_duration(duration)
    if duration.lifetime:
        return None
    try:
        if duration.days is not None:
            return now + timedelta(days=duration.days)
        if duration.months is not None:
            return add_months(now, duration.months)
        return add_years(now, duration.years)
    except (ValueError, OverflowError) as exc:
        raise InvalidGrantDurationError("Grant duration is out of range.") from exc
