from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal


@dataclass(frozen=True)
class CreatePixPaymentInput:
    user_id: str
    plan_type: str
    months: int


@dataclass(frozen=True)
class CreatePixPaymentOutput:
    plan_type: str
    months: int
    original_price: Decimal
    amount: Decimal
    savings: Decimal
    discount_percent: int
    transaction_id: str
    pix_code: str
    qr_code_data_url: str
