from __future__ import annotations

from decimal import Decimal
from typing import Literal

from pydantic import BaseModel, Field


class PriceQuoteResponse(BaseModel):
    plan_type: str
    months: int
    original_price: Decimal
    final_price: Decimal
    savings: Decimal
    discount_percent: int


class CreatePixPaymentRequest(BaseModel):
    plan_type: Literal["PRO", "DIAMOND"]
    months: int = Field(..., ge=0)


class CreatePixPaymentResponse(BaseModel):
    plan_type: str
    months: int
    original_price: Decimal
    amount: Decimal
    savings: Decimal
    discount_percent: int
    transaction_id: str
    pix_code: str
    qr_code_data_url: str
