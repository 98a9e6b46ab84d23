from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException

from app.api.deps import get_create_pix_payment_use_case, get_current_user
from app.api.schemas.billing import CreatePixPaymentRequest, CreatePixPaymentResponse, PriceQuoteResponse
from app.application.dto.billing import CreatePixPaymentInput
from app.application.use_cases.create_pix_payment import CreatePixPaymentUseCase
from app.domain.entities.user import User
from app.domain.exceptions import InvalidAmountError, PricingError, UserNotFoundError
from app.domain.services.upgrade_pricing import calculate_price


router = APIRouter()


@router.get("/v1/billing/price", response_model=PriceQuoteResponse)
def get_price_quote(plan_type: str, months: int):
    try:
        quote = calculate_price(plan_type, months)
    except PricingError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc

    return PriceQuoteResponse(
        plan_type=quote.plan_type,
        months=quote.months,
        original_price=quote.original_price,
        final_price=quote.final_price,
        savings=quote.savings,
        discount_percent=quote.discount_percent,
    )


@router.post("/v1/billing/pix", response_model=CreatePixPaymentResponse)
def create_pix_payment(
    req: CreatePixPaymentRequest,
    current_user: User = Depends(get_current_user),
    use_case: CreatePixPaymentUseCase = Depends(get_create_pix_payment_use_case),
):
    try:
        output = use_case.execute(
            CreatePixPaymentInput(
                user_id=current_user.id,
                plan_type=req.plan_type,
                months=req.months,
            )
        )
    except UserNotFoundError as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc
    except PricingError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    except InvalidAmountError as exc:
        raise HTTPException(status_code=500, detail=str(exc)) from exc

    return CreatePixPaymentResponse(
        plan_type=output.plan_type,
        months=output.months,
        original_price=output.original_price,
        amount=output.amount,
        savings=output.savings,
        discount_percent=output.discount_percent,
        transaction_id=output.transaction_id,
        pix_code=output.pix_code,
        qr_code_data_url=output.qr_code_data_url,
    )
