from __future__ import annotations

from fastapi import APIRouter, Depends

from luxe_salon.api.responses import error_response
from luxe_salon.api.v1.schemas import (
    LoyaltyCardCreateSchema,
    LoyaltyCardListResponse,
    LoyaltyCardResponse,
    LoyaltyCardSchema,
    LoyaltyCardUpdateSchema,
)
from luxe_salon.application.exceptions import ConflictError, NotFoundError, StorageError
from luxe_salon.application.use_cases.loyalty import LoyaltyUseCase
from luxe_salon.wiring.dependencies import get_loyalty_use_case

router = APIRouter(prefix="/api/loyalty-cards")


@router.get("", response_model=LoyaltyCardListResponse)
def list_cards(uc: LoyaltyUseCase = Depends(get_loyalty_use_case)):
    try:
        cards = uc.list_cards()
    except StorageError as e:
        return error_response(500, str(e))

    return LoyaltyCardListResponse(
        count=len(cards),
        data=[LoyaltyCardSchema.from_entity(c) for c in cards],
    )


@router.get("/{email}", response_model=LoyaltyCardResponse)
def get_card(email: str, uc: LoyaltyUseCase = Depends(get_loyalty_use_case)):
    try:
        card = uc.get_card(email)
    except NotFoundError as e:
        return error_response(404, str(e))
    except StorageError as e:
        return error_response(500, str(e))

    return LoyaltyCardResponse(data=LoyaltyCardSchema.from_entity(card))


@router.post("", response_model=LoyaltyCardResponse, status_code=201)
def create_card(
    req: LoyaltyCardCreateSchema,
    uc: LoyaltyUseCase = Depends(get_loyalty_use_case),
):
    try:
        card = uc.register(name=req.name, email=req.email, phone=req.phone)
    except ConflictError as e:
        return error_response(400, str(e))
    except StorageError as e:
        return error_response(500, str(e))

    return LoyaltyCardResponse(data=LoyaltyCardSchema.from_entity(card))


@router.put("/{email}", response_model=LoyaltyCardResponse)
def update_card(
    email: str,
    req: LoyaltyCardUpdateSchema,
    uc: LoyaltyUseCase = Depends(get_loyalty_use_case),
):
    try:
        card = uc.record_activity(
            email,
            add_points=req.add_points,
            add_visits=req.add_visits,
            add_spent=req.add_spent,
        )
    except NotFoundError as e:
        return error_response(404, str(e))
    except StorageError as e:
        return error_response(500, str(e))

    return LoyaltyCardResponse(data=LoyaltyCardSchema.from_entity(card))
