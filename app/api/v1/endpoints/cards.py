import logging
import traceback
from typing import List

from fastapi import APIRouter, Depends, HTTPException, Path, status

from app.api.v1.deps import get_card_service
from app.core.exceptions import BulkCreateFailedException, CardNotFoundException
from app.schemas.card_schema import CardIn, CardOut, CardView
from app.services.card_service import BulkCreateError, CardNotFound, CardService

router = APIRouter(prefix="/api/cards", tags=["cards"])


@router.get("", response_model=List[CardOut])
async def get_all_cards(card_service: CardService = Depends(get_card_service)):
    try:
        cards = await card_service.get_all_cards()
    except Exception as e:
        logging.error(f"Error fetching cards: {e}\n{traceback.format_exc()}")
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                            detail="Failed to fetch cards.")
    return [CardOut(**card) for card in cards]


@router.get("/{card_id}", response_model=CardView)
async def get_card_by_id(
        card_id: int = Path(..., gt=0),
        card_service: CardService = Depends(get_card_service),
):
    try:
        return await card_service.get_card_by_id(card_id)
    except CardNotFound:
        raise CardNotFoundException(card_id)
    except Exception as e:
        logging.error(f"Internal Server Error in get_card_by_id: {e}\n{traceback.format_exc()}")
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                            detail="An unknown error occurred.")


@router.post("", response_model=CardOut, status_code=status.HTTP_201_CREATED)
async def add_card(body: CardIn, card_service: CardService = Depends(get_card_service)):
    try:
        card = await card_service.add_card(body)
    except Exception as e:
        logging.error(f"Internal Server Error in add_card: {e}\n{traceback.format_exc()}")
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                            detail="An unknown error occurred.")
    return CardOut(**card)


@router.post("/multi", response_model=List[CardView], status_code=status.HTTP_201_CREATED)
async def create_multiple_cards(
        body: List[CardView],
        card_service: CardService = Depends(get_card_service),
):
    try:
        return await card_service.create_multiple_cards(body)
    except BulkCreateError as e:
        logging.error(f"Bulk create failed at index {e.index}: {e.cause}\n{traceback.format_exc()}")
        raise BulkCreateFailedException(e.index)
    except Exception as e:
        logging.error(f"Internal Server Error in create_multiple_cards: {e}\n{traceback.format_exc()}")
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                            detail="An unknown error occurred.")
