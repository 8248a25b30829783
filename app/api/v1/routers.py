# app/api/routers.py
from fastapi import APIRouter
from app.api.v1.endpoints import cards

router = APIRouter()

router.include_router(cards.router)
