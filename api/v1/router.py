# api/v1/router.py
from fastapi import APIRouter

from . import body, nutrition, stats

api_router = APIRouter()

api_router.include_router(nutrition.router, prefix="/nutrition", tags=["Nutrition"])
api_router.include_router(body.router, prefix="/body", tags=["Body"])
api_router.include_router(stats.router, prefix="/stats", tags=["Stats"])
