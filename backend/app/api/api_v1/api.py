from __future__ import annotations

from fastapi import APIRouter

from app.api.api_v1.endpoints import contact

api_router = APIRouter()

api_router.include_router(contact.router)
