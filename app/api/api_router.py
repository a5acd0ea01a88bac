# app/api/api_router.py
from fastapi import APIRouter
from app.api.v1 import cases, hearings

api_router = APIRouter()
api_router.include_router(cases.router, prefix="/v1/cases", tags=["cases"])
api_router.include_router(hearings.router, prefix="/v1/hearings", tags=["hearings"])
