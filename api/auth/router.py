"""
Registration and login endpoints.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from core.config import Settings
from core.http import to_response

from . import schemas, service
from .dependencies import get_settings

router = APIRouter()


@router.post("/register")
async def register(
    request: schemas.RegisterRequest,
    settings: Settings = Depends(get_settings),
) -> JSONResponse:
    result = await service.register(
        username=request.username,
        name=request.name,
        password=request.password,
        settings=settings,
    )
    return to_response(result, status_code=201)


@router.post("/login")
async def login(
    request: schemas.LoginRequest,
    settings: Settings = Depends(get_settings),
) -> JSONResponse:
    result = await service.login(
        username=request.username,
        password=request.password,
        settings=settings,
    )
    return to_response(result)
