"""
FastAPI glue for `Result` envelopes.
"""

from __future__ import annotations

from typing import Annotated

from fastapi import Path, Request
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse

from .envelope import Result
from .tables import MAX_ID

# Integer path ids, bounded to the id column range.
RecordId = Annotated[int, Path(ge=0, le=MAX_ID)]


def to_response(result: Result, *, status_code: int = 200) -> JSONResponse:
    if not result.success:
        return JSONResponse(status_code=result.code, content=result.obj)
    return JSONResponse(status_code=status_code, content=jsonable_encoder(result.item))


def base_url(request: Request) -> str:
    return str(request.base_url).rstrip("/")
