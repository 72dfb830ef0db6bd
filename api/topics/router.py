"""
Topic API endpoints. Writes are admin-only.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, Query, Request
from fastapi.responses import JSONResponse

from auth import guards
from auth.dependencies import policy
from core.http import RecordId, base_url, to_response

from . import schemas, service

router = APIRouter(prefix="/topics")

require_auth = policy(guards.REQUIRE_AUTH)
require_admin = policy(guards.REQUIRE_ADMIN)


@router.get("")
async def list_topics(
    request: Request,
    offset: str | None = Query(default=None),
    limit: str | None = Query(default=None),
    ctx: guards.RequestContext = Depends(require_auth),
) -> JSONResponse:
    result = await service.get_topics(
        offset=offset,
        limit=limit,
        base_url=base_url(request),
        default_limit=ctx.settings.default_page_limit,
        max_limit=ctx.settings.max_page_limit,
    )
    return to_response(result)


@router.post("")
async def create_topic(
    body: schemas.TopicRequest,
    _: guards.RequestContext = Depends(require_admin),
) -> JSONResponse:
    result = await service.create_topic(body.topic)
    return to_response(result, status_code=201)


@router.patch("/{topic_id}")
async def patch_topic(
    topic_id: RecordId,
    body: schemas.TopicRequest,
    _: guards.RequestContext = Depends(require_admin),
) -> JSONResponse:
    result = await service.patch_topic(topic_id, body.topic)
    return to_response(result)


@router.delete("/{topic_id}")
async def delete_topic(
    topic_id: RecordId,
    _: guards.RequestContext = Depends(require_admin),
) -> JSONResponse:
    result = await service.delete_topic(topic_id)
    return to_response(result)
