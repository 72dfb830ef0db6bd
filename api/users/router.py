"""
User API endpoints, including the admin-request workflow.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, Query, Request
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse

from auth import guards
from auth.dependencies import policy
from core.http import base_url, to_response
from core.tables import Table

from . import schemas, service

router = APIRouter(prefix="/users")

require_auth = policy(guards.REQUIRE_AUTH)
require_owner = policy(guards.REQUIRE_OWNER, Table.USERS, id_param="user_id")
require_admin_and_record = policy(guards.REQUIRE_ADMIN_AND_RECORD, Table.USERS, id_param="user_id")


def _resolve_user_id(raw_id: str, ctx: guards.RequestContext) -> int:
    if raw_id == guards.SELF_ID:
        return int(ctx.user["id"])
    return guards.parse_record_id(raw_id.strip())


@router.get("")
async def list_users(
    request: Request,
    offset: str | None = Query(default=None),
    limit: str | None = Query(default=None),
    search: str | None = Query(default=None, max_length=500),
    ctx: guards.RequestContext = Depends(require_auth),
) -> JSONResponse:
    result = await service.get_users(
        offset=offset,
        limit=limit,
        search=search,
        base_url=base_url(request),
        default_limit=ctx.settings.default_page_limit,
        max_limit=ctx.settings.max_page_limit,
    )
    return to_response(result)


@router.patch("/me")
async def patch_me(
    body: schemas.PatchUserRequest,
    ctx: guards.RequestContext = Depends(require_auth),
) -> JSONResponse:
    result = await service.patch_user(
        ctx.user,
        name=body.name,
        username=body.username,
        password=body.password,
        rounds=ctx.settings.bcrypt_rounds,
    )
    return to_response(result)


@router.get("/{user_id}")
async def get_user(
    user_id: str,
    ctx: guards.RequestContext = Depends(
        policy(guards.AUTH_AND_RECORD, Table.USERS, id_param="user_id")
    ),
) -> JSONResponse:
    record = {k: v for k, v in ctx.record.items() if k != "userid"}
    return JSONResponse(content=jsonable_encoder(record))


@router.delete("/{user_id}")
async def delete_user(
    user_id: str,
    ctx: guards.RequestContext = Depends(
        policy(guards.REQUIRE_ADMIN_OR_OWNER, Table.USERS, id_param="user_id")
    ),
) -> JSONResponse:
    result = await service.delete_user(int(ctx.record["id"]))
    return to_response(result)


@router.post("/{user_id}/requestAdmin")
async def request_admin(
    user_id: str,
    ctx: guards.RequestContext = Depends(require_owner),
) -> JSONResponse:
    result = await service.request_admin(ctx.user)
    return to_response(result)


@router.post("/{user_id}/cancelAdminRequest")
async def cancel_admin_request(
    user_id: str,
    ctx: guards.RequestContext = Depends(require_owner),
) -> JSONResponse:
    result = await service.cancel_admin_request(ctx.user)
    return to_response(result)


@router.post("/{user_id}/acceptAdmin")
async def accept_admin(
    user_id: str,
    ctx: guards.RequestContext = Depends(require_admin_and_record),
) -> JSONResponse:
    result = await service.accept_admin(ctx.record)
    return to_response(result)


@router.post("/{user_id}/declineAdmin")
async def decline_admin(
    user_id: str,
    ctx: guards.RequestContext = Depends(require_admin_and_record),
) -> JSONResponse:
    result = await service.decline_admin(ctx.record)
    return to_response(result)


@router.get("/{user_id}/articles")
async def get_user_articles(
    user_id: str,
    ctx: guards.RequestContext = Depends(require_auth),
) -> JSONResponse:
    result = await service.get_user_content(_resolve_user_id(user_id, ctx), "articles")
    return to_response(result)


@router.get("/{user_id}/comments")
async def get_user_comments(
    user_id: str,
    ctx: guards.RequestContext = Depends(require_auth),
) -> JSONResponse:
    result = await service.get_user_content(_resolve_user_id(user_id, ctx), "comments")
    return to_response(result)
