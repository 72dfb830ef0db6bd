"""
Comment API endpoints. Comments are created through `POST /articles/{id}`.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from articles.schemas import CommentRequest
from auth import guards
from auth.dependencies import policy
from core.http import RecordId, to_response
from core.tables import Table
from likes import service as likes_service
from likes.repository import LikeTarget

from . import service

router = APIRouter(prefix="/comments")

require_auth = policy(guards.REQUIRE_AUTH)


@router.patch("/{comment_id}")
async def patch_comment(
    comment_id: str,
    body: CommentRequest,
    ctx: guards.RequestContext = Depends(
        policy(guards.REQUIRE_OWNER, Table.COMMENTS, id_param="comment_id")
    ),
) -> JSONResponse:
    result = await service.patch_comment(ctx.record, title=body.title, comment=body.comment)
    return to_response(result)


@router.delete("/{comment_id}")
async def delete_comment(
    comment_id: str,
    ctx: guards.RequestContext = Depends(
        policy(guards.REQUIRE_ADMIN_OR_OWNER, Table.COMMENTS, id_param="comment_id")
    ),
) -> JSONResponse:
    result = await service.delete_comment(int(ctx.record["id"]))
    return to_response(result)


@router.get("/{comment_id}/likes")
async def get_comment_likes(
    comment_id: RecordId,
    _: guards.RequestContext = Depends(require_auth),
) -> JSONResponse:
    result = await service.get_comment_likes(comment_id)
    return to_response(result)


@router.post("/{comment_id}/like")
async def like_comment(
    comment_id: RecordId,
    ctx: guards.RequestContext = Depends(require_auth),
) -> JSONResponse:
    result = await likes_service.handle_like(
        LikeTarget.COMMENT,
        user_id=int(ctx.user["id"]),
        target_id=comment_id,
        is_like=True,
    )
    return to_response(result)


@router.post("/{comment_id}/dislike")
async def dislike_comment(
    comment_id: RecordId,
    ctx: guards.RequestContext = Depends(require_auth),
) -> JSONResponse:
    result = await likes_service.handle_like(
        LikeTarget.COMMENT,
        user_id=int(ctx.user["id"]),
        target_id=comment_id,
        is_like=False,
    )
    return to_response(result)
