"""
Article API endpoints.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, Query, Request
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse

from auth import guards
from auth.dependencies import policy
from comments import service as comments_service
from core.http import RecordId, base_url, to_response
from core.tables import Table
from likes import service as likes_service
from likes.repository import LikeTarget

from . import schemas, service

router = APIRouter(prefix="/articles")

require_auth = policy(guards.REQUIRE_AUTH)


@router.get("")
async def list_articles(
    request: Request,
    offset: str | None = Query(default=None),
    limit: str | None = Query(default=None),
    search: str | None = Query(default=None, max_length=500),
    ctx: guards.RequestContext = Depends(require_auth),
) -> JSONResponse:
    result = await service.get_articles(
        offset=offset,
        limit=limit,
        search=search,
        base_url=base_url(request),
        default_limit=ctx.settings.default_page_limit,
        max_limit=ctx.settings.max_page_limit,
    )
    return to_response(result)


@router.post("")
async def create_article(
    body: schemas.ArticleRequest,
    ctx: guards.RequestContext = Depends(require_auth),
) -> JSONResponse:
    result = await service.create_article(
        user_id=int(ctx.user["id"]),
        topic=body.topic,
        title=body.title,
        article=body.article,
    )
    return to_response(result, status_code=201)


@router.get("/{article_id}")
async def get_article(
    article_id: str,
    ctx: guards.RequestContext = Depends(
        policy(guards.AUTH_AND_RECORD, Table.ARTICLES, id_param="article_id")
    ),
) -> JSONResponse:
    return JSONResponse(content=jsonable_encoder(ctx.record))


@router.post("/{article_id}")
async def comment_on_article(
    article_id: RecordId,
    body: schemas.CommentRequest,
    ctx: guards.RequestContext = Depends(require_auth),
) -> JSONResponse:
    result = await comments_service.comment_on_article(
        user_id=int(ctx.user["id"]),
        article_id=article_id,
        title=body.title,
        comment=body.comment,
    )
    return to_response(result, status_code=201)


@router.patch("/{article_id}")
async def patch_article(
    article_id: str,
    body: schemas.ArticleRequest,
    ctx: guards.RequestContext = Depends(
        policy(guards.REQUIRE_ADMIN_OR_OWNER, Table.ARTICLES, id_param="article_id")
    ),
) -> JSONResponse:
    result = await service.patch_article(
        ctx.record,
        topic=body.topic,
        title=body.title,
        article=body.article,
    )
    return to_response(result)


@router.delete("/{article_id}")
async def delete_article(
    article_id: str,
    ctx: guards.RequestContext = Depends(
        policy(guards.REQUIRE_ADMIN_OR_OWNER, Table.ARTICLES, id_param="article_id")
    ),
) -> JSONResponse:
    result = await service.delete_article(int(ctx.record["id"]))
    return to_response(result)


@router.get("/{article_id}/comments")
async def get_article_comments(
    article_id: RecordId,
    _: guards.RequestContext = Depends(require_auth),
) -> JSONResponse:
    result = await service.get_article_comments(article_id)
    return to_response(result)


@router.get("/{article_id}/likes")
async def get_article_likes(
    article_id: RecordId,
    _: guards.RequestContext = Depends(require_auth),
) -> JSONResponse:
    result = await service.get_article_likes(article_id)
    return to_response(result)


@router.post("/{article_id}/like")
async def like_article(
    article_id: RecordId,
    ctx: guards.RequestContext = Depends(require_auth),
) -> JSONResponse:
    result = await likes_service.handle_like(
        LikeTarget.ARTICLE,
        user_id=int(ctx.user["id"]),
        target_id=article_id,
        is_like=True,
    )
    return to_response(result)


@router.post("/{article_id}/dislike")
async def dislike_article(
    article_id: RecordId,
    ctx: guards.RequestContext = Depends(require_auth),
) -> JSONResponse:
    result = await likes_service.handle_like(
        LikeTarget.ARTICLE,
        user_id=int(ctx.user["id"]),
        target_id=article_id,
        is_like=False,
    )
    return to_response(result)
