"""
Comment business logic.
"""

from __future__ import annotations

from typing import Any

from core import queries
from core.envelope import Result, error_response, success_response
from core.errors import NotFound, ValidationError
from core.sanitize import sanitize
from core.tables import COMMENT_LIKES, Table
from core.validation import validate_comment

from . import repository


async def comment_on_article(*, user_id: int, article_id: int, title: Any, comment: Any) -> Result:
    article = await queries.get_record_by_id(Table.ARTICLES, article_id)
    if not article.success:
        if article.code == 404:
            return error_response(NotFound("Article not found"))
        return article

    clean_title = sanitize(title)
    clean_comment = sanitize(comment)

    validation = validate_comment(title=clean_title, comment=clean_comment)
    if validation:
        return error_response(ValidationError(validation=validation))

    result = await repository.insert_comment(
        user_id=user_id,
        article_id=article_id,
        title=clean_title,
        comment=clean_comment,
    )
    if not result.ok:
        return error_response(queries.query_error("Error commenting on article", result))

    return success_response(result.first)


async def patch_comment(record: dict, *, title: Any = None, comment: Any = None) -> Result:
    clean_title = record["title"] if title is None else sanitize(title)
    clean_comment = record["comment"] if comment is None else sanitize(comment)

    validation = validate_comment(title=clean_title, comment=clean_comment)
    if validation:
        return error_response(ValidationError(validation=validation))

    result = await repository.update_comment(int(record["id"]), title=clean_title, comment=clean_comment)
    if not result.ok:
        return error_response(queries.query_error("Error updating comment", result))

    if result.first is None:
        return error_response(NotFound("Comment not found"))

    return success_response(result.first)


async def delete_comment(comment_id: int) -> Result:
    return await queries.delete_record_by_id(Table.COMMENTS, comment_id)


async def get_comment_likes(comment_id: int) -> Result:
    return await queries.get_children(COMMENT_LIKES, comment_id)
