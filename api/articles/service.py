"""
Article business logic.
"""

from __future__ import annotations

from typing import Any

from core import queries
from core.envelope import Result, error_response, success_response
from core.errors import NotFound, ValidationError
from core.sanitize import sanitize
from core.tables import ARTICLE_COMMENTS, ARTICLE_LIKES, Table
from core.validation import validate_article
from topics import repository as topics_repository

from . import repository


async def _topic_exists(topic: Any) -> tuple[bool, Result | None]:
    if not isinstance(topic, str):
        # Let validation report the type error.
        return True, None

    result = await topics_repository.topic_exists(topic)
    if not result.ok:
        return False, error_response(queries.query_error("Error getting topics", result))
    return result.first is not None, None


async def create_article(*, user_id: int, topic: Any, title: Any, article: Any) -> Result:
    clean_topic = sanitize(topic)
    clean_title = sanitize(title)
    clean_article = sanitize(article)

    exists, failure = await _topic_exists(clean_topic)
    if failure is not None:
        return failure

    validation = validate_article(
        topic=clean_topic,
        title=clean_title,
        article=clean_article,
        topic_exists=exists,
    )
    if validation:
        return error_response(ValidationError(validation=validation))

    result = await repository.insert_article(
        user_id=user_id,
        topic=clean_topic,
        title=clean_title,
        article=clean_article,
    )
    if not result.ok:
        return error_response(queries.query_error("Error creating article", result))

    return success_response(result.first)


async def patch_article(record: dict, *, topic: Any = None, title: Any = None, article: Any = None) -> Result:
    """
    Update an article; omitted fields keep their stored value.
    """
    clean_topic = record["topic"] if topic is None else sanitize(topic)
    clean_title = record["title"] if title is None else sanitize(title)
    clean_article = record["article"] if article is None else sanitize(article)

    exists = True
    if topic is not None:
        exists, failure = await _topic_exists(clean_topic)
        if failure is not None:
            return failure

    validation = validate_article(
        topic=clean_topic,
        title=clean_title,
        article=clean_article,
        topic_exists=exists,
    )
    if validation:
        return error_response(ValidationError(validation=validation))

    result = await repository.update_article(
        int(record["id"]),
        topic=clean_topic,
        title=clean_title,
        article=clean_article,
    )
    if not result.ok:
        return error_response(queries.query_error("Error updating article", result))

    if result.first is None:
        return error_response(NotFound("Article not found"))

    return success_response(result.first)


async def delete_article(article_id: int) -> Result:
    return await queries.delete_record_by_id(Table.ARTICLES, article_id)


async def get_articles(
    *,
    offset: Any,
    limit: Any,
    search: str | None,
    base_url: str,
    default_limit: int = 10,
    max_limit: int = 100,
) -> Result:
    if search:
        return await queries.get_all_search(
            Table.ARTICLES,
            search=search,
            offset=offset,
            limit=limit,
            base_url=base_url,
            default_limit=default_limit,
            max_limit=max_limit,
        )
    return await queries.get_all(
        Table.ARTICLES,
        offset=offset,
        limit=limit,
        base_url=base_url,
        default_limit=default_limit,
        max_limit=max_limit,
    )


async def get_article_comments(article_id: int) -> Result:
    return await queries.get_children(ARTICLE_COMMENTS, article_id)


async def get_article_likes(article_id: int) -> Result:
    return await queries.get_children(ARTICLE_LIKES, article_id)
