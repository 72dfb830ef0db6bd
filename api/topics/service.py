"""
Topic business logic. Topics are managed by admins only.
"""

from __future__ import annotations

from typing import Any

from core import queries
from core.envelope import Result, error_response, success_response
from core.errors import NotFound, ValidationError
from core.sanitize import sanitize
from core.tables import Table
from core.validation import validate_topic

from . import repository


async def create_topic(topic: Any) -> Result:
    clean_topic = sanitize(topic)
    validation = validate_topic(clean_topic)
    if validation:
        return error_response(ValidationError(validation=validation))

    result = await repository.insert_topic(clean_topic)
    if not result.ok:
        return error_response(queries.query_error("Error creating topic", result))

    return success_response(result.first)


async def patch_topic(topic_id: int, topic: Any) -> Result:
    clean_topic = sanitize(topic)
    validation = validate_topic(clean_topic)
    if validation:
        return error_response(ValidationError(validation=validation))

    result = await repository.update_topic(topic_id, name=clean_topic)
    if not result.ok:
        return error_response(queries.query_error("Error updating topic", result))

    if result.first is None:
        return error_response(NotFound("Topic not found"))

    return success_response(result.first)


async def delete_topic(topic_id: int) -> Result:
    return await queries.delete_record_by_id(Table.TOPICS, topic_id)


async def get_topics(
    *,
    offset: Any,
    limit: Any,
    base_url: str,
    default_limit: int = 10,
    max_limit: int = 100,
) -> Result:
    return await queries.get_all(
        Table.TOPICS,
        offset=offset,
        limit=limit,
        base_url=base_url,
        default_limit=default_limit,
        max_limit=max_limit,
    )

