"""
Like/dislike toggling for articles and comments.
"""

from __future__ import annotations

from core import queries
from core.envelope import Result, error_response, success_response
from core.errors import NotFound

from . import repository
from .repository import LikeTarget


async def handle_like(target: LikeTarget, *, user_id: int, target_id: int, is_like: bool) -> Result:
    """
    Store the user's vote on a target. Voting again overwrites the old vote.
    """
    result = await repository.upsert_vote(target, user_id=user_id, target_id=target_id, is_like=is_like)
    if not result.ok:
        # The target (or the user) is gone: foreign key, or a racing delete.
        if result.is_foreign_key_violation or result.is_unique_violation:
            return error_response(NotFound("Record not found", details=str(result.error)))
        return error_response(queries.query_error("Error posting like/dislike", result))

    return success_response(result.first)
