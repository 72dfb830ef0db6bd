"""
Vote persistence (raw SQL).

One row per (user, target); a new vote overwrites the previous one.
"""

from __future__ import annotations

from enum import Enum

from core import db
from core.tables import Table


class LikeTarget(Enum):
    ARTICLE = (Table.ARTICLE_LIKES, "articleid")
    COMMENT = (Table.COMMENT_LIKES, "commentid")

    def __init__(self, table: Table, column: str) -> None:
        self.upsert = (
            f"INSERT INTO {table.value} (userid, {column}, islike) "
            "VALUES ($1, $2, $3) "
            f"ON CONFLICT (userid, {column}) DO UPDATE SET islike = EXCLUDED.islike "
            "RETURNING *"
        )


async def upsert_vote(target: LikeTarget, *, user_id: int, target_id: int, is_like: bool) -> db.QueryResult:
    return await db.query(target.upsert, user_id, target_id, is_like)
