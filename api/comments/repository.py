"""
Comment persistence (raw SQL).
"""

from __future__ import annotations

from core import db


async def insert_comment(*, user_id: int, article_id: int, title: str, comment: str) -> db.QueryResult:
    return await db.query(
        """
        INSERT INTO comments (userid, articleid, title, comment)
        VALUES ($1, $2, $3, $4)
        RETURNING *
        """,
        user_id,
        article_id,
        title,
        comment,
    )


async def update_comment(comment_id: int, *, title: str, comment: str) -> db.QueryResult:
    return await db.query(
        """
        UPDATE comments
        SET (title, comment) = ($1, $2)
        WHERE id = $3
        RETURNING *
        """,
        title,
        comment,
        comment_id,
    )
