"""
Topic persistence (raw SQL).
"""

from __future__ import annotations

from core import db


async def insert_topic(name: str) -> db.QueryResult:
    return await db.query(
        """
        INSERT INTO topics (name)
        VALUES ($1)
        RETURNING *
        """,
        name,
    )


async def update_topic(topic_id: int, *, name: str) -> db.QueryResult:
    return await db.query(
        """
        UPDATE topics
        SET name = $1
        WHERE id = $2
        RETURNING *
        """,
        name,
        topic_id,
    )


async def topic_exists(name: str) -> db.QueryResult:
    return await db.query(
        """
        SELECT 1 AS ok
        FROM topics
        WHERE name = $1
        LIMIT 1
        """,
        name,
    )
