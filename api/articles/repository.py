"""
Article persistence (raw SQL).
"""

from __future__ import annotations

from core import db


async def insert_article(*, user_id: int, topic: str, title: str, article: str) -> db.QueryResult:
    return await db.query(
        """
        INSERT INTO articles (userid, topic, title, article)
        VALUES ($1, $2, $3, $4)
        RETURNING *
        """,
        user_id,
        topic,
        title,
        article,
    )


async def update_article(article_id: int, *, topic: str, title: str, article: str) -> db.QueryResult:
    return await db.query(
        """
        UPDATE articles
        SET (topic, title, article) = ($1, $2, $3)
        WHERE id = $4
        RETURNING *
        """,
        topic,
        title,
        article,
        article_id,
    )
