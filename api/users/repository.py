"""
User persistence (raw SQL).
"""

from __future__ import annotations

from core import db
from core.tables import USER_COLUMNS


async def update_user(
    user_id: int,
    *,
    name: str,
    username: str,
    admin: bool,
    pending: bool,
    password_hash: str | None = None,
) -> db.QueryResult:
    if password_hash is None:
        return await db.query(
            f"""
            UPDATE users
            SET (name, username, admin, pending) = ($1, $2, $3, $4)
            WHERE id = $5
            RETURNING {USER_COLUMNS}
            """,
            name,
            username,
            admin,
            pending,
            user_id,
        )

    return await db.query(
        f"""
        UPDATE users
        SET (name, username, password, admin, pending) = ($1, $2, $3, $4, $5)
        WHERE id = $6
        RETURNING {USER_COLUMNS}
        """,
        name,
        username,
        password_hash,
        admin,
        pending,
        user_id,
    )
