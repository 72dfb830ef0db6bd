"""
Auth persistence helpers.
"""

from __future__ import annotations

from core import db
from core.tables import USER_COLUMNS


async def create_user(
    *,
    username: str,
    name: str,
    password_hash: str,
    admin: bool = False,
    pending: bool = False,
) -> db.QueryResult:
    return await db.query(
        f"""
        INSERT INTO users (username, name, password, admin, pending)
        VALUES ($1, $2, $3, $4, $5)
        RETURNING {USER_COLUMNS}
        """,
        username,
        name,
        password_hash,
        admin,
        pending,
    )


async def get_users_by_username(username: str) -> db.QueryResult:
    # Includes the password hash; only used for login.
    return await db.query(
        """
        SELECT id, username, name, password, admin, pending
        FROM users
        WHERE username = $1
        """,
        username,
    )
