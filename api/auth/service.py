"""
Auth business logic: registration, login and token-to-user resolution.
"""

from __future__ import annotations

import logging
from typing import Any

from core import queries
from core.config import Settings
from core.envelope import Result, error_response, success_response
from core.errors import FieldError, ServerFault, Unauthorized, ValidationError
from core.sanitize import sanitize
from core.tables import Table
from users import service as users_service

from . import repository, security

logger = logging.getLogger(__name__)


def create_token(user_id: int, settings: Settings) -> str:
    return security.build_access_token(user_id=user_id, settings=settings)


async def register(*, username: Any, name: Any, password: Any, settings: Settings) -> Result:
    result = await users_service.create_user(
        username=username,
        name=name,
        password=password,
        rounds=settings.bcrypt_rounds,
    )
    if not result.success:
        return result

    user = dict(result.item)
    user["token"] = create_token(int(user["id"]), settings)
    return success_response(user)


async def get_user_by_username(username: Any) -> Result:
    # Usernames are stored escaped.
    result = await repository.get_users_by_username(sanitize(str(username or "")))
    if not result.ok:
        return error_response(queries.query_error("Error finding user", result))

    if result.row_count == 0:
        return error_response(
            ValidationError(
                validation=[
                    FieldError(field="username", message=f"No user with username = {username} found"),
                ],
            )
        )

    if result.row_count > 1:
        return error_response(ServerFault(details=f"Expected exactly 1 user, got {result.row_count}"))

    return success_response(result.first)


async def login(*, username: Any, password: Any, settings: Settings) -> Result:
    result = await get_user_by_username(username)
    if not result.success:
        return result

    user = result.item
    if not security.verify_password(str(password or ""), str(user.get("password") or "")):
        return error_response(
            Unauthorized(
                "Invalid password",
                validation=[FieldError(field="password", message="Invalid password")],
            )
        )

    return success_response({"token": create_token(int(user["id"]), settings)})


async def get_user_from_access_token(access_token: str, settings: Settings) -> dict:
    """
    Decode the token and reload its user, so deleted or changed users are
    seen on the very next request.
    """
    try:
        payload = security.decode_access_token(access_token, settings=settings)
    except security.AuthSecurityError as exc:
        raise Unauthorized(str(exc)) from exc

    result = await queries.get_record_by_id(Table.USERS, int(payload["id"]))
    if not result.success:
        if result.code == 404:
            logger.info("token_user_missing user_id=%s", payload["id"])
            raise Unauthorized("invalid token")
        raise result.error

    return result.item
