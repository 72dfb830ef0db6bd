"""
User business logic.

Scope:
- registration record creation and self-service profile changes
- paginated listing/search and per-user content
- admin-request lifecycle (pending -> admin, or back)
"""

from __future__ import annotations

from typing import Any

from auth import repository as auth_repository
from auth import security
from core import queries
from core.envelope import Result, error_response, success_response
from core.errors import NotFound, ValidationError
from core.sanitize import sanitize
from core.tables import USER_ARTICLES, USER_COMMENTS, Table
from core.validation import validate_user

from . import repository

USER_CONTENT = {
    "articles": USER_ARTICLES,
    "comments": USER_COMMENTS,
}


async def create_user(*, username: Any, name: Any, password: Any, rounds: int = 11) -> Result:
    """
    Validate the escaped display fields, so the stored row passes the same
    rules a later patch re-applies. The password is checked raw.
    """
    clean_username = sanitize(username)
    clean_name = sanitize(name)

    validation = validate_user(username=clean_username, name=clean_name, password=password)
    if validation:
        return error_response(ValidationError(validation=validation))

    result = await auth_repository.create_user(
        username=clean_username,
        name=clean_name,
        password_hash=security.hash_password(password, rounds=rounds),
    )
    if not result.ok:
        return error_response(queries.query_error("Error creating user", result))

    return success_response(result.first)


async def patch_user(
    user: dict,
    *,
    name: Any = None,
    username: Any = None,
    password: Any = None,
    admin: bool | None = None,
    pending: bool | None = None,
    rounds: int = 11,
) -> Result:
    """
    Update a user; omitted fields keep their stored value.

    The stored password is a hash and is never re-validated, so password
    errors only count when a new password was supplied.
    """
    clean_name = user["name"] if name is None else sanitize(name)
    clean_username = user["username"] if username is None else sanitize(username)
    next_admin = bool(user["admin"]) if admin is None else admin
    next_pending = bool(user["pending"]) if pending is None else pending

    validation = validate_user(username=clean_username, name=clean_name, password=password)
    if password is None:
        validation = [v for v in validation if v.field != "password"]
    if validation:
        return error_response(ValidationError(validation=validation))

    password_hash = None
    if password is not None:
        password_hash = security.hash_password(password, rounds=rounds)

    result = await repository.update_user(
        int(user["id"]),
        name=clean_name,
        username=clean_username,
        admin=next_admin,
        pending=next_pending,
        password_hash=password_hash,
    )
    if not result.ok:
        return error_response(queries.query_error("Error updating user", result))

    if result.first is None:
        return error_response(NotFound("User not found"))

    return success_response(result.first)


async def get_users(
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
            Table.USERS,
            search=search,
            offset=offset,
            limit=limit,
            base_url=base_url,
            default_limit=default_limit,
            max_limit=max_limit,
        )
    return await queries.get_all(
        Table.USERS,
        offset=offset,
        limit=limit,
        base_url=base_url,
        default_limit=default_limit,
        max_limit=max_limit,
    )


async def delete_user(user_id: int) -> Result:
    return await queries.delete_record_by_id(Table.USERS, user_id)


async def get_user_content(user_id: int, kind: str) -> Result:
    return await queries.get_children(USER_CONTENT[kind], user_id)


async def _set_pending(user: dict, pending: bool) -> Result:
    if user["admin"] or bool(user["pending"]) == pending:
        return success_response(user)
    return await patch_user(user, pending=pending)


async def request_admin(user: dict) -> Result:
    return await _set_pending(user, True)


async def cancel_admin_request(user: dict) -> Result:
    return await _set_pending(user, False)


async def _respond_to_admin_request(target: dict, admin: bool) -> Result:
    if bool(target["admin"]) == admin:
        return success_response(target)
    return await patch_user(target, admin=admin, pending=False)


async def accept_admin(target: dict) -> Result:
    return await _respond_to_admin_request(target, True)


async def decline_admin(target: dict) -> Result:
    return await _respond_to_admin_request(target, False)
