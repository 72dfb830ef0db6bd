"""
Authorization and record-loading chain.

A guard takes a `RequestContext` and either returns a new (augmented)
context or raises an `ApiError`, which ends the request. Policies are plain
tuples of guards run in order; later guards rely on what earlier ones added
(`require_owner_auth` expects both `user` and `record`).
"""

from __future__ import annotations

import re
from collections.abc import Awaitable, Callable, Sequence
from dataclasses import dataclass, replace
from typing import Any

from core import queries
from core.config import Settings
from core.errors import Forbidden, NotFound, ServerFault, Unauthorized, ValidationError
from core.tables import MAX_ID, RECORD_TABLES, Table

from . import service

SELF_ID = "me"

_INT_RE = re.compile(r"[+-]?\d+")


@dataclass(frozen=True)
class RequestContext:
    settings: Settings
    token: str | None = None
    table: Table | None = None
    raw_id: str | None = None
    user: dict[str, Any] | None = None
    record: dict[str, Any] | None = None


Guard = Callable[[RequestContext], Awaitable[RequestContext]]


def parse_record_id(raw_id: str) -> int:
    if not _INT_RE.fullmatch(raw_id):
        raise ValidationError("ID is not an integer")
    record_id = int(raw_id)
    # No row can carry an id outside the column range.
    if not -MAX_ID - 1 <= record_id <= MAX_ID:
        raise NotFound("Record not found")
    return record_id


async def require_auth(ctx: RequestContext) -> RequestContext:
    if not ctx.token:
        raise Unauthorized("invalid token")
    user = await service.get_user_from_access_token(ctx.token, ctx.settings)
    return replace(ctx, user=user)


async def add_record_to_request(ctx: RequestContext) -> RequestContext:
    if ctx.user is None:
        raise ServerFault(details="add_record_to_request ran before require_auth")

    user_id = int(ctx.user["id"])
    raw_id = (ctx.raw_id or "").strip()

    if ctx.table is Table.USERS and raw_id == SELF_ID:
        record_id = user_id
    else:
        record_id = parse_record_id(raw_id)

    if ctx.table not in RECORD_TABLES:
        table_name = ctx.table.value if ctx.table is not None else None
        raise ValidationError(f"{table_name} is not a valid table name")

    # Own user data is already loaded.
    if ctx.table is Table.USERS and record_id == user_id:
        return replace(ctx, record={**ctx.user, "userid": user_id})

    result = await queries.get_record_by_id(ctx.table, record_id)
    if not result.success:
        raise result.error

    return replace(ctx, record=result.item)


async def require_admin_auth(ctx: RequestContext) -> RequestContext:
    if ctx.user and ctx.user.get("admin"):
        return ctx
    raise Forbidden()


def _is_owner(ctx: RequestContext) -> bool:
    if ctx.user is None or ctx.record is None:
        raise ServerFault(details="ownership check ran without user and record")
    return ctx.record.get("userid") == ctx.user["id"]


async def require_owner_auth(ctx: RequestContext) -> RequestContext:
    if _is_owner(ctx):
        return ctx
    raise Forbidden()


async def require_owner_or_admin_auth(ctx: RequestContext) -> RequestContext:
    if _is_owner(ctx) or ctx.user.get("admin"):
        return ctx
    raise Forbidden()


async def run_chain(ctx: RequestContext, guards: Sequence[Guard]) -> RequestContext:
    for guard in guards:
        ctx = await guard(ctx)
    return ctx


REQUIRE_AUTH: tuple[Guard, ...] = (require_auth,)
REQUIRE_ADMIN: tuple[Guard, ...] = (require_auth, require_admin_auth)
REQUIRE_OWNER: tuple[Guard, ...] = (require_auth, add_record_to_request, require_owner_auth)
REQUIRE_ADMIN_OR_OWNER: tuple[Guard, ...] = (
    require_auth,
    add_record_to_request,
    require_owner_or_admin_auth,
)
# Admin check first: non-admins are turned away before any record lookup.
REQUIRE_ADMIN_AND_RECORD: tuple[Guard, ...] = (require_auth, require_admin_auth, add_record_to_request)
AUTH_AND_RECORD: tuple[Guard, ...] = (require_auth, add_record_to_request)
