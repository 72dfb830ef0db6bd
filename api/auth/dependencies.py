"""
Auth dependencies for protected FastAPI routes.
"""

from __future__ import annotations

from collections.abc import Sequence

from fastapi import Request

from core.config import Settings
from core.tables import Table

from . import guards


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def _extract_bearer_token(authorization: str | None) -> str | None:
    raw = (authorization or "").strip()
    parts = raw.split(" ", 1)
    if len(parts) != 2:
        return None

    scheme, token = parts[0].strip().lower(), parts[1].strip()
    if scheme != "bearer" or not token:
        return None
    return token


def policy(chain: Sequence[guards.Guard], table: Table | None = None, *, id_param: str = "id"):
    """
    Build a dependency that runs `chain` for the current request.

    `table` names where the `id_param` path parameter is looked up.
    """

    async def dependency(request: Request) -> guards.RequestContext:
        ctx = guards.RequestContext(
            settings=get_settings(request),
            token=_extract_bearer_token(request.headers.get("authorization")),
            table=table,
            raw_id=request.path_params.get(id_param),
        )
        return await guards.run_chain(ctx, chain)

    return dependency
