"""
Uniform result envelope and pagination links.

Entity operations return a `Result` instead of raising for expected failures:

    {"success": true, "item": ...}
    {"success": false, "code": 404, "obj": {"error": "...", "validation": [...]}}
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any
from urllib.parse import urlencode

from .errors import ApiError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Result:
    success: bool
    item: Any = None
    error: ApiError | None = None

    @property
    def code(self) -> int:
        return 200 if self.error is None else self.error.status_code

    @property
    def obj(self) -> dict[str, Any]:
        return {} if self.error is None else self.error.to_body()


def success_response(item: Any) -> Result:
    return Result(success=True, item=item)


def error_response(error: ApiError) -> Result:
    logger.warning(
        "error_response code=%s error=%s details=%s validation=%s",
        error.status_code,
        error.error,
        error.details,
        [v.to_dict() for v in error.validation],
    )
    return Result(success=False, error=error)


def _href(base_url: str, path: str, *, offset: int, limit: int, search: str | None) -> str:
    params: list[tuple[str, Any]] = []
    if search:
        params.append(("search", search))
    params.extend([("offset", offset), ("limit", limit)])
    return f"{base_url.rstrip('/')}/{path.strip('/')}?{urlencode(params)}"


def prepare_result(
    rows: list[dict[str, Any]],
    *,
    path: str,
    offset: int,
    limit: int,
    base_url: str,
    search: str | None = None,
) -> dict[str, Any]:
    """
    Wrap one page of rows with `self`/`prev`/`next` links.

    `next` is present whenever a full page came back, so a result set ending
    exactly on a page boundary still advertises one (empty) next page.
    """
    links: dict[str, dict[str, str]] = {
        "self": {"href": _href(base_url, path, offset=offset, limit=limit, search=search)},
    }

    if offset > 0:
        links["prev"] = {
            "href": _href(base_url, path, offset=max(offset - limit, 0), limit=limit, search=search),
        }

    if not len(rows) < limit:
        links["next"] = {
            "href": _href(base_url, path, offset=offset + limit, limit=limit, search=search),
        }

    return {
        "links": links,
        "limit": limit,
        "offset": offset,
        "items": rows,
    }
