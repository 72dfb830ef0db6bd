"""
Input sanitization.

Free text is HTML-escaped before it is stored or bound into a query.
Paging and search values from the query string are coerced to safe types.
"""

from __future__ import annotations

import html
import re
from typing import Any

_CONTROL_CHARS = re.compile(r"[\x00-\x08\x0b\x0c\x0e-\x1f\x7f]")


def sanitize(value: Any) -> Any:
    """
    Escape `&`, `<` and `>` in strings; other types pass through untouched.

    Unescaping first makes the operation idempotent, so an already stored
    value can be sanitized again without double-escaping.
    """
    if not isinstance(value, str):
        return value
    return html.escape(html.unescape(value), quote=False)


def _to_int(raw: Any) -> int | None:
    if isinstance(raw, bool):
        return None
    if isinstance(raw, int):
        return raw
    text = str(raw if raw is not None else "").strip()
    if not re.fullmatch(r"[+-]?\d+", text):
        return None
    return int(text)


def clean_offset(raw: Any) -> int:
    value = _to_int(raw)
    if value is None or value < 0:
        return 0
    return value


def clean_limit(raw: Any, *, default: int = 10, maximum: int = 100) -> int:
    value = _to_int(raw)
    if value is None or value < 1:
        return default
    return min(value, maximum)


def clean_search(raw: Any, *, max_length: int = 100) -> str:
    if raw is None:
        return ""
    term = _CONTROL_CHARS.sub("", str(raw)).strip()[:max_length]
    return sanitize(term).replace("-", " ")
