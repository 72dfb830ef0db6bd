"""
Per-entity field validation.

Each validator is pure and returns every violation it finds; an empty list
means the input is valid.
"""

from __future__ import annotations

from typing import Any

from .errors import FieldError


def _is_length(value: Any, *, min_len: int, max_len: int) -> bool:
    return isinstance(value, str) and min_len <= len(value) <= max_len


def _check(
    errors: list[FieldError],
    value: Any,
    *,
    field: str,
    label: str,
    min_len: int,
    max_len: int,
) -> None:
    if not _is_length(value, min_len=min_len, max_len=max_len):
        errors.append(
            FieldError(
                field=field,
                message=f"{label} must be a string of length {min_len} to {max_len} characters",
            )
        )


def validate_user(*, username: Any, name: Any, password: Any) -> list[FieldError]:
    errors: list[FieldError] = []
    _check(errors, username, field="username", label="Username", min_len=3, max_len=15)
    _check(errors, password, field="password", label="Password", min_len=5, max_len=25)
    _check(errors, name, field="name", label="Name", min_len=1, max_len=40)
    return errors


def validate_topic(topic: Any) -> list[FieldError]:
    errors: list[FieldError] = []
    _check(errors, topic, field="topic", label="Topic", min_len=2, max_len=30)
    return errors


def validate_article(
    *,
    topic: Any,
    title: Any,
    article: Any,
    topic_exists: bool = True,
) -> list[FieldError]:
    errors = validate_topic(topic)
    if not errors and not topic_exists:
        errors.append(FieldError(field="topic", message=f'Topic "{topic}" does not exist'))
    _check(errors, title, field="title", label="Title", min_len=1, max_len=50)
    _check(errors, article, field="article", label="Article", min_len=1, max_len=500)
    return errors


def validate_comment(*, title: Any, comment: Any) -> list[FieldError]:
    errors: list[FieldError] = []
    _check(errors, title, field="title", label="Title", min_len=1, max_len=25)
    _check(errors, comment, field="comment", label="Comment", min_len=1, max_len=200)
    return errors
