"""
Pydantic schemas for article and comment bodies.
"""

from __future__ import annotations

from pydantic import BaseModel


class ArticleRequest(BaseModel):
    topic: str | None = None
    title: str | None = None
    article: str | None = None


class CommentRequest(BaseModel):
    title: str | None = None
    comment: str | None = None
