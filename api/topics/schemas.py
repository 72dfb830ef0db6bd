"""
Pydantic schemas for topic bodies.
"""

from __future__ import annotations

from pydantic import BaseModel


class TopicRequest(BaseModel):
    topic: str | None = None
