"""
Pydantic schemas for user bodies.
"""

from __future__ import annotations

from pydantic import BaseModel


class PatchUserRequest(BaseModel):
    name: str | None = None
    username: str | None = None
    password: str | None = None
