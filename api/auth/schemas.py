"""
Auth API schemas (request models).

Fields are optional on purpose: length and presence rules live in
`core/validation.py` so every violation is reported together.
"""

from __future__ import annotations

from pydantic import BaseModel


class RegisterRequest(BaseModel):
    username: str | None = None
    name: str | None = None
    password: str | None = None


class LoginRequest(BaseModel):
    username: str | None = None
    password: str | None = None
