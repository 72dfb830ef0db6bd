"""
Tests for password hashing and access tokens.
"""

import jwt
import pytest

from auth import security


class TestPasswordHashing:
    def test_hash_password_returns_bcrypt_hash(self):
        hashed = security.hash_password("pass12", rounds=4)
        assert hashed.startswith("$2b$04$")

    def test_verify_password_correct(self):
        hashed = security.hash_password("pass12", rounds=4)
        assert security.verify_password("pass12", hashed) is True

    def test_verify_password_incorrect(self):
        hashed = security.hash_password("pass12", rounds=4)
        assert security.verify_password("wrong", hashed) is False

    def test_verify_password_garbage_hash(self):
        assert security.verify_password("pass12", "not-a-hash") is False

    def test_empty_password_rejected(self):
        with pytest.raises(security.AuthSecurityError):
            security.hash_password("")


class TestAccessTokens:
    def test_round_trip(self, settings):
        token = security.build_access_token(user_id=7, settings=settings)
        payload = security.decode_access_token(token, settings=settings)
        assert payload["id"] == 7

    def test_expired_token_is_distinguished(self, settings):
        token = security.build_access_token(user_id=7, settings=settings, expires_in=-1)
        with pytest.raises(security.TokenExpiredError, match="expired token"):
            security.decode_access_token(token, settings=settings)

    def test_malformed_token(self, settings):
        with pytest.raises(security.AuthSecurityError, match="invalid token") as info:
            security.decode_access_token("not.a.token", settings=settings)
        assert not isinstance(info.value, security.TokenExpiredError)

    def test_wrong_secret(self, settings):
        token = jwt.encode({"id": 7}, "someone-else", algorithm="HS256")
        with pytest.raises(security.AuthSecurityError, match="invalid token"):
            security.decode_access_token(token, settings=settings)

    def test_missing_id_claim(self, settings):
        token = jwt.encode({"sub": "7"}, settings.jwt_secret, algorithm=settings.jwt_algorithm)
        with pytest.raises(security.AuthSecurityError):
            security.decode_access_token(token, settings=settings)
