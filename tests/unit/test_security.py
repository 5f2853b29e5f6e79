"""Tests for password hashing, codes and JWT helpers."""

from datetime import timedelta

import pytest
from jose import jwt

from cinemahub.core import security
from cinemahub.core.config import settings
from cinemahub.core.security import (
    ACCESS_TOKEN_TYPE,
    DEV_FALLBACK_SECRET_KEY,
    RESET_TOKEN_TYPE,
    create_access_token,
    create_reset_token,
    decode_token,
    generate_otp,
    get_password_hash,
    get_secret_key,
    user_id_from_claims,
    verify_password,
)
from cinemahub.domain.exceptions import (
    ConfigurationError,
    InvalidOrExpiredTokenError,
    TokenExpiredError,
)


class TestPasswordHashing:

    @pytest.mark.parametrize("password", ["secret1", "pässwörd-ünïcode", "x" * 50])
    def test_hash_then_verify(self, password):
        hashed = get_password_hash(password)
        assert hashed != password
        assert verify_password(password, hashed)

    def test_other_password_is_rejected(self):
        hashed = get_password_hash("secret1")
        assert not verify_password("secret2", hashed)
        assert not verify_password("Secret1", hashed)

    def test_hashes_are_salted(self):
        assert get_password_hash("secret1") != get_password_hash("secret1")

    def test_missing_hash_never_matches(self):
        assert not verify_password("anything", None)
        assert not verify_password("", "")


class TestOtpGeneration:

    def test_codes_are_six_digits(self):
        for _ in range(200):
            code = generate_otp()
            assert len(code) == 6
            assert code.isdigit()
            assert 100000 <= int(code) <= 999999


class TestTokens:

    def test_access_token_claims(self):
        token = create_access_token(7, "alice@example.com", "alice")
        claims = decode_token(token, expected_type=ACCESS_TOKEN_TYPE)

        assert claims["sub"] == "7"
        assert claims["email"] == "alice@example.com"
        assert claims["username"] == "alice"
        assert claims["type"] == ACCESS_TOKEN_TYPE
        assert user_id_from_claims(claims) == 7

    def test_access_token_expires_after_seven_days(self):
        claims = decode_token(create_access_token(1, "a@example.com"))
        assert claims["exp"] - claims["iat"] == int(timedelta(days=7).total_seconds())

    def test_reset_tokens_are_unique(self):
        first = create_reset_token(1)
        second = create_reset_token(1)
        assert first != second
        assert decode_token(first, expected_type=RESET_TOKEN_TYPE)["sub"] == "1"

    def test_reset_token_is_not_a_session_token(self):
        with pytest.raises(InvalidOrExpiredTokenError):
            decode_token(create_reset_token(1), expected_type=ACCESS_TOKEN_TYPE)

    def test_expired_token(self):
        token = create_access_token(1, "a@example.com", expires_delta=timedelta(seconds=-5))
        with pytest.raises(TokenExpiredError):
            decode_token(token)

    def test_tampered_token(self):
        token = create_access_token(1, "a@example.com")
        header, _, signature = token.split(".")
        forged = jwt.encode({"sub": "2", "type": ACCESS_TOKEN_TYPE}, "other-key", algorithm="HS256")
        forged_payload = forged.split(".")[1]

        with pytest.raises(InvalidOrExpiredTokenError):
            decode_token(f"{header}.{forged_payload}.{signature}")

    def test_token_signed_with_another_key(self):
        token = jwt.encode({"sub": "1", "type": ACCESS_TOKEN_TYPE}, "other-key", algorithm="HS256")
        with pytest.raises(InvalidOrExpiredTokenError):
            decode_token(token)

    def test_token_without_subject(self):
        token = jwt.encode({"type": ACCESS_TOKEN_TYPE}, get_secret_key(), algorithm=settings.ALGORITHM)
        with pytest.raises(InvalidOrExpiredTokenError):
            decode_token(token)

    def test_garbage_token(self):
        with pytest.raises(InvalidOrExpiredTokenError):
            decode_token("not-a-jwt")

    def test_non_numeric_subject(self):
        with pytest.raises(InvalidOrExpiredTokenError):
            user_id_from_claims({"sub": "abc"})


class TestSecretKey:

    def test_configured_key_is_used(self, monkeypatch):
        monkeypatch.setattr(settings, "SECRET_KEY", "configured-key")
        assert get_secret_key() == "configured-key"

    def test_development_fallback_warns_once(self, monkeypatch, caplog):
        monkeypatch.setattr(settings, "SECRET_KEY", None)
        monkeypatch.setattr(settings, "ENVIRONMENT", "development")
        monkeypatch.setattr(security, "_fallback_secret_warned", False)

        with caplog.at_level("WARNING", logger="cinemahub.core.security"):
            assert get_secret_key() == DEV_FALLBACK_SECRET_KEY
            assert get_secret_key() == DEV_FALLBACK_SECRET_KEY

        warnings = [r for r in caplog.records if "SECRET_KEY is not set" in r.getMessage()]
        assert len(warnings) == 1

    def test_missing_key_outside_development_fails(self, monkeypatch):
        monkeypatch.setattr(settings, "SECRET_KEY", None)
        monkeypatch.setattr(settings, "ENVIRONMENT", "production")

        with pytest.raises(ConfigurationError):
            get_secret_key()
        with pytest.raises(ConfigurationError):
            create_access_token(1, "a@example.com")
