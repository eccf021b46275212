"""Tests for token and password helpers."""

from datetime import timedelta

import pytest

from jobboard.services.auth import (
    create_access_token,
    create_user_token,
    decode_access_token,
    extract_token,
    hash_password,
    verify_password,
)


class TestPasswords:
    def test_hash_and_verify(self):
        digest = hash_password("correct horse")
        assert digest != "correct horse"
        assert verify_password("correct horse", digest)
        assert not verify_password("wrong horse", digest)

    def test_hashes_are_salted(self):
        assert hash_password("same") != hash_password("same")


class TestTokens:
    def test_user_token_claims(self, candidate):
        payload = decode_access_token(create_user_token(candidate))
        assert payload["sub"] == str(candidate.id)
        assert payload["email"] == candidate.email
        assert payload["name"] == candidate.full_name
        assert "exp" in payload

    def test_expired_token(self):
        token = create_access_token({"sub": "1"}, expires_delta=timedelta(seconds=-5))
        assert decode_access_token(token) is None

    def test_tampered_token(self):
        token = create_access_token({"sub": "1"})
        assert decode_access_token(token[:-2] + "xx") is None


class TestExtractToken:
    @pytest.mark.parametrize(
        "header,expected",
        [
            ("abc.def.ghi", "abc.def.ghi"),
            ("Bearer abc.def.ghi", "abc.def.ghi"),
            ("bearer   abc.def.ghi ", "abc.def.ghi"),
            ("", None),
            (None, None),
            ("Bearer ", None),
            ("Bearer", None),
            ("  bearer  ", None),
        ],
    )
    def test_extract(self, header, expected):
        assert extract_token(header) == expected
