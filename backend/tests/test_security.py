"""
Tests for password hashing and token issuance.
"""

from datetime import timedelta

import pytest
from jose import jwt

from skillsphere.core.exceptions import InvalidToken, TokenExpired
from skillsphere.core.security import MAX_PASSWORD_BYTES, TokenIssuer, is_hashable_password


class TestPasswordHasher:
    def test_hash_is_not_plaintext(self, hasher):
        hashed = hasher.hash("secret123")
        assert hashed != "secret123"
        assert "secret123" not in hashed

    def test_same_password_hashes_differently(self, hasher):
        assert hasher.hash("secret123") != hasher.hash("secret123")

    def test_verify_matching_password(self, hasher):
        assert hasher.verify("secret123", hasher.hash("secret123")) is True

    def test_verify_other_password(self, hasher):
        assert hasher.verify("secret123", hasher.hash("secret124")) is False

    @pytest.mark.parametrize("bad_hash", ["", "not-a-hash", "$2b$04$tooshort"])
    def test_malformed_hash_fails_closed(self, hasher, bad_hash):
        assert hasher.verify("secret123", bad_hash) is False

    def test_none_hash_fails_closed(self, hasher):
        assert hasher.verify("secret123", None) is False

    def test_work_factor_is_applied(self, hasher):
        assert hasher.hash("secret123").startswith("$2b$04$")

    def test_dummy_verify_never_matches(self, hasher):
        assert hasher.dummy_verify() is False


class TestTokenIssuer:
    def test_issue_and_verify(self, token_issuer):
        token = token_issuer.issue(42)
        assert token_issuer.verify(token) == "42"

    def test_claims(self, token_issuer):
        claims = jwt.get_unverified_claims(token_issuer.issue(7))
        assert claims["sub"] == "7"
        assert claims["userId"] == "7"
        assert claims["exp"] - claims["iat"] == 3600

    def test_expired_token(self, token_issuer):
        token = token_issuer.issue(1, expires_delta=timedelta(seconds=-10))
        with pytest.raises(TokenExpired):
            token_issuer.verify(token)

    def test_wrong_key(self, token_issuer):
        other = TokenIssuer(secret_key="another-key")
        with pytest.raises(InvalidToken):
            token_issuer.verify(other.issue(1))

    def test_garbage_token(self, token_issuer):
        with pytest.raises(InvalidToken):
            token_issuer.verify("definitely.not.a-token")

    def test_token_without_subject(self, token_issuer):
        token = jwt.encode({"foo": "bar"}, token_issuer.secret_key, algorithm="HS256")
        with pytest.raises(InvalidToken):
            token_issuer.verify(token)


class TestHashablePassword:
    def test_accepts_limit(self):
        assert is_hashable_password("p" * MAX_PASSWORD_BYTES)

    def test_rejects_over_limit(self):
        assert not is_hashable_password("p" * (MAX_PASSWORD_BYTES + 1))

    def test_counts_utf8_bytes(self):
        # two bytes each in UTF-8
        assert not is_hashable_password("é" * (MAX_PASSWORD_BYTES // 2 + 1))

    def test_rejects_nul(self):
        assert not is_hashable_password("ab\x00cd")
