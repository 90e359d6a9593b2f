"""Tests for password hashing and token issuing."""

import time

import pytest

from app.core.security import DEFAULT_TOKEN_PREFIX, PasswordHasher, TokenIssuer


@pytest.fixture
def hasher():
    return PasswordHasher()


# ======================================================================
# PasswordHasher
# ======================================================================


class TestPasswordHasher:
    def test_known_digest(self, hasher):
        # sha256("secret1")
        assert hasher.hash("secret1") == "5b11618c2e44027877d0cd0921ed166b9f176f50587fc91e7534dd2946db77d6"

    def test_deterministic(self, hasher):
        assert hasher.hash("hunter22") == hasher.hash("hunter22")

    def test_no_salt_equal_passwords_share_digest(self):
        assert PasswordHasher().hash("same-password") == PasswordHasher().hash("same-password")

    def test_hex_encoded_sha256_length(self, hasher):
        digest = hasher.hash("anything")
        assert len(digest) == 64
        int(digest, 16)

    def test_empty_password_accepted(self, hasher):
        assert hasher.verify("", hasher.hash(""))

    @pytest.mark.parametrize("password", ["secret1", "", "pässwörd", "a" * 500, " spaced "])
    def test_verify_own_hash(self, hasher, password):
        assert hasher.verify(password, hasher.hash(password)) is True

    @pytest.mark.parametrize("password, other", [("secret1", "secret2"), ("abc", "ABC"), ("x", ""), ("pw ", "pw")])
    def test_verify_other_hash(self, hasher, password, other):
        assert hasher.verify(password, hasher.hash(other)) is False

    def test_verify_rejects_plaintext_as_digest(self, hasher):
        assert hasher.verify("secret1", "secret1") is False


# ======================================================================
# TokenIssuer
# ======================================================================


class TestTokenIssuer:
    def test_token_is_prefix_plus_id(self):
        issued = TokenIssuer().issue("user-123")
        assert issued.token == DEFAULT_TOKEN_PREFIX + "user-123"

    def test_custom_prefix(self):
        assert TokenIssuer(prefix="hdr.").issue("42").token == "hdr.42"

    def test_same_id_same_token(self):
        issuer = TokenIssuer()
        assert issuer.issue("abc").token == issuer.issue("abc").token

    def test_expiry_in_the_future(self):
        now = int(time.time())
        issued = TokenIssuer(expire_minutes=60).issue("abc")
        assert now + 59 * 60 <= issued.expires_at <= now + 61 * 60
