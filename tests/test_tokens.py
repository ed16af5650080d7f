import time

import jwt
import pytest

from app.utils.tokens import TokenSigner


class TestIssueAndDecode:
    def test_round_trip(self, signer):
        issued = int(time.time())
        token = signer.issue(7, username="admin", now=issued)

        claims = signer.decode(token)

        assert claims["sub"] == "7"
        assert claims["username"] == "admin"
        assert claims["iat"] == issued
        assert claims["exp"] == issued + 24 * 60 * 60

    def test_header_names_hs256(self, signer):
        header = jwt.get_unverified_header(signer.issue(1))

        assert header["alg"] == "HS256"

    def test_expired_at_exact_expiry(self, signer):
        token = signer.issue(1, now=time.time() - signer.ttl_seconds)

        with pytest.raises(jwt.ExpiredSignatureError):
            signer.decode(token)

    def test_wrong_secret(self, signer):
        token = TokenSigner("another-secret", ttl_seconds=60).issue(1)

        with pytest.raises(jwt.InvalidSignatureError):
            signer.decode(token)

    def test_tampered_payload(self, signer):
        header, _, signature = signer.issue(1).split(".")
        forged = jwt.encode({"sub": "2", "exp": time.time() + 3600}, "test-secret").split(".")[1]

        with pytest.raises(jwt.InvalidTokenError):
            signer.decode(f"{header}.{forged}.{signature}")

    @pytest.mark.parametrize("token", [None, "", "abc", "a.b", "a.b.c", "...", "a.b.c.d", 42])
    def test_malformed(self, signer, token):
        with pytest.raises(jwt.InvalidTokenError):
            signer.decode(token)

    def test_alg_none_is_refused(self, signer):
        token = jwt.encode({"sub": "1"}, None, algorithm="none")

        with pytest.raises(jwt.InvalidTokenError):
            signer.decode(token)

    def test_empty_secret_not_allowed(self):
        with pytest.raises(ValueError):
            TokenSigner("", ttl_seconds=60)


class TestMissingExpiry:
    def test_accepted_by_default(self, signer):
        token = signer.encode({"sub": "3"})

        assert signer.decode(token)["sub"] == "3"

    def test_rejected_when_expiry_required(self):
        strict = TokenSigner("test-secret", ttl_seconds=60, require_exp=True)
        token = strict.encode({"sub": "3"})

        with pytest.raises(jwt.MissingRequiredClaimError):
            strict.decode(token)

    def test_non_numeric_exp(self, signer):
        token = signer.encode({"sub": "3", "exp": "tomorrow"})

        with pytest.raises(jwt.InvalidTokenError):
            signer.decode(token)
