# app/utils/tokens.py
"""
HS256 JWT bearer tokens for admin sessions.

Nothing is stored server side: a token is valid while its signature matches
the current secret and its ``exp`` is in the future. Rotating the secret
invalidates every outstanding token.
"""
import time
from typing import Any, Dict

import jwt

from app.utils.logging import get_logger

logger = get_logger(__name__)

ALGORITHM = "HS256"


class TokenSigner:
    def __init__(self, secret: str, ttl_seconds: int, require_exp: bool = False):
        if not secret:
            raise ValueError("token secret must not be empty")
        self._secret = secret
        self.ttl_seconds = ttl_seconds
        self.require_exp = require_exp

    def encode(self, claims: Dict[str, Any]) -> str:
        return jwt.encode(claims, self._secret, algorithm=ALGORITHM)

    def issue(self, subject: int, now: float | None = None, **extra: Any) -> str:
        issued = int(now if now is not None else time.time())
        claims = {"sub": str(subject), **extra, "iat": issued, "exp": issued + self.ttl_seconds}
        return self.encode(claims)

    def decode(self, token: str) -> Dict[str, Any]:
        """
        Claims of a valid token. Raises jwt.InvalidTokenError (or a subclass)
        for anything malformed, tampered with, signed with another key or
        algorithm, or expired.
        """
        if not isinstance(token, str) or not token:
            raise jwt.DecodeError("empty token")

        options = {"require": ["exp"]} if self.require_exp else {}
        claims = jwt.decode(token, self._secret, algorithms=[ALGORITHM], options=options)

        if "exp" not in claims:
            logger.warning(f"Accepting admin token without exp claim (sub={claims.get('sub')!r})")

        return claims
