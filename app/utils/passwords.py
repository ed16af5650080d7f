# app/utils/passwords.py
import hashlib
import hmac
import secrets

from app.utils.settings import PASSWORD_HASH_ITERATIONS

ALGORITHM = "pbkdf2_sha256"
SALT_BYTES = 16


def hash_password(password: str, iterations: int | None = None, salt: bytes | None = None) -> str:
    """
    Salted PBKDF2-SHA256, encoded as ``pbkdf2_sha256$<iterations>$<salt hex>$<hash hex>``.
    The iteration count travels with the hash so it can be raised later
    without invalidating stored credentials.
    """
    iterations = iterations or PASSWORD_HASH_ITERATIONS
    salt = salt if salt is not None else secrets.token_bytes(SALT_BYTES)
    digest = hashlib.pbkdf2_hmac("sha256", password.encode("utf-8"), salt, iterations)
    return f"{ALGORITHM}${iterations}${salt.hex()}${digest.hex()}"


def verify_password(password: str, encoded: str) -> bool:
    try:
        algorithm, iterations, salt_hex, digest_hex = encoded.split("$")
        if algorithm != ALGORITHM:
            return False
        salt = bytes.fromhex(salt_hex)
        expected = bytes.fromhex(digest_hex)
        rounds = int(iterations)
    except (AttributeError, ValueError):
        return False

    if rounds <= 0:
        return False

    candidate = hashlib.pbkdf2_hmac("sha256", password.encode("utf-8"), salt, rounds)
    return hmac.compare_digest(candidate, expected)
