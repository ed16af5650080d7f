# app/services/auth_service.py
from functools import lru_cache
import jwt
from sqlalchemy.orm import Session

from app.data.models.admin_user import AdminUserModel
from app.domain.schemas import TokenOut
from app.repos.admin_repo import AdminRepo
from app.utils import settings
from app.utils.logging import get_logger
from app.utils.passwords import hash_password, verify_password
from app.utils.tokens import TokenSigner

logger = get_logger(__name__)


def default_signer() -> TokenSigner:
    return TokenSigner(
        secret=settings.ADMIN_TOKEN_SECRET,
        ttl_seconds=settings.ADMIN_TOKEN_TTL_SECONDS,
        require_exp=settings.ADMIN_TOKEN_REQUIRE_EXP,
    )


@lru_cache(maxsize=1)
def _dummy_hash() -> str:
    return hash_password("not-a-real-password")


class AuthService:
    """
    Stateless admin authentication: login issues a signed token, verify checks
    signature, expiry and that the subject still exists. No token is stored.
    """

    def __init__(self, db: Session, signer: TokenSigner | None = None):
        self.repo = AdminRepo(db)
        self.signer = signer or default_signer()

    def login(self, username: str, password: str) -> TokenOut | None:
        admin = self.repo.get_by_username(username)

        if not admin:
            #same work as a wrong password, no username enumeration via timing
            verify_password(password, _dummy_hash())
            logger.info("Admin login failed")
            return None

        if not verify_password(password, admin.password_hash):
            logger.info("Admin login failed")
            return None

        token = self.signer.issue(admin.id, username=admin.username, email=admin.email)
        logger.info(f"Admin {admin.id} logged in")
        return TokenOut(token=token)

    def verify(self, token: str | None) -> AdminUserModel | None:
        if not token or not isinstance(token, str):
            return None

        try:
            claims = self.signer.decode(token)
        except jwt.InvalidTokenError as e:
            logger.info(f"Admin token rejected: {e}")
            return None

        #sub is the admin id as a decimal string
        subject = claims.get("sub")
        if not isinstance(subject, str) or not subject.isdigit():
            logger.info("Admin token rejected: missing or non-numeric subject")
            return None
        subject = int(subject)

        admin = self.repo.get_admin(subject)
        if not admin:
            logger.info(f"Admin token rejected: principal {subject} no longer exists")
        return admin

    def create_admin(self, username: str, email: str, password: str) -> AdminUserModel:
        """Provisioning helper (seed script, tests); not exposed over HTTP."""
        if self.repo.get_by_username(username):
            raise ValueError(f"Admin {username!r} already exists")

        admin = self.repo.create_admin(
            AdminUserModel(
                username=username,
                email=email,
                password_hash=hash_password(password),
            )
        )
        logger.info(f"Provisioned admin {admin.id} ({username})")
        return admin
