# app/api/deps.py
from fastapi import Depends, Header, HTTPException
from sqlalchemy.orm import Session

from app.data.database import get_db
from app.data.models.admin_user import AdminUserModel
from app.services.auth_service import AuthService, default_signer
from app.utils.tokens import TokenSigner


def get_token_signer() -> TokenSigner:
    return default_signer()


def get_auth_service(
    db: Session = Depends(get_db),
    signer: TokenSigner = Depends(get_token_signer),
) -> AuthService:
    return AuthService(db, signer=signer)


def bearer_token(authorization: str | None) -> str | None:
    if not authorization:
        return None
    scheme, _, token = authorization.partition(" ")
    if scheme.lower() != "bearer" or not token.strip():
        return None
    return token.strip()


def require_admin(
    authorization: str | None = Header(default=None),
    auth: AuthService = Depends(get_auth_service),
) -> AdminUserModel:
    """Guard for every mutating admin route; runs before the handler body."""
    admin = auth.verify(bearer_token(authorization))
    if admin is None:
        raise HTTPException(
            status_code=401,
            detail="Unauthorized: invalid admin token",
            headers={"WWW-Authenticate": "Bearer"},
        )
    return admin
