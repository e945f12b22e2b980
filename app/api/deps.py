from fastapi import Depends, HTTPException, status
from fastapi.security import OAuth2PasswordBearer
from sqlalchemy.orm import Session

from app.core.security import ACCESS_TOKEN_TYPE, decode_token
from app.db import SessionLocal
from app.db.models.user import User
from app.domain.route_access import Role

# Tokens are issued by the identity provider, not by this API.
oauth2_scheme = OAuth2PasswordBearer(tokenUrl="/api/v1/auth/login")
optional_oauth2_scheme = OAuth2PasswordBearer(
    tokenUrl="/api/v1/auth/login", auto_error=False
)


def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def _credentials_exception(detail: str = "Could not validate credentials") -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=detail,
        headers={"WWW-Authenticate": "Bearer"},
    )


def _resolve_user(db: Session, token: str) -> User | None:
    """Return the active user a token belongs to, or None if it doesn't check out."""
    payload = decode_token(token)
    if payload is None:
        return None

    # Only access tokens identify a caller
    if payload.get("type") != ACCESS_TOKEN_TYPE:
        return None

    subject = payload.get("sub")
    try:
        user_id = int(subject)
    except (TypeError, ValueError):
        return None

    user = db.query(User).filter(User.id == user_id).first()
    if user is None or user.status != "ACTIVE":
        return None
    return user


def get_current_user(
    token: str = Depends(oauth2_scheme),
    db: Session = Depends(get_db),
) -> User:
    """Get the current authenticated user from JWT token."""
    user = _resolve_user(db, token)
    if user is None:
        raise _credentials_exception()
    return user


def get_optional_user(
    token: str | None = Depends(optional_oauth2_scheme),
    db: Session = Depends(get_db),
) -> User | None:
    """Like get_current_user, but anonymous or invalid callers resolve to None."""
    if token is None:
        return None
    return _resolve_user(db, token)


def require_roles(*roles: Role):
    """
    Create a dependency that requires the current user to have one of the specified roles.

    Example:
        Depends(require_roles(Role.ADMIN))
        Depends(require_roles(Role.ADMIN, Role.COACH))
    """
    allowed = {role.value for role in roles}

    def role_checker(current_user: User = Depends(get_current_user)) -> User:
        if current_user.role.name not in allowed:
            raise HTTPException(
                status_code=status.HTTP_403_FORBIDDEN,
                detail="Not enough permissions",
            )
        return current_user

    return role_checker
