from fastapi import Request, Depends
from sqlalchemy.orm import Session

from jobboard.database import get_db
from jobboard.errors import Unauthenticated, NotFound
from jobboard.models import User, UserRole
from jobboard.services.auth import decode_access_token, extract_token

AUTH_HEADER = "authorization"


def get_current_user_id(request: Request) -> int:
    """Resolve the caller's identity from the authorization header.

    Use this as a dependency for protected routes. Only the token is checked
    here; roles are left to the operation that needs them.
    """
    token = extract_token(request.headers.get(AUTH_HEADER))
    if not token:
        raise Unauthenticated("Not authenticated")

    payload = decode_access_token(token)
    if not payload:
        raise Unauthenticated("Invalid or expired token")

    try:
        user_id = int(payload.get("sub"))
    except (TypeError, ValueError):
        raise Unauthenticated("Invalid token payload")

    request.state.user_id = user_id
    return user_id


def get_current_user(
    user_id: int = Depends(get_current_user_id),
    db: Session = Depends(get_db),
) -> User:
    """Load the authenticated user's record. Raises 404 if it no longer exists."""
    user = db.query(User).filter(User.id == user_id).first()
    if not user:
        raise NotFound("User not found")
    return user


def get_user_with_role(db: Session, user_id: int, role: UserRole) -> User | None:
    """Return the user only if they hold ``role``."""
    return db.query(User).filter(User.id == user_id, User.role == role).first()
