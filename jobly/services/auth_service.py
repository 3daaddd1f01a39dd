# auth_service.py
import logging

from sqlalchemy.orm import Session

from jobly.errors import UnauthorizedError
from jobly.models.user import User
from jobly.schemas.user import TokenData
from jobly.utils.jwt_handler import create_access_token, decode_access_token
from jobly.utils.password_hash import verify_password

logger = logging.getLogger(__name__)


def issue_token(user: User) -> str:
    return create_access_token(
        {"sub": user.username, "username": user.username, "is_admin": bool(user.is_admin)}
    )


def login(db: Session, username: str, password: str) -> str:
    user = db.get(User, username)
    if user is None or not verify_password(password, user.password):
        logger.info("auth.login username=%s ok=False", username)
        raise UnauthorizedError("Invalid username/password")
    logger.info("auth.login username=%s ok=True", username)
    return issue_token(user)


def verify_token(token: str | None) -> TokenData:
    if not token:
        raise UnauthorizedError("Not authenticated")
    payload = decode_access_token(token)
    username = payload.get("username") or payload.get("sub")
    if not username:
        raise UnauthorizedError("Invalid token payload")
    return TokenData(username=str(username), is_admin=bool(payload.get("is_admin", False)))
