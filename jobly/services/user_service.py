# user_service.py
import logging
from typing import Any

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from jobly.errors import ConflictError, NotFoundError
from jobly.models.user import User
from jobly.schemas.user import UserCreate, UserUpdate
from jobly.utils.password_hash import hash_password

logger = logging.getLogger(__name__)


def find_all_users(db: Session) -> list[User]:
    return db.query(User).order_by(User.username).all()


def find_user_by_username(db: Session, username: str) -> User:
    user = db.get(User, username)
    if user is None:
        raise NotFoundError(f"There is no user with username '{username}'")
    return user


def create_user(db: Session, user_in: UserCreate) -> User:
    if db.get(User, user_in.username) is not None:
        raise ConflictError(f"Username '{user_in.username}' is already taken")

    user = User(
        username=user_in.username,
        password=hash_password(user_in.password),
        first_name=user_in.first_name,
        last_name=user_in.last_name,
        email=user_in.email,
        photo_url=user_in.photo_url,
        is_admin=user_in.is_admin,
    )
    db.add(user)
    try:
        db.commit()
    except IntegrityError as exc:
        # Lost a race with a concurrent insert of the same username.
        db.rollback()
        raise ConflictError(f"Username '{user_in.username}' is already taken") from exc
    db.refresh(user)
    logger.info("users.create username=%s is_admin=%s", user.username, user.is_admin)
    return user


def update_user(db: Session, username: str, patch: UserUpdate | dict[str, Any]) -> User:
    user = find_user_by_username(db, username)
    update_data = patch.model_dump(exclude_unset=True) if isinstance(patch, UserUpdate) else dict(patch)
    if "password" in update_data:
        update_data["password"] = hash_password(update_data["password"])
    for field, value in update_data.items():
        setattr(user, field, value)
    db.add(user)
    db.commit()
    db.refresh(user)
    logger.info("users.update username=%s fields=%s", username, sorted(update_data))
    return user


def remove_user(db: Session, username: str) -> None:
    user = find_user_by_username(db, username)
    db.delete(user)
    db.commit()
    logger.info("users.remove username=%s", username)
