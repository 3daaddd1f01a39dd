# users.py
from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session
from jobly.database import get_db
from jobly.errors import ConflictError, NotFoundError
from jobly.routers.dependencies import ensure_correct_user_or_admin, get_optional_claims
from jobly.schemas.user import (
    MessageResponse,
    TokenData,
    TokenResponse,
    UserCreate,
    UserListResponse,
    UserRead,
    UserResponse,
    UserUpdate,
)
from jobly.services import auth_service, user_service


router = APIRouter()


@router.get("", response_model=UserListResponse)
def list_users(db: Session = Depends(get_db)) -> UserListResponse:
    users = user_service.find_all_users(db)
    return UserListResponse(users=[UserRead.model_validate(u) for u in users])


@router.get("/{username}", response_model=UserResponse)
def read_user(username: str, db: Session = Depends(get_db)) -> UserResponse:
    try:
        user = user_service.find_user_by_username(db, username)
    except NotFoundError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)) from exc
    return UserResponse(user=UserRead.model_validate(user))


@router.post("", response_model=TokenResponse)
def register_user(
    user_in: UserCreate,
    db: Session = Depends(get_db),
    claims: TokenData | None = Depends(get_optional_claims),
) -> TokenResponse:
    if user_in.is_admin and not (claims and claims.is_admin):
        user_in = user_in.model_copy(update={"is_admin": False})
    try:
        user = user_service.create_user(db, user_in)
    except ConflictError as exc:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(exc)) from exc
    return TokenResponse(token=auth_service.issue_token(user))


# A missing target user is reported as 401 on PATCH/DELETE, same as a bad token.
@router.patch("/{username}", response_model=UserResponse)
def update_user(
    username: str,
    update: UserUpdate,
    db: Session = Depends(get_db),
    claims: TokenData = Depends(ensure_correct_user_or_admin),
) -> UserResponse:
    update_data = update.model_dump(exclude_unset=True)
    if not claims.is_admin:
        update_data.pop("is_admin", None)
    try:
        user = user_service.update_user(db, username, update_data)
    except NotFoundError as exc:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail=str(exc)) from exc
    return UserResponse(user=UserRead.model_validate(user))


@router.delete("/{username}", response_model=MessageResponse)
def delete_user(
    username: str,
    db: Session = Depends(get_db),
    claims: TokenData = Depends(ensure_correct_user_or_admin),
) -> MessageResponse:
    try:
        user_service.remove_user(db, username)
    except NotFoundError as exc:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail=str(exc)) from exc
    return MessageResponse(message="User deleted")
