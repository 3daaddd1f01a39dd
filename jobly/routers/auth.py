# auth.py
from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session
from jobly.database import get_db
from jobly.errors import UnauthorizedError
from jobly.schemas.user import TokenResponse, UserLogin
from jobly.services import auth_service


router = APIRouter()


@router.post("/login", response_model=TokenResponse)
def login_user(user_in: UserLogin, db: Session = Depends(get_db)) -> TokenResponse:
    try:
        token = auth_service.login(db, user_in.username, user_in.password)
    except UnauthorizedError as exc:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail=str(exc)) from exc
    return TokenResponse(token=token)
