# dependencies.py
import logging

from fastapi import Depends, HTTPException, Request, status
from fastapi.security import OAuth2PasswordBearer

from jobly.config import settings
from jobly.errors import UnauthorizedError
from jobly.schemas.user import TokenData
from jobly.services.auth_service import verify_token

logger = logging.getLogger(__name__)

oauth2_scheme = OAuth2PasswordBearer(tokenUrl="/users/login", auto_error=False)


async def _legacy_token(request: Request) -> str | None:
    token = request.query_params.get("_token")
    if token:
        return token
    if not (request.headers.get("content-type") or "").startswith("application/json"):
        return None
    try:
        body = await request.json()
    except ValueError:
        return None
    if isinstance(body, dict) and isinstance(body.get("_token"), str):
        return body["_token"]
    return None


async def get_request_token(request: Request, bearer: str | None = Depends(oauth2_scheme)) -> str | None:
    if bearer:
        return bearer
    if settings.accept_body_token:
        return await _legacy_token(request)
    return None


def get_optional_claims(token: str | None = Depends(get_request_token)) -> TokenData | None:
    if not token:
        return None
    try:
        return verify_token(token)
    except UnauthorizedError:
        return None


def get_current_claims(token: str | None = Depends(get_request_token)) -> TokenData:
    try:
        return verify_token(token)
    except UnauthorizedError as exc:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=str(exc),
            headers={"WWW-Authenticate": "Bearer"},
        ) from exc


def require_admin(claims: TokenData = Depends(get_current_claims)) -> TokenData:
    if not claims.is_admin:
        logger.info("auth.require_admin username=%s is_admin=False", claims.username)
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Admin access required")
    return claims


def ensure_correct_user_or_admin(username: str, claims: TokenData = Depends(get_current_claims)) -> TokenData:
    """Allow the owner of ``/users/{username}`` or any admin."""
    if claims.is_admin or claims.username == username:
        return claims
    raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Unauthorized")
