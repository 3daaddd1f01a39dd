from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.orm import Session

from jobly.database import get_db
from jobly.errors import BadRequestError, ConflictError, NotFoundError
from jobly.routers.dependencies import require_admin
from jobly.schemas.company import (
    CompanyCreate,
    CompanyDetail,
    CompanyDetailResponse,
    CompanyListResponse,
    CompanyRead,
    CompanyResponse,
    CompanySearch,
    CompanyUpdate,
)
from jobly.schemas.user import MessageResponse, TokenData
from jobly.services import company_service


router = APIRouter(prefix="/companies", tags=["companies"])


@router.get("", response_model=CompanyListResponse)
def list_companies(
    search: str | None = Query(default=None),
    min_employees: int | None = Query(default=None, ge=0),
    max_employees: int | None = Query(default=None, ge=0),
    db: Session = Depends(get_db),
) -> CompanyListResponse:
    filters = CompanySearch(search=search, min_employees=min_employees, max_employees=max_employees)
    try:
        companies = company_service.find_all_companies(db, filters)
    except BadRequestError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc
    return CompanyListResponse(companies=[CompanyRead.model_validate(c) for c in companies])


@router.get("/{handle}", response_model=CompanyDetailResponse)
def read_company(handle: str, db: Session = Depends(get_db)) -> CompanyDetailResponse:
    try:
        company = company_service.find_company_by_handle(db, handle)
    except NotFoundError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)) from exc
    return CompanyDetailResponse(company=CompanyDetail.model_validate(company))


@router.post("", response_model=CompanyResponse, status_code=status.HTTP_201_CREATED)
def create_company(
    company_in: CompanyCreate,
    db: Session = Depends(get_db),
    _admin: TokenData = Depends(require_admin),
) -> CompanyResponse:
    try:
        company = company_service.create_company(db, company_in)
    except ConflictError as exc:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(exc)) from exc
    return CompanyResponse(company=CompanyRead.model_validate(company))


@router.patch("/{handle}", response_model=CompanyResponse)
def update_company(
    handle: str,
    update: CompanyUpdate,
    db: Session = Depends(get_db),
    _admin: TokenData = Depends(require_admin),
) -> CompanyResponse:
    try:
        company = company_service.update_company(db, handle, update)
    except NotFoundError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)) from exc
    except ConflictError as exc:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(exc)) from exc
    return CompanyResponse(company=CompanyRead.model_validate(company))


@router.delete("/{handle}", response_model=MessageResponse)
def delete_company(
    handle: str,
    db: Session = Depends(get_db),
    _admin: TokenData = Depends(require_admin),
) -> MessageResponse:
    try:
        company_service.remove_company(db, handle)
    except NotFoundError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)) from exc
    return MessageResponse(message="Company deleted")
