from __future__ import annotations

import logging

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from jobly.errors import BadRequestError, ConflictError, NotFoundError
from jobly.models.company import Company
from jobly.schemas.company import CompanyCreate, CompanySearch, CompanyUpdate

logger = logging.getLogger(__name__)


def escape_like(value: str) -> str:
    return value.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")


def find_all_companies(db: Session, filters: CompanySearch | None = None) -> list[Company]:
    """List companies ordered by name, optionally filtered.

    ``search`` is a case-insensitive substring match on the company name;
    ``min_employees``/``max_employees`` are inclusive bounds.
    """

    filters = filters or CompanySearch()
    if (
        filters.min_employees is not None
        and filters.max_employees is not None
        and filters.min_employees > filters.max_employees
    ):
        raise BadRequestError("min_employees cannot be greater than max_employees")

    q = db.query(Company)
    if filters.search:
        q = q.filter(Company.name.ilike(f"%{escape_like(filters.search.strip())}%", escape="\\"))
    if filters.min_employees is not None:
        q = q.filter(Company.num_employees >= filters.min_employees)
    if filters.max_employees is not None:
        q = q.filter(Company.num_employees <= filters.max_employees)
    return q.order_by(Company.name).all()


def find_company_by_handle(db: Session, handle: str) -> Company:
    company = db.get(Company, handle)
    if company is None:
        raise NotFoundError(f"There is no company with handle '{handle}'")
    return company


def _name_taken(db: Session, name: str, *, exclude_handle: str | None = None) -> bool:
    q = db.query(Company).filter(Company.name == name)
    if exclude_handle is not None:
        q = q.filter(Company.handle != exclude_handle)
    return q.first() is not None


def create_company(db: Session, company_in: CompanyCreate) -> Company:
    if db.get(Company, company_in.handle) is not None:
        raise ConflictError(f"Company handle '{company_in.handle}' is already taken")
    if _name_taken(db, company_in.name):
        raise ConflictError(f"Company name '{company_in.name}' is already taken")

    company = Company(**company_in.model_dump())
    db.add(company)
    try:
        db.commit()
    except IntegrityError as exc:
        db.rollback()
        raise ConflictError(f"Company '{company_in.handle}' already exists") from exc
    db.refresh(company)
    logger.info("companies.create handle=%s", company.handle)
    return company


def update_company(db: Session, handle: str, patch: CompanyUpdate) -> Company:
    company = find_company_by_handle(db, handle)
    update_data = patch.model_dump(exclude_unset=True)
    new_name = update_data.get("name")
    if new_name and new_name != company.name and _name_taken(db, new_name, exclude_handle=handle):
        raise ConflictError(f"Company name '{new_name}' is already taken")
    for field, value in update_data.items():
        setattr(company, field, value)
    db.add(company)
    try:
        db.commit()
    except IntegrityError as exc:
        # Another request took the name between the check and the commit.
        db.rollback()
        raise ConflictError(f"Company name '{new_name}' is already taken") from exc
    db.refresh(company)
    logger.info("companies.update handle=%s fields=%s", handle, sorted(update_data))
    return company


def remove_company(db: Session, handle: str) -> None:
    company = find_company_by_handle(db, handle)
    db.delete(company)
    db.commit()
    logger.info("companies.remove handle=%s", handle)
