from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.orm import Session

from jobly.database import get_db
from jobly.errors import BadRequestError, NotFoundError
from jobly.routers.dependencies import require_admin
from jobly.schemas.job import JobCreate, JobListResponse, JobRead, JobResponse, JobUpdate
from jobly.schemas.user import MessageResponse, TokenData
from jobly.services import job_service


router = APIRouter(prefix="/jobs", tags=["jobs"])


@router.get("", response_model=JobListResponse)
def list_jobs(
    search: str | None = Query(default=None),
    min_salary: float | None = Query(default=None, ge=0),
    min_equity: float | None = Query(default=None, ge=0, le=1),
    db: Session = Depends(get_db),
) -> JobListResponse:
    jobs = job_service.find_all_jobs(db, search=search, min_salary=min_salary, min_equity=min_equity)
    return JobListResponse(jobs=[JobRead.model_validate(j) for j in jobs])


@router.get("/{job_id}", response_model=JobResponse)
def read_job(job_id: int, db: Session = Depends(get_db)) -> JobResponse:
    try:
        job = job_service.find_job_by_id(db, job_id)
    except NotFoundError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)) from exc
    return JobResponse(job=JobRead.model_validate(job))


@router.post("", response_model=JobResponse, status_code=status.HTTP_201_CREATED)
def create_job(
    job_in: JobCreate,
    db: Session = Depends(get_db),
    _admin: TokenData = Depends(require_admin),
) -> JobResponse:
    try:
        job = job_service.create_job(db, job_in)
    except BadRequestError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc
    return JobResponse(job=JobRead.model_validate(job))


@router.patch("/{job_id}", response_model=JobResponse)
def update_job(
    job_id: int,
    update: JobUpdate,
    db: Session = Depends(get_db),
    _admin: TokenData = Depends(require_admin),
) -> JobResponse:
    try:
        job = job_service.update_job(db, job_id, update)
    except NotFoundError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)) from exc
    return JobResponse(job=JobRead.model_validate(job))


@router.delete("/{job_id}", response_model=MessageResponse)
def delete_job(
    job_id: int,
    db: Session = Depends(get_db),
    _admin: TokenData = Depends(require_admin),
) -> MessageResponse:
    try:
        job_service.remove_job(db, job_id)
    except NotFoundError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)) from exc
    return MessageResponse(message="Job deleted")
