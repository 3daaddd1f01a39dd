from __future__ import annotations

import logging

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from jobly.errors import BadRequestError, NotFoundError
from jobly.models.company import Company
from jobly.models.job import Job
from jobly.services.company_service import escape_like
from jobly.schemas.job import JobCreate, JobUpdate

logger = logging.getLogger(__name__)


def find_all_jobs(
    db: Session,
    *,
    search: str | None = None,
    min_salary: float | None = None,
    min_equity: float | None = None,
) -> list[Job]:
    q = db.query(Job)
    if search:
        q = q.filter(Job.title.ilike(f"%{escape_like(search.strip())}%", escape="\\"))
    if min_salary is not None:
        q = q.filter(Job.salary >= min_salary)
    if min_equity is not None:
        q = q.filter(Job.equity >= min_equity)
    # Newest first; id breaks ties for rows posted in the same second.
    return q.order_by(Job.date_posted.desc(), Job.id.desc()).all()


def find_job_by_id(db: Session, job_id: int) -> Job:
    job = db.get(Job, job_id)
    if job is None:
        raise NotFoundError(f"There is no job with id {job_id}")
    return job


def _company_exists(db: Session, handle: str) -> bool:
    return db.get(Company, handle) is not None


def create_job(db: Session, job_in: JobCreate) -> Job:
    missing = f"There is no company with handle '{job_in.company_handle}'"
    if not _company_exists(db, job_in.company_handle):
        raise BadRequestError(missing)
    job = Job(**job_in.model_dump())
    db.add(job)
    try:
        db.commit()
    except IntegrityError as exc:
        # The company was deleted between the check and the insert.
        db.rollback()
        raise BadRequestError(missing) from exc
    db.refresh(job)
    logger.info("jobs.create id=%s company_handle=%s", job.id, job.company_handle)
    return job


def update_job(db: Session, job_id: int, patch: JobUpdate) -> Job:
    job = find_job_by_id(db, job_id)
    update_data = patch.model_dump(exclude_unset=True)
    for field, value in update_data.items():
        setattr(job, field, value)
    db.add(job)
    db.commit()
    db.refresh(job)
    logger.info("jobs.update id=%s fields=%s", job_id, sorted(update_data))
    return job


def remove_job(db: Session, job_id: int) -> None:
    job = find_job_by_id(db, job_id)
    db.delete(job)
    db.commit()
    logger.info("jobs.remove id=%s", job_id)
