from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, field_validator


class JobBase(BaseModel):
    title: str = Field(min_length=1, max_length=255)
    salary: float | None = Field(default=None, ge=0)
    equity: float | None = Field(default=None, ge=0, le=1)


class JobCreate(JobBase):
    company_handle: str = Field(min_length=1, max_length=25)


class JobUpdate(BaseModel):
    # id and company_handle are fixed once a job exists.
    title: str | None = Field(default=None, min_length=1, max_length=255)
    salary: float | None = Field(default=None, ge=0)
    equity: float | None = Field(default=None, ge=0, le=1)

    @field_validator("title")
    @classmethod
    def _reject_null_title(cls, v: str | None) -> str:
        if v is None:
            raise ValueError("title may not be null")
        return v


class JobSummary(JobBase):
    id: int
    date_posted: datetime | None = None

    model_config = ConfigDict(from_attributes=True)


class JobRead(JobSummary):
    company_handle: str


class JobResponse(BaseModel):
    job: JobRead


class JobListResponse(BaseModel):
    jobs: list[JobRead]
