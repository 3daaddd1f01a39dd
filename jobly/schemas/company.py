from __future__ import annotations

import re

from pydantic import BaseModel, ConfigDict, Field, field_validator

from jobly.schemas.job import JobSummary

_HANDLE_RE = re.compile(r"^[a-zA-Z0-9_-]+$")


class CompanyBase(BaseModel):
    name: str = Field(min_length=1, max_length=255)
    num_employees: int | None = Field(default=None, ge=0)
    description: str | None = None
    logo_url: str | None = None


class CompanyCreate(CompanyBase):
    handle: str = Field(min_length=1, max_length=25)

    @field_validator("handle")
    @classmethod
    def _validate_handle(cls, v: str) -> str:
        if not _HANDLE_RE.match(v):
            raise ValueError("handle may only contain letters, digits, '-' and '_'")
        return v


class CompanyUpdate(BaseModel):
    name: str | None = Field(default=None, min_length=1, max_length=255)
    num_employees: int | None = Field(default=None, ge=0)
    description: str | None = None
    logo_url: str | None = None

    @field_validator("name")
    @classmethod
    def _reject_null_name(cls, v: str | None) -> str:
        if v is None:
            raise ValueError("name may not be null")
        return v


class CompanyRead(CompanyBase):
    handle: str

    model_config = ConfigDict(from_attributes=True)


class CompanyDetail(CompanyRead):
    jobs: list[JobSummary] = Field(default_factory=list)


class CompanySearch(BaseModel):
    search: str | None = None
    min_employees: int | None = Field(default=None, ge=0)
    max_employees: int | None = Field(default=None, ge=0)


class CompanyResponse(BaseModel):
    company: CompanyRead


class CompanyDetailResponse(BaseModel):
    company: CompanyDetail


class CompanyListResponse(BaseModel):
    companies: list[CompanyRead]
