# __init__.py
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
from jobly.schemas.job import JobCreate, JobListResponse, JobRead, JobResponse, JobSummary, JobUpdate
from jobly.schemas.user import (
	MessageResponse,
	TokenData,
	TokenResponse,
	UserCreate,
	UserListResponse,
	UserLogin,
	UserRead,
	UserResponse,
	UserUpdate,
)

__all__ = [
	"CompanyCreate",
	"CompanyDetail",
	"CompanyDetailResponse",
	"CompanyListResponse",
	"CompanyRead",
	"CompanyResponse",
	"CompanySearch",
	"CompanyUpdate",
	"JobCreate",
	"JobListResponse",
	"JobRead",
	"JobResponse",
	"JobSummary",
	"JobUpdate",
	"MessageResponse",
	"TokenData",
	"TokenResponse",
	"UserCreate",
	"UserListResponse",
	"UserLogin",
	"UserRead",
	"UserResponse",
	"UserUpdate",
]
