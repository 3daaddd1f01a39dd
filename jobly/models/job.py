from __future__ import annotations

from sqlalchemy import CheckConstraint, Column, DateTime, Float, ForeignKey, Integer, String
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from jobly.database import Base


class Job(Base):
    __tablename__ = "jobs"

    id = Column(Integer, primary_key=True, index=True, autoincrement=True)
    title = Column(String(255), index=True, nullable=False)
    salary = Column(Float, nullable=True)
    equity = Column(Float, nullable=True)
    company_handle = Column(
        String(25),
        ForeignKey("companies.handle", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    date_posted = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)

    company = relationship("Company", back_populates="jobs")

    __table_args__ = (
        CheckConstraint("salary IS NULL OR salary >= 0", name="ck_jobs_salary"),
        CheckConstraint("equity IS NULL OR (equity >= 0 AND equity <= 1.0)", name="ck_jobs_equity"),
    )
