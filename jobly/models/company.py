# company.py
from sqlalchemy import CheckConstraint, Column, Integer, String, Text
from sqlalchemy.orm import relationship
from jobly.database import Base


class Company(Base):
    __tablename__ = "companies"

    handle = Column(String(25), primary_key=True, index=True)
    name = Column(String(255), unique=True, nullable=False)
    num_employees = Column(Integer, nullable=True)
    description = Column(Text, nullable=True)
    logo_url = Column(Text, nullable=True)

    jobs = relationship(
        "Job",
        back_populates="company",
        cascade="all, delete-orphan",
        passive_deletes=True,
        order_by="Job.id",
    )

    __table_args__ = (
        CheckConstraint("num_employees IS NULL OR num_employees >= 0", name="ck_companies_num_employees"),
    )
