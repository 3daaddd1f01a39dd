# user.py
from sqlalchemy import Boolean, Column, DateTime, String, Text, false
from sqlalchemy.sql import func
from jobly.database import Base


class User(Base):
    __tablename__ = "users"

    username = Column(String(25), primary_key=True, index=True)
    password = Column(String(255), nullable=False)
    first_name = Column(String(100), nullable=False)
    last_name = Column(String(100), nullable=False)
    email = Column(String(255), nullable=False)
    photo_url = Column(Text, nullable=True)
    is_admin = Column(Boolean, nullable=False, default=False, server_default=false())
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
