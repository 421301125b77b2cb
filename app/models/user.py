"""ORM model for application users (auth and tenant membership)."""

from sqlalchemy import Boolean, Column, ForeignKey, Integer, String, true
from sqlalchemy.orm import relationship

from app.models.base import Base, created_at_column, updated_at_column


class User(Base):
    """
    User account; belongs to exactly one company.

    role: 'user' or 'system_admin'
    """

    __tablename__ = "users"

    id = Column(Integer, primary_key=True, autoincrement=True)
    company_id = Column(
        Integer,
        ForeignKey("companies.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    email = Column(String(255), nullable=False, unique=True, index=True)
    password_hash = Column(String(255), nullable=False)
    first_name = Column(String(100), nullable=False)
    last_name = Column(String(100), nullable=False)
    account_type = Column(String(32), nullable=False, default="company")
    role = Column(String(32), nullable=False, default="user")
    job_title = Column(String(100), nullable=True)
    department = Column(String(100), nullable=True)
    is_active = Column(Boolean, nullable=False, default=True, server_default=true())
    created_at = created_at_column()
    updated_at = updated_at_column()

    company = relationship("Company", back_populates="users")
