"""ORM model for company departments."""

from sqlalchemy import Boolean, Column, ForeignKey, Integer, String, true

from app.models.base import Base, created_at_column, updated_at_column


class Department(Base):
    __tablename__ = "department"

    id = Column(Integer, primary_key=True, autoincrement=True)
    company_id = Column(
        Integer,
        ForeignKey("companies.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    name = Column(String(100), nullable=False)
    is_active = Column(Boolean, nullable=False, default=True, server_default=true())
    created_at = created_at_column()
    updated_at = updated_at_column()
