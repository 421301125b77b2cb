"""ORM model for companies, the tenant boundary for users and position descriptions."""

from sqlalchemy import Column, Integer, String, Text
from sqlalchemy.orm import relationship

from app.models.base import Base, created_at_column, updated_at_column


class Company(Base):
    """
    Tenant. Personal accounts get a single-user pseudo-company.

    account_type: 'personal' or 'company'
    """

    __tablename__ = "companies"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(255), nullable=False)
    industry = Column(String(255), nullable=True)
    company_size = Column(String(50), nullable=True)
    account_type = Column(String(32), nullable=False, default="company")
    website = Column(String(512), nullable=True)
    address = Column(Text, nullable=True)
    phone = Column(String(32), nullable=True)
    company_information = Column(Text, nullable=True)
    company_values = Column(Text, nullable=True)
    company_mission = Column(Text, nullable=True)
    created_at = created_at_column()
    updated_at = updated_at_column()

    users = relationship("User", back_populates="company", cascade="all, delete-orphan")
