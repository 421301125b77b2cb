"""ORM model for per-company rich-text content blocks."""

from sqlalchemy import Boolean, Column, ForeignKey, Integer, String, Text, true

from app.models.base import Base, created_at_column, updated_at_column


class CompanyInfoBlock(Base):
    __tablename__ = "company_info_blocks"

    id = Column(Integer, primary_key=True, autoincrement=True)
    company_id = Column(
        Integer,
        ForeignKey("companies.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    title = Column(String(255), nullable=False)
    description = Column(Text, nullable=False)
    is_active = Column(Boolean, nullable=False, default=True, server_default=true())
    created_by = Column(Integer, ForeignKey("users.id", ondelete="SET NULL"), nullable=True)
    updated_by = Column(Integer, ForeignKey("users.id", ondelete="SET NULL"), nullable=True)
    created_at = created_at_column()
    updated_at = updated_at_column()
