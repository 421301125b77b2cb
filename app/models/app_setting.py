"""ORM model for global key/value application settings."""

from sqlalchemy import Boolean, Column, ForeignKey, Integer, String, Text, false

from app.models.base import Base, created_at_column, updated_at_column


class AppSetting(Base):
    """
    Global setting row (e.g. third-party editor API key).

    is_encrypted is stored as given; values are not encrypted at rest yet.
    """

    __tablename__ = "app_settings"

    id = Column(Integer, primary_key=True, autoincrement=True)
    key = Column(String(255), nullable=False, unique=True, index=True)
    value = Column(Text, nullable=False)
    is_encrypted = Column(Boolean, nullable=False, default=False, server_default=false())
    created_by = Column(Integer, ForeignKey("users.id", ondelete="SET NULL"), nullable=True)
    updated_by = Column(Integer, ForeignKey("users.id", ondelete="SET NULL"), nullable=True)
    created_at = created_at_column()
    updated_at = updated_at_column()
