"""SQLAlchemy ORM models."""

from app.models.app_setting import AppSetting
from app.models.base import Base
from app.models.company import Company
from app.models.company_info_block import CompanyInfoBlock
from app.models.content import Content
from app.models.department import Department
from app.models.position_description import PD_STATUSES, PositionDescription, Responsibility
from app.models.user import User

__all__ = [
    "AppSetting",
    "Base",
    "Company",
    "CompanyInfoBlock",
    "Content",
    "Department",
    "PD_STATUSES",
    "PositionDescription",
    "Responsibility",
    "User",
]
