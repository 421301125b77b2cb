"""ORM models for uploaded position descriptions and their weighted responsibilities."""

from sqlalchemy import (
    BigInteger,
    Boolean,
    CheckConstraint,
    Column,
    DateTime,
    Float,
    ForeignKey,
    Integer,
    String,
    Text,
    false,
    func,
)
from sqlalchemy.orm import relationship

from app.models.base import Base

PD_STATUSES = ("Draft", "In Review", "Published")


class PositionDescription(Base):
    """
    Uploaded job-description document plus review metadata.

    status: one of PD_STATUSES. ai_automation_score_sum is written by an
    external scoring job and only read here.
    """

    __tablename__ = "position_descriptions"
    __table_args__ = (
        CheckConstraint(
            "status IN (" + ", ".join(f"'{s}'" for s in PD_STATUSES) + ")",
            name="ck_position_descriptions_status",
        ),
    )

    id = Column(Integer, primary_key=True, autoincrement=True)
    company_id = Column(
        Integer,
        ForeignKey("companies.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    title = Column(String(200), nullable=False)
    file_name = Column(String(512), nullable=False)
    file_path = Column(String(1024), nullable=False)
    file_size = Column(BigInteger, nullable=False, default=0)
    upload_date = Column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
        index=True,
    )
    status = Column(String(32), nullable=False, default="Draft", server_default="Draft")
    department = Column(String(100), nullable=True)
    ai_automation_score_sum = Column(Float, nullable=True)

    responsibilities = relationship(
        "Responsibility",
        back_populates="position_description",
        cascade="all, delete-orphan",
        passive_deletes=True,
        order_by="Responsibility.id",
    )


class Responsibility(Base):
    """
    Weighted sub-task of a position description.

    responsibility_percentage is 0-100; the API keeps the sum across one
    PD's rows at or below 100. llm_desc maps to the quoted "LLM_Desc" column.
    """

    __tablename__ = "responsibilities"

    id = Column(Integer, primary_key=True, autoincrement=True)
    pd_id = Column(
        Integer,
        ForeignKey("position_descriptions.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    responsibility_name = Column(Text, nullable=False)
    responsibility_percentage = Column(Float, nullable=False, default=0)
    llm_desc = Column("LLM_Desc", Text, nullable=True)
    is_llm_version = Column(Boolean, nullable=False, default=False, server_default=false())
    ai_automation_score = Column(Float, nullable=True)
    ai_automation_percentage = Column(Float, nullable=True)
    ai_automation_reason = Column(Text, nullable=True)

    position_description = relationship("PositionDescription", back_populates="responsibilities")
