"""ORM model for public site content addressed by key."""

from sqlalchemy import Column, String, Text

from app.models.base import Base


class Content(Base):
    __tablename__ = "content"

    key = Column(String(255), primary_key=True)
    value = Column(Text, nullable=False)
