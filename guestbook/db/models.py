"""SQLAlchemy models for the guestbook collection."""
from __future__ import annotations

from sqlalchemy import Column, String, Text

from .session import Base


class SignatureRecord(Base):
    __tablename__ = "signatures"

    id = Column(String(24), primary_key=True)
    name = Column(Text, nullable=False)
    message = Column(Text, nullable=True)
