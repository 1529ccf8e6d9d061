"""SQLAlchemy model holding the root document as a single JSON row."""
from __future__ import annotations

from sqlalchemy import JSON, Column, DateTime, Integer, func

from .session import Base

ROOT_DOCUMENT_ID = 1


class Document(Base):
    __tablename__ = "documents"

    id = Column(Integer, primary_key=True)
    body = Column(JSON, nullable=False)
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now(), nullable=False)
