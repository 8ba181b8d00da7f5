"""SQLAlchemy model for page elements."""

from sqlalchemy import Column, DateTime, ForeignKey, Integer, String
from sqlalchemy.dialects.postgresql import JSONB
from sqlalchemy.orm import relationship
from sqlalchemy.types import JSON

from app.infrastructure.database import Base
from app.utils import now_in_app_timezone

_payload_json_type = JSONB().with_variant(JSON(), "sqlite").with_variant(JSON(), "mssql")


class ElementModel(Base):
    """Database representation of an element placed on a page."""

    __tablename__ = "certificate_element"

    id = Column(Integer, primary_key=True, index=True)
    page_id = Column(
        Integer,
        ForeignKey("certificate_page.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    element_type = Column(String(50), nullable=False)
    name = Column(String(255), nullable=True)
    data = Column(_payload_json_type, nullable=True)
    sequence = Column(Integer, nullable=False)
    created_at = Column(
        DateTime(timezone=True), nullable=False, default=now_in_app_timezone
    )
    updated_at = Column(
        DateTime(timezone=True),
        nullable=False,
        default=now_in_app_timezone,
        onupdate=now_in_app_timezone,
    )

    page = relationship("PageModel", back_populates="elements")


__all__ = ["ElementModel"]
