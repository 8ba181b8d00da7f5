"""SQLAlchemy model for certificate templates."""

from sqlalchemy import Column, DateTime, Integer, String
from sqlalchemy.orm import relationship

from app.infrastructure.database import Base
from app.utils import now_in_app_timezone


class TemplateModel(Base):
    """Database representation of a template definition."""

    __tablename__ = "certificate_template"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(255), nullable=False)
    context_id = Column(Integer, nullable=False, index=True)
    created_at = Column(
        DateTime(timezone=True), nullable=False, default=now_in_app_timezone
    )
    updated_at = Column(
        DateTime(timezone=True),
        nullable=False,
        default=now_in_app_timezone,
        onupdate=now_in_app_timezone,
    )

    pages = relationship(
        "PageModel",
        back_populates="template",
        order_by="PageModel.sequence",
        passive_deletes=True,
    )


__all__ = ["TemplateModel"]
