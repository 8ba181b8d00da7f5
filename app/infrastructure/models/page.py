"""SQLAlchemy model for template pages."""

from sqlalchemy import Column, DateTime, Float, ForeignKey, Integer
from sqlalchemy.orm import relationship

from app.infrastructure.database import Base
from app.utils import now_in_app_timezone


class PageModel(Base):
    """Database representation of a page inside a template."""

    __tablename__ = "certificate_page"

    id = Column(Integer, primary_key=True, index=True)
    template_id = Column(
        Integer,
        ForeignKey("certificate_template.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    width = Column(Float, nullable=False, default=210)
    height = Column(Float, nullable=False, default=297)
    left_margin = Column(Float, nullable=False, default=0)
    right_margin = Column(Float, nullable=False, default=0)
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

    template = relationship("TemplateModel", back_populates="pages")
    elements = relationship(
        "ElementModel",
        back_populates="page",
        order_by="ElementModel.sequence",
        passive_deletes=True,
    )


__all__ = ["PageModel"]
