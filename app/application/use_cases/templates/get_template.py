"""Use cases for reading templates."""

from collections.abc import Sequence

from sqlalchemy.orm import Session

from app.domain.entities import Template
from app.infrastructure.repositories import TemplateRepository

from .lookups import require_template


def get_template(session: Session, template_id: int) -> Template:
    """Return the template with its pages and elements in sequence order."""

    return require_template(TemplateRepository(session), template_id, with_pages=True)


def list_templates(session: Session, *, context_id: int | None = None) -> Sequence[Template]:
    return TemplateRepository(session).list(context_id=context_id)


__all__ = ["get_template", "list_templates"]
