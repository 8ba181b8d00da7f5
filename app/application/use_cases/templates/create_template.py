"""Use case for creating templates."""

from sqlalchemy.orm import Session

from app.domain.entities import Template
from app.infrastructure.database import transaction
from app.infrastructure.repositories import TemplateRepository
from app.utils import now_in_app_timezone


def normalize_template_name(name: str) -> str:
    normalized_name = (name or "").strip()
    if not normalized_name:
        raise ValueError("El nombre de la plantilla no puede estar vacío")
    return normalized_name


def create_template(session: Session, *, name: str, context_id: int) -> Template:
    """Create an empty template owned by ``context_id``."""

    now = now_in_app_timezone()
    template = Template(
        id=None,
        name=normalize_template_name(name),
        context_id=context_id,
        created_at=now,
        updated_at=now,
    )
    with transaction(session):
        return TemplateRepository(session).create(template)


__all__ = ["create_template", "normalize_template_name"]
