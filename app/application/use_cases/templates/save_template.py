"""Use case for renaming a template."""

from dataclasses import replace

from sqlalchemy.orm import Session

from app.domain.entities import Template
from app.infrastructure.database import transaction
from app.infrastructure.repositories import TemplateRepository
from app.utils import now_in_app_timezone

from .create_template import normalize_template_name
from .lookups import require_template


def save_template(session: Session, *, template_id: int, name: str) -> Template:
    """Update the name of a template; pages and elements are untouched."""

    normalized_name = normalize_template_name(name)
    repository = TemplateRepository(session)
    with transaction(session):
        current = require_template(repository, template_id)
        return repository.update(
            replace(current, name=normalized_name, updated_at=now_in_app_timezone())
        )


__all__ = ["save_template"]
