"""Use case for appending a page to a template."""

import logging

from sqlalchemy.orm import Session

from app.config import get_settings
from app.domain.entities import Page
from app.domain.exceptions import NotFoundError
from app.domain.sequencing import next_sequence
from app.infrastructure.database import transaction
from app.infrastructure.repositories import PageRepository, TemplateRepository

logger = logging.getLogger(__name__)


def add_page(session: Session, *, template_id: int) -> Page:
    """Append a page with the default metrics after the last page.

    The template row is locked while the next sequence is computed so two
    concurrent callers never pick the same number.
    """

    settings = get_settings()
    page_repository = PageRepository(session)
    with transaction(session):
        if not TemplateRepository(session).lock(template_id):
            raise NotFoundError("Plantilla", template_id, "Plantilla no encontrada")

        sequence = next_sequence(page_repository.max_sequence(template_id))
        page = page_repository.create(
            Page(
                id=None,
                template_id=template_id,
                sequence=sequence,
                width=settings.default_page_width,
                height=settings.default_page_height,
            )
        )

    logger.debug("Added page %s to template %s at %s", page.id, template_id, sequence)
    return page


__all__ = ["add_page"]
