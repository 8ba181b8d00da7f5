"""Use case for deleting a page from a template."""

import logging

from sqlalchemy.orm import Session

from app.domain.elements import ElementContext, ElementFactory, FileStore, get_element_factory
from app.domain.exceptions import NotFoundError
from app.domain.sequencing import ensure_dense
from app.infrastructure.database import transaction
from app.infrastructure.repositories import (
    ElementRepository,
    PageRepository,
    TemplateRepository,
)

from .lookups import require_page
from .teardown import remove_element

logger = logging.getLogger(__name__)


def delete_page(
    session: Session,
    *,
    template_id: int,
    page_id: int,
    factory: ElementFactory | None = None,
    files: FileStore | None = None,
) -> None:
    """Delete a page with its elements and close the gap it leaves.

    Every element goes through its variant teardown first; the files they
    owned are released once the deletion has committed. Pages after the
    deleted one move up by exactly one position.
    """

    factory = factory or get_element_factory()
    page_repository = PageRepository(session)
    element_repository = ElementRepository(session)
    context = ElementContext(elements=element_repository, files=files)

    with transaction(session):
        if not TemplateRepository(session).lock(template_id):
            raise NotFoundError("Plantilla", template_id, "Plantilla no encontrada")
        page = require_page(page_repository, template_id, page_id)
        page_repository.lock(page.id)

        for element in element_repository.list_by_page(page.id):
            remove_element(element, factory=factory, context=context)

        page_repository.delete(page.id)
        page_repository.shift_down_after(template_id, page.sequence)
        ensure_dense("plantilla", template_id, page_repository.sequences(template_id))

    context.release_pending()
    logger.info("Deleted page %s (sequence %s) of template %s", page.id, page.sequence, template_id)


__all__ = ["delete_page"]
