"""Use case for moving a page or an element one position up or down."""

import logging

from sqlalchemy.orm import Session

from app.domain.exceptions import NotFoundError
from app.domain.sequencing import (
    Direction,
    ItemKind,
    ensure_dense,
    ensure_item_kind,
    neighbour_sequence,
)
from app.infrastructure.database import transaction
from app.infrastructure.repositories import (
    ElementRepository,
    PageRepository,
    TemplateRepository,
)

logger = logging.getLogger(__name__)


def move_item(
    session: Session,
    *,
    template_id: int,
    kind: ItemKind,
    item_id: int,
    direction: Direction,
) -> bool:
    """Swap the item with its neighbour in ``direction``.

    Returns ``False`` without changing anything when there is no neighbour
    (first item moved up, last item moved down) or when the item does not
    belong to the template.
    """

    ensure_item_kind(kind)
    neighbour_sequence(1, direction)

    with transaction(session):
        if not TemplateRepository(session).lock(template_id):
            raise NotFoundError("Plantilla", template_id, "Plantilla no encontrada")
        if kind == "page":
            return _move_page(session, template_id, item_id, direction)
        return _move_element(session, template_id, item_id, direction)


def _move_page(session: Session, template_id: int, page_id: int, direction: str) -> bool:
    repository = PageRepository(session)
    page = repository.get(page_id)
    if page is None or page.template_id != template_id:
        logger.debug("Page %s is not part of template %s; nothing to move", page_id, template_id)
        return False

    swap = repository.get_by_sequence(template_id, neighbour_sequence(page.sequence, direction))
    if swap is None:
        return False

    repository.set_sequence(page.id, swap.sequence)
    repository.set_sequence(swap.id, page.sequence)
    ensure_dense("plantilla", template_id, repository.sequences(template_id))
    return True


def _move_element(session: Session, template_id: int, element_id: int, direction: str) -> bool:
    page_repository = PageRepository(session)
    repository = ElementRepository(session)
    element = repository.get(element_id)
    if element is None:
        logger.debug("Element %s does not exist; nothing to move", element_id)
        return False
    page = page_repository.get(element.page_id)
    if page is None or page.template_id != template_id:
        return False

    page_repository.lock(page.id)
    element = repository.get(element_id)
    if element is None:
        logger.debug("Element %s was deleted while waiting for page %s", element_id, page.id)
        return False
    swap = repository.get_by_sequence(page.id, neighbour_sequence(element.sequence, direction))
    if swap is None:
        return False

    repository.set_sequence(element.id, swap.sequence)
    repository.set_sequence(swap.id, element.sequence)
    ensure_dense("página", page.id, repository.sequences(page.id))
    return True


__all__ = ["move_item"]
