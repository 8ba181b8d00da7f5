"""Use case for placing a new element on a page."""

from typing import Any

from sqlalchemy.orm import Session

from app.domain.elements import ElementFactory, get_element_factory
from app.domain.entities import Element
from app.domain.exceptions import NotFoundError
from app.domain.sequencing import next_sequence
from app.infrastructure.database import transaction
from app.infrastructure.repositories import (
    ElementRepository,
    PageRepository,
    TemplateRepository,
)

from .lookups import require_page


def add_element(
    session: Session,
    *,
    template_id: int,
    page_id: int,
    element_type: str,
    name: str | None = None,
    data: dict[str, Any] | None = None,
    factory: ElementFactory | None = None,
) -> Element:
    """Append an element of ``element_type`` after the last element of the page."""

    factory = factory or get_element_factory()
    if not factory.is_registered(element_type):
        raise ValueError(f"Tipo de elemento desconocido: {element_type}")

    page_repository = PageRepository(session)
    element_repository = ElementRepository(session)
    with transaction(session):
        if not TemplateRepository(session).lock(template_id):
            raise NotFoundError("Plantilla", template_id, "Plantilla no encontrada")
        require_page(page_repository, template_id, page_id)
        if not page_repository.lock(page_id):
            raise NotFoundError("Página", page_id, "Página no encontrada")

        return element_repository.create(
            Element(
                id=None,
                page_id=page_id,
                element_type=element_type,
                sequence=next_sequence(element_repository.max_sequence(page_id)),
                name=name,
                data=dict(data or {}),
            )
        )


__all__ = ["add_element"]
