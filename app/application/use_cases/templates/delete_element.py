"""Use case for deleting a single element."""

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

from .lookups import require_element
from .teardown import remove_element


def delete_element(
    session: Session,
    *,
    template_id: int,
    element_id: int,
    factory: ElementFactory | None = None,
    files: FileStore | None = None,
) -> None:
    """Delete an element and move the elements after it up by one.

    An element whose type cannot be resolved loses its record without any
    type-specific cleanup. Files the element owned are released after commit.
    """

    factory = factory or get_element_factory()
    page_repository = PageRepository(session)
    element_repository = ElementRepository(session)
    context = ElementContext(elements=element_repository, files=files)

    with transaction(session):
        if not TemplateRepository(session).lock(template_id):
            raise NotFoundError("Plantilla", template_id, "Plantilla no encontrada")
        element = require_element(element_repository, page_repository, template_id, element_id)
        page_repository.lock(element.page_id)
        element = element_repository.get(element_id)
        if element is None:
            raise NotFoundError("Elemento", element_id, "Elemento no encontrado")

        remove_element(element, factory=factory, context=context)
        element_repository.shift_down_after(element.page_id, element.sequence)
        ensure_dense("página", element.page_id, element_repository.sequences(element.page_id))

    context.release_pending()


__all__ = ["delete_element"]
