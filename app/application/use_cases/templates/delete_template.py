"""Use case for deleting a template with everything it owns."""

import logging

from sqlalchemy.orm import Session

from app.domain.elements import ElementContext, ElementFactory, FileStore, get_element_factory
from app.domain.exceptions import CascadeDeleteError
from app.infrastructure.database import transaction
from app.infrastructure.repositories import (
    ElementRepository,
    PageRepository,
    TemplateRepository,
)

from .lookups import require_template
from .teardown import remove_element

logger = logging.getLogger(__name__)


def delete_template(
    session: Session,
    template_id: int,
    *,
    factory: ElementFactory | None = None,
    files: FileStore | None = None,
) -> bool:
    """Delete every element, every page and finally the template.

    The descendants are collected first and removed bottom-up inside a single
    transaction. If anything fails the whole cascade is rolled back and
    :class:`CascadeDeleteError` is raised; the template stays in place and no
    file is released. Files are only released after the commit.
    """

    factory = factory or get_element_factory()
    template_repository = TemplateRepository(session)
    page_repository = PageRepository(session)
    element_repository = ElementRepository(session)
    context = ElementContext(elements=element_repository, files=files)

    require_template(template_repository, template_id)

    try:
        with transaction(session):
            template_repository.lock(template_id)
            elements = list(element_repository.list_by_template(template_id))

            for element in elements:
                remove_element(element, factory=factory, context=context)
            pages_deleted = page_repository.delete_by_template(template_id)
            if not template_repository.delete(template_id):
                raise CascadeDeleteError(template_id)
    except CascadeDeleteError:
        raise
    except Exception as exc:
        logger.exception("Cascade delete of template %s failed", template_id)
        raise CascadeDeleteError(template_id) from exc

    context.release_pending()
    logger.info(
        "Deleted template %s with %s pages and %s elements",
        template_id,
        pages_deleted,
        len(elements),
    )
    return True


__all__ = ["delete_template"]
