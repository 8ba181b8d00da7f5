"""Use case for copying the pages and elements of a template into another."""

import logging
from dataclasses import dataclass, replace

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
from app.utils import now_in_app_timezone

from .lookups import require_template
from .teardown import remove_element

logger = logging.getLogger(__name__)


@dataclass
class CopyReport:
    """Counts describing the outcome of a copy."""

    pages_copied: int = 0
    elements_copied: int = 0
    elements_discarded: int = 0


def copy_to_template(
    session: Session,
    *,
    template_id: int,
    target_template_id: int,
    factory: ElementFactory | None = None,
    files: FileStore | None = None,
) -> CopyReport:
    """Duplicate every page and element of ``template_id`` into the target.

    Pages and elements are duplicated in sequence order and appended after
    any pages the target already has. Each duplicated element runs its
    variant's copy hook; when the hook reports failure only that element is
    discarded and the copy carries on.
    """

    factory = factory or get_element_factory()
    template_repository = TemplateRepository(session)
    page_repository = PageRepository(session)
    element_repository = ElementRepository(session)
    context = ElementContext(elements=element_repository, files=files)
    report = CopyReport()

    with transaction(session):
        require_template(template_repository, template_id)
        if not template_repository.lock(target_template_id):
            raise NotFoundError(
                "Plantilla", target_template_id, "Plantilla de destino no encontrada"
            )

        offset = page_repository.max_sequence(target_template_id) or 0
        source_pages = list(page_repository.list_by_template(template_id))
        for position, source_page in enumerate(source_pages, start=offset + 1):
            now = now_in_app_timezone()
            new_page = page_repository.create(
                replace(
                    source_page,
                    id=None,
                    template_id=target_template_id,
                    sequence=position,
                    created_at=now,
                    updated_at=now,
                    elements=[],
                )
            )
            report.pages_copied += 1

            next_position = 1
            for source_element in element_repository.list_by_page(source_page.id):
                now = now_in_app_timezone()
                new_element = element_repository.create(
                    replace(
                        source_element,
                        id=None,
                        page_id=new_page.id,
                        sequence=next_position,
                        data=dict(source_element.data or {}),
                        created_at=now,
                        updated_at=now,
                    )
                )
                variant = factory.resolve(new_element, context)
                if variant is not None and not variant.copy_element(source_element):
                    logger.warning(
                        "Copy hook of element %s (%s) failed; discarding the duplicate",
                        source_element.id,
                        source_element.element_type,
                    )
                    remove_element(new_element, factory=factory, context=context, variant=variant)
                    report.elements_discarded += 1
                    continue
                next_position += 1
                report.elements_copied += 1

            ensure_dense("página", new_page.id, element_repository.sequences(new_page.id))
        ensure_dense(
            "plantilla", target_template_id, page_repository.sequences(target_template_id)
        )

    context.release_pending()
    logger.info(
        "Copied template %s into %s: %s pages, %s elements, %s discarded",
        template_id,
        target_template_id,
        report.pages_copied,
        report.elements_copied,
        report.elements_discarded,
    )
    return report


__all__ = ["CopyReport", "copy_to_template"]
