"""Use case for rendering a template onto a canvas."""

import logging

from sqlalchemy.orm import Session

from app.config import get_settings
from app.domain.elements import ElementContext, ElementFactory, FileStore, get_element_factory
from app.domain.rendering import Canvas, RenderContext, RenderOptions
from app.infrastructure.repositories import (
    ElementRepository,
    PageRepository,
    TemplateRepository,
)
from app.utils import now_in_app_timezone

from .lookups import require_template

logger = logging.getLogger(__name__)


def render_template(
    session: Session,
    *,
    template_id: int,
    options: RenderOptions,
    canvas: Canvas,
    factory: ElementFactory | None = None,
    files: FileStore | None = None,
) -> bytes | None:
    """Draw every page and element of the template in sequence order.

    Elements whose type cannot be resolved are skipped. Reads are not
    isolated from concurrent edits, so a render running alongside a
    structural change may see part of it.
    """

    settings = get_settings()
    factory = factory or get_element_factory()
    page_repository = PageRepository(session)
    element_repository = ElementRepository(session)
    element_context = ElementContext(elements=element_repository, files=files)

    require_template(TemplateRepository(session), template_id)
    subject = options.effective_subject(now_in_app_timezone().date())

    for page_number, page in enumerate(page_repository.list_by_template(template_id), start=1):
        canvas.add_page(
            page.width,
            page.height,
            left_margin=page.left_margin,
            right_margin=page.right_margin,
        )
        render_context = RenderContext(
            page=page,
            subject=subject,
            preview=options.preview,
            default_font=settings.default_font,
            default_font_size=settings.default_font_size,
            date_format=settings.date_format,
            page_number=page_number,
        )
        for element in element_repository.list_by_page(page.id):
            variant = factory.resolve(element, element_context)
            if variant is None:
                logger.warning(
                    "Skipping element %s with unresolvable type '%s'",
                    element.id,
                    element.element_type,
                )
                continue
            variant.render(canvas, render_context)

    return canvas.output(return_bytes=options.return_bytes)


__all__ = ["render_template"]
