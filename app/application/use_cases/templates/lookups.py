"""Lookups shared by the template use cases."""

from app.domain.entities import Element, Page, Template
from app.domain.exceptions import NotFoundError
from app.infrastructure.repositories import (
    ElementRepository,
    PageRepository,
    TemplateRepository,
)


def require_template(
    repository: TemplateRepository, template_id: int, *, with_pages: bool = False
) -> Template:
    template = repository.get(template_id, with_pages=with_pages)
    if template is None:
        raise NotFoundError("Plantilla", template_id, "Plantilla no encontrada")
    return template


def require_page(repository: PageRepository, template_id: int, page_id: int) -> Page:
    """Return the page only when it belongs to ``template_id``."""

    page = repository.get(page_id)
    if page is None or page.template_id != template_id:
        raise NotFoundError("Página", page_id, "Página no encontrada")
    return page


def require_element(
    element_repository: ElementRepository,
    page_repository: PageRepository,
    template_id: int,
    element_id: int,
) -> Element:
    """Return the element only when its page belongs to ``template_id``."""

    element = element_repository.get(element_id)
    if element is None:
        raise NotFoundError("Elemento", element_id, "Elemento no encontrado")
    page = page_repository.get(element.page_id)
    if page is None or page.template_id != template_id:
        raise NotFoundError("Elemento", element_id, "Elemento no encontrado")
    return element


__all__ = ["require_element", "require_page", "require_template"]
