"""Repository implementations for infrastructure layer."""

from .element_repository import ElementRepository
from .page_repository import PageRepository
from .template_repository import TemplateRepository

__all__ = [
    "ElementRepository",
    "PageRepository",
    "TemplateRepository",
]
