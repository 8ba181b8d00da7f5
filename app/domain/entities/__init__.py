"""Domain entities exposed by the application."""

from .element import Element
from .page import DEFAULT_PAGE_HEIGHT, DEFAULT_PAGE_WIDTH, Page, PageMetrics
from .template import Template

__all__ = [
    "DEFAULT_PAGE_HEIGHT",
    "DEFAULT_PAGE_WIDTH",
    "Element",
    "Page",
    "PageMetrics",
    "Template",
]
