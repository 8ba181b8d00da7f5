"""ORM models used by the application infrastructure."""

from .element import ElementModel
from .page import PageModel
from .template import TemplateModel

__all__ = [
    "ElementModel",
    "PageModel",
    "TemplateModel",
]
