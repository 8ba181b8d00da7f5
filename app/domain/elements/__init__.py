"""Polymorphic element behaviour."""

from .base import ElementVariant, TextElementVariant
from .context import ElementContext, ElementStore, FileStore
from .factory import (
    BUILTIN_ELEMENT_TYPES,
    ElementFactory,
    VariantTarget,
    get_element_factory,
)

__all__ = [
    "BUILTIN_ELEMENT_TYPES",
    "ElementContext",
    "ElementFactory",
    "ElementStore",
    "ElementVariant",
    "FileStore",
    "TextElementVariant",
    "VariantTarget",
    "get_element_factory",
]
