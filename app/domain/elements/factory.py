"""Resolve persisted element records to their behaviour."""

from __future__ import annotations

import importlib
import logging
from collections.abc import Mapping
from functools import lru_cache
from typing import Union

from app.config import get_settings
from app.domain.entities import Element

from .base import ElementVariant
from .context import ElementContext

logger = logging.getLogger(__name__)

VariantTarget = Union[str, type[ElementVariant]]

BUILTIN_ELEMENT_TYPES: dict[str, str] = {
    "text": "app.domain.elements.variants.text:TextElement",
    "subjectname": "app.domain.elements.variants.text:SubjectNameElement",
    "coursename": "app.domain.elements.variants.text:CourseNameElement",
    "date": "app.domain.elements.variants.date:DateElement",
    "image": "app.domain.elements.variants.image:ImageElement",
    "line": "app.domain.elements.variants.line:LineElement",
    "border": "app.domain.elements.variants.line:BorderElement",
}


class ElementFactory:
    """Registry mapping element type tags to variant classes.

    Targets are either classes or ``"module:ClassName"`` paths imported on
    first use, so optional element packages can be missing from a deployment.
    A record whose type cannot be resolved yields ``None`` and callers fall
    back to handling the bare record.
    """

    def __init__(self, registry: Mapping[str, VariantTarget] | None = None) -> None:
        self._registry: dict[str, VariantTarget] = dict(registry or {})
        self._loaded: dict[str, type[ElementVariant] | None] = {}

    def register(self, element_type: str, target: VariantTarget) -> None:
        normalized = element_type.strip()
        if not normalized:
            raise ValueError("El tipo de elemento no puede estar vacío")
        self._registry[normalized] = target
        self._loaded.pop(normalized, None)

    def unregister(self, element_type: str) -> None:
        self._registry.pop(element_type, None)
        self._loaded.pop(element_type, None)

    def is_registered(self, element_type: str) -> bool:
        return element_type in self._registry

    def registered_types(self) -> list[str]:
        return sorted(self._registry)

    def resolve(self, record: Element, context: ElementContext) -> ElementVariant | None:
        """Return the variant for ``record`` or ``None`` when it is unresolvable."""

        variant_class = self._load(record.element_type)
        if variant_class is None:
            return None
        return variant_class(record, context)

    def _load(self, element_type: str | None) -> type[ElementVariant] | None:
        if not element_type:
            return None
        if element_type in self._loaded:
            return self._loaded[element_type]

        target = self._registry.get(element_type)
        if target is None:
            logger.warning("No element variant registered for type '%s'", element_type)
            return None

        variant_class = _import_target(target) if isinstance(target, str) else target
        if variant_class is not None and not (
            isinstance(variant_class, type) and issubclass(variant_class, ElementVariant)
        ):
            logger.warning(
                "Element type '%s' points to %r, which is not an ElementVariant",
                element_type,
                variant_class,
            )
            variant_class = None

        self._loaded[element_type] = variant_class
        return variant_class


def _import_target(path: str) -> type | None:
    module_name, _, attribute = path.partition(":")
    try:
        module = importlib.import_module(module_name)
    except ImportError as exc:
        logger.warning("Element module '%s' is not available: %s", module_name, exc)
        return None
    try:
        return getattr(module, attribute)
    except AttributeError:
        logger.warning("Element class '%s' not found in '%s'", attribute, module_name)
        return None


@lru_cache
def get_element_factory() -> ElementFactory:
    """Return the process-wide factory with built-in and configured types."""

    settings = get_settings()
    return ElementFactory({**BUILTIN_ELEMENT_TYPES, **settings.element_plugins})


__all__ = [
    "BUILTIN_ELEMENT_TYPES",
    "ElementFactory",
    "VariantTarget",
    "get_element_factory",
]
