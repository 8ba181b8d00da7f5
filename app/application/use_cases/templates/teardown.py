"""Element removal shared by page, element and template deletion."""

import logging

from app.domain.elements import ElementContext, ElementFactory, ElementVariant
from app.domain.entities import Element

logger = logging.getLogger(__name__)


def remove_element(
    record: Element,
    *,
    factory: ElementFactory,
    context: ElementContext,
    variant: ElementVariant | None = None,
) -> bool:
    """Delete ``record`` through its variant, or directly when unresolvable.

    Returns ``True`` when the variant teardown ran. Sibling sequences are not
    touched; callers that keep the page compact it themselves.
    """

    if variant is None:
        variant = factory.resolve(record, context)
    if variant is None:
        logger.warning(
            "Element %s has unresolvable type '%s'; removing the record only",
            record.id,
            record.element_type,
        )
        context.elements.delete(record.id)
        return False

    variant.delete()
    if context.elements.get(record.id) is not None:
        logger.warning(
            "Element type '%s' left record %s behind on delete; removing it",
            record.element_type,
            record.id,
        )
        context.elements.delete(record.id)
    return True


__all__ = ["remove_element"]
