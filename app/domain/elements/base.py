"""Capability contract every element type implements."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, ClassVar

from app.domain.entities import Element
from app.domain.rendering import Canvas, RenderContext

from .context import ElementContext


class ElementVariant(ABC):
    """Behaviour bound to one persisted element record.

    Instances are short lived: the factory builds one whenever a template
    operation needs the element to delete, copy or render itself.
    """

    element_type: ClassVar[str] = ""

    def __init__(self, record: Element, context: ElementContext) -> None:
        self.record = record
        self.context = context

    @property
    def id(self) -> int | None:
        return self.record.id

    @property
    def data(self) -> dict[str, Any]:
        return self.record.data or {}

    def delete(self) -> None:
        """Tear the element down and remove its persisted record."""

        if self.record.id is not None:
            self.context.elements.delete(self.record.id)

    def copy_element(self, source: Element) -> bool:
        """Adapt this freshly duplicated record using ``source``.

        Returning ``False`` tells the caller to discard the duplicate.
        """

        return True

    @abstractmethod
    def render(self, canvas: Canvas, context: RenderContext) -> None:
        """Emit the draw commands for this element."""

    def _save_data(self, data: dict[str, Any]) -> None:
        self.record.data = data
        self.context.elements.update(self.record)


class TextElementVariant(ElementVariant):
    """Base for elements that print a single string."""

    @abstractmethod
    def get_text(self, context: RenderContext) -> str:
        """Return the string to print."""

    def render(self, canvas: Canvas, context: RenderContext) -> None:
        text = self.get_text(context)
        if not text:
            return
        page = context.page
        canvas.draw_text(
            text,
            x=float(self.data.get("x", page.width / 2)),
            y=float(self.data.get("y", 0)),
            font=self.data.get("font") or context.default_font,
            size=float(self.data.get("font_size") or context.default_font_size),
            align=self.data.get("align", "C"),
            colour=self.data.get("colour", "#000000"),
        )


__all__ = ["ElementVariant", "TextElementVariant"]
