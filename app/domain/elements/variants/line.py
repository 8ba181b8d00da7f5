"""Elements made of straight lines."""

from app.domain.rendering import Canvas, RenderContext

from ..base import ElementVariant


class LineElement(ElementVariant):
    """A single rule between ``(x1, y1)`` and ``(x2, y2)``."""

    element_type = "line"

    def render(self, canvas: Canvas, context: RenderContext) -> None:
        canvas.draw_line(
            float(self.data.get("x1", 0)),
            float(self.data.get("y1", 0)),
            float(self.data.get("x2", context.page.width)),
            float(self.data.get("y2", 0)),
            width=float(self.data.get("width", 0.5)),
            colour=self.data.get("colour", "#000000"),
        )


class BorderElement(ElementVariant):
    """A frame drawn ``inset`` units inside the page edges."""

    element_type = "border"

    def render(self, canvas: Canvas, context: RenderContext) -> None:
        inset = float(self.data.get("inset", 10))
        width = float(self.data.get("width", 1))
        colour = self.data.get("colour", "#000000")
        left, top = inset, inset
        right = context.page.width - inset
        bottom = context.page.height - inset
        for x1, y1, x2, y2 in (
            (left, top, right, top),
            (right, top, right, bottom),
            (right, bottom, left, bottom),
            (left, bottom, left, top),
        ):
            canvas.draw_line(x1, y1, x2, y2, width=width, colour=colour)


__all__ = ["BorderElement", "LineElement"]
