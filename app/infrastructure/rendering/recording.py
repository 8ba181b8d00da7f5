"""Canvas that keeps the draw commands in memory."""

from __future__ import annotations

import json
from dataclasses import asdict, dataclass, field
from typing import Any, BinaryIO

from app.domain.rendering import Alignment, Canvas


@dataclass(frozen=True)
class DrawCommand:
    """One primitive received by the canvas, tagged with its page number."""

    kind: str
    page: int
    params: dict[str, Any] = field(default_factory=dict)


class RecordingCanvas(Canvas):
    """Record every call in order.

    Used for previews that only need the layout and by the test-suite to
    assert render order. ``output`` serializes the commands as JSON.
    """

    def __init__(self, stream: BinaryIO | None = None) -> None:
        self.commands: list[DrawCommand] = []
        self.page_count = 0
        self._stream = stream

    def add_page(
        self,
        width: float,
        height: float,
        *,
        left_margin: float = 0.0,
        right_margin: float = 0.0,
    ) -> None:
        self.page_count += 1
        self._record(
            "page",
            width=width,
            height=height,
            left_margin=left_margin,
            right_margin=right_margin,
        )

    def draw_text(
        self,
        text: str,
        *,
        x: float,
        y: float,
        font: str,
        size: float,
        align: Alignment = "L",
        colour: str = "#000000",
    ) -> None:
        self._record("text", text=text, x=x, y=y, font=font, size=size, align=align, colour=colour)

    def draw_image(
        self,
        path: str,
        *,
        x: float,
        y: float,
        width: float | None = None,
        height: float | None = None,
    ) -> None:
        self._record("image", path=path, x=x, y=y, width=width, height=height)

    def draw_line(
        self,
        x1: float,
        y1: float,
        x2: float,
        y2: float,
        *,
        width: float = 0.5,
        colour: str = "#000000",
    ) -> None:
        self._record("line", x1=x1, y1=y1, x2=x2, y2=y2, width=width, colour=colour)

    def output(self, *, return_bytes: bool = False) -> bytes | None:
        payload = json.dumps([asdict(command) for command in self.commands]).encode("utf-8")
        if return_bytes:
            return payload
        if self._stream is not None:
            self._stream.write(payload)
        return None

    def kinds(self) -> list[str]:
        return [command.kind for command in self.commands]

    def _record(self, kind: str, **params: Any) -> None:
        self.commands.append(DrawCommand(kind=kind, page=self.page_count, params=params))


__all__ = ["DrawCommand", "RecordingCanvas"]
