"""Drawing surface consumed by the render walk."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Literal

Alignment = Literal["L", "C", "R"]


class Canvas(ABC):
    """Accept draw commands in the order a template emits them.

    Coordinates are expressed in the page units (millimetres for the default
    A4 pages) with the origin at the top-left corner of the current page.
    """

    @abstractmethod
    def add_page(
        self,
        width: float,
        height: float,
        *,
        left_margin: float = 0.0,
        right_margin: float = 0.0,
    ) -> None:
        """Start a new page; following draw calls target it."""

    @abstractmethod
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
        """Place ``text`` with its anchor at ``(x, y)``."""

    @abstractmethod
    def draw_image(
        self,
        path: str,
        *,
        x: float,
        y: float,
        width: float | None = None,
        height: float | None = None,
    ) -> None:
        """Place the image stored at ``path``."""

    @abstractmethod
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
        """Draw a straight line between two points."""

    @abstractmethod
    def output(self, *, return_bytes: bool = False) -> bytes | None:
        """Finish the document.

        When ``return_bytes`` is true the assembled document is returned,
        otherwise it is written to the destination the canvas was created
        with and ``None`` is returned.
        """


__all__ = ["Alignment", "Canvas"]
