"""PDF canvas backed by ReportLab."""

from __future__ import annotations

import logging
from io import BytesIO
from pathlib import Path
from typing import BinaryIO

from reportlab.lib import colors
from reportlab.lib.units import mm
from reportlab.pdfgen import canvas

from app.domain.entities import DEFAULT_PAGE_HEIGHT, DEFAULT_PAGE_WIDTH
from app.domain.rendering import Alignment, Canvas

logger = logging.getLogger(__name__)

_FONT_ALIASES: dict[str, str] = {
    "helvetica": "Helvetica",
    "helveticab": "Helvetica-Bold",
    "helveticai": "Helvetica-Oblique",
    "times": "Times-Roman",
    "timesb": "Times-Bold",
    "timesi": "Times-Italic",
    "courier": "Courier",
    "courierb": "Courier-Bold",
}
_FALLBACK_FONT = "Helvetica"


def _hex(value: str | None, default=colors.black) -> colors.Color:
    if not value:
        return default
    try:
        return colors.HexColor("#" + str(value).lstrip("#"))
    except ValueError:
        return default


class ReportLabCanvas(Canvas):
    """Draw pages in millimetres with the origin at the top-left corner.

    ``destination`` is where ``output(return_bytes=False)`` writes the PDF: a
    filesystem path or a binary stream.
    """

    def __init__(
        self,
        destination: str | Path | BinaryIO | None = None,
        *,
        title: str | None = None,
    ) -> None:
        self._buffer = BytesIO()
        self._destination = destination
        self._canvas = canvas.Canvas(
            self._buffer, pagesize=(DEFAULT_PAGE_WIDTH * mm, DEFAULT_PAGE_HEIGHT * mm)
        )
        if title:
            self._canvas.setTitle(title)
        self._page_height = DEFAULT_PAGE_HEIGHT
        self._started = False
        self._available_fonts = set(self._canvas.getAvailableFonts())

    def add_page(
        self,
        width: float,
        height: float,
        *,
        left_margin: float = 0.0,
        right_margin: float = 0.0,
    ) -> None:
        if self._started:
            self._canvas.showPage()
        self._canvas.setPageSize((width * mm, height * mm))
        self._page_height = height
        self._started = True

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
        self._canvas.setFont(self._font_name(font), size)
        self._canvas.setFillColor(_hex(colour))
        baseline = self._flip(y) - size
        if align == "C":
            self._canvas.drawCentredString(x * mm, baseline, text)
        elif align == "R":
            self._canvas.drawRightString(x * mm, baseline, text)
        else:
            self._canvas.drawString(x * mm, baseline, text)

    def draw_image(
        self,
        path: str,
        *,
        x: float,
        y: float,
        width: float | None = None,
        height: float | None = None,
    ) -> None:
        bottom = self._flip(y + (height or 0))
        self._canvas.drawImage(
            path,
            x * mm,
            bottom,
            width=width * mm if width else None,
            height=height * mm if height else None,
            preserveAspectRatio=True,
            mask="auto",
        )

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
        self._canvas.setLineWidth(width)
        self._canvas.setStrokeColor(_hex(colour))
        self._canvas.line(x1 * mm, self._flip(y1), x2 * mm, self._flip(y2))

    def output(self, *, return_bytes: bool = False) -> bytes | None:
        self._canvas.save()
        payload = self._buffer.getvalue()
        if return_bytes:
            return payload
        if self._destination is None:
            raise ValueError("No hay un destino configurado para el documento")
        if isinstance(self._destination, (str, Path)):
            Path(self._destination).write_bytes(payload)
        else:
            self._destination.write(payload)
        return None

    def _flip(self, y: float) -> float:
        return (self._page_height - y) * mm

    def _font_name(self, font: str) -> str:
        name = _FONT_ALIASES.get(font.lower(), font)
        if name not in self._available_fonts:
            logger.warning("Font '%s' is not available, using %s", font, _FALLBACK_FONT)
            return _FALLBACK_FONT
        return name


__all__ = ["ReportLabCanvas"]
