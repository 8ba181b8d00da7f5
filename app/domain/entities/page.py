"""Domain entity representing a template page."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime

from .element import Element

DEFAULT_PAGE_WIDTH = 210.0
DEFAULT_PAGE_HEIGHT = 297.0


@dataclass(frozen=True)
class PageMetrics:
    """Layout values that can be edited for a page in bulk."""

    width: float
    height: float
    left_margin: float = 0.0
    right_margin: float = 0.0


@dataclass
class Page:
    """An ordered container of elements inside a template."""

    id: int | None
    template_id: int
    sequence: int
    width: float = DEFAULT_PAGE_WIDTH
    height: float = DEFAULT_PAGE_HEIGHT
    left_margin: float = 0.0
    right_margin: float = 0.0
    created_at: datetime | None = None
    updated_at: datetime | None = None
    elements: list[Element] = field(default_factory=list)

    @property
    def metrics(self) -> PageMetrics:
        return PageMetrics(
            width=self.width,
            height=self.height,
            left_margin=self.left_margin,
            right_margin=self.right_margin,
        )


__all__ = ["DEFAULT_PAGE_HEIGHT", "DEFAULT_PAGE_WIDTH", "Page", "PageMetrics"]
