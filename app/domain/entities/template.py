"""Domain entity representing a certificate template."""

from dataclasses import dataclass, field
from datetime import datetime

from .page import Page


@dataclass
class Template:
    """Root aggregate describing one document definition."""

    id: int | None
    name: str
    context_id: int
    created_at: datetime | None
    updated_at: datetime | None
    pages: list[Page] = field(default_factory=list)

    @property
    def element_count(self) -> int:
        """Return the number of elements across every loaded page."""

        return sum(len(page.elements) for page in self.pages)


__all__ = ["Template"]
