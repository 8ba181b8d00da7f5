"""Domain entity representing a persisted page element."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any


@dataclass
class Element:
    """Data of one renderable item placed on a page.

    The record carries no behaviour. What an element does when it is deleted,
    copied or rendered depends on ``element_type`` and is resolved through
    :class:`app.domain.elements.ElementFactory`.
    """

    id: int | None
    page_id: int
    element_type: str
    sequence: int
    name: str | None = None
    data: dict[str, Any] = field(default_factory=dict)
    created_at: datetime | None = None
    updated_at: datetime | None = None

    def get(self, key: str, default: Any = None) -> Any:
        """Return ``key`` from the element payload."""

        return (self.data or {}).get(key, default)


__all__ = ["Element"]
