"""Collaborators handed to element variants."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Protocol

from app.domain.entities import Element


class ElementStore(Protocol):
    """Persistence operations an element variant may perform on its own record."""

    def get(self, element_id: int) -> Element | None: ...

    def update(self, element: Element) -> Element: ...

    def delete(self, element_id: int) -> int: ...


class FileStore(Protocol):
    """External storage for files referenced by element payloads."""

    def path(self, file_id: str) -> str | None: ...

    def duplicate(self, file_id: str) -> str | None: ...

    def release(self, file_id: str) -> None: ...


@dataclass(frozen=True)
class ElementContext:
    """Explicit dependencies for delete and copy hooks.

    File releases requested by variants are queued and only reach the file
    store through :meth:`release_pending`, which callers invoke once their
    transaction has committed. A rolled back operation never calls it, so the
    queued releases are dropped together with the context.
    """

    elements: ElementStore
    files: FileStore | None = None
    pending_releases: list[str] = field(default_factory=list)

    def release_after_commit(self, file_id: str) -> None:
        if self.files is not None:
            self.pending_releases.append(file_id)

    def release_pending(self) -> list[str]:
        """Release every queued file and return their ids."""

        released = list(self.pending_releases)
        self.pending_releases.clear()
        if self.files is not None:
            for file_id in released:
                self.files.release(file_id)
        return released


__all__ = ["ElementContext", "ElementStore", "FileStore"]
