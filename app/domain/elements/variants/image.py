"""Element placing a stored image."""

import logging

from app.domain.entities import Element
from app.domain.rendering import Canvas, RenderContext

from ..base import ElementVariant

logger = logging.getLogger(__name__)


class ImageElement(ElementVariant):
    """Image referenced either by ``file_id`` in the file store or by ``path``.

    The element owns its stored file: deleting the element releases it once
    the deletion has committed, and copying the element duplicates it so both
    templates can evolve apart.
    """

    element_type = "image"

    def delete(self) -> None:
        file_id = self.data.get("file_id")
        if file_id:
            self.context.release_after_commit(file_id)
        super().delete()

    def copy_element(self, source: Element) -> bool:
        file_id = source.get("file_id")
        if not file_id:
            return True

        duplicate_id = None
        if self.context.files is not None:
            duplicate_id = self.context.files.duplicate(file_id)
        if duplicate_id is None:
            logger.warning(
                "Could not duplicate file %s for element %s", file_id, self.record.id
            )
            # The duplicate still points at the source file; drop the
            # reference so discarding it leaves the source file alone.
            self._save_data({key: value for key, value in self.data.items() if key != "file_id"})
            return False

        self._save_data({**self.data, "file_id": duplicate_id})
        return True

    def render(self, canvas: Canvas, context: RenderContext) -> None:
        path = self._resolve_path()
        if path is None:
            logger.warning("Image element %s has no file to draw", self.record.id)
            return
        width = self.data.get("width")
        height = self.data.get("height")
        canvas.draw_image(
            path,
            x=float(self.data.get("x", 0)),
            y=float(self.data.get("y", 0)),
            width=float(width) if width else None,
            height=float(height) if height else None,
        )

    def _resolve_path(self) -> str | None:
        file_id = self.data.get("file_id")
        if file_id and self.context.files is not None:
            return self.context.files.path(file_id)
        return self.data.get("path")


__all__ = ["ImageElement"]
