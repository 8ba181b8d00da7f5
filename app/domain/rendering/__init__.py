"""Rendering contracts shared by the domain and the canvas implementations."""

from .canvas import Alignment, Canvas
from .context import (
    PREVIEW_COURSE_NAME,
    PREVIEW_SUBJECT_NAME,
    RenderContext,
    RenderOptions,
    RenderSubject,
)

__all__ = [
    "Alignment",
    "Canvas",
    "PREVIEW_COURSE_NAME",
    "PREVIEW_SUBJECT_NAME",
    "RenderContext",
    "RenderOptions",
    "RenderSubject",
]
