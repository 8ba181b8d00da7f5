"""Explicit inputs handed to every element while rendering."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date

from app.domain.entities import Page

PREVIEW_SUBJECT_NAME = "Nombre Apellido"
PREVIEW_COURSE_NAME = "Nombre del curso"


@dataclass(frozen=True)
class RenderSubject:
    """The person a certificate is issued to, with the values to print.

    Values come from whatever system owns users and courses; they are treated
    as opaque strings here.
    """

    full_name: str
    course_name: str | None = None
    issued_on: date | None = None


@dataclass(frozen=True)
class RenderOptions:
    """How a template should be rendered.

    ``preview`` renders placeholder values instead of a subject's data.
    ``return_bytes`` asks the canvas for the document instead of writing it to
    its own destination.
    """

    preview: bool = False
    subject: RenderSubject | None = None
    return_bytes: bool = True

    def __post_init__(self) -> None:
        if not self.preview and self.subject is None:
            raise ValueError("Se requiere un destinatario cuando no es una vista previa")

    def effective_subject(self, today: date) -> RenderSubject:
        if self.preview or self.subject is None:
            return RenderSubject(
                full_name=PREVIEW_SUBJECT_NAME,
                course_name=PREVIEW_COURSE_NAME,
                issued_on=today,
            )
        if self.subject.issued_on is None:
            return RenderSubject(
                full_name=self.subject.full_name,
                course_name=self.subject.course_name,
                issued_on=today,
            )
        return self.subject


@dataclass(frozen=True)
class RenderContext:
    """Everything an element may rely on while drawing itself."""

    page: Page
    subject: RenderSubject
    preview: bool
    default_font: str
    default_font_size: float
    date_format: str
    page_number: int


__all__ = [
    "PREVIEW_COURSE_NAME",
    "PREVIEW_SUBJECT_NAME",
    "RenderContext",
    "RenderOptions",
    "RenderSubject",
]
