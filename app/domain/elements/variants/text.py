"""Elements that print a piece of text."""

from app.domain.rendering import RenderContext

from ..base import TextElementVariant


class TextElement(TextElementVariant):
    """Static text typed in by the template author."""

    element_type = "text"

    def get_text(self, context: RenderContext) -> str:
        return str(self.data.get("text", ""))


class SubjectNameElement(TextElementVariant):
    """Full name of the person receiving the document."""

    element_type = "subjectname"

    def get_text(self, context: RenderContext) -> str:
        return context.subject.full_name


class CourseNameElement(TextElementVariant):
    element_type = "coursename"

    def get_text(self, context: RenderContext) -> str:
        return context.subject.course_name or ""


__all__ = ["CourseNameElement", "SubjectNameElement", "TextElement"]
