"""Element types shipped with the service."""

from .date import DateElement
from .image import ImageElement
from .line import BorderElement, LineElement
from .text import CourseNameElement, SubjectNameElement, TextElement

__all__ = [
    "BorderElement",
    "CourseNameElement",
    "DateElement",
    "ImageElement",
    "LineElement",
    "SubjectNameElement",
    "TextElement",
]
