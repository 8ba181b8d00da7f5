"""Canvas implementations."""

from .recording import DrawCommand, RecordingCanvas
from .reportlab_canvas import ReportLabCanvas

__all__ = ["DrawCommand", "RecordingCanvas", "ReportLabCanvas"]
