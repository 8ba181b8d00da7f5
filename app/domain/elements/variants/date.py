"""Element printing the issue date."""

from app.domain.rendering import RenderContext

from ..base import TextElementVariant


class DateElement(TextElementVariant):
    """Print the issue date, optionally after a fixed prefix.

    Payload keys: ``format`` (strftime pattern, defaults to the configured
    date format) and ``prefix``, e.g. ``"Linz, am "``.
    """

    element_type = "date"

    def get_text(self, context: RenderContext) -> str:
        issued_on = context.subject.issued_on
        if issued_on is None:
            return ""
        pattern = self.data.get("format") or context.date_format
        return f"{self.data.get('prefix', '')}{issued_on.strftime(pattern)}"


__all__ = ["DateElement"]
