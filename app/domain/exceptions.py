"""Errors raised by template operations."""

from __future__ import annotations


class NotFoundError(ValueError):
    """Raised when a referenced template, page or element does not exist."""

    def __init__(self, entity: str, entity_id: int | None, message: str | None = None) -> None:
        self.entity = entity
        self.entity_id = entity_id
        super().__init__(message or f"{entity} {entity_id} no encontrado")


class CascadeDeleteError(RuntimeError):
    """Raised when a template could not be deleted together with its descendants.

    The surrounding transaction has been rolled back when this is raised, so
    the template and everything under it is still present.
    """

    def __init__(self, template_id: int, message: str | None = None) -> None:
        self.template_id = template_id
        super().__init__(message or f"No se pudo eliminar la plantilla {template_id}")


class SequenceIntegrityError(RuntimeError):
    """Raised when sequence values in a scope are not exactly ``1..N``."""

    def __init__(self, scope: str, scope_id: int, sequences: list[int]) -> None:
        self.scope = scope
        self.scope_id = scope_id
        self.sequences = sequences
        super().__init__(
            f"Secuencia inconsistente en {scope} {scope_id}: {sequences}"
        )


__all__ = ["CascadeDeleteError", "NotFoundError", "SequenceIntegrityError"]
