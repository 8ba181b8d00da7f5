"""Persistence layer for templates."""

from collections.abc import Sequence

from sqlalchemy.orm import Session, selectinload

from app.domain.entities import Template
from app.infrastructure.models import PageModel, TemplateModel
from app.infrastructure.repositories.page_repository import PageRepository
from app.utils import ensure_app_timezone, now_in_app_timezone


class TemplateRepository:
    """Provide CRUD operations for templates.

    Writes are flushed, never committed; callers decide the transaction
    boundary.
    """

    def __init__(self, session: Session) -> None:
        self.session = session

    def list(self, *, context_id: int | None = None) -> Sequence[Template]:
        query = self.session.query(TemplateModel)
        if context_id is not None:
            query = query.filter(TemplateModel.context_id == context_id)
        query = query.order_by(TemplateModel.id.asc())
        return [self._to_entity(model) for model in query.all()]

    def get(self, template_id: int, *, with_pages: bool = False) -> Template | None:
        query = self.session.query(TemplateModel)
        if with_pages:
            query = query.options(
                selectinload(TemplateModel.pages).selectinload(PageModel.elements)
            ).populate_existing()
        model = query.filter(TemplateModel.id == template_id).first()
        if model is None:
            return None
        return self._to_entity(model, with_pages=with_pages)

    def lock(self, template_id: int) -> bool:
        """Take the row lock that serializes page ordering for a template.

        Returns ``False`` when the template does not exist.
        """

        row = (
            self.session.query(TemplateModel.id)
            .filter(TemplateModel.id == template_id)
            .with_for_update()
            .first()
        )
        return row is not None

    def create(self, template: Template) -> Template:
        now = now_in_app_timezone()
        model = TemplateModel(
            name=template.name,
            context_id=template.context_id,
            created_at=ensure_app_timezone(template.created_at) or now,
            updated_at=ensure_app_timezone(template.updated_at) or now,
        )
        self.session.add(model)
        self.session.flush()
        self.session.refresh(model)
        return self._to_entity(model)

    def update(self, template: Template) -> Template:
        model = self.session.get(TemplateModel, template.id)
        if model is None:
            msg = f"Template with id {template.id} not found"
            raise ValueError(msg)
        model.name = template.name
        model.updated_at = ensure_app_timezone(template.updated_at) or now_in_app_timezone()
        self.session.add(model)
        self.session.flush()
        return self._to_entity(model)

    def delete(self, template_id: int) -> int:
        deleted = (
            self.session.query(TemplateModel)
            .filter(TemplateModel.id == template_id)
            .delete(synchronize_session="fetch")
        )
        self.session.flush()
        return deleted

    @staticmethod
    def _to_entity(model: TemplateModel, *, with_pages: bool = False) -> Template:
        pages = []
        if with_pages:
            pages = [
                PageRepository._to_entity(page, with_elements=True)
                for page in sorted(model.pages, key=lambda page: page.sequence)
            ]
        return Template(
            id=model.id,
            name=model.name,
            context_id=model.context_id,
            created_at=ensure_app_timezone(model.created_at),
            updated_at=ensure_app_timezone(model.updated_at),
            pages=pages,
        )


__all__ = ["TemplateRepository"]
