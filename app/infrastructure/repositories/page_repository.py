"""Persistence layer for template pages."""

from collections.abc import Sequence

from sqlalchemy import func
from sqlalchemy.orm import Session

from app.domain.entities import Page
from app.infrastructure.models import PageModel
from app.infrastructure.repositories.element_repository import ElementRepository
from app.utils import ensure_app_timezone, now_in_app_timezone


class PageRepository:
    """Provide CRUD and ordering operations for pages of a template."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def get(self, page_id: int) -> Page | None:
        model = self.session.get(PageModel, page_id, populate_existing=True)
        return self._to_entity(model) if model else None

    def list_by_template(self, template_id: int) -> Sequence[Page]:
        query = (
            self.session.query(PageModel)
            .filter(PageModel.template_id == template_id)
            .order_by(PageModel.sequence.asc(), PageModel.id.asc())
            .populate_existing()
        )
        return [self._to_entity(model) for model in query.all()]

    def get_by_sequence(self, template_id: int, sequence: int) -> Page | None:
        model = (
            self.session.query(PageModel)
            .filter(PageModel.template_id == template_id)
            .filter(PageModel.sequence == sequence)
            .populate_existing()
            .first()
        )
        return self._to_entity(model) if model else None

    def max_sequence(self, template_id: int) -> int | None:
        return (
            self.session.query(func.max(PageModel.sequence))
            .filter(PageModel.template_id == template_id)
            .scalar()
        )

    def sequences(self, template_id: int) -> list[int]:
        rows = (
            self.session.query(PageModel.sequence)
            .filter(PageModel.template_id == template_id)
            .all()
        )
        return [sequence for (sequence,) in rows]

    def lock(self, page_id: int) -> bool:
        """Take the row lock that serializes element ordering on a page."""

        row = (
            self.session.query(PageModel.id)
            .filter(PageModel.id == page_id)
            .with_for_update()
            .first()
        )
        return row is not None

    def create(self, page: Page) -> Page:
        now = now_in_app_timezone()
        model = PageModel(
            template_id=page.template_id,
            width=page.width,
            height=page.height,
            left_margin=page.left_margin,
            right_margin=page.right_margin,
            sequence=page.sequence,
            created_at=ensure_app_timezone(page.created_at) or now,
            updated_at=ensure_app_timezone(page.updated_at) or now,
        )
        self.session.add(model)
        self.session.flush()
        self.session.refresh(model)
        return self._to_entity(model)

    def update(self, page: Page) -> Page:
        model = self.session.get(PageModel, page.id)
        if model is None:
            msg = f"Page with id {page.id} not found"
            raise ValueError(msg)
        model.width = page.width
        model.height = page.height
        model.left_margin = page.left_margin
        model.right_margin = page.right_margin
        model.updated_at = ensure_app_timezone(page.updated_at) or now_in_app_timezone()
        self.session.add(model)
        self.session.flush()
        return self._to_entity(model)

    def set_sequence(self, page_id: int, sequence: int) -> None:
        (
            self.session.query(PageModel)
            .filter(PageModel.id == page_id)
            .update({PageModel.sequence: sequence}, synchronize_session="fetch")
        )
        self.session.flush()

    def shift_down_after(self, template_id: int, sequence: int) -> int:
        """Decrement the sequence of every page after ``sequence``.

        The affected ids are read first so the update touches exactly those
        rows.
        """

        affected_ids = [
            page_id
            for (page_id,) in self.session.query(PageModel.id)
            .filter(PageModel.template_id == template_id)
            .filter(PageModel.sequence > sequence)
            .all()
        ]
        if not affected_ids:
            return 0
        updated = (
            self.session.query(PageModel)
            .filter(PageModel.id.in_(affected_ids))
            .update(
                {PageModel.sequence: PageModel.sequence - 1},
                synchronize_session="fetch",
            )
        )
        self.session.flush()
        return updated

    def delete(self, page_id: int) -> int:
        deleted = (
            self.session.query(PageModel)
            .filter(PageModel.id == page_id)
            .delete(synchronize_session="fetch")
        )
        self.session.flush()
        return deleted

    def delete_by_template(self, template_id: int) -> int:
        deleted = (
            self.session.query(PageModel)
            .filter(PageModel.template_id == template_id)
            .delete(synchronize_session="fetch")
        )
        self.session.flush()
        return deleted

    @staticmethod
    def _to_entity(model: PageModel, *, with_elements: bool = False) -> Page:
        elements = []
        if with_elements:
            elements = [
                ElementRepository._to_entity(element)
                for element in sorted(model.elements, key=lambda element: element.sequence)
            ]
        return Page(
            id=model.id,
            template_id=model.template_id,
            sequence=model.sequence,
            width=model.width,
            height=model.height,
            left_margin=model.left_margin,
            right_margin=model.right_margin,
            created_at=ensure_app_timezone(model.created_at),
            updated_at=ensure_app_timezone(model.updated_at),
            elements=elements,
        )


__all__ = ["PageRepository"]
