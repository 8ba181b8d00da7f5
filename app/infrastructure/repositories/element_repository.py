"""Persistence layer for page elements."""

from collections.abc import Sequence

from sqlalchemy import func
from sqlalchemy.orm import Session

from app.domain.entities import Element
from app.infrastructure.models import ElementModel, PageModel
from app.utils import ensure_app_timezone, now_in_app_timezone


class ElementRepository:
    """Provide CRUD and ordering operations for elements of a page."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def get(self, element_id: int) -> Element | None:
        model = self.session.get(ElementModel, element_id, populate_existing=True)
        return self._to_entity(model) if model else None

    def list_by_page(self, page_id: int) -> Sequence[Element]:
        query = (
            self.session.query(ElementModel)
            .filter(ElementModel.page_id == page_id)
            .order_by(ElementModel.sequence.asc(), ElementModel.id.asc())
            .populate_existing()
        )
        return [self._to_entity(model) for model in query.all()]

    def list_by_template(self, template_id: int) -> Sequence[Element]:
        query = (
            self.session.query(ElementModel)
            .join(PageModel, PageModel.id == ElementModel.page_id)
            .filter(PageModel.template_id == template_id)
            .order_by(PageModel.sequence.asc(), ElementModel.sequence.asc())
            .populate_existing()
        )
        return [self._to_entity(model) for model in query.all()]

    def get_by_sequence(self, page_id: int, sequence: int) -> Element | None:
        model = (
            self.session.query(ElementModel)
            .filter(ElementModel.page_id == page_id)
            .filter(ElementModel.sequence == sequence)
            .populate_existing()
            .first()
        )
        return self._to_entity(model) if model else None

    def max_sequence(self, page_id: int) -> int | None:
        return (
            self.session.query(func.max(ElementModel.sequence))
            .filter(ElementModel.page_id == page_id)
            .scalar()
        )

    def sequences(self, page_id: int) -> list[int]:
        rows = (
            self.session.query(ElementModel.sequence)
            .filter(ElementModel.page_id == page_id)
            .all()
        )
        return [sequence for (sequence,) in rows]

    def create(self, element: Element) -> Element:
        now = now_in_app_timezone()
        model = ElementModel(
            page_id=element.page_id,
            element_type=element.element_type,
            name=element.name,
            data=dict(element.data or {}),
            sequence=element.sequence,
            created_at=ensure_app_timezone(element.created_at) or now,
            updated_at=ensure_app_timezone(element.updated_at) or now,
        )
        self.session.add(model)
        self.session.flush()
        self.session.refresh(model)
        return self._to_entity(model)

    def update(self, element: Element) -> Element:
        model = self.session.get(ElementModel, element.id)
        if model is None:
            msg = f"Element with id {element.id} not found"
            raise ValueError(msg)
        model.name = element.name
        model.data = dict(element.data or {})
        model.updated_at = now_in_app_timezone()
        self.session.add(model)
        self.session.flush()
        return self._to_entity(model)

    def set_sequence(self, element_id: int, sequence: int) -> None:
        (
            self.session.query(ElementModel)
            .filter(ElementModel.id == element_id)
            .update({ElementModel.sequence: sequence}, synchronize_session="fetch")
        )
        self.session.flush()

    def shift_down_after(self, page_id: int, sequence: int) -> int:
        """Decrement the sequence of every element after ``sequence``."""

        affected_ids = [
            element_id
            for (element_id,) in self.session.query(ElementModel.id)
            .filter(ElementModel.page_id == page_id)
            .filter(ElementModel.sequence > sequence)
            .all()
        ]
        if not affected_ids:
            return 0
        updated = (
            self.session.query(ElementModel)
            .filter(ElementModel.id.in_(affected_ids))
            .update(
                {ElementModel.sequence: ElementModel.sequence - 1},
                synchronize_session="fetch",
            )
        )
        self.session.flush()
        return updated

    def delete(self, element_id: int) -> int:
        deleted = (
            self.session.query(ElementModel)
            .filter(ElementModel.id == element_id)
            .delete(synchronize_session="fetch")
        )
        self.session.flush()
        return deleted

    @staticmethod
    def _to_entity(model: ElementModel) -> Element:
        return Element(
            id=model.id,
            page_id=model.page_id,
            element_type=model.element_type,
            sequence=model.sequence,
            name=model.name,
            data=dict(model.data or {}),
            created_at=ensure_app_timezone(model.created_at),
            updated_at=ensure_app_timezone(model.updated_at),
        )


__all__ = ["ElementRepository"]
