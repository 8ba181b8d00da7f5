"""Use case for bulk editing page metrics."""

from __future__ import annotations

import logging
import re
from collections.abc import Mapping
from dataclasses import replace
from typing import Any

from sqlalchemy.orm import Session

from app.domain.entities import Page, PageMetrics
from app.domain.exceptions import NotFoundError
from app.infrastructure.database import transaction
from app.infrastructure.repositories import PageRepository, TemplateRepository
from app.utils import now_in_app_timezone

logger = logging.getLogger(__name__)

_FORM_FIELD_PATTERN = re.compile(
    r"^page(?P<field>width|height|leftmargin|rightmargin)_(?P<page_id>\d+)$"
)
_FORM_FIELDS = {
    "width": "width",
    "height": "height",
    "leftmargin": "left_margin",
    "rightmargin": "right_margin",
}


def parse_page_metrics_form(
    form: Mapping[str, Any], current: Mapping[int, PageMetrics] | None = None
) -> dict[int, PageMetrics]:
    """Turn ``pagewidth_<id>``-style keys into metrics per page id.

    Keys that do not follow the pattern are ignored. A page mentioned in the
    form must provide at least its width and height; margins left out keep
    the value from ``current`` when the page is known there.
    """

    current = current or {}

    collected: dict[int, dict[str, float]] = {}
    for key, raw_value in form.items():
        match = _FORM_FIELD_PATTERN.match(str(key))
        if not match:
            continue
        try:
            value = float(raw_value)
        except (TypeError, ValueError) as exc:
            raise ValueError(f"Valor no numérico para '{key}'") from exc
        page_values = collected.setdefault(int(match.group("page_id")), {})
        page_values[_FORM_FIELDS[match.group("field")]] = value

    metrics: dict[int, PageMetrics] = {}
    for page_id, values in collected.items():
        if "width" not in values or "height" not in values:
            raise ValueError(f"La página {page_id} requiere ancho y alto")
        known = current.get(page_id)
        if known is not None:
            values.setdefault("left_margin", known.left_margin)
            values.setdefault("right_margin", known.right_margin)
        metrics[page_id] = PageMetrics(**values)
    return metrics


def validate_metrics(metrics: PageMetrics) -> PageMetrics:
    if metrics.width <= 0 or metrics.height <= 0:
        raise ValueError("El ancho y el alto de la página deben ser positivos")
    if metrics.left_margin < 0 or metrics.right_margin < 0:
        raise ValueError("Los márgenes de la página no pueden ser negativos")
    if metrics.left_margin + metrics.right_margin >= metrics.width:
        raise ValueError("Los márgenes no pueden superar el ancho de la página")
    return metrics


def save_pages(
    session: Session, *, template_id: int, pages: Mapping[int, PageMetrics]
) -> list[Page]:
    """Apply ``pages`` to the matching pages of the template.

    Pages missing from ``pages`` keep their metrics; ids in ``pages`` that are
    not pages of this template are ignored.
    """

    for metrics in pages.values():
        validate_metrics(metrics)

    template_repository = TemplateRepository(session)
    page_repository = PageRepository(session)
    updated: list[Page] = []
    with transaction(session):
        if not template_repository.lock(template_id):
            raise NotFoundError("Plantilla", template_id, "Plantilla no encontrada")

        existing = page_repository.list_by_template(template_id)
        now = now_in_app_timezone()
        for page in existing:
            metrics = pages.get(page.id)
            if metrics is None:
                continue
            updated.append(
                page_repository.update(
                    replace(
                        page,
                        width=metrics.width,
                        height=metrics.height,
                        left_margin=metrics.left_margin,
                        right_margin=metrics.right_margin,
                        updated_at=now,
                    )
                )
            )

    unknown = set(pages) - {page.id for page in existing}
    if unknown:
        logger.debug(
            "Ignoring metrics for pages %s not in template %s", sorted(unknown), template_id
        )
    return updated


def save_pages_form(
    session: Session, *, template_id: int, form: Mapping[str, Any]
) -> list[Page]:
    """Apply a submitted page metrics form to the pages of the template."""

    current = {
        page.id: page.metrics
        for page in PageRepository(session).list_by_template(template_id)
    }
    return save_pages(
        session,
        template_id=template_id,
        pages=parse_page_metrics_form(form, current),
    )


__all__ = ["parse_page_metrics_form", "save_pages", "save_pages_form", "validate_metrics"]
