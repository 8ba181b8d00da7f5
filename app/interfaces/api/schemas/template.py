"""Schemas for template, page and element endpoints."""

from datetime import date, datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from app.domain.sequencing import Direction, ItemKind


class ElementRead(BaseModel):
    id: int
    page_id: int
    element_type: str
    name: str | None
    data: dict[str, Any]
    sequence: int
    created_at: datetime | None
    updated_at: datetime | None

    model_config = ConfigDict(from_attributes=True)


class PageRead(BaseModel):
    id: int
    template_id: int
    sequence: int
    width: float
    height: float
    left_margin: float
    right_margin: float
    created_at: datetime | None
    updated_at: datetime | None
    elements: list[ElementRead] = Field(default_factory=list)

    model_config = ConfigDict(from_attributes=True)


class TemplateRead(BaseModel):
    id: int
    name: str
    context_id: int
    created_at: datetime | None
    updated_at: datetime | None

    model_config = ConfigDict(from_attributes=True)


class TemplateDetailRead(TemplateRead):
    """Template with its pages and elements in sequence order."""

    pages: list[PageRead] = Field(default_factory=list)
    element_count: int = 0


class TemplateCreate(BaseModel):
    """Payload required to create a template."""

    name: str = Field(..., min_length=1, max_length=255)
    context_id: int


class TemplateUpdate(BaseModel):
    name: str = Field(..., min_length=1, max_length=255)

    model_config = ConfigDict(extra="forbid")


class PageMetricsUpdate(BaseModel):
    id: int
    width: float = Field(..., gt=0)
    height: float = Field(..., gt=0)
    left_margin: float = Field(default=0, ge=0)
    right_margin: float = Field(default=0, ge=0)


class PageMetricsBulkUpdate(BaseModel):
    """Payload wrapper to update the metrics of many pages at once."""

    pages: list[PageMetricsUpdate]


class ElementCreate(BaseModel):
    element_type: str = Field(..., min_length=1, max_length=50)
    name: str | None = Field(default=None, max_length=255)
    data: dict[str, Any] = Field(default_factory=dict)


class MoveRequest(BaseModel):
    kind: ItemKind
    item_id: int
    direction: Direction


class MoveResult(BaseModel):
    moved: bool


class CopyRequest(BaseModel):
    target_template_id: int


class CopyReportRead(BaseModel):
    pages_copied: int
    elements_copied: int
    elements_discarded: int

    model_config = ConfigDict(from_attributes=True)


class RenderSubjectQuery(BaseModel):
    """Values printed when rendering a certificate for a real recipient."""

    full_name: str | None = None
    course_name: str | None = None
    issued_on: date | None = None
