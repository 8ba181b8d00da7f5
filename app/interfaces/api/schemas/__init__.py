from .template import (
    CopyReportRead,
    CopyRequest,
    ElementCreate,
    ElementRead,
    MoveRequest,
    MoveResult,
    PageMetricsBulkUpdate,
    PageMetricsUpdate,
    PageRead,
    RenderSubjectQuery,
    TemplateCreate,
    TemplateDetailRead,
    TemplateRead,
    TemplateUpdate,
)

__all__ = [
    "CopyReportRead",
    "CopyRequest",
    "ElementCreate",
    "ElementRead",
    "MoveRequest",
    "MoveResult",
    "PageMetricsBulkUpdate",
    "PageMetricsUpdate",
    "PageRead",
    "RenderSubjectQuery",
    "TemplateCreate",
    "TemplateDetailRead",
    "TemplateRead",
    "TemplateUpdate",
]
