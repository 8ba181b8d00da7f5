"""Rutas para administrar plantillas de certificados, sus páginas y elementos."""

import logging
from typing import NoReturn

from fastapi import APIRouter, Depends, HTTPException, Query, Request, Response, status
from sqlalchemy.orm import Session

from app.application.use_cases.templates import (
    add_element as add_element_uc,
    add_page as add_page_uc,
    copy_to_template as copy_to_template_uc,
    create_template as create_template_uc,
    delete_element as delete_element_uc,
    delete_page as delete_page_uc,
    delete_template as delete_template_uc,
    get_template as get_template_uc,
    list_templates as list_templates_uc,
    move_item as move_item_uc,
    render_template as render_template_uc,
    save_pages as save_pages_uc,
    save_pages_form as save_pages_form_uc,
    save_template as save_template_uc,
)
from app.config import get_settings
from app.domain.elements import ElementFactory, FileStore
from app.domain.entities import PageMetrics
from app.domain.exceptions import (
    CascadeDeleteError,
    NotFoundError,
    SequenceIntegrityError,
)
from app.domain.rendering import RenderOptions, RenderSubject
from app.infrastructure.database import get_db
from app.infrastructure.rendering import ReportLabCanvas
from app.interfaces.api.dependencies import get_factory, get_file_store
from app.interfaces.api.schemas import (
    CopyReportRead,
    CopyRequest,
    ElementCreate,
    ElementRead,
    MoveRequest,
    MoveResult,
    PageMetricsBulkUpdate,
    PageRead,
    RenderSubjectQuery,
    TemplateCreate,
    TemplateDetailRead,
    TemplateRead,
    TemplateUpdate,
)

router = APIRouter(prefix="/templates", tags=["templates"])

logger = logging.getLogger(__name__)


def _raise_http_error(exc: Exception) -> NoReturn:
    if isinstance(exc, NotFoundError):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)) from exc
    if isinstance(exc, CascadeDeleteError):
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(exc)) from exc
    if isinstance(exc, SequenceIntegrityError):
        logger.error("Sequence integrity check failed: %s", exc)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Orden inconsistente, la operación fue revertida",
        ) from exc
    raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc


@router.post("/", response_model=TemplateRead, status_code=status.HTTP_201_CREATED)
def register_template(
    template_in: TemplateCreate,
    db: Session = Depends(get_db),
) -> TemplateRead:
    """Crea una plantilla vacía."""

    try:
        template = create_template_uc(
            db, name=template_in.name, context_id=template_in.context_id
        )
    except ValueError as exc:
        _raise_http_error(exc)
    return TemplateRead.model_validate(template)


@router.get("/", response_model=list[TemplateRead])
def list_templates(
    context_id: int | None = Query(default=None),
    db: Session = Depends(get_db),
) -> list[TemplateRead]:
    """Lista las plantillas, opcionalmente filtradas por contexto."""

    templates = list_templates_uc(db, context_id=context_id)
    return [TemplateRead.model_validate(template) for template in templates]


@router.get("/{template_id}", response_model=TemplateDetailRead)
def get_template(template_id: int, db: Session = Depends(get_db)) -> TemplateDetailRead:
    """Obtiene una plantilla con sus páginas y elementos ordenados."""

    try:
        template = get_template_uc(db, template_id)
    except ValueError as exc:
        _raise_http_error(exc)
    return TemplateDetailRead.model_validate(template)


@router.put("/{template_id}", response_model=TemplateRead)
def update_template(
    template_id: int,
    template_in: TemplateUpdate,
    db: Session = Depends(get_db),
) -> TemplateRead:
    """Cambia el nombre de una plantilla."""

    try:
        template = save_template_uc(db, template_id=template_id, name=template_in.name)
    except ValueError as exc:
        _raise_http_error(exc)
    return TemplateRead.model_validate(template)


@router.delete("/{template_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_template(
    template_id: int,
    db: Session = Depends(get_db),
    factory: ElementFactory = Depends(get_factory),
    files: FileStore | None = Depends(get_file_store),
) -> Response:
    """Elimina la plantilla junto con todas sus páginas y elementos."""

    try:
        delete_template_uc(db, template_id, factory=factory, files=files)
    except (ValueError, CascadeDeleteError) as exc:
        _raise_http_error(exc)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.post(
    "/{template_id}/pages",
    response_model=PageRead,
    status_code=status.HTTP_201_CREATED,
)
def add_page(template_id: int, db: Session = Depends(get_db)) -> PageRead:
    """Agrega una página al final de la plantilla."""

    try:
        page = add_page_uc(db, template_id=template_id)
    except ValueError as exc:
        _raise_http_error(exc)
    return PageRead.model_validate(page)


@router.put("/{template_id}/pages", response_model=list[PageRead])
def save_pages(
    template_id: int,
    payload: PageMetricsBulkUpdate,
    db: Session = Depends(get_db),
) -> list[PageRead]:
    """Actualiza las dimensiones y márgenes de varias páginas."""

    metrics = {
        page.id: PageMetrics(
            width=page.width,
            height=page.height,
            left_margin=page.left_margin,
            right_margin=page.right_margin,
        )
        for page in payload.pages
    }
    try:
        pages = save_pages_uc(db, template_id=template_id, pages=metrics)
    except ValueError as exc:
        _raise_http_error(exc)
    return [PageRead.model_validate(page) for page in pages]


async def _read_form(request: Request) -> dict[str, str]:
    form = await request.form()
    return {key: str(value) for key, value in form.items()}


@router.put("/{template_id}/pages/form", response_model=list[PageRead])
def save_pages_form(
    template_id: int,
    form: dict[str, str] = Depends(_read_form),
    db: Session = Depends(get_db),
) -> list[PageRead]:
    """Actualiza las páginas desde un formulario con campos ``pagewidth_<id>``."""

    try:
        pages = save_pages_form_uc(db, template_id=template_id, form=form)
    except ValueError as exc:
        _raise_http_error(exc)
    return [PageRead.model_validate(page) for page in pages]


@router.delete("/{template_id}/pages/{page_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_page(
    template_id: int,
    page_id: int,
    db: Session = Depends(get_db),
    factory: ElementFactory = Depends(get_factory),
    files: FileStore | None = Depends(get_file_store),
) -> Response:
    """Elimina una página y reordena las siguientes."""

    try:
        delete_page_uc(db, template_id=template_id, page_id=page_id, factory=factory, files=files)
    except (ValueError, SequenceIntegrityError) as exc:
        _raise_http_error(exc)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.post(
    "/{template_id}/pages/{page_id}/elements",
    response_model=ElementRead,
    status_code=status.HTTP_201_CREATED,
)
def add_element(
    template_id: int,
    page_id: int,
    payload: ElementCreate,
    db: Session = Depends(get_db),
    factory: ElementFactory = Depends(get_factory),
) -> ElementRead:
    """Agrega un elemento al final de la página."""

    try:
        element = add_element_uc(
            db,
            template_id=template_id,
            page_id=page_id,
            element_type=payload.element_type,
            name=payload.name,
            data=payload.data,
            factory=factory,
        )
    except ValueError as exc:
        _raise_http_error(exc)
    return ElementRead.model_validate(element)


@router.delete(
    "/{template_id}/elements/{element_id}", status_code=status.HTTP_204_NO_CONTENT
)
def delete_element(
    template_id: int,
    element_id: int,
    db: Session = Depends(get_db),
    factory: ElementFactory = Depends(get_factory),
    files: FileStore | None = Depends(get_file_store),
) -> Response:
    """Elimina un elemento y reordena los siguientes de su página."""

    try:
        delete_element_uc(
            db, template_id=template_id, element_id=element_id, factory=factory, files=files
        )
    except (ValueError, SequenceIntegrityError) as exc:
        _raise_http_error(exc)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.post("/{template_id}/move", response_model=MoveResult)
def move_item(
    template_id: int,
    payload: MoveRequest,
    db: Session = Depends(get_db),
) -> MoveResult:
    """Mueve una página o un elemento una posición hacia arriba o abajo."""

    try:
        moved = move_item_uc(
            db,
            template_id=template_id,
            kind=payload.kind,
            item_id=payload.item_id,
            direction=payload.direction,
        )
    except (ValueError, SequenceIntegrityError) as exc:
        _raise_http_error(exc)
    return MoveResult(moved=moved)


@router.post("/{template_id}/copy", response_model=CopyReportRead)
def copy_template(
    template_id: int,
    payload: CopyRequest,
    db: Session = Depends(get_db),
    factory: ElementFactory = Depends(get_factory),
    files: FileStore | None = Depends(get_file_store),
) -> CopyReportRead:
    """Copia las páginas y elementos de la plantilla en otra plantilla."""

    try:
        report = copy_to_template_uc(
            db,
            template_id=template_id,
            target_template_id=payload.target_template_id,
            factory=factory,
            files=files,
        )
    except (ValueError, SequenceIntegrityError) as exc:
        _raise_http_error(exc)
    return CopyReportRead.model_validate(report)


@router.get("/{template_id}/pdf")
def render_pdf(
    template_id: int,
    preview: bool = Query(default=True),
    subject: RenderSubjectQuery = Depends(),
    db: Session = Depends(get_db),
    factory: ElementFactory = Depends(get_factory),
    files: FileStore | None = Depends(get_file_store),
) -> Response:
    """Genera el PDF de la plantilla, como vista previa o para un destinatario."""

    settings = get_settings()
    try:
        render_subject = None
        if subject.full_name:
            render_subject = RenderSubject(
                full_name=subject.full_name,
                course_name=subject.course_name,
                issued_on=subject.issued_on,
            )
        options = RenderOptions(preview=preview, subject=render_subject, return_bytes=True)
        content = render_template_uc(
            db,
            template_id=template_id,
            options=options,
            canvas=ReportLabCanvas(title=settings.pdf_filename),
            factory=factory,
            files=files,
        )
    except ValueError as exc:
        _raise_http_error(exc)

    return Response(
        content=content,
        media_type="application/pdf",
        headers={"Content-Disposition": f'inline; filename="{settings.pdf_filename}"'},
    )
