"""Tests for rendering templates onto a canvas."""

from datetime import date
from io import BytesIO

import pytest

from app.application.use_cases.templates import (
    add_element,
    add_page,
    create_template,
    render_template,
    save_pages,
)
from app.domain.entities import PageMetrics
from app.domain.rendering import (
    PREVIEW_COURSE_NAME,
    PREVIEW_SUBJECT_NAME,
    RenderOptions,
    RenderSubject,
)
from app.infrastructure.rendering import RecordingCanvas, ReportLabCanvas


@pytest.fixture()
def template(session, factory):
    template = create_template(session, name="Teilnahmebestätigung", context_id=1)
    first = add_page(session, template_id=template.id)
    second = add_page(session, template_id=template.id)
    save_pages(session, template_id=template.id, pages={second.id: PageMetrics(width=297, height=210)})

    def add(page, element_type, **data):
        add_element(
            session,
            template_id=template.id,
            page_id=page.id,
            element_type=element_type,
            data=data,
            factory=factory,
        )

    add(first, "border", inset=5)
    add(first, "text", text="Zertifikat", y=40, font_size=28)
    add(first, "subjectname", y=80)
    add(second, "coursename", y=20, align="L", x=15)
    add(second, "date", y=180, prefix="Linz, am ")
    add(second, "line", x1=20, y1=190, x2=120, y2=190)
    return template


def _texts(canvas):
    return [command.params["text"] for command in canvas.commands if command.kind == "text"]


def test_render_draws_pages_and_elements_in_sequence_order(session, factory, template):
    canvas = RecordingCanvas()
    subject = RenderSubject(
        full_name="Erika Musterfrau",
        course_name="Erste Hilfe",
        issued_on=date(2024, 3, 1),
    )

    render_template(
        session,
        template_id=template.id,
        options=RenderOptions(subject=subject),
        canvas=canvas,
        factory=factory,
    )

    assert canvas.page_count == 2
    assert canvas.kinds() == ["page", "line", "line", "line", "line", "text", "text",
                              "page", "text", "text", "line"]
    assert _texts(canvas) == ["Zertifikat", "Erika Musterfrau", "Erste Hilfe", "Linz, am 01.03.2024"]
    pages = [command for command in canvas.commands if command.kind == "page"]
    assert (pages[1].params["width"], pages[1].params["height"]) == (297, 210)
    assert {command.page for command in canvas.commands if command.kind == "line"} == {1, 2}


def test_text_elements_fall_back_to_configured_defaults(session, factory, template):
    canvas = RecordingCanvas()

    render_template(
        session,
        template_id=template.id,
        options=RenderOptions(preview=True),
        canvas=canvas,
        factory=factory,
    )

    name = next(command for command in canvas.commands if command.params.get("text") == PREVIEW_SUBJECT_NAME)
    assert name.params["font"] == "helvetica"
    assert name.params["size"] == 12
    assert name.params["x"] == 105
    assert name.params["align"] == "C"
    title = next(command for command in canvas.commands if command.params.get("text") == "Zertifikat")
    assert title.params["size"] == 28


def test_preview_uses_placeholders(session, factory, template):
    canvas = RecordingCanvas()
    subject = RenderSubject(full_name="Erika Musterfrau", course_name="Erste Hilfe")

    render_template(
        session,
        template_id=template.id,
        options=RenderOptions(preview=True, subject=subject),
        canvas=canvas,
        factory=factory,
    )

    texts = _texts(canvas)
    assert PREVIEW_SUBJECT_NAME in texts
    assert PREVIEW_COURSE_NAME in texts
    assert "Erika Musterfrau" not in texts


def test_render_skips_unresolvable_elements(session, factory, template):
    factory.unregister("border")
    canvas = RecordingCanvas()

    render_template(
        session,
        template_id=template.id,
        options=RenderOptions(preview=True),
        canvas=canvas,
        factory=factory,
    )

    assert canvas.kinds() == ["page", "text", "text", "page", "text", "text", "line"]


def test_render_requires_subject_outside_preview():
    with pytest.raises(ValueError):
        RenderOptions(preview=False)


def test_missing_issue_date_defaults_to_today():
    subject = RenderSubject(full_name="Erika Musterfrau")

    effective = RenderOptions(subject=subject).effective_subject(date(2024, 5, 6))

    assert effective.full_name == "Erika Musterfrau"
    assert effective.issued_on == date(2024, 5, 6)


def test_recording_canvas_writes_to_its_stream(session, factory, template):
    stream = BytesIO()

    result = render_template(
        session,
        template_id=template.id,
        options=RenderOptions(preview=True, return_bytes=False),
        canvas=RecordingCanvas(stream),
        factory=factory,
    )

    assert result is None
    assert stream.getvalue().startswith(b"[")


def test_reportlab_canvas_produces_pdf(session, factory, template):
    payload = render_template(
        session,
        template_id=template.id,
        options=RenderOptions(preview=True),
        canvas=ReportLabCanvas(title="Vorschau"),
        factory=factory,
    )

    assert payload.startswith(b"%PDF")


def test_reportlab_canvas_writes_to_a_path(session, factory, template, tmp_path):
    target = tmp_path / "certificate.pdf"

    render_template(
        session,
        template_id=template.id,
        options=RenderOptions(preview=True, return_bytes=False),
        canvas=ReportLabCanvas(target),
        factory=factory,
    )

    assert target.read_bytes().startswith(b"%PDF")


def test_image_elements_resolve_paths_through_the_file_store(session, factory, file_store):
    template = create_template(session, name="Logo", context_id=1)
    page = add_page(session, template_id=template.id)
    add_element(
        session,
        template_id=template.id,
        page_id=page.id,
        element_type="image",
        data={"file_id": "logo", "x": 10, "y": 10, "width": 40},
        factory=factory,
    )
    canvas = RecordingCanvas()

    render_template(
        session,
        template_id=template.id,
        options=RenderOptions(preview=True),
        canvas=canvas,
        factory=factory,
        files=file_store,
    )

    image = canvas.commands[1]
    assert image.kind == "image"
    assert image.params == {"path": "/files/logo.png", "x": 10.0, "y": 10.0, "width": 40.0, "height": None}


def test_render_script_writes_pdf(session, template, tmp_path, monkeypatch, capsys):
    from scripts.render_template import main

    target = tmp_path / "script.pdf"
    monkeypatch.setattr(
        "sys.argv",
        ["render_template", str(template.id), "--output", str(target), "--name", "Erika Musterfrau"],
    )

    main()

    assert target.read_bytes().startswith(b"%PDF")
    assert str(target) in capsys.readouterr().out


def test_render_script_fails_for_missing_template(tmp_path, monkeypatch):
    from scripts.render_template import main

    monkeypatch.setattr(
        "sys.argv", ["render_template", "999", "--output", str(tmp_path / "none.pdf")]
    )

    with pytest.raises(SystemExit):
        main()
