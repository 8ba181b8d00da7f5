"""Tests for cascading template deletion."""

import pytest

from app.application.use_cases.templates import (
    add_element,
    add_page,
    create_template,
    delete_template,
    get_template,
    list_templates,
)
from app.domain.elements.variants import TextElement
from app.domain.exceptions import CascadeDeleteError, NotFoundError
from app.infrastructure.repositories import ElementRepository, PageRepository


class _BrokenElement(TextElement):
    def delete(self) -> None:
        raise RuntimeError("storage unavailable")


def _build_template(session, factory, *, element_types=("text", "date", "text")):
    template = create_template(session, name="Zertifikat", context_id=3)
    pages = [add_page(session, template_id=template.id) for _ in range(2)]
    elements = [
        add_element(
            session,
            template_id=template.id,
            page_id=pages[index % 2].id,
            element_type=element_type,
            factory=factory,
        )
        for index, element_type in enumerate(element_types)
    ]
    return template, pages, elements


def test_delete_template_removes_everything(session, factory):
    template, pages, elements = _build_template(session, factory)
    survivor = create_template(session, name="Andere", context_id=3)

    assert delete_template(session, template.id, factory=factory) is True

    with pytest.raises(NotFoundError):
        get_template(session, template.id)
    assert [item.id for item in list_templates(session, context_id=3)] == [survivor.id]
    for page in pages:
        assert PageRepository(session).get(page.id) is None
    for element in elements:
        assert ElementRepository(session).get(element.id) is None


def test_delete_template_releases_files_of_image_elements(session, factory, file_store):
    template = create_template(session, name="Mit Logo", context_id=3)
    page = add_page(session, template_id=template.id)
    add_element(
        session,
        template_id=template.id,
        page_id=page.id,
        element_type="image",
        data={"file_id": "logo"},
        factory=factory,
    )

    delete_template(session, template.id, factory=factory, files=file_store)

    assert file_store.released == ["logo"]


def test_failed_teardown_keeps_the_template_intact(session, factory):
    factory.register("broken", _BrokenElement)
    template, pages, elements = _build_template(
        session, factory, element_types=("text", "text", "broken")
    )

    with pytest.raises(CascadeDeleteError) as excinfo:
        delete_template(session, template.id, factory=factory)

    assert excinfo.value.template_id == template.id
    assert isinstance(excinfo.value.__cause__, RuntimeError)

    detail = get_template(session, template.id)
    assert [page.id for page in detail.pages] == [page.id for page in pages]
    stored = sorted(
        element.id for page in detail.pages for element in page.elements
    )
    assert stored == sorted(element.id for element in elements)


def test_delete_template_with_unresolvable_elements(session, factory):
    factory.register("legacy", "app.plugins_removed_long_ago:LegacyElement")
    template, _, elements = _build_template(
        session, factory, element_types=("legacy", "text")
    )

    assert delete_template(session, template.id, factory=factory)
    for element in elements:
        assert ElementRepository(session).get(element.id) is None


def test_delete_missing_template_is_not_found(session, factory):
    with pytest.raises(NotFoundError):
        delete_template(session, 4040, factory=factory)


def test_failed_teardown_releases_no_files(session, factory, file_store):
    factory.register("broken", _BrokenElement)
    template = create_template(session, name="Mit Logo", context_id=3)
    page = add_page(session, template_id=template.id)
    for element_type, data in (("image", {"file_id": "logo"}), ("broken", {})):
        add_element(
            session,
            template_id=template.id,
            page_id=page.id,
            element_type=element_type,
            data=data,
            factory=factory,
        )

    with pytest.raises(CascadeDeleteError):
        delete_template(session, template.id, factory=factory, files=file_store)

    assert file_store.released == []
    image = get_template(session, template.id).pages[0].elements[0]
    assert image.data == {"file_id": "logo"}
