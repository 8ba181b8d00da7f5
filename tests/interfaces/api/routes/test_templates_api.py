"""Integration tests for the template API endpoints."""

from __future__ import annotations

import pytest

pytest.importorskip("fastapi")
from fastapi.testclient import TestClient

from app.interfaces.api.dependencies import get_factory, get_file_store
from main import create_app


@pytest.fixture()
def client(factory, file_store):
    """Return a test client whose element factory and file store are isolated."""

    app = create_app()
    app.dependency_overrides[get_factory] = lambda: factory
    app.dependency_overrides[get_file_store] = lambda: file_store
    with TestClient(app) as test_client:
        yield test_client


def _create_template(client: TestClient, name: str = "Teilnahme") -> int:
    response = client.post("/templates/", json={"name": name, "context_id": 7})
    assert response.status_code == 201
    return response.json()["id"]


def _add_page(client: TestClient, template_id: int) -> dict:
    response = client.post(f"/templates/{template_id}/pages")
    assert response.status_code == 201
    return response.json()


def _add_element(client: TestClient, template_id: int, page_id: int, element_type: str, **data) -> dict:
    response = client.post(
        f"/templates/{template_id}/pages/{page_id}/elements",
        json={"element_type": element_type, "data": data},
    )
    assert response.status_code == 201, response.text
    return response.json()


def test_template_lifecycle(client: TestClient) -> None:
    template_id = _create_template(client, "  Teilnahme  ")

    listing = client.get("/templates/", params={"context_id": 7})
    assert listing.status_code == 200
    assert [item["name"] for item in listing.json()] == ["Teilnahme"]

    renamed = client.put(f"/templates/{template_id}", json={"name": "Abschluss"})
    assert renamed.status_code == 200
    assert renamed.json()["name"] == "Abschluss"

    first = _add_page(client, template_id)
    second = _add_page(client, template_id)
    assert (first["sequence"], second["sequence"]) == (1, 2)

    metrics = client.put(
        f"/templates/{template_id}/pages",
        json={"pages": [{"id": second["id"], "width": 297, "height": 210, "left_margin": 10}]},
    )
    assert metrics.status_code == 200
    assert metrics.json()[0]["width"] == 297
    assert metrics.json()[0]["left_margin"] == 10

    title = _add_element(client, template_id, first["id"], "text", text="Zertifikat")
    _add_element(client, template_id, first["id"], "subjectname")
    assert title["sequence"] == 1

    moved = client.post(
        f"/templates/{template_id}/move",
        json={"kind": "page", "item_id": second["id"], "direction": "up"},
    )
    assert moved.status_code == 200
    assert moved.json() == {"moved": True}

    detail = client.get(f"/templates/{template_id}")
    assert detail.status_code == 200
    pages = detail.json()["pages"]
    assert [page["id"] for page in pages] == [second["id"], first["id"]]
    assert [element["element_type"] for element in pages[1]["elements"]] == ["text", "subjectname"]
    assert detail.json()["element_count"] == 2

    deleted = client.delete(f"/templates/{template_id}/elements/{title['id']}")
    assert deleted.status_code == 204
    remaining = client.get(f"/templates/{template_id}").json()["pages"][1]["elements"]
    assert [(element["sequence"], element["element_type"]) for element in remaining] == [
        (1, "subjectname")
    ]

    assert client.delete(f"/templates/{template_id}/pages/{second['id']}").status_code == 204
    assert [page["sequence"] for page in client.get(f"/templates/{template_id}").json()["pages"]] == [1]

    assert client.delete(f"/templates/{template_id}").status_code == 204
    assert client.get(f"/templates/{template_id}").status_code == 404


def test_edge_move_reports_no_change(client: TestClient) -> None:
    template_id = _create_template(client)
    page = _add_page(client, template_id)

    response = client.post(
        f"/templates/{template_id}/move",
        json={"kind": "page", "item_id": page["id"], "direction": "up"},
    )

    assert response.status_code == 200
    assert response.json() == {"moved": False}


def test_invalid_requests_are_rejected(client: TestClient) -> None:
    template_id = _create_template(client)
    page = _add_page(client, template_id)

    unknown_type = client.post(
        f"/templates/{template_id}/pages/{page['id']}/elements",
        json={"element_type": "hologram"},
    )
    assert unknown_type.status_code == 400

    bad_direction = client.post(
        f"/templates/{template_id}/move",
        json={"kind": "page", "item_id": page["id"], "direction": "sideways"},
    )
    assert bad_direction.status_code == 422

    blank_name = client.put(f"/templates/{template_id}", json={"name": "   "})
    assert blank_name.status_code == 400

    assert client.post("/templates/999/pages").status_code == 404
    assert client.delete(f"/templates/{template_id}/pages/999").status_code == 404


def test_copy_endpoint_reports_counts(client: TestClient, file_store) -> None:
    source_id = _create_template(client, "Quelle")
    target_id = _create_template(client, "Ziel")
    page = _add_page(client, source_id)
    _add_element(client, source_id, page["id"], "image", file_id="logo")
    _add_element(client, source_id, page["id"], "text", text="Zertifikat")

    response = client.post(f"/templates/{source_id}/copy", json={"target_template_id": target_id})

    assert response.status_code == 200
    assert response.json() == {"pages_copied": 1, "elements_copied": 2, "elements_discarded": 0}
    assert file_store.duplicated == ["logo"]

    missing = client.post(f"/templates/{source_id}/copy", json={"target_template_id": 999})
    assert missing.status_code == 404


def test_pdf_endpoint(client: TestClient) -> None:
    template_id = _create_template(client)
    page = _add_page(client, template_id)
    _add_element(client, template_id, page["id"], "subjectname", y=80)
    _add_element(client, template_id, page["id"], "date", y=120)

    preview = client.get(f"/templates/{template_id}/pdf")
    assert preview.status_code == 200
    assert preview.headers["content-type"] == "application/pdf"
    assert preview.content.startswith(b"%PDF")

    issued = client.get(
        f"/templates/{template_id}/pdf",
        params={"preview": "false", "full_name": "Erika Musterfrau", "issued_on": "2024-03-01"},
    )
    assert issued.status_code == 200
    assert issued.content.startswith(b"%PDF")

    without_subject = client.get(f"/templates/{template_id}/pdf", params={"preview": "false"})
    assert without_subject.status_code == 400

    assert client.get("/templates/999/pdf").status_code == 404


def test_page_metrics_form(client: TestClient) -> None:
    template_id = _create_template(client)
    page = _add_page(client, template_id)
    client.put(
        f"/templates/{template_id}/pages",
        json={"pages": [{"id": page["id"], "width": 210, "height": 297, "left_margin": 12}]},
    )

    response = client.put(
        f"/templates/{template_id}/pages/form",
        data={f"pagewidth_{page['id']}": "297", f"pageheight_{page['id']}": "210", "tid": "1"},
    )

    assert response.status_code == 200, response.text
    saved = response.json()[0]
    assert (saved["width"], saved["height"], saved["left_margin"]) == (297, 210, 12)

    incomplete = client.put(
        f"/templates/{template_id}/pages/form", data={f"pagewidth_{page['id']}": "297"}
    )
    assert incomplete.status_code == 400
