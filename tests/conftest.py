"""Shared fixtures: a throwaway SQLite database and a fresh element factory."""

from __future__ import annotations

import os
import sys
import tempfile
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

TEST_DB_PATH = Path(tempfile.gettempdir()) / "certificate_templates_test.db"
os.environ["DATABASE_URL"] = f"sqlite:///{TEST_DB_PATH}"
os.environ.setdefault("APP_TIMEZONE", "UTC")

from app.config import get_settings  # noqa: E402

get_settings.cache_clear()

from app.domain.elements import BUILTIN_ELEMENT_TYPES, ElementFactory  # noqa: E402
from app.infrastructure.database import (  # noqa: E402
    Base,
    SessionLocal,
    engine,
    initialize_database,
)
from app.infrastructure.repositories import PageRepository, TemplateRepository  # noqa: E402


@pytest.fixture(autouse=True)
def reset_database():
    """Ensure every test starts from empty tables."""

    Base.metadata.drop_all(bind=engine)
    initialize_database()
    yield
    Base.metadata.drop_all(bind=engine)


@pytest.fixture()
def session():
    with SessionLocal() as db:
        yield db


@pytest.fixture()
def factory() -> ElementFactory:
    return ElementFactory(BUILTIN_ELEMENT_TYPES)


class FakeFileStore:
    """In-memory stand-in for the external file storage."""

    def __init__(self, *, fail_duplicates: bool = False) -> None:
        self.fail_duplicates = fail_duplicates
        self.released: list[str] = []
        self.duplicated: list[str] = []

    def path(self, file_id: str) -> str | None:
        return f"/files/{file_id}.png"

    def duplicate(self, file_id: str) -> str | None:
        if self.fail_duplicates:
            return None
        self.duplicated.append(file_id)
        return f"{file_id}-copy"

    def release(self, file_id: str) -> None:
        self.released.append(file_id)


@pytest.fixture()
def file_store() -> FakeFileStore:
    return FakeFileStore()


@pytest.fixture()
def lock_calls(monkeypatch) -> list[tuple[str, int]]:
    """Record the row locks taken by template and page repositories, in order."""

    calls: list[tuple[str, int]] = []
    template_lock = TemplateRepository.lock
    page_lock = PageRepository.lock

    def lock_template(self, template_id):
        calls.append(("template", template_id))
        return template_lock(self, template_id)

    def lock_page(self, page_id):
        calls.append(("page", page_id))
        return page_lock(self, page_id)

    monkeypatch.setattr(TemplateRepository, "lock", lock_template)
    monkeypatch.setattr(PageRepository, "lock", lock_page)
    return calls
