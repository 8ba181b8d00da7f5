"""FastAPI dependency utilities."""

from app.domain.elements import ElementFactory, FileStore, get_element_factory


def get_factory() -> ElementFactory:
    """Return the element factory used to resolve element behaviour."""

    return get_element_factory()


def get_file_store() -> FileStore | None:
    """Return the store holding files referenced by image elements.

    The service ships without one; deployments provide theirs through
    ``app.dependency_overrides[get_file_store]``.
    """

    return None
