"""Tests for resolving element records to their variants."""

from app.domain.elements import (
    BUILTIN_ELEMENT_TYPES,
    ElementContext,
    ElementFactory,
    ElementVariant,
    get_element_factory,
)
from app.domain.elements.variants import DateElement, TextElement
from app.domain.entities import Element


class _NullStore:
    def get(self, element_id):
        return None

    def update(self, element):
        return element

    def delete(self, element_id):
        return 0


class _NotAVariant:
    pass


def _record(element_type: str) -> Element:
    return Element(id=1, page_id=1, element_type=element_type, sequence=1)


def _context() -> ElementContext:
    return ElementContext(elements=_NullStore())


def test_resolves_builtin_types_from_import_paths():
    factory = ElementFactory(BUILTIN_ELEMENT_TYPES)

    variant = factory.resolve(_record("date"), _context())

    assert isinstance(variant, DateElement)
    assert variant.record.element_type == "date"


def test_unknown_type_is_unresolvable():
    factory = ElementFactory(BUILTIN_ELEMENT_TYPES)

    assert factory.resolve(_record("qrcode"), _context()) is None
    assert factory.resolve(_record(""), _context()) is None


def test_missing_module_is_unresolvable():
    factory = ElementFactory({"ghost": "app.elements_that_do_not_exist:Ghost"})

    assert factory.resolve(_record("ghost"), _context()) is None


def test_missing_class_is_unresolvable():
    factory = ElementFactory({"ghost": "app.domain.elements.variants.text:GhostElement"})

    assert factory.resolve(_record("ghost"), _context()) is None


def test_targets_that_are_not_variants_are_unresolvable():
    factory = ElementFactory({"odd": _NotAVariant})

    assert factory.resolve(_record("odd"), _context()) is None


def test_register_and_unregister_classes():
    factory = ElementFactory()
    factory.register("text", TextElement)

    assert factory.is_registered("text")
    assert isinstance(factory.resolve(_record("text"), _context()), ElementVariant)

    factory.unregister("text")

    assert not factory.is_registered("text")
    assert factory.resolve(_record("text"), _context()) is None


def test_default_factory_exposes_builtin_types():
    factory = get_element_factory()

    assert set(BUILTIN_ELEMENT_TYPES) <= set(factory.registered_types())
