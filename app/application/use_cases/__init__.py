"""Aggregate application use cases."""

from .templates import (
    add_element,
    add_page,
    copy_to_template,
    create_template,
    delete_element,
    delete_page,
    delete_template,
    move_item,
    render_template,
    save_pages,
    save_template,
)

__all__ = [
    "add_element",
    "add_page",
    "copy_to_template",
    "create_template",
    "delete_element",
    "delete_page",
    "delete_template",
    "move_item",
    "render_template",
    "save_pages",
    "save_template",
]
