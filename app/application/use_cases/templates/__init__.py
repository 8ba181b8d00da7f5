"""Template-related use cases."""

from .add_element import add_element
from .add_page import add_page
from .copy_to_template import CopyReport, copy_to_template
from .create_template import create_template
from .delete_element import delete_element
from .delete_page import delete_page
from .delete_template import delete_template
from .get_template import get_template, list_templates
from .move_item import move_item
from .render_template import render_template
from .save_pages import parse_page_metrics_form, save_pages, save_pages_form
from .save_template import save_template

__all__ = [
    "CopyReport",
    "add_element",
    "add_page",
    "copy_to_template",
    "create_template",
    "delete_element",
    "delete_page",
    "delete_template",
    "get_template",
    "list_templates",
    "move_item",
    "parse_page_metrics_form",
    "render_template",
    "save_pages",
    "save_pages_form",
    "save_template",
]
