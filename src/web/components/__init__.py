"""Reusable UI components for the Console Kit dashboard."""

from web.components.action_button import apply_pending_navigation, plain_label, render_action_button
from web.components.button_style import FORMAT_CSS, button_css_class, button_html, format_css_class
from web.components.empty_state import empty_state
from web.components.keyvalue_list import keyvalue_row_html, render_keyvalue_list

__all__ = [
    "FORMAT_CSS",
    "apply_pending_navigation",
    "button_css_class",
    "button_html",
    "empty_state",
    "format_css_class",
    "keyvalue_row_html",
    "plain_label",
    "render_action_button",
    "render_keyvalue_list",
]
