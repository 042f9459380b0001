"""Format-to-CSS lookup and HTML markup for action buttons."""

import html
import logging

from core.action_button import ActionButton
from core.button_descriptor import LinkMode
from utils.html_defuser import defuse

logger = logging.getLogger("ButtonStyle")

FORMAT_CSS = {
    "primary": "btn-primary",
    "submit": "oxi-btn-submit",
    "loading": "oxi-btn-loading",
    "cancel": "oxi-btn-cancel",
    "reset": "oxi-btn-reset",
    "expected": "oxi-btn-expected",
    "failure": "oxi-btn-failure",
    "optional": "oxi-btn-optional",
    "alternative": "oxi-btn-alternative",
    "exceptional": "oxi-btn-exceptional",
    "terminate": "oxi-btn-terminate",
    "tile": "oxi-btn-tile",
}

LOADING_CSS = "oxi-btn-loading"
NEUTRAL_CSS = "btn-light border-secondary"


def format_css_class(format: str | None, loading: bool = False, label: str = "") -> str:  # noqa: A002
    """Return the CSS class for a button format.

    Loading wins over the format. An unknown format is logged and yields "".
    """
    if loading:
        return LOADING_CSS
    if not format:
        return NEUTRAL_CSS
    css_class = FORMAT_CSS.get(format)
    if css_class is None:
        logger.warning(f'button "{label}" has unknown format: "{format}"')
        return ""
    return css_class


def button_css_class(button: ActionButton) -> str:
    """CSS class for the current state of *button*."""
    return format_css_class(button.descriptor.format, button.loading, button.descriptor.label)


def button_html(button: ActionButton) -> str:
    """Return ``<a>`` markup for link buttons, ``<button>`` markup otherwise.

    The label may contain markup and is defused, not escaped.
    """
    desc = button.descriptor
    classes = f"btn {button_css_class(button)}".strip()
    label = defuse(desc.label)
    title = f' title="{html.escape(desc.tooltip)}"' if desc.tooltip else ""

    if isinstance(desc.mode, LinkMode):
        target = f' target="{html.escape(desc.mode.target)}"' if desc.mode.target else ""
        return f'<a href="{html.escape(desc.mode.href)}"{target} class="{classes}"{title}>{label}</a>'

    disabled = "" if button.interactive else " disabled"
    return f'<button type="button" class="{classes}"{title}{disabled}>{label}</button>'
