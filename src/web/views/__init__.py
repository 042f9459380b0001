"""View modules for the Console Kit dashboard."""

from web.views.buttons import render_buttons
from web.views.markup_defuser import render_markup_defuser

PAGE_MAP = {
    "Buttons": render_buttons,
    "Markup Defuser": render_markup_defuser,
}

__all__ = ["PAGE_MAP"]
