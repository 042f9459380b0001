"""Button gallery: every format and dispatch mode of the action button."""

import asyncio

import streamlit as st

from core.button_descriptor import BUTTON_FORMATS, ButtonDescriptor
from web.components import button_html, render_action_button, render_keyvalue_list
from web.navigation import LAST_ACTION_KEY
from web.state import AppComponents


async def _slow_callback(descriptor: ButtonDescriptor) -> None:
    await asyncio.sleep(1)
    st.session_state["callback_count"] = st.session_state.get("callback_count", 0) + 1


_DEMO_BUTTONS = {
    "link": {"label": "Project site", "format": "alternative", "href": "https://example.org", "target": "_blank"},
    "link_confirm": {
        "label": "Leave console",
        "format": "terminate",
        "href": "https://example.org",
        "confirm": {"label": "Leave the console?", "description": "Unsaved changes will be lost."},
    },
    "callback": {"label": "Run <b>callback</b>", "format": "expected", "onClick": _slow_callback},
    "action": {"label": "Refresh cache", "format": "submit", "action": "refresh_cache"},
    "action_fail": {"label": "Broken action", "format": "failure", "action": "fail_always"},
    "page": {
        "label": "Open defuser",
        "format": "primary",
        "page": "Markup Defuser",
        "confirm": {"label": "Switch page?", "description": "You will leave the gallery.", "confirm_label": "Go"},
    },
    "page_missing": {"label": "Missing page", "format": "exceptional", "page": "Nowhere"},
    "disabled": {"label": "Disabled", "format": "optional", "action": "refresh_cache", "disabled": True},
}


def render_buttons(app: AppComponents):
    """Render the button gallery page."""
    st.title("Buttons")
    st.caption("Dispatch modes, confirm gates and loading state")

    cols = st.columns(2)
    for i, (key, definition) in enumerate(_DEMO_BUTTONS.items()):
        button = app.get_button(key, lambda d=definition: ButtonDescriptor.from_dict(d))
        with cols[i % 2]:
            render_action_button(button, key=f"btn_{key}", ui=app.ui)
            state = button.state
            render_keyvalue_list(
                [
                    {"label": "loading", "value": state.loading},
                    {"label": "dialog open", "value": state.confirm_dialog_open},
                ]
            )

    st.markdown("---")
    st.subheader("State")
    last = st.session_state.get(LAST_ACTION_KEY)
    render_keyvalue_list(
        [
            {"label": "Dispatch", "format": "head"},
            {"label": "Callback runs", "value": st.session_state.get("callback_count", 0)},
            {"label": "Last backend action", "value": f"{last['action']}: {last['result']}" if last else "-"},
        ]
    )

    st.markdown("---")
    st.subheader("Formats")
    samples = []
    for fmt in BUTTON_FORMATS:
        definition = {"label": fmt, "format": fmt, "action": "refresh_cache"}
        button = app.get_button(f"fmt_{fmt}", lambda d=definition: ButtonDescriptor.from_dict(d))
        samples.append(button_html(button))
    st.markdown(" ".join(samples), unsafe_allow_html=True)
