"""Streamlit rendering for action buttons."""

import asyncio
import json
from collections.abc import MutableMapping
from typing import Any

import streamlit as st
import streamlit.components.v1 as components
from bs4 import BeautifulSoup

from core.action_button import ActionButton
from core.button_descriptor import ButtonConfigError
from utils.html_defuser import defuse
from web.components.button_style import button_css_class
from web.navigation import NAV_KEY, PENDING_LINK_KEY, PENDING_PAGE_KEY

OPEN_DIALOG_KEY = "confirm_dialog_button"


def plain_label(label: str) -> str:
    """Text content of a (possibly rich) label, for widgets that take plain text."""
    return BeautifulSoup(str(defuse(label)), "html.parser").get_text()


def _run(button: ActionButton, step: str) -> bool:
    """Run an async button step, reporting collaborator failures on the page."""
    try:
        asyncio.run(getattr(button, step)())
        return True
    except ButtonConfigError:
        raise
    except Exception as e:
        st.error(f"{plain_label(button.descriptor.label)} failed: {e}")
        return False


def cancel_open_dialog(session: MutableMapping[str, Any] | None = None) -> None:
    """Treat a dismissed confirm dialog (X, Esc, click outside) as a cancel."""
    session = session if session is not None else st.session_state
    button = session.pop(OPEN_DIALOG_KEY, None)
    if button is not None:
        button.cancel()


@st.dialog("Please confirm", on_dismiss=cancel_open_dialog)
def _confirm_dialog(button: ActionButton, key: str, ui: dict[str, Any]) -> None:
    """Confirm gate for a button with ``confirm`` set."""
    confirm = button.descriptor.confirm
    assert confirm is not None
    st.markdown(f"**{defuse(confirm.label)}**", unsafe_allow_html=True)
    st.markdown(defuse(confirm.description), unsafe_allow_html=True)

    col1, col2 = st.columns(2)
    with col1:
        if st.button(
            confirm.confirm_label or ui.get("confirm_label", "OK"),
            type="primary",
            use_container_width=True,
            key=f"{key}_confirm",
        ):
            st.session_state.pop(OPEN_DIALOG_KEY, None)
            if _run(button, "confirm"):
                st.rerun()
    with col2:
        if st.button(
            confirm.cancel_label or ui.get("cancel_label", "Cancel"),
            use_container_width=True,
            key=f"{key}_cancel",
        ):
            cancel_open_dialog()
            st.rerun()


def render_action_button(button: ActionButton, key: str, ui: dict[str, Any] | None = None) -> None:
    """Render *button* as a link or a button and drive its state machine.

    Args:
        button: ActionButton kept in session state across reruns.
        key: Unique widget key.
        ui: ``ui`` settings section (default dialog labels).
    """
    ui = ui or {}
    desc = button.descriptor
    label = plain_label(desc.label)

    st.markdown(f'<div class="{button_css_class(button)}">', unsafe_allow_html=True)
    if desc.is_link and not desc.confirm:
        # the browser performs the navigation itself
        st.link_button(
            label,
            desc.mode.href,  # type: ignore[union-attr]
            help=desc.tooltip,
            disabled=not button.interactive,
            use_container_width=True,
        )
    elif st.button(
        label,
        key=key,
        help=desc.tooltip,
        disabled=not button.interactive,
        use_container_width=True,
    ):
        if _run(button, "click") and not button.confirm_dialog_open:
            st.rerun()
    st.markdown("</div>", unsafe_allow_html=True)

    if button.confirm_dialog_open:
        st.session_state[OPEN_DIALOG_KEY] = button
        _confirm_dialog(button, key, ui)


def apply_pending_navigation() -> None:
    """Apply page switches and link openings recorded by the collaborators.

    Must run before the navigation widget is created.
    """
    page = st.session_state.pop(PENDING_PAGE_KEY, None)
    if page:
        st.session_state[NAV_KEY] = page

    link = st.session_state.pop(PENDING_LINK_KEY, None)
    if link:
        href = json.dumps(link["href"])
        if link["target"] == "_self":
            # component iframes are sandboxed children of the app page
            script = f"window.parent.location.href = {href};"
        else:
            script = f"window.open({href}, {json.dumps(link['target'])});"
        components.html(f"<script>{script}</script>", height=0)
