"""Empty-state placeholder."""

import html

import streamlit as st


def empty_state(title: str, description: str = "") -> None:
    """Render a centered placeholder for a section with nothing to show.

    Args:
        title: Main heading text.
        description: Subtitle/explanation.
    """
    st.markdown(f'<div class="empty-state-title">{html.escape(title)}</div>', unsafe_allow_html=True)
    if description:
        st.markdown(f'<div class="empty-state-text">{html.escape(description)}</div>', unsafe_allow_html=True)
