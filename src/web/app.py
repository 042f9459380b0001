"""Streamlit Web Console for Console Kit: thin dispatcher."""

import os
import sys

import streamlit as st

# Add parent directory to path
sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from web.components import apply_pending_navigation
from web.state import ALL_PAGES, init_app_state
from web.theme import apply_theme
from web.views import PAGE_MAP

APP_VERSION = "1.0"

# ── Page Config ──────────────────────────────────────────────────────
st.set_page_config(
    page_title="Console Kit",
    page_icon="CK",
    layout="wide",
    initial_sidebar_state="expanded",
)

# ── Theme ────────────────────────────────────────────────────────────
apply_theme()

# ── Initialize Components ────────────────────────────────────────────
app = init_app_state()

# Page switches requested by buttons must land before the radio exists
apply_pending_navigation()

# ── Sidebar Navigation ──────────────────────────────────────────────
with st.sidebar:
    st.markdown('<div class="sidebar-brand">Console Kit</div>', unsafe_allow_html=True)

    page = st.radio(
        "Navigation",
        ALL_PAGES,
        key="nav_page",
        label_visibility="collapsed",
    )

    with st.expander("Settings"):
        st.text(f"Route:   {app.ui.get('route_name')}")
        st.text(f"Confirm: {app.ui.get('confirm_label')}")
        st.text(f"Cancel:  {app.ui.get('cancel_label')}")
        st.text(f"Logging: {app.config.get_setting('logging.level', 'INFO')}")

    st.markdown("---")
    st.markdown(
        f'<span style="color:#6b7280;font-size:0.75rem">Console Kit v{APP_VERSION}</span>',
        unsafe_allow_html=True,
    )

# ── Dispatch to Page ─────────────────────────────────────────────────
PAGE_MAP[page](app)
