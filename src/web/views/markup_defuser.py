"""Markup Defuser view for the Console Kit dashboard."""

import streamlit as st

from web.components.empty_state import empty_state
from web.state import AppComponents

_MAX_UPLOAD_MB = 5


def _read_uploaded_file(uploaded) -> str | None:
    """Read uploaded file with encoding fallback."""
    if uploaded.size > _MAX_UPLOAD_MB * 1024 * 1024:
        st.error(f"File exceeds {_MAX_UPLOAD_MB}MB limit.")
        return None
    raw = uploaded.read()
    for enc in ("utf-8", "latin-1"):
        try:
            return raw.decode(enc)
        except (UnicodeDecodeError, ValueError):
            continue
    st.error("Could not decode file. Ensure it's a text-based HTML file.")
    return None


def render_markup_defuser(app: AppComponents):
    """Render the Markup Defuser page."""
    st.title("Markup Defuser")
    st.caption("Strip scripts and event handler attributes before rendering HTML unescaped")

    input_method = st.radio(
        "Input method",
        ["Paste HTML", "Upload File"],
        horizontal=True,
        label_visibility="collapsed",
    )

    if input_method == "Paste HTML":
        html_input = st.text_area(
            "Paste HTML",
            height=250,
            key="defuser_paste",
            label_visibility="collapsed",
            placeholder="Paste your HTML here...",
        )
    else:
        uploaded = st.file_uploader(
            "Upload HTML file",
            type=["html", "htm", "txt"],
            label_visibility="collapsed",
        )
        html_input = _read_uploaded_file(uploaded) if uploaded else ""

    # Clear output when the input changes
    prev = st.session_state.get("defuser_input", "")
    st.session_state["defuser_input"] = html_input or ""
    if html_input != prev:
        st.session_state.pop("defuser_output", None)

    if st.button("Defuse", type="primary"):
        src = st.session_state.get("defuser_input", "").strip()
        if not src:
            st.warning("Paste or upload HTML first.")
            st.stop()
        st.session_state["defuser_output"] = app.defuser.defuse(src)
        st.rerun()

    st.markdown("---")
    output = st.session_state.get("defuser_output")
    if output is None:
        empty_state("Nothing defused yet", "Paste some markup and press Defuse.")
        return

    st.markdown(f"**Result** | {len(output):,} chars")
    st.code(output, language="html")
    with st.expander("Preview"):
        st.markdown(output, unsafe_allow_html=True)
