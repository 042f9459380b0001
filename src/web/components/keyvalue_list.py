"""Key/value list section."""

import html
from collections.abc import Iterable, Mapping
from typing import Any

import streamlit as st

from utils.html_defuser import defuse
from utils.keyvalue import KeyValueItem, visible_items


def keyvalue_row_html(item: KeyValueItem) -> str:
    """HTML for one row. Raw values are defused, everything else escaped."""
    if item.is_head:
        return f'<div class="kv-head">{html.escape(item.label)}</div>'
    value = defuse(item.value) if item.format == "raw" else html.escape(str(item.value))
    return f'<div class="kv-row"><span class="kv-label">{html.escape(item.label)}</span><span class="kv-value">{value}</span></div>'


def render_keyvalue_list(items: Iterable[KeyValueItem | Mapping[str, Any]] | None) -> None:
    """Render the visible items of a key/value section."""
    for item in visible_items(items):
        st.markdown(keyvalue_row_html(item), unsafe_allow_html=True)
