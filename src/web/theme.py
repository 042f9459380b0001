"""Design system and CSS theme for Console Kit"""

import streamlit as st

# Color palette
COLORS = {
    "bg_page": "#0e1117",
    "bg_card": "#1a1f2e",
    "bg_hover": "#262d3d",
    "border": "#2d3548",
    "text_heading": "#fafafa",
    "text_body": "#a1a7b5",
    "text_muted": "#6b7280",
    "accent_blue": "#3b82f6",
    "accent_green": "#22c55e",
    "accent_amber": "#f59e0b",
    "accent_red": "#ef4444",
    "accent_purple": "#8b5cf6",
}

# Button format classes (see web.components.button_style.FORMAT_CSS) -> colour
BUTTON_COLORS = {
    "oxi-btn-submit": COLORS["accent_blue"],
    "oxi-btn-cancel": COLORS["text_muted"],
    "oxi-btn-reset": COLORS["text_muted"],
    "oxi-btn-expected": COLORS["accent_green"],
    "oxi-btn-failure": COLORS["accent_red"],
    "oxi-btn-optional": COLORS["bg_hover"],
    "oxi-btn-alternative": COLORS["accent_purple"],
    "oxi-btn-exceptional": COLORS["accent_amber"],
    "oxi-btn-terminate": COLORS["accent_red"],
    "oxi-btn-tile": COLORS["bg_card"],
}


def apply_theme() -> None:
    """Inject the full CSS design system into the Streamlit app."""
    st.markdown(_get_css(), unsafe_allow_html=True)


def _button_css() -> str:
    rules = []
    for css_class, color in BUTTON_COLORS.items():
        rules.append(
            f".btn.{css_class}, .{css_class} button {{\n"
            f"    background-color: {color} !important;\n"
            f"    border-color: {color} !important;\n"
            f"    color: white !important;\n"
            f"}}"
        )
    return "\n\n".join(rules)


def _get_css() -> str:
    return f"""<style>
/* ── Global ──────────────────────────────────────────── */
section[data-testid="stSidebar"] {{
    background-color: {COLORS["bg_card"]};
    border-right: 1px solid {COLORS["border"]};
}}

.sidebar-brand {{
    font-size: 1.1rem;
    font-weight: 700;
    color: {COLORS["text_heading"]};
    padding: 0.25rem 0 1rem 0;
}}

/* ── Buttons ─────────────────────────────────────────── */
.btn {{
    display: inline-block;
    padding: 0.35rem 0.9rem;
    margin: 0 0.25rem 0.5rem 0;
    border-radius: 6px;
    border: 1px solid {COLORS["border"]};
    font-size: 0.85rem;
    text-decoration: none;
}}

.btn-primary, .btn-primary button {{
    background-color: {COLORS["accent_blue"]} !important;
    color: white !important;
}}

.btn-light.border-secondary {{
    background-color: {COLORS["bg_hover"]};
    color: {COLORS["text_body"]};
}}

{_button_css()}

.btn.oxi-btn-loading, .oxi-btn-loading button {{
    opacity: 0.6;
    cursor: progress !important;
}}

.btn[disabled] {{
    opacity: 0.4;
    cursor: not-allowed;
}}

/* ── Key/Value Lists ─────────────────────────────────── */
.kv-head {{
    font-size: 0.7rem;
    font-weight: 600;
    letter-spacing: 0.08em;
    text-transform: uppercase;
    color: {COLORS["text_muted"]};
    padding: 0.75rem 0 0.25rem 0;
}}

.kv-row {{
    display: flex;
    padding: 0.2rem 0;
    border-bottom: 1px solid {COLORS["border"]};
    font-size: 0.85rem;
}}

.kv-label {{
    flex: 1;
    color: {COLORS["text_muted"]};
}}

.kv-value {{
    flex: 2;
    color: {COLORS["text_body"]};
}}

/* ── Empty State ─────────────────────────────────────── */
.empty-state-title {{
    text-align: center;
    padding: 2rem 1rem 0.25rem;
    font-size: 1.1rem;
    font-weight: 600;
    color: {COLORS["text_body"]};
}}

.empty-state-text {{
    text-align: center;
    font-size: 0.85rem;
    color: {COLORS["text_muted"]};
    padding-bottom: 1rem;
}}

/* ── Dialog Overrides ────────────────────────────────── */
[data-testid="stDialog"] {{
    background: {COLORS["bg_card"]};
}}

/* ── Hide default Streamlit chrome ────────────────────── */
#MainMenu {{visibility: hidden;}}
footer {{visibility: hidden;}}
</style>"""
