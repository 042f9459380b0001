"""Session state initialization and shared app components."""

import asyncio
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

import streamlit as st

from core.action_button import ActionButton
from core.button_descriptor import ButtonDescriptor
from core.config_manager import ConfigManager
from core.logging_setup import setup_logging
from utils.html_defuser import HtmlDefuser
from web.navigation import StreamlitActionInvoker, StreamlitLinkOpener, StreamlitNavigator

ALL_PAGES = ["Buttons", "Markup Defuser"]

_BUTTONS_KEY = "action_buttons"


@dataclass
class AppComponents:
    """Shared application components passed to every page."""

    config: ConfigManager
    defuser: HtmlDefuser
    navigator: StreamlitNavigator
    invoker: StreamlitActionInvoker
    link_opener: StreamlitLinkOpener

    @property
    def ui(self) -> dict[str, Any]:
        return self.config.get_ui_settings()

    def get_button(self, key: str, build: Callable[[], ButtonDescriptor]) -> ActionButton:
        """Return the ActionButton stored under *key*, creating it on first use.

        Buttons live in session state so loading and dialog state survive reruns.
        """
        buttons: dict[str, ActionButton] = st.session_state.setdefault(_BUTTONS_KEY, {})
        if key not in buttons:
            buttons[key] = ActionButton(
                build(),
                navigator=self.navigator,
                invoker=self.invoker,
                link_opener=self.link_opener,
                route_name=self.ui.get("route_name", "console"),
            )
        return buttons[key]


async def _refresh_cache() -> str:
    await asyncio.sleep(0.5)
    return "cache refreshed"


async def _fail_always() -> None:
    await asyncio.sleep(0.2)
    raise RuntimeError("backend unavailable")


@st.cache_resource
def _create_config() -> ConfigManager:
    """Load settings and configure logging once per process."""
    config = ConfigManager()
    setup_logging(config)
    return config


def init_app_state() -> AppComponents:
    """Build the per-session components. Returns AppComponents."""
    config = _create_config()

    if "components" not in st.session_state:
        invoker = StreamlitActionInvoker()
        invoker.register("refresh_cache", _refresh_cache)
        invoker.register("fail_always", _fail_always)
        st.session_state.components = AppComponents(
            config=config,
            defuser=HtmlDefuser(),
            navigator=StreamlitNavigator(ALL_PAGES),
            invoker=invoker,
            link_opener=StreamlitLinkOpener(),
        )

    return st.session_state.components
