"""Streamlit-backed collaborators for action buttons.

Streamlit reruns the whole script on every interaction, so none of these act
immediately. They record what should happen in session state and the page
applies it on the next pass (see :func:`web.components.action_button.apply_pending_navigation`).
"""

import logging
from collections.abc import Awaitable, Callable, MutableMapping
from typing import Any

import streamlit as st

NAV_KEY = "nav_page"
PENDING_PAGE_KEY = "pending_page"
PENDING_LINK_KEY = "pending_link"
LAST_ACTION_KEY = "last_action_result"

ActionHandler = Callable[[], Awaitable[Any]]


class StreamlitNavigator:
    """Page transitions between the console's registered pages"""

    def __init__(self, pages: list[str], session: MutableMapping[str, Any] | None = None):
        self.pages = list(pages)
        self.session = session if session is not None else st.session_state
        self.logger = logging.getLogger("Navigation")

    async def transition_to(self, route_name: str, page: str) -> None:
        """Schedule a switch to *page*.

        Raises:
            LookupError: if *page* is not a registered page.
        """
        if page not in self.pages:
            raise LookupError(f"Unknown page '{page}' for route '{route_name}'")
        self.logger.info(f"Transition to {route_name}/{page}")
        self.session[PENDING_PAGE_KEY] = page


class StreamlitActionInvoker:
    """Runs named backend actions registered by the console"""

    def __init__(
        self,
        handlers: dict[str, ActionHandler] | None = None,
        session: MutableMapping[str, Any] | None = None,
    ):
        self.handlers: dict[str, ActionHandler] = dict(handlers or {})
        self.session = session if session is not None else st.session_state
        self.logger = logging.getLogger("Navigation")

    def register(self, name: str, handler: ActionHandler) -> None:
        self.handlers[name] = handler

    async def invoke(self, request: dict[str, Any]) -> Any:
        """Run the handler named by ``request["action"]`` and keep its result.

        Raises:
            LookupError: if no handler is registered under that name.
        """
        name = request.get("action")
        handler = self.handlers.get(name) if name else None
        if handler is None:
            raise LookupError(f"No backend action registered as '{name}'")

        self.logger.info(f"Invoking backend action '{name}'")
        result = await handler()
        self.session[LAST_ACTION_KEY] = {"action": name, "result": result}
        return result


class StreamlitLinkOpener:
    """Opens a URL once, on the next render"""

    def __init__(self, session: MutableMapping[str, Any] | None = None):
        self.session = session if session is not None else st.session_state
        self.logger = logging.getLogger("Navigation")

    async def open(self, href: str, target: str | None = None) -> None:
        self.logger.info(f"Opening link {href} (target={target or '_self'})")
        self.session[PENDING_LINK_KEY] = {"href": href, "target": target or "_self"}
