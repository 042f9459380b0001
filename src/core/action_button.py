"""Action button interaction state machine.

An :class:`ActionButton` wraps an immutable :class:`ButtonDescriptor` and owns
the presentation state around it::

    Idle --click()--> ConfirmPending --confirm()--> Dispatching --> Idle
      |                    |
      |                    +--cancel()--> Idle
      +--click() (no confirm)-----------> Dispatching --> Idle

State changes are pushed to listeners registered with :meth:`subscribe`.
"""

import logging
from collections.abc import Callable
from dataclasses import dataclass, replace
from typing import Any, Protocol

from core.button_descriptor import (
    BackendActionMode,
    ButtonConfigError,
    ButtonDescriptor,
    CallbackMode,
    LinkMode,
    PageMode,
)

DEFAULT_ROUTE_NAME = "console"


class Navigator(Protocol):
    async def transition_to(self, route_name: str, page: str) -> None: ...


class ActionInvoker(Protocol):
    async def invoke(self, request: dict[str, Any]) -> Any: ...


class LinkOpener(Protocol):
    async def open(self, href: str, target: str | None = None) -> None: ...


@dataclass(frozen=True)
class ButtonState:
    """Presentation state of a button"""

    loading: bool = False
    confirm_dialog_open: bool = False


StateListener = Callable[[ButtonState], None]


class ActionButton:
    """Single control that links, calls back, invokes an action or changes page"""

    def __init__(
        self,
        descriptor: ButtonDescriptor,
        navigator: Navigator | None = None,
        invoker: ActionInvoker | None = None,
        link_opener: LinkOpener | None = None,
        route_name: str = DEFAULT_ROUTE_NAME,
    ):
        self.descriptor = descriptor
        self.navigator = navigator
        self.invoker = invoker
        self.link_opener = link_opener
        self.route_name = route_name
        self.logger = logging.getLogger("ActionButton")

        self._state = ButtonState()
        self._listeners: list[StateListener] = []

    # ── state ────────────────────────────────────────────────────────

    @property
    def state(self) -> ButtonState:
        return self._state

    @property
    def loading(self) -> bool:
        return self._state.loading

    @property
    def confirm_dialog_open(self) -> bool:
        return self._state.confirm_dialog_open

    @property
    def is_link(self) -> bool:
        return self.descriptor.is_link

    @property
    def interactive(self) -> bool:
        """False while disabled or loading. Advisory only: click() does not check it."""
        return not (self.descriptor.disabled or self._state.loading)

    def subscribe(self, listener: StateListener) -> Callable[[], None]:
        """Register *listener* for state changes. Returns an unsubscribe function."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _set_state(self, **changes: bool) -> None:
        new_state = replace(self._state, **changes)
        if new_state == self._state:
            return
        self._state = new_state
        for listener in list(self._listeners):
            listener(new_state)

    # ── interaction ──────────────────────────────────────────────────

    async def click(self) -> bool:
        """Handle a user interaction.

        Opens the confirm dialog if the descriptor asks for one, otherwise
        dispatches immediately.

        Returns:
            True if the action was dispatched during this call.
        """
        self.logger.debug(f"click on '{self.descriptor.label}'")

        if self.descriptor.confirm:
            self._set_state(loading=True, confirm_dialog_open=True)
            return False

        await self.execute_action()
        return True

    async def confirm(self) -> bool:
        """Affirmative answer from the confirm dialog."""
        if not self._state.confirm_dialog_open:
            self.logger.debug(f"confirm on '{self.descriptor.label}' ignored, dialog not open")
            return False
        await self.execute_action()
        return True

    def cancel(self) -> None:
        """Negative answer from the confirm dialog."""
        self.reset_confirm_state()

    def reset_confirm_state(self) -> None:
        self._set_state(loading=False, confirm_dialog_open=False)

    async def execute_action(self) -> None:
        """Dispatch to the collaborator selected by the descriptor's mode.

        Callback and backend action failures are logged and only clear the
        loading flag. A failed page transition propagates and leaves the
        button loading.

        Raises:
            ButtonConfigError: if the collaborator required by the mode is missing.
        """
        self.reset_confirm_state()
        mode = self.descriptor.mode

        if isinstance(mode, LinkMode):
            if self.link_opener is None:
                raise ButtonConfigError(f"button '{self.descriptor.label}': no link opener for '{mode.href}'")
            self.logger.debug(f"executeAction - open link '{mode.href}'")
            await self.link_opener.open(mode.href, mode.target)
            return

        self._check_collaborators()
        self._set_state(loading=True)

        if isinstance(mode, CallbackMode):
            self.logger.debug("executeAction - custom on_click handler")
            try:
                await mode.fn(self.descriptor)
            except Exception as e:
                self.logger.warning(f"on_click handler of '{self.descriptor.label}' failed: {e}")
            finally:
                self._set_state(loading=False)

        elif isinstance(mode, BackendActionMode):
            self.logger.debug(f"executeAction - call to backend action '{mode.name}'")
            try:
                await self.invoker.invoke({"action": mode.name})
            except Exception as e:
                self.logger.warning(f"Backend action '{mode.name}' failed: {e}")
            finally:
                self._set_state(loading=False)

        else:
            self.logger.debug(f"executeAction - transition to page '{mode.route}'")
            # no except: a failed transition propagates and the button stays loading
            await self.navigator.transition_to(self.route_name, mode.route)
            self._set_state(loading=False)

    def _check_collaborators(self) -> None:
        """Raise ButtonConfigError unless the mode's collaborator is wired up."""
        mode = self.descriptor.mode
        label = self.descriptor.label

        if isinstance(mode, CallbackMode):
            return
        if isinstance(mode, BackendActionMode):
            if self.invoker is None:
                raise ButtonConfigError(f"button '{label}': no action invoker for '{mode.name}'")
            return
        if isinstance(mode, PageMode):
            if self.navigator is None:
                raise ButtonConfigError(f"button '{label}': no navigator for page '{mode.route}'")
            return
        raise ButtonConfigError(f"button '{label}': nothing to do. No 'action', 'page' or 'onClick' specified")
