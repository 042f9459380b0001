"""Button descriptors: what an action button shows and what it does."""

from collections.abc import Awaitable, Callable, Mapping
from dataclasses import dataclass
from typing import Any, Union

BUTTON_FORMATS = (
    "primary",
    "submit",
    "loading",
    "cancel",
    "reset",
    "expected",
    "failure",
    "optional",
    "alternative",
    "exceptional",
    "terminate",
    "tile",
)


class ButtonConfigError(ValueError):
    """A button was wired up incorrectly (integration bug, not a runtime failure)."""


@dataclass(frozen=True)
class ConfirmSpec:
    """Confirmation dialog shown before the button dispatches."""

    label: str
    description: str
    confirm_label: str | None = None
    cancel_label: str | None = None

    def __post_init__(self):
        if not self.label or not self.description:
            raise ButtonConfigError("confirm requires both 'label' and 'description'")


@dataclass(frozen=True)
class LinkMode:
    href: str
    target: str | None = None

    def __post_init__(self):
        if not self.href:
            raise ButtonConfigError("link button requires a non-empty 'href'")


@dataclass(frozen=True)
class CallbackMode:
    fn: Callable[["ButtonDescriptor"], Awaitable[None]]


@dataclass(frozen=True)
class BackendActionMode:
    name: str


@dataclass(frozen=True)
class PageMode:
    route: str


DispatchMode = Union[LinkMode, CallbackMode, BackendActionMode, PageMode]


@dataclass(frozen=True)
class ButtonDescriptor:
    """Immutable description of a button, owned by the page that shows it.

    Presentation state (loading, confirm dialog) lives on the
    :class:`~core.action_button.ActionButton`, never here.
    """

    label: str
    mode: DispatchMode
    format: str | None = None
    disabled: bool = False
    tooltip: str | None = None
    confirm: ConfirmSpec | None = None

    def __post_init__(self):
        if not self.label:
            raise ButtonConfigError("button requires a non-empty 'label'")
        if not isinstance(self.mode, (LinkMode, CallbackMode, BackendActionMode, PageMode)):
            raise ButtonConfigError(f"button '{self.label}' has invalid mode: {self.mode!r}")

    @property
    def is_link(self) -> bool:
        return isinstance(self.mode, LinkMode)

    @classmethod
    def from_dict(
        cls,
        data: Mapping[str, Any],
        on_click: Callable[["ButtonDescriptor"], Awaitable[None]] | None = None,
    ) -> "ButtonDescriptor":
        """Build a descriptor from a page definition dict.

        ``href`` selects link mode. Otherwise the first of ``onClick`` (or the
        *on_click* argument), ``action`` and ``page`` that is set wins.

        Raises:
            ButtonConfigError: if no dispatch target is given or a field is invalid.
        """
        label = data.get("label", "")
        callback = on_click or data.get("onClick")

        mode: DispatchMode
        if data.get("href"):
            mode = LinkMode(href=data["href"], target=data.get("target"))
        elif callback:
            mode = CallbackMode(fn=callback)
        elif data.get("action"):
            mode = BackendActionMode(name=data["action"])
        elif data.get("page"):
            mode = PageMode(route=data["page"])
        else:
            raise ButtonConfigError(f"button '{label}': nothing to do. No 'href', 'action', 'page' or 'onClick' specified")

        confirm = data.get("confirm")
        if confirm and not isinstance(confirm, Mapping):
            raise ButtonConfigError(f"button '{label}': 'confirm' must be a mapping, got {type(confirm).__name__}")

        return cls(
            label=label,
            mode=mode,
            format=data.get("format") or None,
            disabled=bool(data.get("disabled", False)),
            tooltip=data.get("tooltip"),
            confirm=ConfirmSpec(
                label=confirm.get("label", ""),
                description=confirm.get("description", ""),
                confirm_label=confirm.get("confirm_label") or None,
                cancel_label=confirm.get("cancel_label") or None,
            )
            if confirm
            else None,
        )
