"""
Tests for the ActionButton state machine.

Covers confirm gating, the four dispatch modes, loading-state handling on
success and failure, and state-change notifications.
"""

import asyncio

import pytest

from core.action_button import ActionButton, ButtonState
from core.button_descriptor import ButtonConfigError, ButtonDescriptor, ConfirmSpec, PageMode

CONFIRM = {"label": "Really?", "description": "Think twice"}


def make_button(definition, navigator=None, invoker=None, link_opener=None, on_click=None):
    descriptor = ButtonDescriptor.from_dict(definition, on_click=on_click)
    return ActionButton(descriptor, navigator=navigator, invoker=invoker, link_opener=link_opener)


def record_states(button):
    states = []
    button.subscribe(states.append)
    return states


class TestLinkMode:
    @pytest.mark.asyncio
    async def test_click_without_confirm_opens_link_once(self, link_opener):
        button = make_button({"label": "Go", "href": "https://example.org", "target": "_blank"}, link_opener=link_opener)
        states = record_states(button)

        dispatched = await button.click()

        assert dispatched is True
        link_opener.open.assert_awaited_once_with("https://example.org", "_blank")
        assert not any(s.confirm_dialog_open for s in states)
        assert button.state == ButtonState()

    @pytest.mark.asyncio
    async def test_click_with_confirm_waits_for_decision(self, link_opener):
        button = make_button({"label": "Go", "href": "https://example.org", "confirm": CONFIRM}, link_opener=link_opener)

        dispatched = await button.click()

        assert dispatched is False
        assert button.loading is True
        assert button.confirm_dialog_open is True
        link_opener.open.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_confirm_opens_link_once(self, link_opener):
        button = make_button({"label": "Go", "href": "https://example.org", "confirm": CONFIRM}, link_opener=link_opener)

        await button.click()
        assert await button.confirm() is True

        link_opener.open.assert_awaited_once_with("https://example.org", None)
        assert button.confirm_dialog_open is False
        assert button.loading is False

    @pytest.mark.asyncio
    async def test_cancel_clears_flags_without_navigation(self, link_opener):
        button = make_button({"label": "Go", "href": "https://example.org", "confirm": CONFIRM}, link_opener=link_opener)

        await button.click()
        button.cancel()

        assert button.state == ButtonState(loading=False, confirm_dialog_open=False)
        link_opener.open.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_confirm_without_open_dialog_is_ignored(self, link_opener):
        button = make_button({"label": "Go", "href": "https://example.org", "confirm": CONFIRM}, link_opener=link_opener)

        await button.click()
        button.cancel()

        assert await button.confirm() is False
        link_opener.open.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_missing_link_opener_is_fatal(self):
        button = make_button({"label": "Go", "href": "https://example.org"})

        with pytest.raises(ButtonConfigError):
            await button.click()


class TestCallbackMode:
    @pytest.mark.asyncio
    async def test_callback_invoked_with_descriptor_while_loading(self):
        seen = []

        async def on_click(descriptor):
            seen.append((descriptor, button.loading))

        button = make_button({"label": "Run"}, on_click=on_click)
        await button.click()

        assert seen == [(button.descriptor, True)]
        assert button.loading is False

    @pytest.mark.asyncio
    async def test_failure_clears_loading_and_is_not_raised(self):
        async def on_click(descriptor):
            raise RuntimeError("boom")

        button = make_button({"label": "Run"}, on_click=on_click)
        states = record_states(button)

        await button.click()

        assert button.loading is False
        assert states == [ButtonState(loading=True), ButtonState(loading=False)]

    @pytest.mark.asyncio
    async def test_callback_takes_priority_over_action_and_page(self, invoker, navigator):
        calls = []

        async def on_click(descriptor):
            calls.append(descriptor.label)

        button = make_button(
            {"label": "Run", "action": "save", "page": "home"},
            navigator=navigator,
            invoker=invoker,
            on_click=on_click,
        )
        await button.click()

        assert calls == ["Run"]
        invoker.invoke.assert_not_awaited()
        navigator.transition_to.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_confirm_then_callback(self):
        calls = []

        async def on_click(descriptor):
            calls.append(descriptor)

        button = make_button({"label": "Run", "confirm": CONFIRM}, on_click=on_click)
        states = record_states(button)

        await button.click()
        assert calls == []
        await button.confirm()

        assert len(calls) == 1
        assert states == [
            ButtonState(loading=True, confirm_dialog_open=True),
            ButtonState(loading=False, confirm_dialog_open=False),
            ButtonState(loading=True, confirm_dialog_open=False),
            ButtonState(loading=False, confirm_dialog_open=False),
        ]


class TestBackendActionMode:
    @pytest.mark.asyncio
    async def test_invokes_named_action(self, invoker):
        button = make_button({"label": "Save", "action": "save_profile"}, invoker=invoker)

        await button.click()

        invoker.invoke.assert_awaited_once_with({"action": "save_profile"})
        assert button.loading is False

    @pytest.mark.asyncio
    async def test_failure_clears_loading(self, invoker):
        invoker.invoke.side_effect = ConnectionError("backend down")
        button = make_button({"label": "Save", "action": "save_profile"}, invoker=invoker)

        await button.click()

        assert button.loading is False

    @pytest.mark.asyncio
    async def test_missing_invoker_is_fatal(self):
        button = make_button({"label": "Save", "action": "save_profile"})

        with pytest.raises(ButtonConfigError):
            await button.click()
        assert button.loading is False


class TestPageMode:
    @pytest.mark.asyncio
    async def test_transitions_with_route_name(self, navigator):
        descriptor = ButtonDescriptor(label="Home", mode=PageMode(route="home"))
        button = ActionButton(descriptor, navigator=navigator, route_name="admin")

        await button.click()

        navigator.transition_to.assert_awaited_once_with("admin", "home")
        assert button.loading is False

    @pytest.mark.asyncio
    async def test_failed_transition_propagates_and_keeps_loading(self, navigator):
        navigator.transition_to.side_effect = LookupError("no such page")
        button = make_button({"label": "Home", "page": "home"}, navigator=navigator)

        with pytest.raises(LookupError):
            await button.click()

        assert button.loading is True

    @pytest.mark.asyncio
    async def test_action_takes_priority_over_page(self, navigator, invoker):
        button = make_button({"label": "Both", "action": "save", "page": "home"}, navigator=navigator, invoker=invoker)

        await button.click()

        invoker.invoke.assert_awaited_once()
        navigator.transition_to.assert_not_awaited()


class TestMisconfiguration:
    def test_no_dispatch_target_fails_at_construction(self, navigator, invoker, link_opener):
        with pytest.raises(ButtonConfigError):
            make_button({"label": "Nothing"}, navigator=navigator, invoker=invoker, link_opener=link_opener)

        navigator.transition_to.assert_not_awaited()
        invoker.invoke.assert_not_awaited()
        link_opener.open.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_unknown_mode_fails_at_dispatch(self, navigator, invoker):
        descriptor = ButtonDescriptor(label="Home", mode=PageMode(route="home"))
        object.__setattr__(descriptor, "mode", object())
        button = ActionButton(descriptor, navigator=navigator, invoker=invoker)

        with pytest.raises(ButtonConfigError):
            await button.execute_action()

        navigator.transition_to.assert_not_awaited()
        invoker.invoke.assert_not_awaited()
        assert button.loading is False


class TestReentrancy:
    @pytest.mark.asyncio
    async def test_second_click_while_loading_dispatches_again(self):
        release = asyncio.Event()
        calls = []

        async def on_click(descriptor):
            calls.append(descriptor)
            await release.wait()

        button = make_button({"label": "Slow"}, on_click=on_click)

        first = asyncio.create_task(button.click())
        await asyncio.sleep(0)
        assert button.loading is True
        assert button.interactive is False

        second = asyncio.create_task(button.click())
        await asyncio.sleep(0)
        release.set()
        await asyncio.gather(first, second)

        assert len(calls) == 2
        assert button.loading is False


class TestStateNotifications:
    @pytest.mark.asyncio
    async def test_unsubscribe_stops_notifications(self, invoker):
        button = make_button({"label": "Save", "action": "save"}, invoker=invoker)
        states = []
        unsubscribe = button.subscribe(states.append)
        unsubscribe()

        await button.click()

        assert states == []

    def test_descriptor_is_not_mutated(self):
        descriptor = ButtonDescriptor(label="Home", mode=PageMode(route="home"), confirm=ConfirmSpec("a", "b"))
        button = ActionButton(descriptor)

        asyncio.run(button.click())

        assert button.descriptor is descriptor
        assert not hasattr(descriptor, "loading")
        assert button.confirm_dialog_open is True

    def test_disabled_button_is_not_interactive(self):
        button = make_button({"label": "Off", "page": "home", "disabled": True})
        assert button.interactive is False
