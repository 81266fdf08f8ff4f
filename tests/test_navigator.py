"""
Test page navigation: clamping, control state, field handling and the
stateful navigator.

Usage:
    pytest tests/test_navigator.py
"""

import pytest

from xhtml_controls.navigation.models import (
    NEXT_CONTROL_ID,
    PAGE_INPUT_ID,
    PREV_CONTROL_ID,
    NavigateCommand,
    NavigationState,
    ScrollTo,
    SetControlState,
    SetFieldValue,
)
from xhtml_controls.navigation.navigator import (
    PageNavigator,
    clamp_page,
    on_field_edited,
    on_field_submitted,
    on_navigate,
)


def _goto(page, page_count, state=None):
    return on_navigate(state or NavigationState(), NavigateCommand.goto(page), page_count)


# -- pure command handling ----------------------------------------------------


@pytest.mark.parametrize(
    "target, page_count, expected",
    [(5, 10, 5), (0, 10, 1), (-3, 10, 1), (11, 10, 10), (7, 0, 1), (1, 1, 1)],
)
def test_clamp_page(target, page_count, expected):
    assert clamp_page(target, page_count) == expected


def test_navigate_effects_in_order():
    state, effects = _goto(2, 3)

    assert state == NavigationState(current_page=2, page_count=3, field_text="2")
    assert effects == [
        SetFieldValue("2", PAGE_INPUT_ID),
        ScrollTo("page-2"),
        SetControlState(PREV_CONTROL_ID, True),
        SetControlState(NEXT_CONTROL_ID, True),
    ]


def test_navigate_past_end_clamps_to_last_page():
    state, effects = _goto(99, 4)
    assert state.current_page == 4
    assert effects[0] == SetFieldValue("4")
    assert effects[-1] == SetControlState(NEXT_CONTROL_ID, False)


def test_navigate_empty_document():
    state, effects = _goto(3, 0)
    assert state.current_page == 1
    assert effects[2:] == [
        SetControlState(PREV_CONTROL_ID, False),
        SetControlState(NEXT_CONTROL_ID, False),
    ]


def test_navigate_is_idempotent():
    first_state, first_effects = _goto(3, 5)
    second_state, second_effects = _goto(3, 5, first_state)
    assert first_state == second_state
    assert first_effects == second_effects


@pytest.mark.parametrize("page_count", [1, 2, 5])
def test_control_state_matches_position(page_count):
    for target in range(-1, page_count + 3):
        state, effects = _goto(target, page_count)
        controls = {e.control_id: e.enabled for e in effects if isinstance(e, SetControlState)}
        assert 1 <= state.current_page <= page_count
        assert controls[PREV_CONTROL_ID] == (state.current_page > 1)
        assert controls[NEXT_CONTROL_ID] == (state.current_page < page_count)


def test_relative_moves_saturate():
    state = NavigationState(current_page=1, page_count=3, field_text="1")
    state, _ = on_navigate(state, NavigateCommand.previous(), 3)
    assert state.current_page == 1

    for _ in range(5):
        state, effects = on_navigate(state, NavigateCommand.next(), 3)
    assert state.current_page == 3
    assert SetControlState(NEXT_CONTROL_ID, False) in effects


def test_relative_move_from_unparsable_field_starts_at_page_one():
    state = NavigationState(current_page=4, page_count=6, field_text="abc")
    state, _ = on_navigate(state, NavigateCommand.next(), 6)
    assert state.current_page == 2


def test_relative_move_uses_field_value():
    state = on_field_edited(NavigationState(current_page=1, page_count=9), "6")
    state, _ = on_navigate(state, NavigateCommand.next(), 9)
    assert state.current_page == 7


def test_submit_unparsable_field_is_ignored():
    state = on_field_edited(NavigationState(current_page=2, page_count=5), "2.5")
    new_state, effects = on_field_submitted(state, 5)
    assert new_state is state
    assert effects == []


def test_submit_field_clamps():
    state = on_field_edited(NavigationState(page_count=5), "50")
    state, effects = on_field_submitted(state, 5)
    assert state.current_page == 5
    assert effects[0] == SetFieldValue("5")


# -- stateful navigator -------------------------------------------------------


def test_navigator_applies_effects(recorder):
    nav = PageNavigator(lambda: 3, recorder)
    nav.next()

    assert nav.current_page == 2
    assert recorder.calls == [
        ("field", PAGE_INPUT_ID, "2"),
        ("scroll", "page-2"),
        ("enabled", PREV_CONTROL_ID, True),
        ("enabled", NEXT_CONTROL_ID, True),
    ]


def test_navigator_resolves_page_count_per_command(recorder):
    counts = iter([2, 2, 5])
    nav = PageNavigator(lambda: next(counts), recorder)

    nav.navigate(5)
    assert nav.current_page == 2

    nav.navigate(5)
    assert nav.current_page == 5
    assert nav.page_count == 5


def test_navigator_missing_anchor_does_not_raise(recorder):
    nav = PageNavigator(lambda: 10, recorder)
    nav.navigate(8)
    assert nav.current_page == 8
    assert ("scroll", "page-8") in recorder.calls


def test_navigator_enter_key(recorder):
    nav = PageNavigator(lambda: 3, recorder)
    nav.edit_field("3")

    nav.handle_key("a")
    assert nav.current_page == 1
    assert recorder.calls == [("field", PAGE_INPUT_ID, "3")]

    nav.handle_key("Enter")
    assert nav.current_page == 3
    assert nav.state.field_text == "3"


def test_navigator_ignores_garbage_submission(recorder):
    nav = PageNavigator(lambda: 3, recorder)
    nav.navigate(2)
    recorder.calls.clear()

    nav.edit_field("")
    nav.submit_field()
    assert nav.current_page == 2
    assert recorder.calls == [("field", PAGE_INPUT_ID, "")]


def test_navigator_relative_navigate(recorder):
    nav = PageNavigator(lambda: 4, recorder)
    nav.navigate(3, is_relative=True)
    assert nav.current_page == 4
    nav.previous()
    assert nav.current_page == 3


def test_navigator_refresh_only_touches_controls(recorder):
    nav = PageNavigator(lambda: 3, recorder)
    nav.refresh()
    assert recorder.calls == [
        ("enabled", PREV_CONTROL_ID, False),
        ("enabled", NEXT_CONTROL_ID, True),
    ]


def test_navigator_without_applier():
    nav = PageNavigator(lambda: 2)
    effects = nav.dispatch(NavigateCommand.goto(2))
    assert nav.current_page == 2
    assert ScrollTo("page-2") in effects
