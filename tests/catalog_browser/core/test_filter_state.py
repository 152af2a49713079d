from __future__ import annotations

import pytest

from catalog_browser.core.filter_state import (
    INITIAL_STATE,
    FilterState,
    clear_search,
    reset_all,
    select_all_owners,
    select_owner,
    set_search_text,
)


def test_initial_state_is_neutral():
    assert INITIAL_STATE == FilterState(selected_owner_id=None, search_text="")
    assert INITIAL_STATE.is_neutral


def test_filter_state_to_from_dict_roundtrip():
    st = FilterState(selected_owner_id=3, search_text="Mac")

    raw = st.to_dict()
    rebuilt = FilterState.from_dict(raw)

    assert raw == {"selected_owner_id": 3, "search_text": "Mac"}
    assert rebuilt == st


def test_from_dict_defaults_missing_fields():
    assert FilterState.from_dict({}) == INITIAL_STATE
    assert FilterState.from_dict({"search_text": None}) == INITIAL_STATE


def test_filter_state_is_immutable():
    st = FilterState()
    with pytest.raises(AttributeError):
        st.search_text = "x"


def test_select_owner_keeps_search_text():
    st = FilterState(selected_owner_id=None, search_text="cola")

    new = select_owner(st, 2)

    assert new == FilterState(selected_owner_id=2, search_text="cola")
    assert st == FilterState(selected_owner_id=None, search_text="cola")


def test_select_all_owners_keeps_search_text():
    st = FilterState(selected_owner_id=2, search_text="cola")

    assert select_all_owners(st) == FilterState(selected_owner_id=None, search_text="cola")


def test_set_search_text_is_verbatim():
    st = FilterState(selected_owner_id=1)

    new = set_search_text(st, "  Mac ")

    assert new.search_text == "  Mac "
    assert new.selected_owner_id == 1


def test_clear_search_keeps_owner():
    st = FilterState(selected_owner_id=1, search_text="mac")

    assert clear_search(st) == FilterState(selected_owner_id=1, search_text="")


def test_reset_all_returns_initial_state():
    st = FilterState(selected_owner_id=4, search_text="mac")

    assert reset_all(st) == INITIAL_STATE
    assert reset_all(INITIAL_STATE) == INITIAL_STATE
