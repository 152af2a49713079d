from __future__ import annotations

from typing import List, Sequence

from .filter_state import FilterState
from .view_records import ViewRecord


def owner_matches(view: ViewRecord, state: FilterState) -> bool:
    """
    True when no owner is selected, or the view's user is the selected owner.
    A view without a user never matches a selected owner.
    """
    if state.selected_owner_id is None:
        return True
    return view.user is not None and view.user.id == state.selected_owner_id


def search_matches(view: ViewRecord, state: FilterState) -> bool:
    """Case-insensitive substring match of search_text in the product name."""
    if state.search_text == "":
        return True
    return state.search_text.lower() in view.name.lower()


def apply_filters(views: Sequence[ViewRecord], state: FilterState) -> List[ViewRecord]:
    """
    Return the views matching both the owner and the search predicate.

    Input order is preserved and a new list is returned on every call;
    neither argument is mutated. An empty list is a valid result.
    """
    return [v for v in views if owner_matches(v, state) and search_matches(v, state)]
