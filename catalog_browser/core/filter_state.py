from __future__ import annotations

from dataclasses import dataclass, asdict, replace
from typing import Any, Dict, Optional


@dataclass(frozen=True)
class FilterState:
    """
    Represents the current user selection/filters.

    Fields:

    - selected_owner_id: id of the User whose products are shown, None for all owners
    - search_text: free-text product name search, "" for no search

    Instances are immutable; use the transition functions below to move
    between states.
    """

    selected_owner_id: Optional[int] = None
    search_text: str = ""

    @property
    def is_neutral(self) -> bool:
        return self.selected_owner_id is None and self.search_text == ""

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> FilterState:
        owner_id = data.get("selected_owner_id")
        return cls(
            selected_owner_id=int(owner_id) if owner_id is not None else None,
            search_text=str(data.get("search_text") or ""),
        )


INITIAL_STATE = FilterState()


# -----------------------------------------------------------------------------
# Transitions
# -----------------------------------------------------------------------------
def select_owner(state: FilterState, owner_id: int) -> FilterState:
    return replace(state, selected_owner_id=owner_id)


def select_all_owners(state: FilterState) -> FilterState:
    return replace(state, selected_owner_id=None)


def set_search_text(state: FilterState, text: str) -> FilterState:
    # verbatim: no trimming
    return replace(state, search_text=text)


def clear_search(state: FilterState) -> FilterState:
    return replace(state, search_text="")


def reset_all(state: FilterState) -> FilterState:
    return INITIAL_STATE
