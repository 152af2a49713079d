from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Optional

import dash
from dash import ALL, Input, Output, State

from catalog_browser.core.filter_state import (
    FilterState,
    clear_search,
    reset_all,
    select_all_owners,
    select_owner,
    set_search_text,
)
from catalog_browser.ui.helpers import parse_filter_state
from catalog_browser.ui.ids import IDs

if TYPE_CHECKING:
    from catalog_browser.ui.config import AppConfig

logger = logging.getLogger(__name__)


def _next_state(state: FilterState, triggered_id: Any, search_value: Optional[str]) -> FilterState:
    """
    Pure helper mapping the UI event that fired to one FilterState transition.

    Unknown triggers leave the state unchanged.
    """
    if triggered_id == IDs.Control.OWNER_ALL:
        return select_all_owners(state)

    if isinstance(triggered_id, dict) and triggered_id.get("type") == IDs.Pattern.OWNER_FILTER:
        return select_owner(state, int(triggered_id["index"]))

    if triggered_id == IDs.Control.SEARCH_INPUT:
        return set_search_text(state, search_value or "")

    if triggered_id == IDs.Control.CLEAR_BUTTON:
        return clear_search(state)

    if triggered_id == IDs.Control.RESET_ALL_BUTTON:
        return reset_all(state)

    return state


def register_filter_callbacks(app: dash.Dash, ctx: AppConfig) -> None:
    # ---------------------------------------------------------
    # UI events -> FilterState (canonical)
    # ---------------------------------------------------------
    @app.callback(
        Output(IDs.Store.FILTER_STATE, "data"),
        Output(IDs.Control.SEARCH_INPUT, "value"),
        Input(IDs.Control.OWNER_ALL, "n_clicks"),
        Input({"type": IDs.Pattern.OWNER_FILTER, "index": ALL}, "n_clicks"),
        Input(IDs.Control.SEARCH_INPUT, "value"),
        Input(IDs.Control.CLEAR_BUTTON, "n_clicks"),
        Input(IDs.Control.RESET_ALL_BUTTON, "n_clicks"),
        State(IDs.Store.FILTER_STATE, "data"),
        prevent_initial_call=True,
    )
    def sync_filter_state_from_ui(_all_clicks, _owner_clicks, search_value, _clear_clicks, _reset_clicks, fs_data):
        triggered_id = dash.ctx.triggered_id
        state = parse_filter_state(fs_data)
        new_state = _next_state(state, triggered_id, search_value)

        logger.debug(
            "filter_state_transition",
            extra={"trigger": str(triggered_id), "filter_state": new_state.to_dict()},
        )

        return new_state.to_dict(), new_state.search_text
