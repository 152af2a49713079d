from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

import dash
from dash import Input, Output, html

from catalog_browser.ui.helpers import (
    build_product_table,
    build_status_bar,
    clear_button_style,
    parse_filter_state,
)
from catalog_browser.ui.ids import IDs

if TYPE_CHECKING:
    from catalog_browser.ui.config import AppConfig

logger = logging.getLogger(__name__)


def _render_outputs(ctx: AppConfig, fs_data: dict[str, Any] | None) -> tuple:
    """
    Pure helper: filter-state payload -> (table, status bar, "All" tab active,
    per-owner tab active flags, clear button style).
    """
    catalog = ctx.catalog
    state = parse_filter_state(fs_data)

    visible = catalog.visible(state)
    n_total = len(catalog.views)

    owner_flags = [user.id == state.selected_owner_id for user in catalog.owners()]

    return (
        build_product_table(visible),
        build_status_bar(state, catalog.user_by_id(state.selected_owner_id), len(visible), n_total),
        state.selected_owner_id is None,
        owner_flags,
        clear_button_style(state),
    )


def _error_message(details: str) -> html.Div:
    return html.Div(
        [
            html.P("Something went wrong while rendering the products.", className="mb-1"),
            html.Small(details, className="text-muted"),
        ],
        className="text-danger",
    )


def register_render_callbacks(app: dash.Dash, ctx: AppConfig) -> None:
    # ---------------------------------------------------------
    # FilterState -> table, status bar and active filter styling
    # ---------------------------------------------------------
    @app.callback(
        Output(IDs.Control.PRODUCT_TABLE_CONTAINER, "children"),
        Output(IDs.Control.STATUS_BAR, "children"),
        Output(IDs.Control.OWNER_ALL, "active"),
        Output({"type": IDs.Pattern.OWNER_FILTER, "index": dash.ALL}, "active"),
        Output(IDs.Control.CLEAR_BUTTON, "style"),
        Input(IDs.Store.FILTER_STATE, "data"),
    )
    def update_products_from_state(fs_data: dict[str, Any] | None):
        try:
            return _render_outputs(ctx, fs_data)
        except Exception:
            logger.exception(
                "Error in update_products_from_state",
                extra={"filter_state": fs_data},
            )
            return (
                _error_message("If this keeps happening, grab the logs and open an issue."),
                dash.no_update,
                dash.no_update,
                dash.no_update,
                dash.no_update,
            )
