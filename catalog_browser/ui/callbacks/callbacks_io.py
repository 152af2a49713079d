from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

import dash
import pandas as pd
from dash import Input, Output, State, dcc

from catalog_browser.core.view_records import views_to_frame
from catalog_browser.ui.helpers import parse_filter_state
from catalog_browser.ui.ids import IDs

if TYPE_CHECKING:
    from catalog_browser.ui.config import AppConfig

logger = logging.getLogger(__name__)

CSV_FILENAME = "products.csv"


def _visible_frame(ctx: AppConfig, fs_data: dict[str, Any] | None) -> pd.DataFrame:
    state = parse_filter_state(fs_data)
    return views_to_frame(ctx.catalog.visible(state))


def register_io_callbacks(app: dash.Dash, ctx: AppConfig) -> None:
    # ---------------------------------------------------------
    # Download visible rows as CSV
    # ---------------------------------------------------------
    @app.callback(
        Output(IDs.Control.DOWNLOAD_DATA, "data"),
        Input(IDs.Control.DOWNLOAD_DATA_BTN, "n_clicks"),
        State(IDs.Store.FILTER_STATE, "data"),
        prevent_initial_call=True,
    )
    def download_visible_products(_n_clicks, fs_data):
        df = _visible_frame(ctx, fs_data)
        logger.info("Exporting visible products", extra={"n_rows": len(df)})
        return dcc.send_data_frame(df.to_csv, CSV_FILENAME, index=False)
