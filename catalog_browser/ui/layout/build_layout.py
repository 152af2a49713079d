from __future__ import annotations

from typing import TYPE_CHECKING

import dash_bootstrap_components as dbc
from dash import dcc

from catalog_browser.core.filter_state import INITIAL_STATE
from catalog_browser.ui.ids import IDs
from catalog_browser.ui.layout.build_filter_panel import build_filter_panel
from catalog_browser.ui.layout.build_navbar import build_navbar
from catalog_browser.ui.layout.build_product_panel import build_product_panel

if TYPE_CHECKING:
    from catalog_browser.ui.config import AppConfig


def build_layout(ctx: AppConfig):
    catalog = ctx.catalog

    return dbc.Container(
        fluid=True,
        className="cb-root",
        children=[
            build_navbar(ctx.global_config),

            # App-level stores
            dcc.Store(
                id=IDs.Store.FILTER_STATE,
                storage_type="memory",
                data=INITIAL_STATE.to_dict(),
            ),

            dbc.Row(
                [
                    dbc.Col(build_filter_panel(catalog.owners()), md=4),
                    dbc.Col(build_product_panel(catalog.visible(INITIAL_STATE)), md=8),
                ],
                className="gx-3",
            ),
        ],
    )
