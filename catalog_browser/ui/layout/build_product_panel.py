from __future__ import annotations

from typing import Sequence

import dash_bootstrap_components as dbc
from dash import dcc, html

from catalog_browser.core.view_records import ViewRecord
from catalog_browser.ui.helpers import build_product_table
from catalog_browser.ui.ids import IDs


def build_product_panel(initial_views: Sequence[ViewRecord]) -> dbc.Card:
    return dbc.Card(
        [
            dbc.CardHeader(
                html.Div(
                    [
                        html.Strong("Products"),
                        html.Div(id=IDs.Control.STATUS_BAR, className="ms-auto small"),
                    ],
                    className="d-flex align-items-center",
                ),
                className="p-2",
            ),
            dbc.CardBody(
                [
                    html.Div(
                        build_product_table(initial_views),
                        id=IDs.Control.PRODUCT_TABLE_CONTAINER,
                        className="table-responsive",
                    ),
                    html.Div(
                        [
                            dbc.Button(
                                "Download visible (CSV)",
                                id=IDs.Control.DOWNLOAD_DATA_BTN,
                                color="secondary",
                                size="sm",
                                className="mt-2 ms-auto me-2",
                            ),
                            dcc.Download(id=IDs.Control.DOWNLOAD_DATA),
                        ],
                        className="d-flex justify-content-end align-items-center",
                    ),
                ],
                className="cb-main-body",
            ),
        ],
        className="cb-maincard",
    )
