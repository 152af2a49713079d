from __future__ import annotations

import dash_bootstrap_components as dbc
from dash import html

from catalog_browser.config.model import DEFAULT_SUBTITLE, DEFAULT_UI_TITLE


def build_navbar(global_config) -> dbc.Navbar:
    title = getattr(global_config, "ui_title", DEFAULT_UI_TITLE)
    subtitle = getattr(global_config, "subtitle", DEFAULT_SUBTITLE)

    return dbc.Navbar(
        dbc.Container(
            fluid=True,
            children=[
                html.Div(
                    [
                        html.H2(title, className="mb-0"),
                        html.Small(
                            subtitle,
                            className="text-muted",
                            id="navbar-subtitle",
                        ),
                    ],
                    className="d-flex flex-column justify-content-center",
                ),
            ],
        ),
        className="cb-navbar mb-3",
        color="light",
    )
