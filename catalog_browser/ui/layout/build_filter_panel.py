from __future__ import annotations

from typing import List

import dash_bootstrap_components as dbc
from dash import html

from catalog_browser.core.records import User
from catalog_browser.ui.ids import IDs, owner_filter_id


def build_filter_panel(owners: List[User]) -> dbc.Card:
    """
    Filters card:

    - owner tabs ("All" + one per user)
    - search field with a clear button (hidden until there is search text)
    - reset-all button
    """
    owner_tabs = [
        dbc.NavItem(
            dbc.NavLink("All", id=IDs.Control.OWNER_ALL, active=True, n_clicks=0)
        )
    ] + [
        dbc.NavItem(
            dbc.NavLink(user.name, id=owner_filter_id(user.id), active=False, n_clicks=0)
        )
        for user in owners
    ]

    return dbc.Card(
        [
            dbc.CardHeader("Filters", className="fw-semibold"),
            dbc.CardBody(
                [
                    dbc.Nav(owner_tabs, pills=True, className="fw-bold mb-3"),
                    dbc.InputGroup(
                        [
                            dbc.Input(
                                id=IDs.Control.SEARCH_INPUT,
                                type="text",
                                placeholder="Search",
                                value="",
                            ),
                            dbc.Button(
                                "Clear",
                                id=IDs.Control.CLEAR_BUTTON,
                                color="secondary",
                                outline=True,
                                n_clicks=0,
                                style={"display": "none"},
                            ),
                        ],
                        className="mb-3",
                    ),
                    dbc.Button(
                        "Reset all filters",
                        id=IDs.Control.RESET_ALL_BUTTON,
                        color="link",
                        outline=True,
                        n_clicks=0,
                        className="w-100 border",
                    ),
                ]
            ),
        ],
        className="cb-filters mb-3",
    )
