from __future__ import annotations

import logging
from typing import Any, List, Optional, Sequence

import dash_bootstrap_components as dbc
from dash import html

from catalog_browser.core.filter_state import FilterState, INITIAL_STATE
from catalog_browser.core.records import Sex, User
from catalog_browser.core.view_records import ViewRecord

logger = logging.getLogger(__name__)

NO_MATCHES_MESSAGE = "No products matching selected criteria"

TABLE_COLUMNS = ["ID", "Product", "Category", "User"]

_SEX_CLASSES = {
    Sex.MALE: "text-primary",
    Sex.FEMALE: "text-danger",
}


def parse_filter_state(data: Any) -> FilterState:
    """
    Turn the filter-state store payload into a FilterState.

    Nothing stored yet (None) and unparsable payloads both fall back to the
    initial state; the latter is logged.
    """
    if data is None:
        return INITIAL_STATE
    if not isinstance(data, dict):
        logger.error("Invalid filter-state payload: %r", data)
        return INITIAL_STATE
    try:
        return FilterState.from_dict(data)
    except (TypeError, ValueError):
        logger.exception("Invalid filter-state: %r", data)
        return INITIAL_STATE


def user_css_class(user: Optional[User]) -> str:
    if user is None:
        return ""
    return _SEX_CLASSES.get(user.sex, "")


def clear_button_style(state: FilterState) -> dict:
    return {} if state.search_text else {"display": "none"}


def build_product_row(view: ViewRecord) -> html.Tr:
    return html.Tr(
        [
            html.Td(view.id, className="fw-bold"),
            html.Td(view.name),
            html.Td(view.category_label),
            html.Td(view.user_name, className=user_css_class(view.user)),
        ],
        id=f"product-{view.id}",
    )


def build_product_table(views: Sequence[ViewRecord]):
    """
    The product table for the visible views, or the empty-state message when
    nothing matches.
    """
    if not views:
        return html.P(NO_MATCHES_MESSAGE, className="text-muted mb-0 no-matching-message")

    return dbc.Table(
        [
            html.Thead(html.Tr([html.Th(col) for col in TABLE_COLUMNS])),
            html.Tbody([build_product_row(v) for v in views]),
        ],
        striped=True,
        hover=True,
        size="sm",
        className="mb-0",
        id="product-table",
    )


def build_status_bar(
    state: FilterState,
    owner: Optional[User],
    n_visible: int,
    n_total: int,
) -> html.Span:
    owner_label = owner.name if owner is not None else "All"
    if state.selected_owner_id is not None and owner is None:
        owner_label = f"#{state.selected_owner_id}"

    search_label = f'"{state.search_text}"' if state.search_text else "None"

    children: List[Any] = [
        html.Strong("Owner: "), owner_label, " • ",
        html.Strong("Search: "), search_label, " • ",
        html.Strong("Showing: "), f"{n_visible} of {n_total} products",
    ]
    return html.Span(children)
