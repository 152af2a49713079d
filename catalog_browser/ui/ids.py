from __future__ import annotations

__all__ = ["IDs", "owner_filter_id"]


class IDs:
    class Store:
        FILTER_STATE = "filter-state"

    class Control:
        # Owner tabs
        OWNER_ALL = "owner-filter-all"

        # Search
        SEARCH_INPUT = "search-field"
        CLEAR_BUTTON = "clear-search-btn"

        RESET_ALL_BUTTON = "reset-all-btn"

        # Product table + downloads
        PRODUCT_TABLE_CONTAINER = "product-table-container"
        DOWNLOAD_DATA = "download-data"
        DOWNLOAD_DATA_BTN = "download-data-btn"

        # Status bar
        STATUS_BAR = "status-bar"

    class Pattern:
        # pattern-matching "type" strings
        OWNER_FILTER = "owner-filter"


def owner_filter_id(user_id: int) -> dict:
    return {"type": IDs.Pattern.OWNER_FILTER, "index": user_id}
