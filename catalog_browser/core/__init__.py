"""
Core domain layer: record store, view builder, filter state and filter
engine, and the Catalog service tying them together
"""

from .catalog import Catalog
from .filter_state import FilterState
from .filters import apply_filters
from .records import Category, Product, RecordStore, Sex, User
from .view_records import ViewRecord, build_views

__all__ = [
    "Catalog",
    "Category",
    "FilterState",
    "Product",
    "RecordStore",
    "Sex",
    "User",
    "ViewRecord",
    "apply_filters",
    "build_views",
]
