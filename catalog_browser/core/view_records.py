from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Dict, Iterable, List, Optional, Sequence, TypeVar

import pandas as pd

from .records import Category, Product, User

logger = logging.getLogger(__name__)

CSV_COLUMNS = ["id", "product", "category", "user"]

_T = TypeVar("_T", Category, User)


@dataclass(frozen=True)
class ViewRecord:
    """
    A Product enriched with its resolved Category and owning User.

    Fields:

    - id, name, category_id: copied from the Product
    - category: the Category with id == category_id, or None if it doesn't exist
    - user: the User with id == category.owner_id, or None if the category is
      missing or its owner doesn't exist

    Consumers must branch on category/user being None.
    """
    id: int
    name: str
    category_id: int
    category: Optional[Category] = None
    user: Optional[User] = None

    @property
    def category_label(self) -> str:
        if self.category is None:
            return ""
        return f"{self.category.icon} - {self.category.title}"

    @property
    def user_name(self) -> str:
        return self.user.name if self.user is not None else ""

    def to_row(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "product": self.name,
            "category": self.category_label,
            "user": self.user_name,
        }


def _index_by_id(records: Iterable[_T]) -> Dict[int, _T]:
    # first occurrence wins, same as a linear "find first" scan
    index: Dict[int, _T] = {}
    for record in records:
        index.setdefault(record.id, record)
    return index


def build_views(
    users: Sequence[User],
    categories: Sequence[Category],
    products: Sequence[Product],
) -> List[ViewRecord]:
    """
    Join every product to its category and the category's owner.

    Output has one ViewRecord per product, in product order. Dangling
    categoryId / ownerId references resolve to None and never raise.

    :param users: user records, any order
    :param categories: category records, any order
    :param products: product records; their order is the output order
    :return: list of ViewRecords
    """
    categories_by_id = _index_by_id(categories)
    users_by_id = _index_by_id(users)

    views: List[ViewRecord] = []
    n_missing_category = 0
    n_missing_user = 0

    for product in products:
        category = categories_by_id.get(product.category_id)
        user = users_by_id.get(category.owner_id) if category is not None else None

        if category is None:
            n_missing_category += 1
        elif user is None:
            n_missing_user += 1

        views.append(
            ViewRecord(
                id=product.id,
                name=product.name,
                category_id=product.category_id,
                category=category,
                user=user,
            )
        )

    if n_missing_category or n_missing_user:
        logger.debug(
            "Dangling references resolved to None",
            extra={
                "n_products": len(views),
                "n_missing_category": n_missing_category,
                "n_missing_user": n_missing_user,
            },
        )

    return views


def views_to_frame(views: Sequence[ViewRecord]) -> pd.DataFrame:
    """Flatten view records into a DataFrame (one row per record, input order)."""
    return pd.DataFrame([v.to_row() for v in views], columns=CSV_COLUMNS)
