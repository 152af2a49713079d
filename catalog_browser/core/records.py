from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Tuple


class Sex(str, Enum):
    MALE = "m"
    FEMALE = "f"


@dataclass(frozen=True)
class User:
    id: int
    name: str
    sex: Sex


@dataclass(frozen=True)
class Category:
    """
    A product category owned by a single user.

    owner_id references User.id; it is not checked on load, a category whose
    owner does not exist simply resolves to no user when views are built.
    """
    id: int
    title: str
    icon: str
    owner_id: int


@dataclass(frozen=True)
class Product:
    id: int
    name: str
    category_id: int


@dataclass(frozen=True)
class RecordStore:
    """
    Immutable snapshot of the three record collections.

    Collections keep their source order. Ids are assumed unique, not enforced.
    """
    users: Tuple[User, ...] = field(default_factory=tuple)
    categories: Tuple[Category, ...] = field(default_factory=tuple)
    products: Tuple[Product, ...] = field(default_factory=tuple)

    def __len__(self) -> int:
        return len(self.products)
