from __future__ import annotations

import logging
from typing import Dict, List, Optional, Tuple

from .filter_state import FilterState, INITIAL_STATE
from .filters import apply_filters
from .records import RecordStore, User
from .view_records import ViewRecord, build_views

logger = logging.getLogger(__name__)


class Catalog:
    """
    Read-only product catalog built from one RecordStore snapshot.

    Includes:
    - View records joined once per snapshot (memoised)
    - Visible subsets per FilterState (bounded memo cache)
    - Owner lookups used by the filter panel
    """

    MAX_VISIBLE_CACHE = 128

    # -------------------------------------------------------------------------
    # Constructor
    # -------------------------------------------------------------------------
    def __init__(self, store: RecordStore, name: str = "catalog") -> None:
        self.name = name
        self.store = store

        # ---------------------------------------------------------------------
        # Caches
        # ---------------------------------------------------------------------
        self._views: Optional[Tuple[ViewRecord, ...]] = None
        self._visible_cache: Dict[FilterState, Tuple[ViewRecord, ...]] = {}
        self._users_by_id: Optional[Dict[int, User]] = None

    # -------------------------------------------------------------------------
    # View records
    # -------------------------------------------------------------------------
    @property
    def views(self) -> Tuple[ViewRecord, ...]:
        """
        All view records of the snapshot, in product order.

        The snapshot never changes for the lifetime of a Catalog, so the join
        runs once.
        """
        if self._views is None:
            self._views = tuple(
                build_views(self.store.users, self.store.categories, self.store.products)
            )
            logger.info(
                "Built view records",
                extra={
                    "catalog": self.name,
                    "n_users": len(self.store.users),
                    "n_categories": len(self.store.categories),
                    "n_products": len(self.store.products),
                },
            )
        return self._views

    # -------------------------------------------------------------------------
    # Filtering with caching
    # -------------------------------------------------------------------------
    def visible(self, state: Optional[FilterState]) -> List[ViewRecord]:
        """
        Return the view records visible under the given FilterState.

        A None state (nothing stored yet) is treated as the initial state.
        Each call returns a new list, even on a cache hit.
        """
        if state is None:
            state = INITIAL_STATE

        cached = self._visible_cache.get(state)
        if cached is None:
            cached = tuple(apply_filters(self.views, state))
            if len(self._visible_cache) >= self.MAX_VISIBLE_CACHE:
                # drop the oldest entry (dicts keep insertion order)
                self._visible_cache.pop(next(iter(self._visible_cache)))
            self._visible_cache[state] = cached

        return list(cached)

    def summary(self, state: Optional[FilterState]) -> Tuple[int, int]:
        """(visible count, total count) for the status bar."""
        return len(self.visible(state)), len(self.views)

    # -------------------------------------------------------------------------
    # Owners
    # -------------------------------------------------------------------------
    def owners(self) -> List[User]:
        return list(self.store.users)

    def user_by_id(self, owner_id: Optional[int]) -> Optional[User]:
        if owner_id is None:
            return None
        if self._users_by_id is None:
            users_by_id: Dict[int, User] = {}
            for user in self.store.users:
                users_by_id.setdefault(user.id, user)
            self._users_by_id = users_by_id
        return self._users_by_id.get(owner_id)
