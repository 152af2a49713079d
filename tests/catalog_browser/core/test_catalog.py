from __future__ import annotations

from catalog_browser.core.catalog import Catalog
from catalog_browser.core.filter_state import FilterState
from catalog_browser.core.records import Category, Product, RecordStore, Sex, User


def _make_catalog() -> Catalog:
    store = RecordStore(
        users=(
            User(id=1, name="Roma", sex=Sex.MALE),
            User(id=2, name="Anna", sex=Sex.FEMALE),
        ),
        categories=(
            Category(id=10, title="Drinks", icon="🍹", owner_id=1),
            Category(id=20, title="Fruits", icon="🍏", owner_id=2),
        ),
        products=(
            Product(id=100, name="Cola", category_id=10),
            Product(id=101, name="Fanta", category_id=99),
            Product(id=102, name="Banana", category_id=20),
        ),
    )
    return Catalog(store, name="test")


def test_views_are_built_once():
    catalog = _make_catalog()

    first = catalog.views
    second = catalog.views

    assert first is second
    assert [v.id for v in first] == [100, 101, 102]


def test_visible_none_state_is_everything():
    catalog = _make_catalog()

    assert catalog.visible(None) == list(catalog.views)


def test_visible_filters_by_state():
    catalog = _make_catalog()

    assert [v.id for v in catalog.visible(FilterState(selected_owner_id=2))] == [102]
    assert [v.id for v in catalog.visible(FilterState(search_text="AN"))] == [101, 102]


def test_visible_returns_new_list_on_cache_hit():
    catalog = _make_catalog()
    state = FilterState(search_text="a")

    first = catalog.visible(state)
    first.clear()
    second = catalog.visible(state)

    assert [v.id for v in second] == [100, 101, 102]


def test_visible_cache_is_bounded():
    catalog = _make_catalog()
    catalog.MAX_VISIBLE_CACHE = 2

    for text in ("a", "b", "c", "d"):
        catalog.visible(FilterState(search_text=text))

    assert len(catalog._visible_cache) == 2
    # evicted entries are recomputed correctly
    assert [v.id for v in catalog.visible(FilterState(search_text="a"))] == [100, 101, 102]


def test_empty_result_is_an_empty_list():
    catalog = _make_catalog()

    visible = catalog.visible(FilterState(selected_owner_id=1, search_text="zzz"))

    assert visible == []
    assert catalog.summary(FilterState(selected_owner_id=1, search_text="zzz")) == (0, 3)


def test_owners_and_user_lookup():
    catalog = _make_catalog()

    assert [u.name for u in catalog.owners()] == ["Roma", "Anna"]
    assert catalog.user_by_id(2).name == "Anna"
    assert catalog.user_by_id(99) is None
    assert catalog.user_by_id(None) is None
