from __future__ import annotations

from catalog_browser.core.filter_state import FilterState
from catalog_browser.core.filters import apply_filters, owner_matches, search_matches
from catalog_browser.core.records import Category, Product, Sex, User
from catalog_browser.core.view_records import ViewRecord, build_views


def _make_views():
    users = [
        User(id=1, name="Roma", sex=Sex.MALE),
        User(id=2, name="Anna", sex=Sex.FEMALE),
    ]
    categories = [
        Category(id=10, title="Drinks", icon="🍹", owner_id=1),
        Category(id=20, title="Electronics", icon="💻", owner_id=2),
        Category(id=30, title="Orphaned", icon="?", owner_id=99),
    ]
    products = [
        Product(id=100, name="Cola", category_id=10),
        Product(id=101, name="Fanta", category_id=99),
        Product(id=102, name="MacBook", category_id=20),
        Product(id=103, name="iMac", category_id=20),
        Product(id=104, name="Big Mac sauce", category_id=30),
        Product(id=105, name="Tomato juice", category_id=10),
    ]
    return build_views(users, categories, products)


def _ids(views):
    return [v.id for v in views]


def test_scenario_owner_filter():
    views = _make_views()[:2]

    visible = apply_filters(views, FilterState(selected_owner_id=1, search_text=""))

    assert _ids(visible) == [100]


def test_scenario_search_filter():
    views = _make_views()[:2]

    visible = apply_filters(views, FilterState(selected_owner_id=None, search_text="fan"))

    assert _ids(visible) == [101]


def test_neutral_state_is_identity():
    views = _make_views()

    visible = apply_filters(views, FilterState())

    assert visible == views
    assert visible is not views


def test_filters_are_idempotent():
    views = _make_views()
    state = FilterState(selected_owner_id=2, search_text="mac")

    once = apply_filters(views, state)
    twice = apply_filters(once, state)

    assert twice == once
    assert _ids(once) == [102, 103]


def test_search_is_case_insensitive():
    views = _make_views()

    upper = apply_filters(views, FilterState(search_text="MAC"))
    lower = apply_filters(views, FilterState(search_text="mac"))

    assert upper == lower
    assert _ids(lower) == [102, 103, 104]


def test_search_is_substring_not_prefix():
    views = _make_views()

    visible = apply_filters(views, FilterState(search_text="juice"))

    assert _ids(visible) == [105]


def test_search_text_is_not_trimmed():
    views = _make_views()

    # "Big Mac sauce" is the only name containing " mac"
    visible = apply_filters(views, FilterState(search_text=" mac"))

    assert _ids(visible) == [104]


def test_missing_user_excluded_when_owner_selected():
    views = _make_views()
    no_user = [v for v in views if v.user is None]
    assert _ids(no_user) == [101, 104]

    for search in ("", "a", "Fanta"):
        for owner_id in (1, 2, 99):
            state = FilterState(selected_owner_id=owner_id, search_text=search)
            assert not any(v.user is None for v in apply_filters(views, state))


def test_owner_and_search_are_combined_with_and():
    views = _make_views()

    visible = apply_filters(views, FilterState(selected_owner_id=1, search_text="o"))

    assert _ids(visible) == [100, 105]

    visible = apply_filters(views, FilterState(selected_owner_id=2, search_text="cola"))
    assert visible == []


def test_output_preserves_input_order():
    views = list(reversed(_make_views()))

    visible = apply_filters(views, FilterState(search_text="a"))

    assert _ids(visible) == [105, 104, 103, 102, 101, 100]


def test_apply_filters_does_not_mutate_inputs():
    views = _make_views()
    before = list(views)
    state = FilterState(selected_owner_id=1, search_text="x")

    apply_filters(views, state)

    assert views == before
    assert state == FilterState(selected_owner_id=1, search_text="x")


def test_apply_filters_empty_input():
    assert apply_filters([], FilterState(selected_owner_id=1, search_text="x")) == []


def test_individual_predicates():
    user = User(id=1, name="Roma", sex=Sex.MALE)
    view = ViewRecord(id=1, name="Cola", category_id=10, category=None, user=user)
    orphan = ViewRecord(id=2, name="Cola", category_id=99)

    assert owner_matches(view, FilterState())
    assert owner_matches(view, FilterState(selected_owner_id=1))
    assert not owner_matches(view, FilterState(selected_owner_id=2))
    assert owner_matches(orphan, FilterState())
    assert not owner_matches(orphan, FilterState(selected_owner_id=1))

    assert search_matches(view, FilterState())
    assert search_matches(view, FilterState(search_text="OL"))
    assert not search_matches(view, FilterState(search_text="fanta"))
