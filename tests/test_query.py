"""Unit tests for the query engine. Pure functions over Contact lists; no store."""

from datetime import datetime, timedelta, timezone

import pytest

from rolodex.application import QuerySpec, run_query
from rolodex.domain import Contact

BASE_TIME = datetime(2024, 1, 1, tzinfo=timezone.utc)


def _contact(first: str, last: str, **kwargs) -> Contact:
    kwargs.setdefault("email", f"{first.lower()}.{last.lower()}@example.com")
    return Contact(first_name=first, last_name=last, **kwargs)


def _names(contacts: list[Contact]) -> list[tuple[str, str]]:
    return [(c.last_name, c.first_name) for c in contacts]


def _many(n: int) -> list[Contact]:
    return [
        _contact(
            f"First{i:03d}",
            f"Last{i:03d}",
            is_active=i % 3 != 0,
            created_at=BASE_TIME + timedelta(days=i),
        )
        for i in range(n)
    ]


def test_default_sort_is_last_name_then_first_name() -> None:
    contacts = [
        _contact("Jane", "Smith"),
        _contact("Ann", "Smith"),
        _contact("Bob", "Adams"),
    ]
    result = run_query(contacts, QuerySpec())
    assert _names(result.items) == [("Adams", "Bob"), ("Smith", "Ann"), ("Smith", "Jane")]
    assert result.total == 3


def test_page_past_the_end_is_empty_with_total() -> None:
    contacts = [_contact(f"F{i}", f"L{i}", is_active=True) for i in range(153)]
    result = run_query(contacts, QuerySpec(page=17, page_size=10))
    assert result.items == []
    assert result.total == 153


def test_last_page_is_partial() -> None:
    contacts = [_contact(f"F{i}", f"L{i}") for i in range(153)]
    result = run_query(contacts, QuerySpec(page=15, page_size=10))
    assert len(result.items) == 10
    result = run_query(contacts, QuerySpec(page=16, page_size=10))
    assert len(result.items) == 3
    result = run_query(contacts, QuerySpec(page=8, page_size=20))
    assert len(result.items) == 13


@pytest.mark.parametrize("page,page_size", [(1, 1), (1, 10), (2, 7), (5, 10), (9, 5), (100, 3)])
def test_page_length_and_total_independent_of_paging(page: int, page_size: int) -> None:
    contacts = _many(42)
    spec = QuerySpec(is_active=True, page=page, page_size=page_size)
    result = run_query(contacts, spec)
    expected_total = sum(1 for c in contacts if c.is_active)
    assert result.total == expected_total
    assert len(result.items) == min(page_size, max(0, expected_total - (page - 1) * page_size))


def test_pages_partition_the_ordered_result() -> None:
    contacts = _many(25)
    full = run_query(contacts, QuerySpec(page_size=100)).items
    paged = []
    for page in range(1, 4):
        paged.extend(run_query(contacts, QuerySpec(page=page, page_size=10)).items)
    assert [c.id for c in paged] == [c.id for c in full]


def test_active_filter() -> None:
    contacts = [
        _contact("A", "One", is_active=True),
        _contact("B", "Two", is_active=False),
        _contact("C", "Three", is_active=True),
    ]
    active = run_query(contacts, QuerySpec(is_active=True))
    inactive = run_query(contacts, QuerySpec(is_active=False))
    assert active.total == 2
    assert all(c.is_active for c in active.items)
    assert inactive.total == 1
    assert inactive.items[0].first_name == "B"


def test_search_matches_any_field_case_sensitive() -> None:
    contacts = [
        _contact("Alice", "Walker", company="Tech Corp"),
        _contact("Bob", "Stone", phone="555-123-4567"),
        _contact("Carol", "Techer", email="carol@example.com"),
        _contact("Dan", "Moss", email="dan@techmail.com"),
    ]
    result = run_query(contacts, QuerySpec(search_text="Tech"))
    assert sorted(c.first_name for c in result.items) == ["Alice", "Carol"]
    assert result.total == 2

    assert run_query(contacts, QuerySpec(search_text="tech")).total == 1
    assert run_query(contacts, QuerySpec(search_text="123-45")).items[0].first_name == "Bob"


def test_search_skips_missing_phone_and_company() -> None:
    contacts = [_contact("Eve", "North", phone=None, company=None)]
    assert run_query(contacts, QuerySpec(search_text="None")).total == 0


def test_empty_search_text_is_no_filter() -> None:
    contacts = _many(5)
    assert run_query(contacts, QuerySpec(search_text="")).total == 5
    assert run_query(contacts, QuerySpec(search_text=None)).total == 5


def test_search_and_active_filters_combine() -> None:
    contacts = [
        _contact("Sam", "Smith", is_active=True),
        _contact("Sue", "Smith", is_active=False),
        _contact("Tom", "Jones", is_active=True),
    ]
    result = run_query(contacts, QuerySpec(search_text="Smith", is_active=True))
    assert result.total == 1
    assert result.items[0].first_name == "Sam"


@pytest.mark.parametrize("field", ["firstName", "lastName", "email", "company", "createdAt"])
def test_desc_exactly_reverses_asc(field: str) -> None:
    contacts = _many(12) + [_contact("First001", "Dup", company=None)]
    asc = run_query(contacts, QuerySpec(sort_field=field, sort_direction="asc", page_size=50))
    desc = run_query(contacts, QuerySpec(sort_field=field, sort_direction="desc", page_size=50))
    assert [c.id for c in desc.items] == [c.id for c in reversed(asc.items)]


def test_sort_field_is_case_insensitive() -> None:
    contacts = [_contact("Zed", "Alpha"), _contact("Amy", "Beta")]
    result = run_query(contacts, QuerySpec(sort_field="FIRSTNAME"))
    assert [c.first_name for c in result.items] == ["Amy", "Zed"]


def test_company_sort_treats_missing_as_empty() -> None:
    contacts = [
        _contact("A", "One", company="Beta"),
        _contact("B", "Two", company=None),
        _contact("C", "Three", company="Alpha"),
    ]
    result = run_query(contacts, QuerySpec(sort_field="company"))
    assert [c.company for c in result.items] == [None, "Alpha", "Beta"]


def test_created_at_sort_is_chronological() -> None:
    contacts = [
        _contact("Late", "X", created_at=BASE_TIME + timedelta(days=2)),
        _contact("Early", "Y", created_at=BASE_TIME),
        _contact("Middle", "Z", created_at=BASE_TIME + timedelta(days=1)),
    ]
    result = run_query(contacts, QuerySpec(sort_field="createdAt", sort_direction="desc"))
    assert [c.first_name for c in result.items] == ["Late", "Middle", "Early"]


def test_unrecognised_sort_field_ignores_direction() -> None:
    contacts = [
        _contact("Jane", "Smith"),
        _contact("Ann", "Smith"),
        _contact("Bob", "Adams"),
    ]
    result = run_query(contacts, QuerySpec(sort_field="shoeSize", sort_direction="desc"))
    assert _names(result.items) == [("Adams", "Bob"), ("Smith", "Ann"), ("Smith", "Jane")]


def test_ties_are_broken_by_id() -> None:
    contacts = [
        _contact("Same", "Name", id="c", email="c@example.com"),
        _contact("Same", "Name", id="a", email="a@example.com"),
        _contact("Same", "Name", id="b", email="b@example.com"),
    ]
    for field in ("firstName", "lastName", "company"):
        result = run_query(contacts, QuerySpec(sort_field=field))
        assert [c.id for c in result.items] == ["a", "b", "c"]


def test_repeated_query_is_idempotent() -> None:
    contacts = _many(30)
    spec = QuerySpec(search_text="First0", sort_field="email", sort_direction="desc", page=2, page_size=4)
    first = run_query(contacts, spec)
    second = run_query(contacts, spec)
    assert first == second


def test_query_spec_rejects_non_positive_paging() -> None:
    with pytest.raises(ValueError):
        QuerySpec(page=0)
    with pytest.raises(ValueError):
        QuerySpec(page_size=0)
