"""Query engine: filter, count, order and page a snapshot of contacts.

Pure functions over an iterable of Contact; nothing here touches the store.
"""

from collections.abc import Callable, Iterable
from dataclasses import dataclass

from rolodex.application.dto import QuerySpec
from rolodex.domain import Contact

SORT_DESCENDING = "desc"


@dataclass(frozen=True)
class QueryResult:
    items: list[Contact]
    total: int


def _by_first_name(c: Contact) -> tuple:
    return (c.first_name, c.id)


def _by_last_name(c: Contact) -> tuple:
    return (c.last_name, c.first_name, c.id)


def _by_email(c: Contact) -> tuple:
    return (c.email, c.id)


def _by_company(c: Contact) -> tuple:
    return (c.company or "", c.id)


def _by_created_at(c: Contact) -> tuple:
    return (c.created_at, c.id)


# Keys are lower-cased field names; lookup is case-insensitive.
SORT_KEYS: dict[str, Callable[[Contact], tuple]] = {
    "firstname": _by_first_name,
    "lastname": _by_last_name,
    "email": _by_email,
    "company": _by_company,
    "createdat": _by_created_at,
}


def matches_search(contact: Contact, search_text: str) -> bool:
    """Case-sensitive substring match over name, email, phone and company."""
    if search_text in contact.first_name:
        return True
    if search_text in contact.last_name:
        return True
    if search_text in contact.email:
        return True
    if contact.phone is not None and search_text in contact.phone:
        return True
    return contact.company is not None and search_text in contact.company


def filter_contacts(contacts: Iterable[Contact], spec: QuerySpec) -> list[Contact]:
    """Apply the active flag filter, then the search filter."""
    out = list(contacts)
    if spec.is_active is not None:
        out = [c for c in out if c.is_active == spec.is_active]
    if spec.search_text:
        out = [c for c in out if matches_search(c, spec.search_text)]
    return out


def sort_contacts(
    contacts: Iterable[Contact], sort_field: str, sort_direction: str
) -> list[Contact]:
    """Return contacts in a total order keyed by sort_field.

    An unrecognised sort_field falls back to last name then first name, always ascending.
    """
    key = SORT_KEYS.get((sort_field or "").lower())
    if key is None:
        # TODO: confirm whether the fallback should honour sort_direction.
        return sorted(contacts, key=_by_last_name)
    return sorted(contacts, key=key, reverse=sort_direction == SORT_DESCENDING)


def paginate(contacts: list[Contact], page: int, page_size: int) -> list[Contact]:
    start = (page - 1) * page_size
    return contacts[start : start + page_size]


def run_query(contacts: Iterable[Contact], spec: QuerySpec) -> QueryResult:
    """Filter, count, sort and page. total reflects the filtered set, not the page."""
    matched = filter_contacts(contacts, spec)
    ordered = sort_contacts(matched, spec.sort_field, spec.sort_direction)
    return QueryResult(
        items=paginate(ordered, spec.page, spec.page_size),
        total=len(matched),
    )
