"""Application DTOs: inbound payloads, query spec, outbound projections, and operation results."""

from dataclasses import dataclass, field, fields
from datetime import datetime

DEFAULT_PAGE = 1
DEFAULT_PAGE_SIZE = 10
DEFAULT_SORT_FIELD = "lastName"
DEFAULT_SORT_DIRECTION = "asc"


class _Unset:
    """Marks a field the caller did not send (distinct from an explicit None)."""

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "UNSET"

    def __bool__(self) -> bool:
        return False


UNSET = _Unset()


# --- Inbound payloads ---


@dataclass(frozen=True)
class CreateContactData:
    """Create payload. Required fields may be None here; validation reports them."""

    first_name: str | None = None
    last_name: str | None = None
    email: str | None = None
    phone: str | None = None
    company: str | None = None
    address_line1: str | None = None
    address_line2: str | None = None
    city: str | None = None
    state: str | None = None
    postal_code: str | None = None
    country: str | None = None
    is_active: bool = True


@dataclass(frozen=True)
class UpdateContactData:
    """Partial update payload. Fields left as UNSET are not changed."""

    first_name: str | None | _Unset = UNSET
    last_name: str | None | _Unset = UNSET
    email: str | None | _Unset = UNSET
    phone: str | None | _Unset = UNSET
    company: str | None | _Unset = UNSET
    address_line1: str | None | _Unset = UNSET
    address_line2: str | None | _Unset = UNSET
    city: str | None | _Unset = UNSET
    state: str | None | _Unset = UNSET
    postal_code: str | None | _Unset = UNSET
    country: str | None | _Unset = UNSET
    is_active: bool | _Unset = UNSET

    def supplied(self) -> dict[str, object]:
        """Return only the fields the caller sent, by attribute name."""
        values = {f.name: getattr(self, f.name) for f in fields(self)}
        return {name: value for name, value in values.items() if value is not UNSET}


@dataclass(frozen=True)
class QuerySpec:
    """Filter, sort and paging parameters for listing contacts."""

    search_text: str | None = None
    is_active: bool | None = None
    sort_field: str = DEFAULT_SORT_FIELD
    sort_direction: str = DEFAULT_SORT_DIRECTION
    page: int = DEFAULT_PAGE
    page_size: int = DEFAULT_PAGE_SIZE

    def __post_init__(self):
        if self.page < 1:
            raise ValueError("page must be at least 1.")
        if self.page_size < 1:
            raise ValueError("page_size must be at least 1.")


# --- Outbound projections ---


@dataclass(frozen=True)
class ContactListItem:
    id: str
    first_name: str
    last_name: str
    email: str
    company: str | None
    is_active: bool
    created_at: datetime


@dataclass(frozen=True)
class ContactDetail:
    id: str
    first_name: str
    last_name: str
    email: str
    phone: str | None
    company: str | None
    address_line1: str | None
    address_line2: str | None
    city: str | None
    state: str | None
    postal_code: str | None
    country: str | None
    is_active: bool
    created_at: datetime
    updated_at: datetime


@dataclass(frozen=True)
class ContactPage:
    """One page of list projections plus the echoed query parameters."""

    items: list[ContactListItem]
    total: int
    page: int
    page_size: int
    sort: str
    direction: str


# --- Operation results ---


@dataclass(frozen=True)
class Invalid:
    """Payload failed validation. errors maps wire field name to messages."""

    errors: dict[str, list[str]] = field(default_factory=dict)


@dataclass(frozen=True)
class Duplicate:
    """Another contact already uses this email."""

    email: str


@dataclass(frozen=True)
class ContactNotFound:
    contact_id: str


@dataclass(frozen=True)
class ContactDeleted:
    contact_id: str
