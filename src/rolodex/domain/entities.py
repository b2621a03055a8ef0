"""Domain entity: Contact, plus the field bounds shared by validation and storage."""

import uuid
from dataclasses import dataclass, field
from datetime import datetime, timezone

# Max lengths per stored field.
FIRST_NAME_MAX_LENGTH = 100
LAST_NAME_MAX_LENGTH = 100
EMAIL_MAX_LENGTH = 255
PHONE_MAX_LENGTH = 20
COMPANY_MAX_LENGTH = 200
ADDRESS_LINE_MAX_LENGTH = 255
CITY_MAX_LENGTH = 100
STATE_MAX_LENGTH = 100
POSTAL_CODE_MAX_LENGTH = 20
COUNTRY_MAX_LENGTH = 100


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(frozen=True)
class Contact:
    """
    A person in the directory.
    Immutable: updates produce a new Contact with the same id and created_at.
    """

    id: str = field(default_factory=lambda: str(uuid.uuid4()))
    first_name: str = ""
    last_name: str = ""
    email: str = ""
    phone: str | None = None
    company: str | None = None
    address_line1: str | None = None
    address_line2: str | None = None
    city: str | None = None
    state: str | None = None
    postal_code: str | None = None
    country: str | None = None
    is_active: bool = True
    created_at: datetime = field(default_factory=utcnow)
    updated_at: datetime | None = None

    def __post_init__(self):
        if not self.id:
            raise ValueError("Contact id must be non-empty.")
        if self.updated_at is None:
            object.__setattr__(self, "updated_at", self.created_at)
        if self.updated_at < self.created_at:
            raise ValueError("Contact updated_at must not be earlier than created_at.")
