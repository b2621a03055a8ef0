"""Conversions between Contact entities, inbound payloads and outbound projections."""

import dataclasses

from rolodex.application.dto import (
    ContactDetail,
    ContactListItem,
    CreateContactData,
    UpdateContactData,
)
from rolodex.domain import Contact

# Optional string fields; an empty value is stored as None.
OPTIONAL_FIELDS = (
    "phone",
    "company",
    "address_line1",
    "address_line2",
    "city",
    "state",
    "postal_code",
    "country",
)
SETTABLE_FIELDS = ("first_name", "last_name", "email", *OPTIONAL_FIELDS, "is_active")


def _clean(name: str, value: object) -> object:
    if name in OPTIONAL_FIELDS and value == "":
        return None
    return value


def to_list_item(contact: Contact) -> ContactListItem:
    return ContactListItem(
        id=contact.id,
        first_name=contact.first_name,
        last_name=contact.last_name,
        email=contact.email,
        company=contact.company,
        is_active=contact.is_active,
        created_at=contact.created_at,
    )


def to_detail(contact: Contact) -> ContactDetail:
    return ContactDetail(
        id=contact.id,
        first_name=contact.first_name,
        last_name=contact.last_name,
        email=contact.email,
        phone=contact.phone,
        company=contact.company,
        address_line1=contact.address_line1,
        address_line2=contact.address_line2,
        city=contact.city,
        state=contact.state,
        postal_code=contact.postal_code,
        country=contact.country,
        is_active=contact.is_active,
        created_at=contact.created_at,
        updated_at=contact.updated_at,
    )


def create_fields(payload: CreateContactData) -> dict[str, object]:
    """Settable fields of a new contact. id and timestamps are assigned by the caller."""
    return {name: _clean(name, getattr(payload, name)) for name in SETTABLE_FIELDS}


def apply_partial_update(existing: Contact, payload: UpdateContactData) -> Contact:
    """Return a new Contact with only the supplied fields replaced.

    id, created_at and updated_at are carried over unchanged.
    """
    changes = {
        name: _clean(name, value)
        for name, value in payload.supplied().items()
        if name in SETTABLE_FIELDS
    }
    return dataclasses.replace(existing, **changes)
