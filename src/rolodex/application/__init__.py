"""Application layer: use cases, ports, query engine, validation and mapping. Depends only on domain."""

from rolodex.application.contact_service import ContactService
from rolodex.application.dto import (
    UNSET,
    ContactDeleted,
    ContactDetail,
    ContactListItem,
    ContactNotFound,
    ContactPage,
    CreateContactData,
    Duplicate,
    Invalid,
    QuerySpec,
    UpdateContactData,
)
from rolodex.application.errors import (
    ContactNotFoundError,
    DuplicateContactError,
    DuplicateEmailError,
    StoreError,
)
from rolodex.application.ports import ContactRepository
from rolodex.application.query import QueryResult, run_query

__all__ = [
    "UNSET",
    "ContactDeleted",
    "ContactDetail",
    "ContactListItem",
    "ContactNotFound",
    "ContactNotFoundError",
    "ContactPage",
    "ContactRepository",
    "ContactService",
    "CreateContactData",
    "Duplicate",
    "DuplicateContactError",
    "DuplicateEmailError",
    "Invalid",
    "QueryResult",
    "QuerySpec",
    "StoreError",
    "UpdateContactData",
    "run_query",
]
