"""
Rolodex core: clean-architecture layout.

- domain: the Contact entity. No outer dependencies.
- application: use cases (ContactService), ports (ContactRepository), query engine,
  validation, mapping, DTOs.
- infrastructure: adapters (InMemoryContactRepository, Neo4jContactRepository) and seeding.
"""

from rolodex.application import (
    ContactDeleted,
    ContactDetail,
    ContactListItem,
    ContactNotFound,
    ContactPage,
    ContactRepository,
    ContactService,
    CreateContactData,
    Duplicate,
    Invalid,
    QuerySpec,
    StoreError,
    UpdateContactData,
)
from rolodex.domain import Contact
from rolodex.infrastructure import InMemoryContactRepository, Neo4jContactRepository

__all__ = [
    "Contact",
    "ContactDeleted",
    "ContactDetail",
    "ContactListItem",
    "ContactNotFound",
    "ContactPage",
    "ContactRepository",
    "ContactService",
    "CreateContactData",
    "Duplicate",
    "InMemoryContactRepository",
    "Invalid",
    "Neo4jContactRepository",
    "QuerySpec",
    "StoreError",
    "UpdateContactData",
]
