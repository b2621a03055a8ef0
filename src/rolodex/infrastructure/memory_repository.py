"""In-memory implementation of ContactRepository (no DB)."""

import logging
import threading

from rolodex.application.errors import (
    ContactNotFoundError,
    DuplicateContactError,
    DuplicateEmailError,
)
from rolodex.domain import Contact

logger = logging.getLogger(__name__)


class InMemoryContactRepository:
    """Stores contacts in memory, indexed by id and by email.
    Every access goes through one lock, so the email check and the write happen together.
    Iteration order is insertion order.
    """

    def __init__(self) -> None:
        self._by_id: dict[str, Contact] = {}
        self._id_by_email: dict[str, str] = {}
        self._lock = threading.RLock()

    def get(self, contact_id: str) -> Contact | None:
        with self._lock:
            return self._by_id.get(contact_id)

    def list_all(self) -> list[Contact]:
        with self._lock:
            return list(self._by_id.values())

    def insert(self, contact: Contact) -> None:
        with self._lock:
            if contact.id in self._by_id:
                raise DuplicateContactError(contact.id)
            if contact.email in self._id_by_email:
                raise DuplicateEmailError(contact.email)
            self._by_id[contact.id] = contact
            self._id_by_email[contact.email] = contact.id
        logger.debug("Inserted contact %s", contact.id)

    def update(self, contact: Contact) -> None:
        with self._lock:
            current = self._by_id.get(contact.id)
            if current is None:
                raise ContactNotFoundError(contact.id)
            owner = self._id_by_email.get(contact.email)
            if owner is not None and owner != contact.id:
                raise DuplicateEmailError(contact.email)
            if current.email != contact.email:
                del self._id_by_email[current.email]
                self._id_by_email[contact.email] = contact.id
            self._by_id[contact.id] = contact
        logger.debug("Updated contact %s", contact.id)

    def delete(self, contact_id: str) -> None:
        with self._lock:
            current = self._by_id.pop(contact_id, None)
            if current is None:
                raise ContactNotFoundError(contact_id)
            self._id_by_email.pop(current.email, None)
        logger.debug("Deleted contact %s", contact_id)

    def __len__(self) -> int:
        with self._lock:
            return len(self._by_id)
