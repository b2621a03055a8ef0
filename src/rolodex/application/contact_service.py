"""Contact CRUD and listing: validate -> map -> persist -> re-map."""

import logging
import threading
import uuid
from collections.abc import Callable
from dataclasses import replace
from datetime import datetime, timedelta

from rolodex.application.dto import (
    ContactDeleted,
    ContactDetail,
    ContactNotFound,
    ContactPage,
    CreateContactData,
    Duplicate,
    Invalid,
    QuerySpec,
    UpdateContactData,
)
from rolodex.application.errors import ContactNotFoundError, DuplicateEmailError
from rolodex.application.mapping import (
    apply_partial_update,
    create_fields,
    to_detail,
    to_list_item,
)
from rolodex.application.ports import ContactRepository
from rolodex.application.query import run_query
from rolodex.application.validation import validate_create, validate_update
from rolodex.domain import Contact, utcnow

logger = logging.getLogger(__name__)

_TICK = timedelta(microseconds=1)


class ContactService:
    """Five operations over a ContactRepository. Holds no contact state of its own.

    Writes are serialised by one lock so an update's read-merge-write cannot interleave
    with another write. Reads take no lock.
    """

    def __init__(
        self,
        repository: ContactRepository,
        *,
        clock: Callable[[], datetime] | None = None,
        id_factory: Callable[[], str] | None = None,
    ) -> None:
        self._repo = repository
        self._clock = clock or utcnow
        self._id_factory = id_factory or (lambda: str(uuid.uuid4()))
        self._write_lock = threading.Lock()

    def list_contacts(self, spec: QuerySpec | None = None) -> ContactPage:
        """Return one page of contacts matching the spec, with the filtered total."""
        spec = spec or QuerySpec()
        result = run_query(self._repo.list_all(), spec)
        return ContactPage(
            items=[to_list_item(c) for c in result.items],
            total=result.total,
            page=spec.page,
            page_size=spec.page_size,
            sort=spec.sort_field,
            direction=spec.sort_direction,
        )

    def get_contact(self, contact_id: str) -> ContactDetail | ContactNotFound:
        contact = self._repo.get(contact_id)
        if contact is None:
            return ContactNotFound(contact_id=contact_id)
        return to_detail(contact)

    def create_contact(
        self, payload: CreateContactData
    ) -> ContactDetail | Invalid | Duplicate:
        """Validate and store a new contact. Duplicate if the email is already in use."""
        errors = validate_create(payload)
        if errors:
            return Invalid(errors=errors)

        now = self._clock()
        contact = Contact(
            id=self._id_factory(),
            created_at=now,
            updated_at=now,
            **create_fields(payload),
        )
        with self._write_lock:
            try:
                self._repo.insert(contact)
            except DuplicateEmailError as e:
                logger.info("Create rejected, email already in use: %s", e.email)
                return Duplicate(email=e.email)
        logger.info("Created contact %s", contact.id)
        return to_detail(contact)

    def update_contact(
        self, contact_id: str, payload: UpdateContactData
    ) -> ContactDetail | ContactNotFound | Invalid | Duplicate:
        """Apply a partial update. Fields not supplied keep their stored values."""
        with self._write_lock:
            existing = self._repo.get(contact_id)
            if existing is None:
                return ContactNotFound(contact_id=contact_id)

            errors = validate_update(payload)
            if errors:
                return Invalid(errors=errors)

            merged = apply_partial_update(existing, payload)
            # updated_at must move forward even if the clock has not.
            updated_at = max(self._clock(), existing.updated_at + _TICK)
            contact = replace(merged, updated_at=updated_at)
            try:
                self._repo.update(contact)
            except DuplicateEmailError as e:
                logger.info("Update of %s rejected, email already in use: %s", contact_id, e.email)
                return Duplicate(email=e.email)
            except ContactNotFoundError:
                return ContactNotFound(contact_id=contact_id)
        logger.info("Updated contact %s", contact_id)
        return to_detail(contact)

    def delete_contact(self, contact_id: str) -> ContactDeleted | ContactNotFound:
        with self._write_lock:
            try:
                self._repo.delete(contact_id)
            except ContactNotFoundError:
                return ContactNotFound(contact_id=contact_id)
        logger.info("Deleted contact %s", contact_id)
        return ContactDeleted(contact_id=contact_id)
