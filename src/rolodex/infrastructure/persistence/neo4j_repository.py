"""Neo4j implementation of ContactRepository.
Graph: one (:Contact) node per contact; timestamps stored as ISO-8601 strings.
Uniqueness of id and email is enforced by constraints (see ensure_contact_constraints),
so the email check is atomic with the write even across processes.
"""

import logging
from collections.abc import Iterator
from contextlib import contextmanager
from datetime import datetime

from neo4j.exceptions import ConstraintError, DriverError, Neo4jError

from rolodex.application.errors import (
    ContactNotFoundError,
    DuplicateContactError,
    DuplicateEmailError,
    StoreError,
)
from rolodex.domain import Contact

logger = logging.getLogger(__name__)

_CONSTRAINT_QUERIES = (
    """
    CREATE CONSTRAINT contact_id_unique IF NOT EXISTS
    FOR (c:Contact) REQUIRE c.id IS UNIQUE
    """,
    """
    CREATE CONSTRAINT contact_email_unique IF NOT EXISTS
    FOR (c:Contact) REQUIRE c.email IS UNIQUE
    """,
)

_PROPERTY_NAMES = (
    "first_name",
    "last_name",
    "email",
    "phone",
    "company",
    "address_line1",
    "address_line2",
    "city",
    "state",
    "postal_code",
    "country",
    "is_active",
)


def _datetime_to_iso(dt: datetime) -> str:
    return dt.isoformat()


def _iso_to_datetime(s: str) -> datetime:
    return datetime.fromisoformat(s.replace("Z", "+00:00"))


def ensure_contact_constraints(driver) -> None:
    """Create unique constraints on Contact(id) and Contact(email) if missing."""
    try:
        with driver.session() as session:
            for query in _CONSTRAINT_QUERIES:
                session.run(query).consume()
    except (DriverError, Neo4jError) as e:
        raise StoreError(f"Could not create contact constraints: {e}") from e


def _contact_properties(contact: Contact) -> dict:
    props = {name: getattr(contact, name) for name in _PROPERTY_NAMES}
    props["updated_at"] = _datetime_to_iso(contact.updated_at)
    return props


class Neo4jContactRepository:
    """Stores contacts as (:Contact) nodes. Driver failures surface as StoreError."""

    def __init__(self, driver: object) -> None:
        self._driver = driver

    @contextmanager
    def _session(self) -> Iterator:
        try:
            with self._driver.session() as session:
                yield session
        except ConstraintError:
            raise
        except (DriverError, Neo4jError) as e:
            raise StoreError(f"Neo4j request failed: {e}") from e

    def get(self, contact_id: str) -> Contact | None:
        with self._session() as session:
            record = session.run(
                "MATCH (c:Contact {id: $id}) RETURN c",
                id=contact_id,
            ).single()
        if not record:
            return None
        return _record_to_contact(record)

    def list_all(self) -> list[Contact]:
        with self._session() as session:
            result = session.run("MATCH (c:Contact) RETURN c ORDER BY c.created_at")
            return [_record_to_contact(rec) for rec in result]

    def insert(self, contact: Contact) -> None:
        props = _contact_properties(contact)
        props["id"] = contact.id
        props["created_at"] = _datetime_to_iso(contact.created_at)
        with self._session() as session:
            try:
                session.run("CREATE (c:Contact $props)", props=props).consume()
            except ConstraintError as e:
                existing = session.run(
                    "MATCH (c:Contact {id: $id}) RETURN c.id AS id",
                    id=contact.id,
                ).single()
                if existing:
                    raise DuplicateContactError(contact.id) from e
                raise DuplicateEmailError(contact.email) from e
        logger.debug("Inserted contact %s", contact.id)

    def update(self, contact: Contact) -> None:
        with self._session() as session:
            try:
                record = session.run(
                    """
                    MATCH (c:Contact {id: $id})
                    SET c += $props
                    RETURN c.id AS id
                    """,
                    id=contact.id,
                    props=_contact_properties(contact),
                ).single()
            except ConstraintError as e:
                raise DuplicateEmailError(contact.email) from e
        if not record:
            raise ContactNotFoundError(contact.id)
        logger.debug("Updated contact %s", contact.id)

    def delete(self, contact_id: str) -> None:
        with self._session() as session:
            record = session.run(
                """
                MATCH (c:Contact {id: $id})
                DETACH DELETE c
                RETURN count(*) AS deleted
                """,
                id=contact_id,
            ).single()
        if not record or record["deleted"] == 0:
            raise ContactNotFoundError(contact_id)
        logger.debug("Deleted contact %s", contact_id)


def _record_to_contact(record) -> Contact:
    c = record["c"]
    return Contact(
        id=c["id"],
        first_name=c.get("first_name") or "",
        last_name=c.get("last_name") or "",
        email=c.get("email") or "",
        phone=c.get("phone"),
        company=c.get("company"),
        address_line1=c.get("address_line1"),
        address_line2=c.get("address_line2"),
        city=c.get("city"),
        state=c.get("state"),
        postal_code=c.get("postal_code"),
        country=c.get("country"),
        is_active=bool(c.get("is_active", True)),
        created_at=_iso_to_datetime(c["created_at"]),
        updated_at=_iso_to_datetime(c["updated_at"]),
    )
