"""Application ports (interfaces). Implemented by infrastructure adapters."""

from typing import Protocol

from rolodex.domain import Contact


class ContactRepository(Protocol):
    """Persists contacts. Holds no query logic; ordering and filtering live in the query engine."""

    def get(self, contact_id: str) -> Contact | None:
        """Return the contact with the given id, or None."""
        ...

    def list_all(self) -> list[Contact]:
        """Return every stored contact, in no particular order."""
        ...

    def insert(self, contact: Contact) -> None:
        """Store a new contact.

        Raises DuplicateContactError if the id exists and DuplicateEmailError if the
        email is taken. The email check is atomic with the write.
        """
        ...

    def update(self, contact: Contact) -> None:
        """Replace the stored contact with the same id.

        Raises ContactNotFoundError if the id is absent and DuplicateEmailError if the
        new email belongs to another contact.
        """
        ...

    def delete(self, contact_id: str) -> None:
        """Remove a contact. Raises ContactNotFoundError if the id is absent."""
        ...
