"""Exceptions raised by ContactRepository implementations."""


class StoreError(Exception):
    """Underlying storage is unavailable or returned something unusable."""


class ContactNotFoundError(LookupError):
    def __init__(self, contact_id: str) -> None:
        super().__init__(f"Contact {contact_id!r} not found.")
        self.contact_id = contact_id


class DuplicateContactError(ValueError):
    def __init__(self, contact_id: str) -> None:
        super().__init__(f"Contact {contact_id!r} already exists.")
        self.contact_id = contact_id


class DuplicateEmailError(ValueError):
    def __init__(self, email: str) -> None:
        super().__init__(f"A contact with email {email!r} already exists.")
        self.email = email
