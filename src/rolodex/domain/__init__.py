"""Domain layer: the Contact entity. No dependencies on outer layers."""

from rolodex.domain.entities import Contact, utcnow

__all__ = ["Contact", "utcnow"]
