"""Infrastructure layer: concrete implementations of application ports."""

from rolodex.infrastructure.memory_repository import InMemoryContactRepository
from rolodex.infrastructure.persistence.neo4j_repository import (
    Neo4jContactRepository,
    ensure_contact_constraints,
)
from rolodex.infrastructure.seed import build_seed_contacts, seed_contacts

__all__ = [
    "InMemoryContactRepository",
    "Neo4jContactRepository",
    "build_seed_contacts",
    "ensure_contact_constraints",
    "seed_contacts",
]
