"""Deterministic demo data for an empty store."""

import logging
import random
import uuid
from collections.abc import Callable
from datetime import datetime, timedelta

from rolodex.application.ports import ContactRepository
from rolodex.domain import Contact, utcnow

logger = logging.getLogger(__name__)

DEFAULT_SEED_COUNT = 153
DEFAULT_SEED = 42

FIRST_NAMES = ("John", "Jane", "Michael", "Sarah", "David", "Emily", "Robert", "Lisa", "James", "Mary")
LAST_NAMES = ("Smith", "Johnson", "Williams", "Brown", "Jones", "Garcia", "Miller", "Davis", "Rodriguez", "Martinez")
COMPANIES = (
    "Tech Corp",
    "Digital Solutions",
    "Innovation Inc",
    "Global Systems",
    "Future Technologies",
    "Smart Solutions",
    "Advanced Systems",
    "Modern Tech",
    "Digital Innovations",
    "Tech Solutions",
)
# (city, state) pairs.
LOCATIONS = (
    ("New York", "NY"),
    ("Los Angeles", "CA"),
    ("Chicago", "IL"),
    ("Houston", "TX"),
    ("Phoenix", "AZ"),
    ("Philadelphia", "PA"),
    ("San Antonio", "TX"),
    ("San Diego", "CA"),
    ("Dallas", "TX"),
    ("San Jose", "CA"),
)


def build_seed_contacts(
    count: int = DEFAULT_SEED_COUNT,
    *,
    seed: int = DEFAULT_SEED,
    now: datetime | None = None,
) -> list[Contact]:
    """Return count contacts generated from a fixed-seed RNG. Same seed, same contacts."""
    rng = random.Random(seed)
    now = now or utcnow()
    contacts = []
    for i in range(1, count + 1):
        first_name = rng.choice(FIRST_NAMES)
        last_name = rng.choice(LAST_NAMES)
        city, state = rng.choice(LOCATIONS)
        created_at = now - timedelta(days=rng.randint(1, 364))
        updated_at = min(now, created_at + timedelta(days=rng.randint(0, 29)))
        contacts.append(
            Contact(
                id=str(uuid.UUID(int=rng.getrandbits(128), version=4)),
                first_name=first_name,
                last_name=last_name,
                email=f"{first_name.lower()}.{last_name.lower()}{i}@example.com",
                phone=f"555-{rng.randint(100, 999)}-{rng.randint(1000, 9999)}",
                company=rng.choice(COMPANIES),
                address_line1=f"{rng.randint(100, 999)} Main St",
                address_line2=f"Apt {rng.randint(1, 998)}" if rng.random() < 0.5 else None,
                city=city,
                state=state,
                postal_code=str(rng.randint(10000, 99999)),
                country="USA",
                is_active=rng.randint(0, 9) > 1,
                created_at=created_at,
                updated_at=updated_at,
            )
        )
    return contacts


def seed_contacts(
    repository: ContactRepository,
    *,
    count: int = DEFAULT_SEED_COUNT,
    seed: int = DEFAULT_SEED,
    clock: Callable[[], datetime] | None = None,
) -> int:
    """Insert demo contacts if the store is empty. Returns how many were inserted."""
    if repository.list_all():
        logger.info("Store already has contacts; skipping seed")
        return 0
    now = (clock or utcnow)()
    contacts = build_seed_contacts(count, seed=seed, now=now)
    for contact in contacts:
        repository.insert(contact)
    logger.info("Seeded %d contacts", len(contacts))
    return len(contacts)
