"""Runtime settings read from the environment (and a .env file at the repo root, if present)."""

import os
from dataclasses import dataclass, field
from pathlib import Path

from dotenv import load_dotenv

STORE_MEMORY = "memory"
STORE_NEO4J = "neo4j"


def load_env_file() -> None:
    """Load .env from repo root or cwd. Existing environment variables win."""
    for path in (
        Path(__file__).resolve().parent.parent.parent / ".env",
        Path.cwd() / ".env",
    ):
        if path.exists():
            load_dotenv(path)
            break


def _env_bool(name: str, default: bool) -> bool:
    raw = os.environ.get(name, "").strip().lower()
    if not raw:
        return default
    return raw in ("1", "true", "yes", "on")


@dataclass(frozen=True)
class Settings:
    store: str = STORE_MEMORY
    neo4j_uri: str = "bolt://localhost:7687"
    neo4j_user: str = "neo4j"
    neo4j_password: str = "password"
    seed_data: bool = True
    seed_count: int = 153
    cors_origins: tuple[str, ...] = field(default_factory=tuple)
    log_level: str = "INFO"

    def __post_init__(self):
        if self.store not in (STORE_MEMORY, STORE_NEO4J):
            raise ValueError(f"Unknown store backend {self.store!r}.")

    @classmethod
    def from_env(cls) -> "Settings":
        load_env_file()
        origins = os.environ.get("ROLODEX_CORS_ORIGINS", "")
        return cls(
            store=os.environ.get("ROLODEX_STORE", STORE_MEMORY).strip().lower(),
            neo4j_uri=os.environ.get("NEO4J_URI", "bolt://localhost:7687").strip(),
            neo4j_user=os.environ.get("NEO4J_USER", "neo4j").strip(),
            neo4j_password=os.environ.get("NEO4J_PASSWORD", "password").strip(),
            seed_data=_env_bool("ROLODEX_SEED", True),
            seed_count=int(os.environ.get("ROLODEX_SEED_COUNT", "153")),
            cors_origins=tuple(o.strip() for o in origins.split(",") if o.strip()),
            log_level=os.environ.get("LOG_LEVEL", "INFO").strip().upper(),
        )
