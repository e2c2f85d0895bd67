"""Infrastructure layer: concrete implementations of application ports."""

from contactbook.infrastructure.memory_repository import InMemoryContactRepository
from contactbook.infrastructure.seed import load_seed_contacts

__all__ = ["InMemoryContactRepository", "load_seed_contacts"]
