"""Application ports (interfaces). Implemented by infrastructure adapters."""

from typing import Protocol

from contactbook.domain import Contact


class ContactRepository(Protocol):
    """Holds contact records in a stable order."""

    def next_id(self) -> int:
        """Reserve and return a fresh identifier. Identifiers are never reused."""
        ...

    def add(self, contact: Contact) -> None:
        """Append a contact. Its id must not already be stored."""
        ...

    def get_by_id(self, contact_id: int) -> Contact | None:
        """Return the contact with the given id, or None."""
        ...

    def list_all(self) -> list[Contact]:
        """Return all contacts in insertion order."""
        ...

    def find_by_email(self, email: str) -> Contact | None:
        """Return a contact with exactly this email, or None."""
        ...

    def replace(self, contact: Contact) -> bool:
        """Swap in a new version of a stored contact. False if its id is unknown."""
        ...

    def remove(self, contact_id: int) -> bool:
        """Delete a contact. False if its id is unknown."""
        ...
