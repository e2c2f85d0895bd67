"""In-memory implementation of ContactRepository (no DB)."""

from collections.abc import Iterable

from contactbook.domain import Contact


class InMemoryContactRepository:
    """Stores contacts in a list. Order preserved by insertion; lookups scan linearly."""

    def __init__(self, contacts: Iterable[Contact] = ()) -> None:
        self._contacts: list[Contact] = []
        self._last_id = 0
        for contact in contacts:
            self.add(contact)

    def _index_of(self, contact_id: int) -> int | None:
        for i, contact in enumerate(self._contacts):
            if contact.id == contact_id:
                return i
        return None

    def next_id(self) -> int:
        self._last_id += 1
        return self._last_id

    def add(self, contact: Contact) -> None:
        if self._index_of(contact.id) is not None:
            raise ValueError(f"Contact id {contact.id} is already stored.")
        self._contacts.append(contact)
        self._last_id = max(self._last_id, contact.id)

    def get_by_id(self, contact_id: int) -> Contact | None:
        i = self._index_of(contact_id)
        return self._contacts[i] if i is not None else None

    def list_all(self) -> list[Contact]:
        return list(self._contacts)

    def find_by_email(self, email: str) -> Contact | None:
        for contact in self._contacts:
            if contact.email == email:
                return contact
        return None

    def replace(self, contact: Contact) -> bool:
        i = self._index_of(contact.id)
        if i is None:
            return False
        self._contacts[i] = contact
        return True

    def remove(self, contact_id: int) -> bool:
        i = self._index_of(contact_id)
        if i is None:
            return False
        del self._contacts[i]
        return True

    def __len__(self) -> int:
        return len(self._contacts)
