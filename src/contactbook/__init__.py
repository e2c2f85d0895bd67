"""
Contactbook core: clean-architecture layout.

- domain: the Contact entity and the error taxonomy. No outer dependencies.
- application: use cases (ContactService), ports (ContactRepository), the
  contact model and the filter/sort/page collaborators.
- infrastructure: adapters (InMemoryContactRepository, seed loading).
"""

from contactbook.application import (
    ContactModel,
    ContactPage,
    ContactRepository,
    ContactService,
    ListQuery,
    Pager,
    filter_contacts,
    sort_contacts,
)
from contactbook.domain import Contact, ContactError, ErrorKind
from contactbook.infrastructure import InMemoryContactRepository, load_seed_contacts

__all__ = [
    "Contact",
    "ContactError",
    "ContactModel",
    "ContactPage",
    "ContactRepository",
    "ContactService",
    "ErrorKind",
    "InMemoryContactRepository",
    "ListQuery",
    "Pager",
    "filter_contacts",
    "load_seed_contacts",
    "sort_contacts",
]
