"""Application layer: use cases, ports, DTOs and the query collaborators. Depends only on domain."""

from contactbook.application.contact_model import ContactModel
from contactbook.application.contact_service import ContactService
from contactbook.application.dto import ContactPage, ListQuery
from contactbook.application.ports import ContactRepository
from contactbook.application.query import (
    DEFAULT_PAGE,
    DEFAULT_PAGE_SIZE,
    DEFAULT_SORT_DIRECTION,
    DEFAULT_SORT_FIELD,
    FILTER_OPERATORS,
    MAX_PAGE_SIZE,
    SORT_DIRECTIONS,
    Pager,
    filter_contacts,
    sort_contacts,
)

__all__ = [
    "ContactModel",
    "ContactPage",
    "ContactRepository",
    "ContactService",
    "DEFAULT_PAGE",
    "DEFAULT_PAGE_SIZE",
    "DEFAULT_SORT_DIRECTION",
    "DEFAULT_SORT_FIELD",
    "FILTER_OPERATORS",
    "ListQuery",
    "MAX_PAGE_SIZE",
    "Pager",
    "SORT_DIRECTIONS",
    "filter_contacts",
    "sort_contacts",
]
