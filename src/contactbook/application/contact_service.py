"""Contact CRUD and the list query pipeline (filter -> sort -> paginate)."""

import logging

from contactbook.application.contact_model import ContactModel
from contactbook.application.dto import ContactPage, ListQuery
from contactbook.application.ports import ContactRepository
from contactbook.application.query import (
    MAX_PAGE_SIZE,
    SORT_DIRECTIONS,
    Pager,
    filter_contacts,
    sort_contacts,
)
from contactbook.domain import SORTABLE_FIELDS, Contact, ContactError, ErrorKind

logger = logging.getLogger(__name__)


def _require_member(value: str, allowed: tuple[str, ...], message: str) -> None:
    if value not in allowed:
        raise ContactError(ErrorKind.INVALID_ENUM, message)


class ContactService:
    """Use cases over one repository. Every failure is raised as ContactError."""

    def __init__(self, repository: ContactRepository) -> None:
        self._repo = repository

    def list_contacts(self, query: ListQuery) -> ContactPage:
        contacts = self._repo.list_all()
        if query.has_filter:
            contacts = filter_contacts(
                contacts, query.filter_by, query.filter_operator, query.filter_value
            )

        _require_member(query.sort, SORTABLE_FIELDS, "Invalid sort field")
        _require_member(query.direction, SORT_DIRECTIONS, "Invalid sort direction")
        contacts = sort_contacts(contacts, query.sort, query.direction)

        if query.size > MAX_PAGE_SIZE:
            raise ContactError(ErrorKind.PAGER_LIMIT_EXCEEDED)
        pager = Pager(contacts, query.page, query.size)
        return ContactPage(
            contacts=pager.results(),
            page=pager.page,
            size=pager.size,
            total_pages=pager.total(),
            total_count=pager.count,
            next_page=pager.next(),
            prev_page=pager.prev(),
        )

    def create_contact(self, candidate: object) -> Contact:
        """Validate, reject duplicate emails, then store. Returns the stored record."""
        fields = ContactModel.validate(candidate)
        if self._repo.find_by_email(fields["email"]) is not None:
            raise ContactError(ErrorKind.DUPLICATE_CONTACT)
        contact = ContactModel.create(fields, self._repo.next_id())
        self._repo.add(contact)
        logger.info("Created contact %s", contact.id)
        return contact

    def get_contact(self, contact_id: int | None) -> Contact:
        """contact_id None stands for an unparseable id and is simply not found."""
        contact = self._repo.get_by_id(contact_id) if contact_id is not None else None
        if contact is None:
            raise ContactError(ErrorKind.CONTACT_NOT_FOUND)
        return contact

    def update_contact(self, contact_id: int | None, changes: object) -> Contact:
        """Overlay the supplied fields onto the stored record.

        The merged record is not re-validated as a whole and email uniqueness
        is not re-checked. An id in the body is ignored.
        """
        if isinstance(changes, dict):
            changes = {k: v for k, v in changes.items() if k != "id"}
        fields = ContactModel.validate(changes, partial=True)
        updated = self.get_contact(contact_id).merged(fields)
        self._repo.replace(updated)
        logger.info("Updated contact %s (%s)", updated.id, ", ".join(sorted(fields)) or "no fields")
        return updated

    def delete_contact(self, contact_id: int | None) -> None:
        contact = self.get_contact(contact_id)
        self._repo.remove(contact.id)
        logger.info("Deleted contact %s", contact.id)
