"""Input and result types for the contact list query."""

from dataclasses import dataclass

from contactbook.application.query import (
    DEFAULT_PAGE,
    DEFAULT_PAGE_SIZE,
    DEFAULT_SORT_DIRECTION,
    DEFAULT_SORT_FIELD,
)
from contactbook.domain import Contact


@dataclass(frozen=True)
class ListQuery:
    """Parameters of GET /contacts. The filter applies only when all three parts are set."""

    filter_by: str | None = None
    filter_operator: str | None = None
    filter_value: str | None = None
    sort: str = DEFAULT_SORT_FIELD
    direction: str = DEFAULT_SORT_DIRECTION
    page: int = DEFAULT_PAGE
    size: int = DEFAULT_PAGE_SIZE

    @property
    def has_filter(self) -> bool:
        return bool(self.filter_by and self.filter_operator and self.filter_value)


@dataclass(frozen=True)
class ContactPage:
    """One page of contacts and the pager indicators that go with it."""

    contacts: list[Contact]
    page: int
    size: int
    total_pages: int
    total_count: int
    next_page: int | None
    prev_page: int | None
