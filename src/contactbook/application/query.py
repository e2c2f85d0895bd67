"""Filtering, sorting and pagination over contact sequences."""

import math
import operator
from collections.abc import Callable, Sequence
from datetime import date

from contactbook.domain import SORTABLE_FIELDS, Contact, ContactError, ErrorKind

SORT_DIRECTIONS = ("asc", "desc")
DEFAULT_SORT_FIELD = "fname"
DEFAULT_SORT_DIRECTION = "asc"
DEFAULT_PAGE = 1
DEFAULT_PAGE_SIZE = 10
MAX_PAGE_SIZE = 20

_OPERATORS: dict[str, Callable[[object, object], bool]] = {
    "eq": operator.eq,
    "ne": operator.ne,
    "gt": operator.gt,
    "gte": operator.ge,
    "lt": operator.lt,
    "lte": operator.le,
    "contains": lambda field_value, needle: needle in field_value,
}

FILTER_OPERATORS = tuple(_OPERATORS)


def _field_key(contact: Contact, field: str):
    value = getattr(contact, field)
    if isinstance(value, str):
        return value.casefold()
    return value


def _filter_operand(field: str, raw: str):
    if field != "birthday":
        return raw.casefold()
    try:
        return date.fromisoformat(raw.strip())
    except ValueError as e:
        raise ContactError(
            ErrorKind.INVALID_ENUM, "Invalid filter value: birthday must be YYYY-MM-DD"
        ) from e


def filter_contacts(
    contacts: Sequence[Contact], field: str, op: str, value: str
) -> list[Contact]:
    """Keep contacts whose field compares true against value with op.

    Text fields compare case-insensitively; birthday compares as a date.
    """
    if field not in SORTABLE_FIELDS:
        raise ContactError(ErrorKind.INVALID_ENUM, "Invalid filter field")
    compare = _OPERATORS.get(op)
    if compare is None:
        raise ContactError(ErrorKind.INVALID_ENUM, "Invalid filter operator")
    if op == "contains" and field == "birthday":
        raise ContactError(
            ErrorKind.INVALID_ENUM, "Invalid filter operator for birthday"
        )
    operand = _filter_operand(field, value)
    return [c for c in contacts if compare(_field_key(c, field), operand)]


def sort_contacts(
    contacts: Sequence[Contact], field: str, direction: str
) -> list[Contact]:
    """Stable sort by field. Equal keys keep their input order in both directions."""
    return sorted(
        contacts,
        key=lambda c: _field_key(c, field),
        reverse=direction == "desc",
    )


class Pager:
    """One page of a sequence plus page-count and neighbour indicators.

    An empty sequence still has a single, empty page.
    """

    def __init__(
        self,
        items: Sequence[Contact],
        page: int = DEFAULT_PAGE,
        size: int = DEFAULT_PAGE_SIZE,
    ) -> None:
        if size < 1 or size > MAX_PAGE_SIZE:
            raise ContactError(ErrorKind.PAGER_LIMIT_EXCEEDED)
        self._items = list(items)
        self.page = page
        self.size = size
        self.count = len(self._items)
        self._pages = max(1, math.ceil(self.count / size))
        if page < 1 or page > self._pages:
            raise ContactError(
                ErrorKind.PAGER_OUT_OF_RANGE,
                f"Page {page} is out of range (1-{self._pages})",
            )

    def total(self) -> int:
        return self._pages

    def next(self) -> int | None:
        return self.page + 1 if self.page < self._pages else None

    def prev(self) -> int | None:
        return self.page - 1 if self.page > 1 else None

    def results(self) -> list[Contact]:
        start = (self.page - 1) * self.size
        return self._items[start : start + self.size]
