"""Error taxonomy shared by every layer.

A single exception type carries a discriminant so the HTTP boundary can map
each kind to a status code from one table instead of an isinstance chain.
"""

from enum import Enum


class ErrorKind(str, Enum):
    INVALID_CONTACT = "invalid_contact"
    DUPLICATE_CONTACT = "duplicate_contact"
    CONTACT_NOT_FOUND = "contact_not_found"
    INVALID_ENUM = "invalid_enum"
    PAGER_OUT_OF_RANGE = "pager_out_of_range"
    PAGER_LIMIT_EXCEEDED = "pager_limit_exceeded"


_DEFAULT_MESSAGES = {
    ErrorKind.INVALID_CONTACT: "Invalid contact",
    ErrorKind.DUPLICATE_CONTACT: "A contact with this email already exists",
    ErrorKind.CONTACT_NOT_FOUND: "Contact not found",
    ErrorKind.INVALID_ENUM: "Invalid value",
    ErrorKind.PAGER_OUT_OF_RANGE: "Requested page is out of range",
    ErrorKind.PAGER_LIMIT_EXCEEDED: "Page size must be between 1 and 20",
}


class ContactError(Exception):
    """Raised for every recognised failure. kind decides the response status."""

    def __init__(self, kind: ErrorKind, message: str | None = None) -> None:
        self.kind = kind
        self.message = message or _DEFAULT_MESSAGES[kind]
        super().__init__(self.message)

    def __repr__(self) -> str:
        return f"ContactError({self.kind.name}, {self.message!r})"
