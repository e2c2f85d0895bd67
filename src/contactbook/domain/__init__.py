"""Domain layer: entities and the error taxonomy. No dependencies on outer layers."""

from contactbook.domain.entities import SORTABLE_FIELDS, Contact
from contactbook.domain.errors import ContactError, ErrorKind

__all__ = ["Contact", "ContactError", "ErrorKind", "SORTABLE_FIELDS"]
