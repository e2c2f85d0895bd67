"""Contact validation and construction.

Request bodies arrive as plain JSON-decoded values. ContactModel checks them
with pydantic and builds domain Contact objects from the result.
"""

import re
from datetime import date

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from contactbook.domain import Contact, ContactError, ErrorKind

NAME_MAX_LENGTH = 100
EMAIL_MAX_LENGTH = 254
_EMAIL_PATTERN = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")


def _check_email(value: str | None) -> str | None:
    if value is not None and not _EMAIL_PATTERN.match(value):
        raise ValueError("must be a valid email address")
    return value


def _check_birthday(value: date | None) -> date | None:
    if value is not None and value > date.today():
        raise ValueError("cannot be in the future")
    return value


class ContactFields(BaseModel):
    """Full contact body, as required on creation."""

    model_config = ConfigDict(extra="forbid", str_strip_whitespace=True)

    fname: str = Field(min_length=1, max_length=NAME_MAX_LENGTH)
    lname: str = Field(min_length=1, max_length=NAME_MAX_LENGTH)
    email: str = Field(min_length=3, max_length=EMAIL_MAX_LENGTH)
    birthday: date

    check_email = field_validator("email")(_check_email)
    check_birthday = field_validator("birthday")(_check_birthday)


class ContactPatch(BaseModel):
    """Partial contact body for updates.

    Defaults are not validated, so an omitted field stays unset while an
    explicit null is rejected like any other bad value.
    """

    model_config = ConfigDict(extra="forbid", str_strip_whitespace=True)

    fname: str = Field(default=None, min_length=1, max_length=NAME_MAX_LENGTH)
    lname: str = Field(default=None, min_length=1, max_length=NAME_MAX_LENGTH)
    email: str = Field(default=None, min_length=3, max_length=EMAIL_MAX_LENGTH)
    birthday: date = None

    check_email = field_validator("email")(_check_email)
    check_birthday = field_validator("birthday")(_check_birthday)


def _describe(exc: ValidationError) -> str:
    parts = []
    for err in exc.errors():
        loc = ".".join(str(p) for p in err["loc"])
        msg = err["msg"].removeprefix("Value error, ")
        parts.append(f"{loc}: {msg}" if loc else msg)
    return "Invalid contact: " + "; ".join(parts)


class ContactModel:
    """Validates candidate bodies and builds Contact records from them."""

    @staticmethod
    def validate(candidate: object, *, partial: bool = False) -> dict:
        """Return the cleaned fields of candidate, or raise an INVALID_CONTACT error.

        With partial=True only the fields present in candidate are checked and
        returned; nothing is required.
        """
        if not isinstance(candidate, dict):
            raise ContactError(ErrorKind.INVALID_CONTACT, "Contact must be a JSON object")
        model = ContactPatch if partial else ContactFields
        try:
            parsed = model.model_validate(candidate)
        except ValidationError as e:
            raise ContactError(ErrorKind.INVALID_CONTACT, _describe(e)) from e
        return parsed.model_dump(exclude_unset=True)

    @staticmethod
    def create(candidate: object, contact_id: int) -> Contact:
        """Validate candidate and build the stored record with the given id."""
        fields = ContactModel.validate(candidate)
        return Contact(id=contact_id, **fields)
