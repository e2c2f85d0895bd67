"""Load initial contacts from a JSON file.

The file holds a JSON array of contact objects. Records may carry an "id";
those without one are numbered after the highest id seen so far.
"""

import json
import logging
from pathlib import Path

from contactbook.application.contact_model import ContactModel
from contactbook.domain import Contact, ContactError

logger = logging.getLogger(__name__)


def load_seed_contacts(path: str | Path) -> list[Contact]:
    """Parse and validate the seed file. Raises ValueError on malformed content."""
    path = Path(path)
    records = json.loads(path.read_text(encoding="utf-8"))
    if not isinstance(records, list):
        raise ValueError(f"{path}: seed file must contain a JSON array")

    contacts: list[Contact] = []
    seen_ids: set[int] = set()
    seen_emails: set[str] = set()
    last_id = max(
        (r["id"] for r in records if isinstance(r, dict) and type(r.get("id")) is int),
        default=0,
    )
    for n, record in enumerate(records):
        if not isinstance(record, dict):
            raise ValueError(f"{path}: record {n} is not an object")
        fields = dict(record)
        contact_id = fields.pop("id", None)
        if contact_id is None:
            last_id += 1
            contact_id = last_id
        if type(contact_id) is not int or contact_id < 1 or contact_id in seen_ids:
            raise ValueError(f"{path}: record {n} has an invalid or repeated id")
        try:
            contact = ContactModel.create(fields, contact_id)
        except ContactError as e:
            raise ValueError(f"{path}: record {n}: {e.message}") from e
        if contact.email in seen_emails:
            raise ValueError(f"{path}: record {n} repeats email {contact.email}")
        seen_ids.add(contact.id)
        seen_emails.add(contact.email)
        contacts.append(contact)

    logger.info("Loaded %d seed contacts from %s", len(contacts), path)
    return contacts
