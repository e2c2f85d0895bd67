"""Domain entity: Contact."""

from dataclasses import asdict, dataclass, replace
from datetime import date

# Fields a client may sort and filter on. Order matters only for display.
SORTABLE_FIELDS = ("fname", "lname", "email", "birthday")


@dataclass(frozen=True)
class Contact:
    """
    A person in the address book.
    The id is assigned by the store and never changes afterwards.
    """

    id: int
    fname: str
    lname: str
    email: str
    birthday: date

    def __post_init__(self):
        if self.id < 1:
            raise ValueError("Contact id must be a positive integer.")
        for name in ("fname", "lname", "email"):
            if not getattr(self, name).strip():
                raise ValueError(f"Contact {name} must be non-empty.")

    def merged(self, changes: dict) -> "Contact":
        """Return a copy with the given fields overlaid. id is never overwritten."""
        changes = {k: v for k, v in changes.items() if k != "id"}
        return replace(self, **changes)

    def to_dict(self) -> dict:
        data = asdict(self)
        data["birthday"] = self.birthday.isoformat()
        return data
