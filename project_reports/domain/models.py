"""
Domain Models
=============

Plain dataclasses shared by the catalog, the contact store and the web layer.
"""

from dataclasses import dataclass, asdict
from datetime import datetime, timezone

# Column order of the contacts sheet
CONTACT_FIELDS = ("name", "email", "mobile", "date")


def utc_timestamp() -> str:
    """Current time as ISO-8601 UTC with millisecond precision, e.g. 2024-05-01T09:30:00.123Z."""
    now = datetime.now(timezone.utc)
    return now.isoformat(timespec="milliseconds").replace("+00:00", "Z")


@dataclass(frozen=True)
class Report:
    """A PDF report found in a category directory."""
    name: str
    file: str

    def to_dict(self) -> dict:
        return asdict(self)


@dataclass(frozen=True)
class ContactRecord:
    """One contact form submission as persisted in the spreadsheet."""
    name: str
    email: str
    mobile: str
    date: str

    @classmethod
    def create(cls, name: str, email: str, mobile: str) -> "ContactRecord":
        return cls(name=name, email=email, mobile=mobile, date=utc_timestamp())

    def to_row(self) -> dict:
        return {key: getattr(self, key) for key in CONTACT_FIELDS}
