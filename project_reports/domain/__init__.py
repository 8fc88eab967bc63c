# Domain Layer
# ============
# Pure data types and the error taxonomy. No filesystem or HTTP code here.
from .errors import (
    PortalError,
    ValidationError,
    NotFoundError,
    ReportsUnavailableError,
    StoreError,
)
from .models import CONTACT_FIELDS, ContactRecord, Report, utc_timestamp

__all__ = [
    "PortalError",
    "ValidationError",
    "NotFoundError",
    "ReportsUnavailableError",
    "StoreError",
    "CONTACT_FIELDS",
    "ContactRecord",
    "Report",
    "utc_timestamp",
]
