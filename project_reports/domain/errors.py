"""
Domain Errors
=============

Every failure the handler layer knows how to map to an HTTP status:

- ValidationError          -> 400 (missing, blank or unsafe input)
- NotFoundError            -> 500 (filesystem access failure)
- StoreError               -> 500 (spreadsheet read/parse/write failure)
"""


class PortalError(Exception):
    """Base class for all project reports portal errors."""


class ValidationError(PortalError):
    """Required input is missing, blank, or not acceptable."""


class NotFoundError(PortalError):
    """A directory the portal needs could not be read."""


class ReportsUnavailableError(NotFoundError):
    """The reports root or a category directory is missing or unreadable."""


class StoreError(PortalError):
    """The contacts spreadsheet could not be read or written."""
