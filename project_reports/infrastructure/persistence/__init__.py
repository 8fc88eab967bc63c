from .contact_store import ContactStore, DEFAULT_SHEET_NAME

__all__ = ["ContactStore", "DEFAULT_SHEET_NAME"]
