from .report_catalog import ReportCatalog, category_sort_key, display_name, encode_uri_component

__all__ = ["ReportCatalog", "category_sort_key", "display_name", "encode_uri_component"]
