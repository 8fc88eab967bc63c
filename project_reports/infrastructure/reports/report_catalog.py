"""
Report Catalog - Category and PDF Listing
=========================================

Reads the reports directory tree under the public root:

    public/ProjectReports2/
        Annual/
            Annual_Report_2023.pdf
        Audits/
            ...

Each immediate subdirectory is a category, each PDF inside it a report.
Nothing is cached; every call reads the filesystem.
"""

import os
import logging
import unicodedata
from pathlib import Path
from typing import List
from urllib.parse import quote

from ...domain import Report, ReportsUnavailableError, ValidationError

logger = logging.getLogger(__name__)

PDF_SUFFIX = ".pdf"

# Characters encodeURIComponent leaves untouched besides alphanumerics and "-_.~"
_URI_COMPONENT_SAFE = "!*'()"


def category_sort_key(name: str):
    """
    Collation key close to a locale compare: accents and case are ignored
    first, then unaccented before accented, then lowercase before uppercase.
    ["Zeta", "Éclair", "alpha"] sorts as ["alpha", "Éclair", "Zeta"].
    """
    decomposed = unicodedata.normalize("NFKD", name)
    base = "".join(ch for ch in decomposed if not unicodedata.combining(ch))
    return (base.casefold(), decomposed.casefold(), name.swapcase())


def encode_uri_component(value: str) -> str:
    return quote(value, safe=_URI_COMPONENT_SAFE)


def display_name(filename: str) -> str:
    """'Annual_Report_2023.PDF' -> 'Annual Report 2023'"""
    if filename.lower().endswith(PDF_SUFFIX):
        filename = filename[:-len(PDF_SUFFIX)]
    return filename.replace("_", " ")


class ReportCatalog:
    """
    Lists report categories and the PDFs within them.

    Usage:
        catalog = ReportCatalog(Path("public/ProjectReports2"), "/ProjectReports2")
        catalog.list_categories()      # ["Annual", "Audits"]
        catalog.list_reports("Annual") # [Report(name="Annual Report 2023", file="/ProjectReports2/Annual/...")]
    """

    def __init__(self, reports_dir: Path, url_prefix: str = "/ProjectReports2"):
        self.reports_dir = Path(reports_dir)
        self.url_prefix = "/" + url_prefix.strip("/")

    def list_categories(self) -> List[str]:
        """Names of the immediate subdirectories of the reports root, sorted."""
        try:
            with os.scandir(self.reports_dir) as entries:
                names = [entry.name for entry in entries if entry.is_dir()]
        except OSError as e:
            raise ReportsUnavailableError(
                f"Cannot read reports directory {self.reports_dir}: {e}"
            ) from e

        return sorted(names, key=category_sort_key)

    def list_reports(self, category: str) -> List[Report]:
        """PDF reports in one category, in directory enumeration order."""
        category_dir = self.resolve_category(category)

        try:
            with os.scandir(category_dir) as entries:
                filenames = [
                    entry.name for entry in entries
                    if entry.is_file() and entry.name.lower().endswith(PDF_SUFFIX)
                ]
        except OSError as e:
            raise ReportsUnavailableError(
                f"Cannot read category directory {category_dir}: {e}"
            ) from e

        logger.debug(f"Found {len(filenames)} reports in category '{category}'")
        return [self._to_report(category, filename) for filename in filenames]

    def resolve_category(self, category: str) -> Path:
        """
        Map a category name to its directory, refusing anything that is not a
        direct child of the reports root.

        Raises:
            ValidationError: category is empty or would escape the root
        """
        if category is None or not category.strip():
            raise ValidationError("Category is required.")

        if "\x00" in category or "/" in category or "\\" in category:
            raise ValidationError(f"Invalid category: {category!r}")

        root = Path(os.path.normpath(os.path.abspath(self.reports_dir)))
        candidate = Path(os.path.normpath(root / category))
        if candidate.parent != root or candidate == root:
            raise ValidationError(f"Invalid category: {category!r}")

        return candidate

    def _to_report(self, category: str, filename: str) -> Report:
        return Report(
            name=display_name(filename),
            file=f"{self.url_prefix}/{encode_uri_component(category)}/{encode_uri_component(filename)}",
        )
