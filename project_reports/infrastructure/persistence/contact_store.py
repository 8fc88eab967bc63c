"""
Contact Store - Excel-backed Contact Submissions
================================================

Keeps every contact form submission as one row of a single-sheet .xlsx
workbook. The workbook is created on the first submission; every later
submission reads all rows, appends one, and rewrites the whole file.

Writes go to a temporary file next to the workbook which is then moved over
it with os.replace(), so readers see either the old or the new workbook and
never a half-written one. All operations hold one lock, so two submissions
in the same process cannot overwrite each other's row. Separate processes
writing the same file are not coordinated.
"""

import os
import logging
import tempfile
import threading
from pathlib import Path
from typing import Dict, List, Tuple

import pandas as pd

from ...domain import CONTACT_FIELDS, ContactRecord, StoreError

logger = logging.getLogger(__name__)

DEFAULT_SHEET_NAME = "Contacts"


def _store_as_text(worksheet):
    """Keep submitted values like "=1+1" as plain text instead of formulas."""
    for row in worksheet.iter_rows():
        for cell in row:
            if cell.data_type == "f":
                cell.data_type = "s"


class ContactStore:
    """
    Append-only contact list stored in an Excel workbook.

    Usage:
        store = ContactStore("contacts.xlsx")
        record = store.append_contact("Jane Doe", "jane@example.com", "0412345678")
        rows = store.load_contacts()
        # [{"name": "Jane Doe", "email": "jane@example.com", "mobile": "0412345678", "date": "..."}]
    """

    def __init__(self, path, sheet_name: str = DEFAULT_SHEET_NAME):
        self.path = Path(path)
        self.sheet_name = sheet_name
        self._lock = threading.Lock()

    # ── Public API ─────────────────────────────────────────────────

    def append_contact(self, name: str, email: str, mobile: str) -> ContactRecord:
        """
        Append one submission and rewrite the workbook.

        Raises:
            StoreError: the workbook could not be read or written
        """
        with self._lock:
            record = ContactRecord.create(name=name, email=email, mobile=mobile)
            rows, extra_columns = self._read_rows()
            rows.append(record.to_row())
            self._write_rows(rows, extra_columns)

        logger.info(f"Saved contact #{len(rows)} to {self.path}")
        return record

    def load_contacts(self) -> List[Dict[str, str]]:
        """All stored rows as dicts, schema columns first. Empty if no workbook yet."""
        with self._lock:
            rows, _ = self._read_rows()
        return rows

    # ── Internals ──────────────────────────────────────────────────

    def _read_rows(self) -> Tuple[List[Dict[str, str]], List[str]]:
        """
        Read the first sheet as strings.

        Returns:
            Tuple of (rows, legacy columns not part of the contact schema)
        """
        if not self.path.exists():
            logger.info(f"Contacts file not found, creating a new one: {self.path}")
            return [], []

        try:
            # dtype=str keeps mobiles like "0412..." or "+61..." intact
            df = pd.read_excel(self.path, sheet_name=0, dtype=str, engine="openpyxl")
        except Exception as e:
            raise StoreError(f"Failed to read contacts file {self.path}: {e}") from e

        df.columns = [str(col).strip() for col in df.columns]
        df = df.fillna("")

        missing = [col for col in CONTACT_FIELDS if col not in df.columns]
        extra_columns = [col for col in df.columns if col not in CONTACT_FIELDS]

        if missing and len(df):
            logger.warning(f"Contacts file lacks columns {missing}; existing rows get empty values")
        if extra_columns:
            logger.warning(f"Contacts file has legacy columns {extra_columns}; keeping them after {list(CONTACT_FIELDS)}")

        for col in missing:
            df[col] = ""

        df = df[list(CONTACT_FIELDS) + extra_columns]
        return df.to_dict(orient="records"), extra_columns

    def _write_rows(self, rows: List[Dict[str, str]], extra_columns: List[str]):
        """Write all rows to a temp file and atomically move it over the workbook."""
        columns = list(CONTACT_FIELDS) + extra_columns
        df = pd.DataFrame(rows, columns=columns).fillna("")

        tmp_path = None
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp_path = tempfile.mkstemp(
                prefix=f".{self.path.stem}-", suffix=".xlsx", dir=self.path.parent
            )
            os.close(fd)

            with pd.ExcelWriter(tmp_path, engine="openpyxl") as writer:
                df.to_excel(writer, sheet_name=self.sheet_name, index=False)
                _store_as_text(writer.sheets[self.sheet_name])
            os.replace(tmp_path, self.path)
            tmp_path = None
        except Exception as e:
            raise StoreError(f"Failed to write contacts file {self.path}: {e}") from e
        finally:
            if tmp_path is not None and os.path.exists(tmp_path):
                os.remove(tmp_path)
