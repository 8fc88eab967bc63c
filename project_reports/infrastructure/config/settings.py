"""
Settings Module - Centralized Configuration Management
=======================================================

- All configuration is loaded from environment variables (.env supported)
- Settings are an immutable dataclass
- Paths are resolved relative to the working directory unless absolute
"""

import os
from dataclasses import dataclass, field
from pathlib import Path
from functools import lru_cache

from dotenv import load_dotenv

load_dotenv()

DEFAULT_PORT = 3000


def _port_from_env() -> int:
    raw = os.getenv("PORT", "")
    if raw.strip().isdigit():
        return int(raw)
    return DEFAULT_PORT


@dataclass(frozen=True)
class Settings:
    """
    Root settings container - Single source of truth for all configuration.

    Usage:
        from project_reports.infrastructure.config import get_settings
        settings = get_settings()
        print(settings.reports_dir)
    """

    host: str = field(default_factory=lambda: os.getenv("HOST", "127.0.0.1"))
    port: int = field(default_factory=_port_from_env)
    log_level: str = field(default_factory=lambda: os.getenv("LOG_LEVEL", "INFO").upper())

    # File paths
    public_dir: Path = field(
        default_factory=lambda: Path(os.getenv("PUBLIC_DIR", "public"))
    )
    reports_subdir: str = field(
        default_factory=lambda: os.getenv("REPORTS_SUBDIR", "ProjectReports2")
    )
    contacts_file: Path = field(
        default_factory=lambda: Path(os.getenv("CONTACTS_FILE", "contacts.xlsx"))
    )

    @property
    def reports_dir(self) -> Path:
        return self.public_dir / self.reports_subdir

    @property
    def reports_url_prefix(self) -> str:
        """Public URL path the report PDFs are served under."""
        return "/" + self.reports_subdir.strip("/")

    def validate(self) -> list[str]:
        """
        Validate settings and return list of warnings.
        Returns empty list if all settings are valid.
        """
        issues = []

        raw_port = os.getenv("PORT")
        if raw_port is not None and not raw_port.strip().isdigit():
            issues.append(
                f"WARNING: PORT={raw_port!r} is not a number. "
                f"Falling back to {DEFAULT_PORT}."
            )

        if not 0 < self.port < 65536:
            issues.append(f"WARNING: PORT {self.port} is outside 1-65535.")

        if not self.public_dir.is_dir():
            issues.append(
                f"WARNING: Public directory not found: {self.public_dir}. "
                "Static files will return 404."
            )
        elif not self.reports_dir.is_dir():
            issues.append(
                f"WARNING: Reports directory not found: {self.reports_dir}. "
                "Report listings will fail."
            )

        if not self.contacts_file.exists():
            issues.append(
                f"INFO: Contacts file not found: {self.contacts_file}. "
                "It will be created on the first submission."
            )

        return issues


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """
    Get singleton Settings instance.
    Cached to ensure consistent settings throughout application lifecycle.
    """
    return Settings()
