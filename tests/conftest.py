"""
Pytest configuration and fixtures.

Builds a throwaway public directory per test:

    public/
        index.html
        ProjectReports2/
            README.txt
            Alpha/    Annual_Report_2023.pdf, Summary.PDF, notes.txt
            beta/
            Site Visits/    Q1 (draft).pdf
"""

import pytest
from fastapi.testclient import TestClient

from project_reports.infrastructure.config import Settings
from project_reports.web.app import create_app


@pytest.fixture
def public_dir(tmp_path):
    public = tmp_path / "public"
    reports = public / "ProjectReports2"

    (reports / "Alpha").mkdir(parents=True)
    (reports / "beta").mkdir()
    (reports / "Site Visits").mkdir()

    (reports / "README.txt").write_text("not a category")
    (reports / "Alpha" / "Annual_Report_2023.pdf").write_bytes(b"%PDF-1.4 annual")
    (reports / "Alpha" / "Summary.PDF").write_bytes(b"%PDF-1.4 summary")
    (reports / "Alpha" / "notes.txt").write_text("not a report")
    (reports / "Site Visits" / "Q1 (draft).pdf").write_bytes(b"%PDF-1.4 q1")

    (public / "index.html").write_text("<h1>Project Reports</h1>")
    return public


@pytest.fixture
def reports_dir(public_dir):
    return public_dir / "ProjectReports2"


@pytest.fixture
def contacts_file(tmp_path):
    return tmp_path / "contacts.xlsx"


@pytest.fixture
def settings(public_dir, contacts_file):
    return Settings(
        public_dir=public_dir,
        reports_subdir="ProjectReports2",
        contacts_file=contacts_file,
    )


@pytest.fixture
def client(settings):
    with TestClient(create_app(settings)) as test_client:
        yield test_client
