"""
API tests for the FastAPI application.
"""

import shutil
from unittest.mock import MagicMock

import pytest
from fastapi.testclient import TestClient

from project_reports.domain import StoreError
from project_reports.infrastructure.persistence import ContactStore
from project_reports.infrastructure.reports import ReportCatalog
from project_reports.web.app import create_app


VALID_CONTACT = {"name": "Jane Doe", "email": "jane@example.com", "mobile": "0412345678"}


class TestHealth:
    def test_health(self, client) -> None:
        response = client.get("/health")

        assert response.status_code == 200
        assert response.json() == {"status": "ok"}


class TestCategoriesEndpoint:
    def test_lists_categories(self, client) -> None:
        response = client.get("/api/project-report-categories")

        assert response.status_code == 200
        assert response.json() == ["Alpha", "beta", "Site Visits"]

    def test_missing_reports_root(self, settings, reports_dir) -> None:
        shutil.rmtree(reports_dir)

        with TestClient(create_app(settings)) as client:
            response = client.get("/api/project-report-categories")

        assert response.status_code == 500
        assert response.json() == {"error": "Unable to list categories"}


class TestReportsEndpoint:
    def test_lists_reports(self, client) -> None:
        response = client.get("/api/project-reports", params={"category": "Alpha"})

        assert response.status_code == 200
        assert sorted(response.json(), key=lambda r: r["name"]) == [
            {"name": "Annual Report 2023", "file": "/ProjectReports2/Alpha/Annual_Report_2023.pdf"},
            {"name": "Summary", "file": "/ProjectReports2/Alpha/Summary.PDF"},
        ]

    def test_empty_category_has_no_reports(self, client) -> None:
        response = client.get("/api/project-reports", params={"category": "beta"})

        assert response.status_code == 200
        assert response.json() == []

    @pytest.mark.parametrize("params", [{}, {"category": ""}, {"category": "  "}])
    def test_missing_category_does_not_touch_filesystem(self, settings, params) -> None:
        catalog = MagicMock(spec=ReportCatalog)

        with TestClient(create_app(settings, catalog=catalog)) as client:
            response = client.get("/api/project-reports", params=params)

        assert response.status_code == 400
        assert response.json() == {"error": "Category is required."}
        catalog.list_reports.assert_not_called()

    def test_unknown_category(self, client) -> None:
        response = client.get("/api/project-reports", params={"category": "Gamma"})

        assert response.status_code == 500
        assert response.json() == {"error": "Unable to list files for the specified category"}

    @pytest.mark.parametrize("category", ["..", "../ProjectReports2", "Alpha/../../.."])
    def test_path_traversal(self, client, category) -> None:
        response = client.get("/api/project-reports", params={"category": category})

        assert response.status_code == 400
        assert response.json() == {"error": "Invalid category."}

    def test_listed_file_is_downloadable(self, client) -> None:
        reports = client.get("/api/project-reports", params={"category": "Site Visits"}).json()

        response = client.get(reports[0]["file"])

        assert response.status_code == 200
        assert response.content == b"%PDF-1.4 q1"


class TestContactEndpoint:
    def test_saves_contact(self, client, contacts_file) -> None:
        response = client.post("/api/contact", json=VALID_CONTACT)

        assert response.status_code == 201
        assert response.json() == {"success": True, "message": "Contact saved."}

        rows = ContactStore(contacts_file).load_contacts()
        assert len(rows) == 1
        assert {k: rows[0][k] for k in ("name", "email", "mobile")} == VALID_CONTACT
        assert rows[0]["date"]

    def test_appends_in_order(self, client, contacts_file) -> None:
        for i in range(3):
            contact = dict(VALID_CONTACT, name=f"Person {i}")
            assert client.post("/api/contact", json=contact).status_code == 201

        rows = ContactStore(contacts_file).load_contacts()
        assert [row["name"] for row in rows] == ["Person 0", "Person 1", "Person 2"]

    def test_stores_values_as_submitted(self, client, contacts_file) -> None:
        response = client.post("/api/contact", json={"name": "  Jane ", "email": "jane@example.com ", "mobile": " 0412"})

        assert response.status_code == 201
        row = ContactStore(contacts_file).load_contacts()[0]
        assert (row["name"], row["email"], row["mobile"]) == ("  Jane ", "jane@example.com ", " 0412")

    def test_formula_like_values_saved_as_text(self, client, contacts_file) -> None:
        response = client.post("/api/contact", json=dict(VALID_CONTACT, name="=HYPERLINK(\"http://x\")"))

        assert response.status_code == 201
        assert ContactStore(contacts_file).load_contacts()[0]["name"] == "=HYPERLINK(\"http://x\")"

    def test_numeric_mobile_is_accepted(self, client, contacts_file) -> None:
        response = client.post("/api/contact", json=dict(VALID_CONTACT, mobile=412345678))

        assert response.status_code == 201
        assert ContactStore(contacts_file).load_contacts()[0]["mobile"] == "412345678"

    @pytest.mark.parametrize("missing", ["name", "email", "mobile"])
    def test_missing_field_writes_nothing(self, client, contacts_file, missing) -> None:
        body = {k: v for k, v in VALID_CONTACT.items() if k != missing}

        response = client.post("/api/contact", json=body)

        assert response.status_code == 400
        assert response.json() == {"error": "All fields are required."}
        assert not contacts_file.exists()

    @pytest.mark.parametrize("blank", ["", "   ", None])
    def test_blank_field_rejected(self, client, contacts_file, blank) -> None:
        response = client.post("/api/contact", json=dict(VALID_CONTACT, email=blank))

        assert response.status_code == 400
        assert not contacts_file.exists()

    def test_no_body(self, client, contacts_file) -> None:
        response = client.post("/api/contact")

        assert response.status_code == 400
        assert response.json() == {"error": "All fields are required."}
        assert not contacts_file.exists()

    def test_malformed_json(self, client, contacts_file) -> None:
        response = client.post(
            "/api/contact",
            content=b"{not json",
            headers={"Content-Type": "application/json"},
        )

        assert response.status_code == 400
        assert response.json() == {"error": "All fields are required."}
        assert not contacts_file.exists()

    def test_store_failure(self, settings) -> None:
        store = MagicMock(spec=ContactStore)
        store.append_contact.side_effect = StoreError("disk full")

        with TestClient(create_app(settings, contact_store=store)) as client:
            response = client.post("/api/contact", json=VALID_CONTACT)

        assert response.status_code == 500
        assert response.json() == {"error": "Failed to save contact."}
        store.append_contact.assert_called_once_with(
            name="Jane Doe", email="jane@example.com", mobile="0412345678"
        )


class TestStaticFiles:
    def test_index(self, client) -> None:
        response = client.get("/")

        assert response.status_code == 200
        assert "Project Reports" in response.text

    def test_unknown_path(self, client) -> None:
        assert client.get("/missing.html").status_code == 404

    def test_without_public_dir(self, tmp_path) -> None:
        from project_reports.infrastructure.config import Settings

        settings = Settings(public_dir=tmp_path / "nope", contacts_file=tmp_path / "c.xlsx")

        with TestClient(create_app(settings)) as client:
            assert client.get("/health").status_code == 200
            assert client.get("/index.html").status_code == 404
            assert client.get("/api/project-report-categories").status_code == 500
