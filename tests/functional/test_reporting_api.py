"""
API tests for the reporting module.
Tests catalogue browsing, report generation, previews and request logging.
"""

import pytest
from fastapi.testclient import TestClient

from report_engine.core.dependencies import get_report_service
from report_engine.logging.models import RequestLog

BASE = "/api/reporting"

TELLER_REQUEST = {
    "query_parameters": [{"name": "Status", "operator": "IN", "value": "CONFIRMED"}],
    "displayable_fields": [{"name": "Teller Id"}, {"name": "Teller"}, {"name": "Status"}],
}


class TestCatalogue:
    """Categories and report definitions"""

    def test_get_categories(self, client: TestClient):
        response = client.get(f"{BASE}/categories")

        assert response.status_code == 200
        assert response.json() == ["Accounting", "Teller", "Organization"]

    def test_get_definitions_of_category(self, client: TestClient):
        response = client.get(f"{BASE}/categories/Teller")

        assert response.status_code == 200
        definitions = response.json()
        assert len(definitions) == 1
        assert definitions[0]["identifier"] == "Transactions"
        assert [(p["name"], p["operator"]) for p in definitions[0]["query_parameters"]] == [
            ("Transaction Date", "BETWEEN"),
            ("Status", "IN"),
        ]

    def test_unknown_category(self, client: TestClient):
        response = client.get(f"{BASE}/categories/Nope")

        assert response.status_code == 404
        assert response.json() == {"detail": "Category Nope not found."}

    def test_get_single_definition(self, client: TestClient):
        response = client.get(f"{BASE}/categories/Accounting/definitions/Balancesheet")

        assert response.status_code == 200
        definition = response.json()
        assert definition["name"] == "Balance Sheet"
        assert all(field["mandatory"] for field in definition["displayable_fields"])

    def test_unknown_definition(self, client: TestClient):
        response = client.get(f"{BASE}/categories/Accounting/definitions/Nope")

        assert response.status_code == 404


class TestReportGeneration:
    """POST a report request, get one page back"""

    def test_generate_page(self, client: TestClient, sample_data):
        response = client.post(
            f"{BASE}/categories/Teller/reports/Transactions",
            json=TELLER_REQUEST,
            headers={"User": "jdoe"},
        )

        assert response.status_code == 200
        page = response.json()
        assert page["name"] == "Teller Transactions"
        assert page["header"]["column_names"] == ["Teller Id", "Teller", "Status"]
        assert page["rows"][0]["values"] == [
            {"values": ["1"]},
            {"values": ["T-001"]},
            {"values": ["CONFIRMED"]},
        ]
        assert len(page["rows"]) == 3
        assert page["has_more"] is False
        assert page["generated_by"] == "jdoe"
        assert page["generated_on"]

    def test_page_size_and_index(self, client: TestClient, sample_data):
        response = client.post(
            f"{BASE}/categories/Organization/reports/Employee",
            params={"page_index": 1, "size": 2},
            json={"displayable_fields": [{"name": "Username"}]},
        )

        assert response.status_code == 200
        page = response.json()
        assert [row["values"][0]["values"] for row in page["rows"]] == [["carol"]]
        assert page["has_more"] is False

    def test_unknown_field_is_bad_request(self, client: TestClient, sample_data):
        response = client.post(
            f"{BASE}/categories/Teller/reports/Transactions",
            json={"displayable_fields": [{"name": "Teller"}, {"name": "Bogus"}]},
        )

        assert response.status_code == 400
        assert response.json() == {"detail": "Unspecified fields requested: Bogus"}

    def test_unknown_report(self, client: TestClient):
        response = client.post(f"{BASE}/categories/Teller/reports/Nope", json={})

        assert response.status_code == 404

    @pytest.mark.parametrize("params", [{"size": 0}, {"page_index": -1}, {"size": "many"}])
    def test_invalid_paging_is_rejected(self, client: TestClient, params):
        response = client.post(
            f"{BASE}/categories/Teller/reports/Transactions", params=params, json=TELLER_REQUEST
        )

        assert response.status_code == 422
        assert "detail" in response.json()

    def test_invalid_operator_is_rejected(self, client: TestClient):
        response = client.post(
            f"{BASE}/categories/Teller/reports/Transactions",
            json={"query_parameters": [{"name": "Status", "operator": "NEAR", "value": "x"}]},
        )

        assert response.status_code == 422

    def test_preview(self, client: TestClient):
        response = client.post(
            f"{BASE}/categories/Teller/reports/Transactions/preview",
            params={"size": 5},
            json=TELLER_REQUEST,
        )

        assert response.status_code == 200
        preview = response.json()
        assert preview["columns"] == ["teller.id", "teller.identifier"]
        assert "FROM tajet_teller AS teller" in preview["sql"]


class TestRequestLogging:
    """Every API call leaves one RequestLog row"""

    def test_request_is_logged(self, client: TestClient, config_db_session):
        client.get(f"{BASE}/categories", headers={"User": "jdoe"})

        logs = config_db_session.query(RequestLog).all()
        assert len(logs) == 1
        assert logs[0].method == "GET"
        assert logs[0].path == f"{BASE}/categories"
        assert logs[0].status_code == 200
        assert logs[0].username == "jdoe"

    def test_unhandled_error_returns_500_and_is_logged(self, app, config_db_session):
        class BrokenService:
            def get_categories(self):
                raise RuntimeError("store unavailable")

        app.dependency_overrides[get_report_service] = lambda: BrokenService()

        with TestClient(app, raise_server_exceptions=False) as test_client:
            response = test_client.get(f"{BASE}/categories")

        assert response.status_code == 500
        assert response.json() == {"detail": "Internal Server Error"}
        logs = config_db_session.query(RequestLog).filter(RequestLog.status_code == 500).all()
        assert len(logs) == 1
        assert "store unavailable" in logs[0].response_body
