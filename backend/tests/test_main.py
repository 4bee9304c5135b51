from __future__ import annotations

from unittest.mock import MagicMock

import pytest
from fastapi.testclient import TestClient

from beacon_dashboard import schemas
from beacon_dashboard.domain.errors import DataSourceUnavailable, NoActiveValidators
from beacon_dashboard.main import _dashboard_service, app
from beacon_dashboard.services import DashboardQuery, DashboardService, PriceService, TierService


@pytest.fixture
def service():
    mock_service = MagicMock(spec=DashboardService)
    app.dependency_overrides[_dashboard_service] = lambda: mock_service
    return mock_service


@pytest.fixture
def client(monkeypatch):
    """Test client with pinned collaborators that cleans up overrides after each test."""
    monkeypatch.setattr(
        "beacon_dashboard.main.price_service",
        PriceService({"ETH": 1.0, "USD": 2000.0}, "ETH"),
    )
    monkeypatch.setattr(
        "beacon_dashboard.main.tier_service",
        TierService({"whale": 4}, 2),
    )
    yield TestClient(app)
    app.dependency_overrides.clear()


def test_healthcheck(client):
    response = client.get("/healthz")
    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


def test_proposals_receive_parsed_query(client, service):
    service.proposals.return_value = [[1606824623, 1]]

    response = client.get("/dashboard/data/proposals", params={"validators": "12,12"})

    assert response.status_code == 200
    assert response.json() == [[1606824623, 1]]
    service.proposals.assert_called_once_with(
        DashboardQuery(identifiers=(12,), limit=2, currency="ETH")
    )


def test_malformed_identifier_is_rejected(client, service):
    response = client.get("/dashboard/data/proposals", params={"validators": "5,abc"})

    assert response.status_code == 400
    assert response.json() == {"detail": "Invalid query"}
    service.proposals.assert_not_called()


def test_limit_depends_on_tier(client, service):
    service.proposal_history.return_value = []

    rejected = client.get("/dashboard/data/proposalshistory", params={"validators": "1,2,3"})
    accepted = client.get(
        "/dashboard/data/proposalshistory",
        params={"validators": "1,2,3"},
        headers={"X-Premium-Tier": "whale"},
    )

    assert rejected.status_code == 400
    assert accepted.status_code == 200
    service.proposal_history.assert_called_once_with(
        DashboardQuery(identifiers=(1, 2, 3), limit=4, currency="ETH")
    )


def test_currency_from_query_then_cookie(client, service):
    service.earnings.return_value = schemas.ValidatorEarnings()

    client.get("/dashboard/data/earnings", params={"validators": "1", "currency": "usd"})
    client.cookies.set("currency", "USD")
    client.get("/dashboard/data/earnings", params={"validators": "1"})
    client.get("/dashboard/data/earnings", params={"validators": "1", "currency": "XYZ"})

    currencies = [call.args[0].currency for call in service.earnings.call_args_list]
    assert currencies == ["USD", "USD", "ETH"]


def test_earnings_default_to_zeroed_object(client, service):
    service.earnings.return_value = schemas.ValidatorEarnings()

    response = client.get("/dashboard/data/earnings")

    assert response.status_code == 200
    body = response.json()
    assert body["lastDay"] == 0.0
    assert body["apr"] == 0.0


def test_validators_table_payload(client, service):
    service.validators_table.return_value = schemas.ValidatorTable(
        latest_epoch=7,
        data=[["ab", "5", ["32.0000 ETH", "32.0 ETH"], "active_online", None, None, None, None, [0, 0], "+0.0000 ETH"]],
    )

    response = client.get("/dashboard/data/validators", params={"validators": "5"})

    assert response.status_code == 200
    assert response.json() == {
        "latestEpoch": 7,
        "data": [["ab", "5", ["32.0000 ETH", "32.0 ETH"], "active_online", None, None, None, None, [0, 0], "+0.0000 ETH"]],
    }


def test_no_active_validators_is_a_client_error(client, service):
    service.effectiveness.side_effect = NoActiveValidators(100)

    response = client.get("/dashboard/data/effectiveness", params={"validators": "20"})

    assert response.status_code == 400
    assert response.json() == {"detail": "Invalid query"}


def test_data_source_failure_is_opaque(client, service):
    service.balance_history.side_effect = DataSourceUnavailable("relational store", "loading balance history")

    response = client.get("/dashboard/data/balance", params={"validators": "5"})

    assert response.status_code == 503
    assert response.json() == {"detail": "Internal server error"}


def test_balance_chart_points(client, service):
    service.balance_history.return_value = [schemas.ChartPoint(x=1000, y=0.5, color="#7cb5ec")]

    response = client.get("/dashboard/data/balance", params={"validators": "5"})

    assert response.status_code == 200
    assert response.json() == [{"x": 1000, "y": 0.5, "color": "#7cb5ec"}]


def test_graffitiwall(client, service):
    service.graffitiwall.return_value = [
        schemas.GraffitiwallPixel(x=0, y=1, color="ff0000", slot=9, validator=3)
    ]

    response = client.get("/graffitiwall")

    assert response.status_code == 200
    assert response.json() == [{"x": 0, "y": 1, "color": "ff0000", "slot": 9, "validator": 3}]
