from datetime import UTC, datetime, timedelta

import pytest

from app.analytics.services.record_source import get_record_source
from tests.utils.factories import create_event_factory
from tests.utils.helpers import FailingRecordSource, StaticRecordSource, create_auth_headers

ANALYTICS_URL = "/api/v1/admin/analytics"


def _recent(days: int = 1) -> str:
    return (datetime.now(UTC) - timedelta(days=days)).isoformat()


class TestAnalyticsEndpoint:
    @pytest.mark.asyncio
    async def test_should_require_admin(self, test_client, test_organizer_token):
        response = await test_client.get(
            ANALYTICS_URL, headers=create_auth_headers(test_organizer_token)
        )

        assert response.status_code == 403

    @pytest.mark.asyncio
    async def test_should_require_authentication(self, test_client):
        response = await test_client.get(ANALYTICS_URL)

        assert response.status_code == 401

    @pytest.mark.asyncio
    async def test_should_return_camel_case_snapshot(self, test_client, test_app, test_admin_token):
        source = StaticRecordSource(
            events=[
                {"id": "e1", "title": "Big Show", "revenue": 900, "ticketsSold": 30,
                 "totalTickets": 40, "category": "Music", "createdAt": _recent()},
                {"id": "e2", "title": "Small Show", "revenue": 100, "ticketsSold": 10,
                 "totalTickets": 10, "createdAt": _recent(2)},
            ],
            users=[
                {"status": "active", "createdAt": _recent()},
                {"status": "active", "createdAt": _recent()},
            ],
        )
        test_app.dependency_overrides[get_record_source] = lambda: source

        response = await test_client.get(
            ANALYTICS_URL, params={"range": "7d"}, headers=create_auth_headers(test_admin_token)
        )

        assert response.status_code == 200
        body = response.json()
        assert body["success"] is True
        assert body["meta"]["range"] == "7d"
        data = body["data"]
        assert data["overview"] == {
            "totalUsers": 2,
            "totalEvents": 2,
            "ticketsSold": 40,
            "totalRevenue": 1000,
            "activeUsers": 2,
            "conversionRate": 2000.0,
        }
        assert data["topEvents"][0]["id"] == "e1"
        assert data["topEvents"][0]["ticketsSold"] == 30
        assert data["eventStats"][1]["capacity"] == 100
        assert data["counts"]["byCategory"] == {"Music": 1, "Uncategorized": 1}

    @pytest.mark.asyncio
    async def test_should_default_range(self, test_client, test_app, test_admin_token):
        test_app.dependency_overrides[get_record_source] = lambda: StaticRecordSource()

        response = await test_client.get(ANALYTICS_URL, headers=create_auth_headers(test_admin_token))

        assert response.status_code == 200
        assert response.json()["meta"]["range"] == "30d"
        assert response.json()["data"]["overview"]["totalEvents"] == 0

    @pytest.mark.asyncio
    async def test_should_reject_unknown_range(self, test_client, test_admin_token):
        response = await test_client.get(
            ANALYTICS_URL, params={"range": "5y"}, headers=create_auth_headers(test_admin_token)
        )

        assert response.status_code == 422

    @pytest.mark.asyncio
    async def test_should_degrade_when_users_are_unavailable(
        self, test_client, test_app, test_admin_token
    ):
        source = FailingRecordSource(events=[{"ticketsSold": 5, "createdAt": _recent()}])
        test_app.dependency_overrides[get_record_source] = lambda: source

        response = await test_client.get(ANALYTICS_URL, headers=create_auth_headers(test_admin_token))

        assert response.status_code == 200
        overview = response.json()["data"]["overview"]
        assert overview["totalEvents"] == 1
        assert overview["totalUsers"] == 0
        assert overview["conversionRate"] == 0

    @pytest.mark.asyncio
    async def test_should_read_from_database(
        self, test_client, db_session, test_organizer, test_admin_token
    ):
        create_event_factory(
            db_session, organizer=test_organizer, title="Stored", tickets_sold=7, revenue=70
        )

        response = await test_client.get(ANALYTICS_URL, headers=create_auth_headers(test_admin_token))

        data = response.json()["data"]
        assert data["overview"]["totalEvents"] == 1
        assert data["overview"]["totalUsers"] == 2
        assert data["overview"]["ticketsSold"] == 7
        assert data["topEvents"][0]["name"] == "Stored"
        assert data["topEvents"][0]["status"] == "active"
