import uuid
from datetime import UTC, datetime, timedelta

import pytest

from app.auth.models.user import UserType
from app.users.services.user_service import attendee_status
from tests.utils.factories import create_event_factory, create_ticket_factory, create_user_factory
from tests.utils.helpers import assert_user_response_valid, create_auth_headers

USERS_URL = "/api/v1/users"


class TestAttendeeStatus:
    NOW = datetime(2024, 6, 15, 12, 0, tzinfo=UTC)

    @pytest.mark.parametrize(
        ("date", "expected"),
        [
            (datetime(2024, 6, 1, tzinfo=UTC), "completed"),
            (datetime(2024, 6, 18, tzinfo=UTC), "active"),
            (datetime(2024, 7, 1, tzinfo=UTC), "upcoming"),
            (None, "active"),
        ],
    )
    def test_status_follows_event_date(self, date, expected):
        assert attendee_status(date, self.NOW) == expected


class TestListUsers:
    @pytest.mark.asyncio
    async def test_admin_should_list_users(
        self, test_client, test_admin_token, test_user, test_organizer
    ):
        response = await test_client.get(USERS_URL, headers=create_auth_headers(test_admin_token))

        assert response.status_code == 200
        body = response.json()
        assert body["meta"]["total"] == 3
        for user in body["data"]:
            assert_user_response_valid(user)

    @pytest.mark.asyncio
    async def test_should_filter_by_type(self, test_client, test_admin_token, test_organizer):
        response = await test_client.get(
            USERS_URL,
            params={"user_type": "organizer"},
            headers=create_auth_headers(test_admin_token),
        )

        emails = [u["email"] for u in response.json()["data"]]
        assert emails == ["organizer@example.com"]

    @pytest.mark.asyncio
    async def test_non_admin_should_get_403(self, test_client, test_user_token):
        response = await test_client.get(USERS_URL, headers=create_auth_headers(test_user_token))

        assert response.status_code == 403


class TestProfile:
    @pytest.mark.asyncio
    async def test_should_return_own_profile(self, test_client, test_user, test_user_token):
        response = await test_client.get(
            f"{USERS_URL}/me", headers=create_auth_headers(test_user_token)
        )

        assert response.status_code == 200
        assert response.json()["id"] == str(test_user.id)

    @pytest.mark.asyncio
    async def test_should_update_only_sent_fields(self, test_client, test_user, test_user_token):
        original_name = test_user.name

        response = await test_client.put(
            f"{USERS_URL}/me",
            json={"bio": "Festival lover"},
            headers=create_auth_headers(test_user_token),
        )

        assert response.status_code == 200
        data = response.json()
        assert data["bio"] == "Festival lover"
        assert data["name"] == original_name


class TestMyEvents:
    @pytest.fixture
    def dashboard(self, db_session, test_user, test_organizer):
        now = datetime.now(UTC)
        future = create_event_factory(
            db_session, organizer=test_organizer, title="Future Fest", date=now + timedelta(days=30)
        )
        past = create_event_factory(
            db_session,
            organizer=test_organizer,
            title="Past Party",
            category="Party",
            date=now - timedelta(days=30),
        )
        create_ticket_factory(db_session, test_user, future, quantity=2)
        create_ticket_factory(db_session, test_user, future, quantity=1)
        create_ticket_factory(db_session, test_user, past)
        owned = create_event_factory(db_session, organizer=test_user, title="My Meetup")
        return {"future": future, "past": past, "owned": owned}

    @pytest.mark.asyncio
    async def test_attending_tab_groups_tickets_per_event(
        self, test_client, test_user_token, dashboard
    ):
        response = await test_client.get(
            f"{USERS_URL}/me/events", headers=create_auth_headers(test_user_token)
        )

        assert response.status_code == 200
        body = response.json()
        assert body["tab"] == "attending"
        assert body["counts"] == {"attending": 1, "organizing": 1, "past": 1, "saved": 0}
        [event] = body["events"]
        assert event["title"] == "Future Fest"
        assert event["role"] == "attendee"
        assert event["status"] == "upcoming"
        assert event["ticket_count"] == 3
        assert len(event["ticket_numbers"]) == 2

    @pytest.mark.asyncio
    async def test_past_tab(self, test_client, test_user_token, dashboard):
        response = await test_client.get(
            f"{USERS_URL}/me/events",
            params={"tab": "past"},
            headers=create_auth_headers(test_user_token),
        )

        [event] = response.json()["events"]
        assert event["title"] == "Past Party"
        assert event["status"] == "completed"

    @pytest.mark.asyncio
    async def test_organizing_tab(self, test_client, test_user_token, dashboard):
        response = await test_client.get(
            f"{USERS_URL}/me/events",
            params={"tab": "organizing"},
            headers=create_auth_headers(test_user_token),
        )

        [event] = response.json()["events"]
        assert event["title"] == "My Meetup"
        assert event["role"] == "organizer"
        assert event["status"] == "active"

    @pytest.mark.asyncio
    async def test_saved_tab_is_empty(self, test_client, test_user_token, dashboard):
        response = await test_client.get(
            f"{USERS_URL}/me/events",
            params={"tab": "saved"},
            headers=create_auth_headers(test_user_token),
        )

        assert response.json()["events"] == []

    @pytest.mark.asyncio
    async def test_should_filter_by_category_and_search(
        self, test_client, test_user_token, dashboard
    ):
        headers = create_auth_headers(test_user_token)

        by_category = await test_client.get(
            f"{USERS_URL}/me/events", params={"tab": "past", "category": "Music"}, headers=headers
        )
        all_categories = await test_client.get(
            f"{USERS_URL}/me/events", params={"tab": "past", "category": "all"}, headers=headers
        )
        by_search = await test_client.get(
            f"{USERS_URL}/me/events", params={"tab": "past", "search": "PARTY"}, headers=headers
        )

        assert by_category.json()["events"] == []
        assert len(all_categories.json()["events"]) == 1
        assert len(by_search.json()["events"]) == 1


class TestMyTickets:
    @pytest.mark.asyncio
    async def test_should_return_tickets_with_event_details(
        self, test_client, db_session, test_user, test_user_token
    ):
        event = create_event_factory(db_session, title="Opera")
        other = create_event_factory(db_session, title="Ballet")
        create_ticket_factory(db_session, test_user, event, quantity=2, unit_price=30)
        create_ticket_factory(db_session, test_user, other)

        response = await test_client.get(
            f"{USERS_URL}/me/tickets",
            params={"event_id": str(event.id)},
            headers=create_auth_headers(test_user_token),
        )

        assert response.status_code == 200
        [ticket] = response.json()
        assert ticket["event_name"] == "Opera"
        assert ticket["quantity"] == 2
        assert ticket["total_amount"] == 60
        assert ticket["city"] == event.city


class TestUserStats:
    @pytest.mark.asyncio
    async def test_should_return_own_stats(
        self, test_client, db_session, test_user, test_user_token
    ):
        now = datetime.now(UTC)
        create_event_factory(
            db_session,
            organizer=test_user,
            date=now + timedelta(days=5),
            tickets_sold=4,
            revenue=100,
        )
        attended = create_event_factory(db_session, date=now - timedelta(days=5))
        create_ticket_factory(db_session, test_user, attended, quantity=3, unit_price=10)

        response = await test_client.get(
            f"{USERS_URL}/me/stats", headers=create_auth_headers(test_user_token)
        )

        assert response.status_code == 200
        body = response.json()
        assert body["success"] is True
        data = body["data"]
        assert data["userId"] == str(test_user.id)
        assert data["stats"]["organizedEvents"] == 1
        assert data["stats"]["upcomingOrganized"] == 1
        assert data["stats"]["attendingEvents"] == 1
        assert data["stats"]["pastAttending"] == 1
        assert data["stats"]["ticketsPurchased"] == 3
        assert data["stats"]["totalSpent"] == 30
        assert data["stats"]["averageTicketPrice"] == 25.0
        assert data["summary"]["message"] == "You have 1 organized events and 1 events to attend"

    @pytest.mark.asyncio
    async def test_should_zero_fill_without_activity(self, test_client, test_user_token):
        response = await test_client.get(
            f"{USERS_URL}/me/stats", headers=create_auth_headers(test_user_token)
        )

        stats = response.json()["data"]["stats"]
        assert stats["totalTickets"] == 0
        assert stats["averageTicketPrice"] == 0
        assert stats["attendanceRate"] == 0

    @pytest.mark.asyncio
    async def test_admin_should_read_any_users_stats(
        self, test_client, db_session, test_admin_token
    ):
        organizer = create_user_factory(db_session, user_type=UserType.ORGANIZER)
        create_event_factory(db_session, organizer=organizer)

        response = await test_client.get(
            f"{USERS_URL}/{organizer.id}/stats", headers=create_auth_headers(test_admin_token)
        )

        assert response.status_code == 200
        assert response.json()["data"]["stats"]["organizedEvents"] == 1

    @pytest.mark.asyncio
    async def test_should_return_404_for_unknown_user(self, test_client, test_admin_token):
        response = await test_client.get(
            f"{USERS_URL}/{uuid.uuid4()}/stats", headers=create_auth_headers(test_admin_token)
        )

        assert response.status_code == 404

    @pytest.mark.asyncio
    async def test_non_admin_should_get_403(self, test_client, test_organizer, test_user_token):
        response = await test_client.get(
            f"{USERS_URL}/{test_organizer.id}/stats", headers=create_auth_headers(test_user_token)
        )

        assert response.status_code == 403
