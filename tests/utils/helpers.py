from typing import Any

import httpx

from app.analytics.schemas.records import EventRecord, TicketRecord, UserRecord


def assert_login_response_valid(
    data: dict[str, Any], response: httpx.Response | None = None
) -> None:
    """Login returns the user and a bearer token, and sets both auth cookies."""
    assert "user" in data
    assert data["access_token"]
    assert data["token_type"] == "bearer"

    if response is not None:
        set_cookies = response.headers.get_list("set-cookie")
        assert any(c.startswith("access_token=") for c in set_cookies)
        assert any(c.startswith("refresh_token=") for c in set_cookies)


def assert_user_response_valid(data: dict[str, Any]) -> None:
    assert "id" in data
    assert "email" in data
    assert "name" in data
    assert "user_type" in data


def create_auth_headers(token: str) -> dict[str, str]:
    return {"Authorization": f"Bearer {token}"}


def extract_token_from_cookie(response: httpx.Response, cookie_name: str) -> str | None:
    for header in response.headers.get_list("set-cookie"):
        name, _, rest = header.partition("=")
        if name == cookie_name:
            return rest.split(";", 1)[0]
    return None


class StaticRecordSource:
    """Record source backed by plain lists, for feeding reports in tests."""

    def __init__(
        self,
        events: list[dict] | None = None,
        users: list[dict] | None = None,
        tickets: list[dict] | None = None,
    ):
        self.events = [EventRecord.model_validate(e) for e in events or []]
        self.users = [UserRecord.model_validate(u) for u in users or []]
        self.tickets = [TicketRecord.model_validate(t) for t in tickets or []]

    async def fetch_events(self) -> list[EventRecord]:
        return self.events

    async def fetch_users(self) -> list[UserRecord]:
        return self.users

    async def fetch_tickets(self, user_id: str | None = None) -> list[TicketRecord]:
        if user_id is None:
            return self.tickets
        return [t for t in self.tickets if t.user_id == user_id]


class FailingRecordSource(StaticRecordSource):
    """Static source whose user fetch fails, as an unreachable store would."""

    async def fetch_users(self) -> list[UserRecord]:
        raise ConnectionError("user store unreachable")
