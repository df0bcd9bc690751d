import pytest


class TestHealthEndpoint:
    @pytest.mark.asyncio
    async def test_should_report_healthy(self, test_client):
        response = await test_client.get("/health")

        assert response.status_code == 200
        assert response.json() == {"status": "healthy", "redis": "healthy", "database": "healthy"}

    @pytest.mark.asyncio
    async def test_root(self, test_client):
        response = await test_client.get("/")

        assert response.json()["status"] == "running"
