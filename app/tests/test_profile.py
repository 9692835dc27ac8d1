"""
Tests for the profile placeholder and the infrastructure endpoints
"""

class TestProfile:
    """GET /api/profile"""

    async def test_profile_placeholder(self, async_client):
        """The profile route is public and returns a fixed string"""
        response = await async_client.get("/api/profile")

        assert response.status_code == 200
        assert response.json() == "Profile Route"

    async def test_profile_ignores_credentials(self, async_client, auth_headers):
        response = await async_client.get("/api/profile", headers=auth_headers)

        assert response.status_code == 200
        assert response.json() == "Profile Route"

class TestHealth:

    async def test_root(self, async_client):
        response = await async_client.get("/")

        assert response.status_code == 200
        assert response.json()["status"] == "healthy"

    async def test_health_check(self, async_client):
        response = await async_client.get("/health")

        assert response.status_code == 200
        assert response.json()["status"] == "healthy"
        assert response.headers["x-process-time"].endswith("ms")

    async def test_database_health_without_connection(self, async_client):
        """The lifespan is not run in tests, so no client is connected"""
        response = await async_client.get("/health/db")

        assert response.status_code == 200
        assert response.json()["status"] == "unhealthy"
