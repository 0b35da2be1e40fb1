"""Integration tests for the FastAPI host application."""

from httpx import ASGITransport, AsyncClient

from pdfchat.api.app import create_app


class TestHealth:
    async def test_health_reports_healthy(self, async_client: AsyncClient) -> None:
        response = await async_client.get("/health")

        assert response.status_code == 200
        assert response.json() == {"status": "healthy", "service": "pdf-chat"}

    async def test_wrong_http_method_returns_405(self, async_client: AsyncClient) -> None:
        response = await async_client.post("/health")

        assert response.status_code == 405

    async def test_cors_headers_present(self, async_client: AsyncClient) -> None:
        """Response includes CORS headers for cross-origin requests."""
        response = await async_client.get(
            "/health", headers={"Origin": "http://localhost:3000"}
        )

        assert "access-control-allow-origin" in response.headers

    async def test_unlisted_origin_gets_no_cors_header(self) -> None:
        app = create_app(cors_origins=["http://localhost:8080"])
        transport = ASGITransport(app=app)

        async with AsyncClient(transport=transport, base_url="http://test") as client:
            response = await client.get(
                "/health", headers={"Origin": "http://evil.example"}
            )

        assert response.status_code == 200
        assert "access-control-allow-origin" not in response.headers
