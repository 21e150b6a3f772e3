import pytest
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient

from src.core.config.cors_config import CORSConfig
from src.security.cors import add_cors


def build_app(cors_config: CORSConfig) -> FastAPI:
    test_app = FastAPI()

    @test_app.get("/")
    async def root() -> dict[str, str]:
        return {"status": "ok"}

    add_cors(test_app, cors_config)
    return test_app


def split_header(value: str) -> set[str]:
    return {item.strip() for item in value.split(",") if item.strip()}


class TestCORSPolicyMiddleware:
    """Test the CORS policy stage."""

    @pytest.mark.asyncio
    async def test_wildcard_origin_without_origin_header(self) -> None:
        async with AsyncClient(transport=ASGITransport(app=build_app(CORSConfig())), base_url="http://test") as client:
            response = await client.get("/")

        assert response.status_code == 200
        assert response.headers["Access-Control-Allow-Origin"] == "*"

    @pytest.mark.asyncio
    async def test_wildcard_origin_with_origin_header(self) -> None:
        async with AsyncClient(transport=ASGITransport(app=build_app(CORSConfig())), base_url="http://test") as client:
            response = await client.get("/", headers={"Origin": "https://example.com"})

        assert response.headers["Access-Control-Allow-Origin"] == "*"

    @pytest.mark.asyncio
    async def test_preflight_methods_and_headers(self) -> None:
        async with AsyncClient(transport=ASGITransport(app=build_app(CORSConfig())), base_url="http://test") as client:
            response = await client.options(
                "/",
                headers={
                    "Origin": "https://example.com",
                    "Access-Control-Request-Method": "PUT",
                    "Access-Control-Request-Headers": "Authorization, Content-Type",
                },
            )

        assert response.status_code == 200
        assert response.headers["Access-Control-Allow-Origin"] == "*"
        assert split_header(response.headers["Access-Control-Allow-Methods"]) == {"GET", "POST", "PUT", "DELETE"}
        assert response.headers["Access-Control-Allow-Methods"] == "GET,POST,PUT,DELETE"
        assert response.headers["Access-Control-Allow-Headers"] == "Content-Type,Authorization"
        assert split_header(response.headers["Access-Control-Allow-Headers"]) == {"Content-Type", "Authorization"}

    @pytest.mark.asyncio
    async def test_preflight_rejects_unlisted_method(self) -> None:
        async with AsyncClient(transport=ASGITransport(app=build_app(CORSConfig())), base_url="http://test") as client:
            response = await client.options(
                "/",
                headers={"Origin": "https://example.com", "Access-Control-Request-Method": "PATCH"},
            )

        assert response.status_code == 400

    @pytest.mark.asyncio
    async def test_explicit_origin_list(self) -> None:
        cors_config = CORSConfig(origins=["https://allowed.example"])
        async with AsyncClient(transport=ASGITransport(app=build_app(cors_config)), base_url="http://test") as client:
            allowed = await client.get("/", headers={"Origin": "https://allowed.example"})
            other = await client.get("/", headers={"Origin": "https://other.example"})
            no_origin = await client.get("/")

        assert allowed.headers["Access-Control-Allow-Origin"] == "https://allowed.example"
        assert "Access-Control-Allow-Origin" not in other.headers
        assert "Access-Control-Allow-Origin" not in no_origin.headers

    @pytest.mark.asyncio
    async def test_bare_options_answered_by_policy(self) -> None:
        """OPTIONS without Access-Control-Request-Method never reaches the router."""
        async with AsyncClient(transport=ASGITransport(app=build_app(CORSConfig())), base_url="http://test") as client:
            response = await client.options("/")

        assert response.status_code == 204
        assert response.content == b""
        assert response.headers["Access-Control-Allow-Origin"] == "*"
        assert response.headers["Access-Control-Allow-Methods"] == "GET,POST,PUT,DELETE"
        assert response.headers["Access-Control-Allow-Headers"] == "Content-Type,Authorization"

    @pytest.mark.asyncio
    async def test_bare_options_with_listed_origin(self) -> None:
        cors_config = CORSConfig(origins=["https://allowed.example"])
        async with AsyncClient(transport=ASGITransport(app=build_app(cors_config)), base_url="http://test") as client:
            allowed = await client.options("/", headers={"Origin": "https://allowed.example"})
            other = await client.options("/", headers={"Origin": "https://other.example"})

        assert allowed.status_code == 204
        assert allowed.headers["Access-Control-Allow-Origin"] == "https://allowed.example"
        assert "Access-Control-Allow-Origin" not in other.headers

    @pytest.mark.asyncio
    async def test_preflight_still_checks_requested_headers(self) -> None:
        async with AsyncClient(transport=ASGITransport(app=build_app(CORSConfig())), base_url="http://test") as client:
            response = await client.options(
                "/",
                headers={
                    "Origin": "https://example.com",
                    "Access-Control-Request-Method": "GET",
                    "Access-Control-Request-Headers": "X-Custom",
                },
            )

        assert response.status_code == 400

    def test_add_cors_is_silent(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Building the policy happens at import time, before logging is configured."""
        build_app(CORSConfig())

        captured = capsys.readouterr()
        assert captured.out == ""
        assert captured.err == ""
