"""Tests for the HTTP servings export client."""

import asyncio
from datetime import UTC, date

import httpx
import pytest

from nutrition_flux.adapters.export_client import HttpxServingExportClient
from nutrition_flux.errors import AuthenticationFailed, FetchFailed

CSV = (
    "Day,Time,Group,Food Name,Amount,Category,Energy (kcal)\n"
    "2024-01-15,8:15 AM,Breakfast,Oatmeal,1.00 cup,Grains,158\n"
)


def _client(handler) -> HttpxServingExportClient:  # type: ignore[no-untyped-def]
    transport = httpx.MockTransport(handler)
    return HttpxServingExportClient(
        export_url="https://export.test/export",
        username="user@example.com",
        password="secret",
        http_client=httpx.AsyncClient(transport=transport),
        zone=UTC,
    )


def test_fetch_servings_sends_range_and_credentials() -> None:
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, text=CSV)

    client = _client(handler)

    records = asyncio.run(client.fetch_servings(date(2024, 1, 15), date(2024, 1, 16)))

    assert [record.food_name for record in records] == ["Oatmeal"]
    assert records[0].energy_kcal == 158.0
    request = seen[0]
    assert request.url.path == "/export"
    assert request.url.params["generate"] == "servings"
    assert request.url.params["start"] == "2024-01-15"
    assert request.url.params["end"] == "2024-01-16"
    assert request.headers["authorization"].startswith("Basic ")


@pytest.mark.parametrize("status_code", [401, 403])
def test_fetch_servings_maps_auth_failures(status_code: int) -> None:
    client = _client(lambda request: httpx.Response(status_code))

    with pytest.raises(AuthenticationFailed):
        asyncio.run(client.fetch_servings(date(2024, 1, 15), date(2024, 1, 15)))


def test_fetch_servings_maps_server_errors() -> None:
    client = _client(lambda request: httpx.Response(500, text="boom"))

    with pytest.raises(FetchFailed, match="500"):
        asyncio.run(client.fetch_servings(date(2024, 1, 15), date(2024, 1, 15)))


def test_fetch_servings_maps_transport_errors() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("unreachable", request=request)

    client = _client(handler)

    with pytest.raises(FetchFailed):
        asyncio.run(client.fetch_servings(date(2024, 1, 15), date(2024, 1, 15)))


def test_fetch_servings_rejects_malformed_export() -> None:
    client = _client(lambda request: httpx.Response(200, text="<html>login</html>"))

    with pytest.raises(FetchFailed):
        asyncio.run(client.fetch_servings(date(2024, 1, 15), date(2024, 1, 15)))


def test_create_and_close() -> None:
    client = HttpxServingExportClient.create(
        export_url="https://export.test/export",
        username="user",
        password="pass",
    )

    asyncio.run(client.close())

    assert client.http_client.is_closed
