"""HTTP servings export client."""

import logging
from dataclasses import dataclass
from datetime import date, tzinfo

import httpx

from nutrition_flux.adapters.servings_csv import parse_servings_csv
from nutrition_flux.domain.date_range import DATE_FORMAT, DateRange
from nutrition_flux.domain.servings import ServingRecord
from nutrition_flux.errors import AuthenticationFailed, FetchFailed
from nutrition_flux.services.export import ServingSource

_AUTH_STATUS_CODES = {401, 403}

_logger = logging.getLogger(__name__)


@dataclass
class HttpxServingExportClient(ServingSource):
    """Downloads the servings CSV export over HTTP with basic auth."""

    export_url: str
    username: str
    password: str
    http_client: httpx.AsyncClient
    zone: tzinfo | None = None
    timeout_seconds: float = 30

    @classmethod
    def create(
        cls,
        export_url: str,
        username: str,
        password: str,
        zone: tzinfo | None = None,
    ) -> "HttpxServingExportClient":
        """Create an export client with a managed httpx session."""
        return cls(
            export_url=export_url,
            username=username,
            password=password,
            http_client=httpx.AsyncClient(),
            zone=zone,
        )

    async def fetch_servings(self, start: date, end: date) -> list[ServingRecord]:
        """Download and parse servings recorded between start and end."""
        try:
            response = await self.http_client.get(
                self.export_url,
                params={
                    "generate": "servings",
                    "start": start.strftime(DATE_FORMAT),
                    "end": end.strftime(DATE_FORMAT),
                },
                auth=(self.username, self.password),
                timeout=self.timeout_seconds,
            )
        except httpx.HTTPError as exc:
            raise FetchFailed(f"Servings export request failed: {exc}") from exc

        if response.status_code in _AUTH_STATUS_CODES:
            raise AuthenticationFailed(
                f"Export endpoint rejected credentials for {self.username}"
            )
        try:
            response.raise_for_status()
        except httpx.HTTPStatusError as exc:
            raise FetchFailed(
                f"Servings export failed with status {response.status_code}"
            ) from exc

        records = parse_servings_csv(
            response.text, zone=self.zone, date_range=DateRange(start=start, end=end)
        )
        _logger.info(
            "Fetched %s servings (%s..%s)",
            len(records),
            start.isoformat(),
            end.isoformat(),
        )
        return records

    async def close(self) -> None:
        """Close the underlying HTTP session."""
        await self.http_client.aclose()
