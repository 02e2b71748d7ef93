"""Dependency container wiring for the application."""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from pathlib import Path

from nutrition_flux.adapters.export_client import HttpxServingExportClient
from nutrition_flux.adapters.servings_csv import CsvFileServingSource, resolve_timezone
from nutrition_flux.config import Settings
from nutrition_flux.errors import AuthenticationFailed
from nutrition_flux.services.export import ExportService, ServingSource


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    serving_source: ServingSource | None
    export_service: ExportService
    close_resources: Callable[[], Awaitable[None]]


async def _close_nothing() -> None:
    return None


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container.

    A configured CSV path takes precedence over the HTTP export endpoint.
    Without either the container has no source and exports fail with
    ConfigurationError, while encoding posted servings still works.
    """
    resolved_settings = settings or Settings()
    zone = resolve_timezone(resolved_settings.timezone)
    close_resources: Callable[[], Awaitable[None]] = _close_nothing

    source: ServingSource | None = None
    if resolved_settings.servings_csv_path:
        source = CsvFileServingSource(
            path=Path(resolved_settings.servings_csv_path), zone=zone
        )
    elif resolved_settings.servings_export_url:
        username = resolved_settings.cronometer_user
        password = resolved_settings.cronometer_pass
        if not username or not password:
            raise AuthenticationFailed(
                "Username and password are required. Set via flags or "
                "CRONOMETER_USER/CRONOMETER_PASS environment variables"
            )
        export_client = HttpxServingExportClient.create(
            export_url=resolved_settings.servings_export_url,
            username=username,
            password=password,
            zone=zone,
        )
        source = export_client
        close_resources = export_client.close

    export_service = ExportService(source=source)
    return AppContainer(
        settings=resolved_settings,
        serving_source=source,
        export_service=export_service,
        close_resources=close_resources,
    )
