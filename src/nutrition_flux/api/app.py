"""FastAPI application factory."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI, HTTPException, Request, status
from fastapi.responses import PlainTextResponse

from nutrition_flux.api.models import ServingPayload
from nutrition_flux.app_logging import configure_logging
from nutrition_flux.containers import AppContainer
from nutrition_flux.domain.date_range import parse_date_range
from nutrition_flux.errors import (
    AuthenticationFailed,
    ConfigurationError,
    FetchFailed,
    InvalidDateRange,
)
from nutrition_flux.services.line_protocol import format_servings

LINE_PROTOCOL_MEDIA_TYPE = "text/plain; charset=utf-8"


def _as_body(lines: list[str]) -> str:
    return "".join(f"{line}\n" for line in lines)


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging()
    logger = logging.getLogger(__name__)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        yield
        await app.state.container.close_resources()

    app = FastAPI(lifespan=lifespan)
    app.state.container = container

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    @app.post("/line-protocol", response_class=PlainTextResponse)
    async def encode_servings(servings: list[ServingPayload]) -> PlainTextResponse:
        """Encode posted servings as line protocol."""
        lines = format_servings(serving.to_record() for serving in servings)
        return PlainTextResponse(_as_body(lines), media_type=LINE_PROTOCOL_MEDIA_TYPE)

    @app.get("/export", response_class=PlainTextResponse)
    async def export(
        request: Request, start: str | None = None, end: str | None = None
    ) -> PlainTextResponse:
        """Encode servings from the configured source for a date range."""
        state_container: AppContainer = request.app.state.container
        try:
            date_range = parse_date_range(start, end)
            lines = await state_container.export_service.export_lines(date_range)
        except InvalidDateRange as exc:
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)
            ) from exc
        except (AuthenticationFailed, FetchFailed, ConfigurationError) as exc:
            logger.warning("Export failed: %s: %s", type(exc).__name__, exc)
            raise HTTPException(
                status_code=status.HTTP_502_BAD_GATEWAY, detail=str(exc)
            ) from exc
        return PlainTextResponse(_as_body(lines), media_type=LINE_PROTOCOL_MEDIA_TYPE)

    return app
