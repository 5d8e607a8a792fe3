"""FastAPI application factory."""

import asyncio
import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from food_diary.api.models import DiaryParseRequest, DocumentModel, ParseErrorModel
from food_diary.app_logging import configure_logging
from food_diary.containers import AppContainer
from food_diary.parser.errors import ParseError
from food_diary.services.diary import DiaryTooLargeError


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging(container.settings.log_level)
    logger = logging.getLogger(__name__)

    app = FastAPI()
    app.state.container = container

    @app.exception_handler(ParseError)
    async def parse_error_handler(request: Request, exc: ParseError) -> JSONResponse:
        error = ParseErrorModel.model_validate(exc.to_dict())
        return JSONResponse(
            status_code=422,
            content={"error": error.model_dump()},
        )

    @app.exception_handler(DiaryTooLargeError)
    async def too_large_handler(
        request: Request, exc: DiaryTooLargeError
    ) -> JSONResponse:
        logger.info("Rejected oversized diary: %s", exc)
        return JSONResponse(
            status_code=413,
            content={"error": {"size": exc.size, "limit": exc.limit}},
        )

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    @app.post("/diary/parse")
    async def parse_diary(
        payload: DiaryParseRequest, request: Request
    ) -> DocumentModel:
        """Parse diary text and return the structured document."""
        state_container: AppContainer = request.app.state.container
        document = await asyncio.to_thread(
            state_container.diary_service.parse, payload.text
        )
        return DocumentModel.from_domain(document)

    return app
