"""Litestar application exposing the problem tracker."""

import sys

from litestar import Litestar, Request, Response
from litestar.datastructures import State
from litestar.di import Provide
from litestar.exceptions import ValidationException
from litestar.plugins.pydantic import PydanticPlugin
from litestar.status_codes import (
    HTTP_400_BAD_REQUEST,
    HTTP_404_NOT_FOUND,
    HTTP_500_INTERNAL_SERVER_ERROR,
    HTTP_502_BAD_GATEWAY,
)
from loguru import logger

from compendium.api.dependencies import (
    provide_preferences_service,
    provide_tracker_service,
)
from compendium.api.routes import (
    LinkController,
    PreferencesController,
    ProblemController,
    RevisionController,
    TransferController,
)
from compendium.config import Settings, load_settings
from compendium.domain.exceptions import (
    CompendiumError,
    DuplicateIdError,
    ImportFormatError,
    NotFoundError,
    TransportError,
    ValidationError,
)
from compendium.services import (
    PreferencesService,
    TrackerService,
    create_preferences_service,
    create_tracker_service,
)

ERROR_STATUS: dict[type[CompendiumError], int] = {
    ValidationError: HTTP_400_BAD_REQUEST,
    ImportFormatError: HTTP_400_BAD_REQUEST,
    NotFoundError: HTTP_404_NOT_FOUND,
    TransportError: HTTP_502_BAD_GATEWAY,
    DuplicateIdError: HTTP_500_INTERNAL_SERVER_ERROR,
}


def configure_logging(level: str = "INFO") -> None:
    logger.remove()
    logger.add(sys.stderr, level=level)


def handle_compendium_error(request: Request, exc: CompendiumError) -> Response:
    """Turn domain errors into JSON error responses."""
    status_code = HTTP_500_INTERNAL_SERVER_ERROR
    for error_type, code in ERROR_STATUS.items():
        if isinstance(exc, error_type):
            status_code = code
            break

    if status_code >= HTTP_500_INTERNAL_SERVER_ERROR:
        logger.error(f"{request.method} {request.url.path} failed: {exc}")
    else:
        logger.warning(f"{request.method} {request.url.path} rejected: {exc}")

    return Response(
        content={"error": exc.kind, "detail": exc.message},
        status_code=status_code,
    )


def handle_request_validation_error(request: Request, exc: ValidationException) -> Response:
    """Report malformed request data with the same body as domain validation errors."""
    problems = [
        f"{item.get('key')}: {item.get('message')}" if item.get("key") else str(item.get("message"))
        for item in exc.extra or []
        if isinstance(item, dict)
    ]
    detail = "; ".join(problems) or exc.detail
    logger.warning(f"{request.method} {request.url.path} rejected: {detail}")

    return Response(
        content={"error": ValidationError.kind, "detail": detail},
        status_code=HTTP_400_BAD_REQUEST,
    )


def create_app(
    settings: Settings | None = None,
    *,
    tracker: TrackerService | None = None,
    preferences: PreferencesService | None = None,
    load_on_startup: bool = True,
) -> Litestar:
    """
    Build the application.

    Args:
        settings: Settings to use (read from the environment when omitted)
        tracker: Pre-built tracker service, mainly for tests
        preferences: Pre-built preferences service, mainly for tests
        load_on_startup: Fetch problems and links when the app starts
    """
    settings = settings or load_settings()
    preferences = preferences or create_preferences_service(settings)

    http_client = None
    if tracker is None:
        tracker, http_client = create_tracker_service(settings, preferences)

    async def load_collections() -> None:
        if not load_on_startup:
            return
        try:
            await tracker.load()
        except TransportError as e:
            logger.warning(f"Initial load failed, starting with empty collections: {e}")

    async def close_http_client() -> None:
        if http_client is not None:
            await http_client.close()

    return Litestar(
        route_handlers=[
            ProblemController,
            RevisionController,
            TransferController,
            LinkController,
            PreferencesController,
        ],
        dependencies={
            "tracker": Provide(provide_tracker_service),
            "preferences": Provide(provide_preferences_service),
        },
        exception_handlers={
            CompendiumError: handle_compendium_error,
            ValidationException: handle_request_validation_error,
        },
        plugins=[PydanticPlugin(prefer_alias=True)],
        on_startup=[load_collections],
        on_shutdown=[close_http_client],
        state=State({"tracker": tracker, "preferences": preferences}),
    )


def main() -> None:
    import uvicorn

    settings = load_settings()
    configure_logging(settings.log_level)

    logger.info(f"Serving tracker for backend {settings.api_base_url}")
    uvicorn.run(create_app(settings), host=settings.host, port=settings.port)


if __name__ == "__main__":
    main()
