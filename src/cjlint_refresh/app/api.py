"""HTTP surface: one endpoint that refreshes the cached analysis of a repo."""

from __future__ import annotations

from contextlib import asynccontextmanager

from fastapi import FastAPI, Query
from fastapi.responses import JSONResponse

from .container import Container
from .main import _create_container
from .models import ApiResponse
from ..core.domain.exceptions import PipelineError

SUCCESS_MESSAGE = "Analysis completed successfully"


def _respond(status_code: int, body: ApiResponse) -> JSONResponse:
    return JSONResponse(status_code=status_code, content=body.to_content())


def create_app(container: Container | None = None) -> FastAPI:
    """Build the FastAPI application.

    The cjlint toolchain is extracted during startup, before any request is
    served. Pass a preconfigured container to override providers in tests.
    """
    if container is None:
        container = _create_container()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        container.toolchain().ensure_extracted()
        try:
            yield
        finally:
            container.shutdown_resources()

    app = FastAPI(
        title="cjlint-refresh",
        description="Runs cjlint over a repository and caches the report",
        lifespan=lifespan,
    )
    app.state.container = container

    @app.get("/health")
    def health() -> dict[str, str | bool]:
        return {
            "status": "ok",
            "toolchain": container.toolchain().is_extracted(),
        }

    # Sync endpoint: FastAPI runs the blocking pipeline in its threadpool.
    @app.get("/api/refresh")
    def refresh(repo: str | None = Query(default=None)) -> JSONResponse:
        logger = container.logger()
        try:
            result = container.analyze_uc().execute(repo_url=repo)
        except PipelineError as exc:
            logger.warning(
                "request_failed",
                repo_url=repo,
                stage=type(exc).__name__,
                error=exc.describe(),
            )
            return _respond(exc.status_code, ApiResponse.fail(exc.describe()))
        except Exception as exc:
            logger.exception("request_failed", repo_url=repo)
            return _respond(500, ApiResponse.fail(f"Internal error: {exc}"))

        return _respond(200, ApiResponse.ok(result, SUCCESS_MESSAGE))

    return app
