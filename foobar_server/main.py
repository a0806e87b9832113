"""FastAPI app factory, health endpoint and listener startup."""
from __future__ import annotations

import os
import sys
import time
from collections.abc import Callable
from uuid import uuid4

import uvicorn
from fastapi import FastAPI, Request, Response
from fastapi.responses import PlainTextResponse

from foobar_server import __version__
from foobar_server.api import router as api_router
from foobar_server.config import ServerConfig
from foobar_server.logging_conf import get_logger, setup_logging

HEALTHY_MESSAGE = "Server is healthy :)\n"

# Configure logging before anything else.
setup_logging()
logger = get_logger("app")


def create_app() -> FastAPI:
    app = FastAPI(
        title="FooBar Sequence Service",
        version=os.getenv("APP_VERSION", __version__),
    )

    @app.on_event("startup")
    async def _on_startup() -> None:
        logger.info("startup", extra={"event": "startup"})

    @app.on_event("shutdown")
    async def _on_shutdown() -> None:
        logger.info("shutdown", extra={"event": "shutdown"})

    @app.middleware("http")
    async def request_logger(request: Request, call_next: Callable[[Request], Response]):
        """JSON request logging with a correlation id.

        - Propagates an incoming X-Request-ID, otherwise mints one
        - Logs a start and end event with method/path/status/elapsed_ms
        - Echoes X-Request-ID on the response
        """
        request_id = request.headers.get("X-Request-ID", str(uuid4()))
        request.state.request_id = request_id

        start = time.perf_counter()
        logger.info(
            "request.start",
            extra={
                "event": "request_start",
                "method": request.method,
                "path": request.url.path,
                "request_id": request_id,
            },
        )
        try:
            response = await call_next(request)
        except Exception as exc:  # Log and re-raise to let FastAPI answer 500
            logger.exception(
                "request.error",
                extra={
                    "event": "request_error",
                    "path": request.url.path,
                    "method": request.method,
                    "request_id": request_id,
                },
            )
            raise exc
        finally:
            elapsed_ms = (time.perf_counter() - start) * 1000.0

        response.headers["X-Request-ID"] = request_id
        logger.info(
            "request.end",
            extra={
                "event": "request_end",
                "status_code": response.status_code,
                "elapsed_ms": round(elapsed_ms, 2),
                "request_id": request_id,
            },
        )
        return response

    @app.get("/healthz", response_class=PlainTextResponse, summary="Liveness check")
    async def healthz() -> PlainTextResponse:
        return PlainTextResponse(HEALTHY_MESSAGE)

    app.include_router(api_router)

    return app


def serve(config: ServerConfig) -> None:
    """Bind the listener described by `config` and serve until stopped.

    A listener that cannot start (e.g. port already bound) is fatal.
    """
    setup_logging(config.log_level)
    logger.info(
        "server.listen",
        extra={"event": "server_listen", "host": config.host, "port": config.port},
    )
    server = uvicorn.Server(
        uvicorn.Config(
            app,
            host=config.host,
            port=config.port,
            log_config=None,
            log_level=config.log_level.lower(),
        )
    )
    try:
        # uvicorn logs bind errors and raises SystemExit itself
        server.run()
    finally:
        if not server.started:
            logger.critical(
                "server.listen_failed",
                extra={"event": "server_listen_failed", "host": config.host, "port": config.port},
            )
    if not server.started:
        sys.exit(1)


def main() -> None:
    serve(ServerConfig.from_env())


# ASGI entrypoint for uvicorn: `uvicorn foobar_server.main:app --port 8080`
app = create_app()


if __name__ == "__main__":
    main()
