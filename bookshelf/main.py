import argparse
import logging
from contextlib import asynccontextmanager
from typing import Optional

import uvicorn
from asgi_correlation_id import CorrelationIdMiddleware
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles

from bookshelf.config import HOST, LOG_LEVEL, SERVER_PORT, STATIC_DIR
from bookshelf.database import Database, build_database
from bookshelf.logging_config import configure_logging
from bookshelf.routes import router as api_router
from bookshelf.routes import verify_routes
from bookshelf.utils.exceptions import BookshelfException, RequestValidationException

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    if app.state.database is None:
        app.state.database = build_database()
    # A store that cannot be reached is fatal: the app never starts serving
    app.state.database.check_connection()
    app.state.database.create_tables()
    try:
        yield
    finally:
        app.state.database.dispose()


def create_app(database: Optional[Database] = None, static_dir: str = STATIC_DIR) -> FastAPI:
    app = FastAPI(
        title="Bookshelf API",
        description="An API for managing books and their chapters",
        version="1.0.0",
        lifespan=lifespan,
    )
    app.state.database = database

    app.add_middleware(CorrelationIdMiddleware)

    @app.exception_handler(BookshelfException)
    async def bookshelf_exception_handler(_request: Request, exc: BookshelfException) -> JSONResponse:
        return JSONResponse(status_code=exc.status_code, content=exc.to_dict())

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(_request: Request, exc: RequestValidationError) -> JSONResponse:
        errors = [
            {"loc": [str(part) for part in error.get("loc", ())], "msg": error.get("msg", "")}
            for error in exc.errors()
        ]
        return await bookshelf_exception_handler(_request, RequestValidationException(errors=errors))

    app.include_router(api_router)
    verify_routes(app)

    # Anything the API does not claim is looked up in the static directory
    app.mount("/", StaticFiles(directory=static_dir, html=True), name="static")
    return app


configure_logging()
app = create_app()


class BookshelfServer(uvicorn.Server):
    async def startup(self, sockets=None):
        await super().startup(sockets=sockets)
        # Sockets are bound once the parent startup returns without asking to exit
        if not self.should_exit:
            logger.info(f"Server started on port {self.config.port}")


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="bookshelf", description="Run the Bookshelf API server")
    parser.add_argument("--host", default=HOST, help=f"Host to bind (default: {HOST})")
    parser.add_argument("--port", type=int, default=SERVER_PORT, help=f"Port to bind (default: {SERVER_PORT})")
    parser.add_argument(
        "--log-level",
        default=LOG_LEVEL.lower(),
        choices=["critical", "error", "warning", "info", "debug"],
        help="Log level for the server",
    )
    return parser


def main(argv: Optional[list[str]] = None) -> None:
    args = build_arg_parser().parse_args(argv)
    configure_logging(args.log_level.upper())

    config = uvicorn.Config(app, host=args.host, port=args.port, log_level=args.log_level)
    BookshelfServer(config).run()


if __name__ == "__main__":
    main()
