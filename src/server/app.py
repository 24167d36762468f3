"""FastAPI application bootstrap."""

from __future__ import annotations

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from .routes import register_health_routes, register_task_routes
from .routes.tasks import envelope_response


async def handle_invalid_body(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Answer malformed request bodies with a 400 envelope."""
    details = "; ".join(
        f"{'.'.join(str(part) for part in err.get('loc', ()))}: {err.get('msg', '')}"
        for err in exc.errors()
    )
    return envelope_response(400, success=False, message="Invalid request body", error=details)


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    app = FastAPI(title="Task Tracker API", version="1.0.0")

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(RequestValidationError, handle_invalid_body)

    register_health_routes(app)
    register_task_routes(app)

    return app


app = create_app()
