"""FastAPI application factory."""

import logging
from collections.abc import Awaitable, Callable

from fastapi import FastAPI, Request, Response, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import HTMLResponse, JSONResponse

from exercise_tracker.api.users import router as users_router
from exercise_tracker.app_logging import configure_logging
from exercise_tracker.config import parse_allowed_origins
from exercise_tracker.containers import AppContainer
from exercise_tracker.errors import (
    ConflictError,
    ExerciseTrackerError,
    NotFoundError,
    StorageError,
    ValidationError,
)

_STATUS_CODES: tuple[tuple[type[ExerciseTrackerError], int], ...] = (
    (ValidationError, status.HTTP_400_BAD_REQUEST),
    (ConflictError, status.HTTP_400_BAD_REQUEST),
    (NotFoundError, status.HTTP_404_NOT_FOUND),
    (StorageError, status.HTTP_500_INTERNAL_SERVER_ERROR),
)


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging()
    logger = logging.getLogger(__name__)

    app = FastAPI(title="Exercise Tracker")
    app.state.container = container

    @app.exception_handler(ExerciseTrackerError)
    async def handle_tracker_error(
        request: Request, exc: ExerciseTrackerError
    ) -> JSONResponse:
        status_code = _status_code_for(exc)
        if status_code == status.HTTP_500_INTERNAL_SERVER_ERROR:
            logger.error("%s %s failed: %s", request.method, request.url.path, exc)
        return JSONResponse(status_code=status_code, content={"error": exc.message})

    # Registered before CORS so CORS wraps it and 500s keep their CORS headers.
    @app.middleware("http")
    async def handle_unexpected_error(
        request: Request, call_next: Callable[[Request], Awaitable[Response]]
    ) -> Response:
        try:
            return await call_next(request)
        except Exception as exc:
            logger.error(
                "Unhandled error for %s %s",
                request.method,
                request.url.path,
                exc_info=exc,
            )
            return JSONResponse(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                content={"error": "Internal server error"},
            )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=parse_allowed_origins(container.settings.cors_allowed_origins),
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(users_router)

    @app.get("/", response_class=HTMLResponse)
    async def landing_page() -> HTMLResponse:
        """Landing page with forms for the API."""
        return HTMLResponse(_LANDING_HTML)

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    return app


def _status_code_for(exc: ExerciseTrackerError) -> int:
    for error_type, status_code in _STATUS_CODES:
        if isinstance(exc, error_type):
            return status_code
    return status.HTTP_500_INTERNAL_SERVER_ERROR


_LANDING_HTML = """<!doctype html>
<html lang="en">
  <head>
    <meta charset="utf-8" />
    <meta name="viewport" content="width=device-width, initial-scale=1" />
    <title>Exercise Tracker</title>
    <style>
      body { font-family: ui-sans-serif, system-ui, sans-serif; margin: 2rem; }
      h1 { margin-bottom: 0.5rem; }
      form { margin-bottom: 2rem; }
      input { display: block; padding: 0.4rem 0.6rem; margin: 0.4rem 0; width: 320px; }
      button { padding: 0.4rem 0.8rem; }
      code { background: #f6f6f6; padding: 0.1rem 0.3rem; }
    </style>
  </head>
  <body>
    <h1>Exercise Tracker</h1>
    <form action="/api/users" method="post">
      <h2>Create a New User</h2>
      <p><code>POST /api/users</code></p>
      <input name="username" type="text" placeholder="username" />
      <button type="submit">Submit</button>
    </form>
    <form id="exercise-form" method="post">
      <h2>Add exercises</h2>
      <p><code>POST /api/users/:_id/exercises</code></p>
      <input id="uid" type="text" placeholder=":_id" />
      <input name="description" type="text" placeholder="description*" />
      <input name="duration" type="text" placeholder="duration* (mins.)" />
      <input name="date" type="text" placeholder="date (yyyy-mm-dd)" />
      <button type="submit">Submit</button>
    </form>
    <p>
      <strong>GET user's exercise log:</strong>
      <code>GET /api/users/:_id/logs?[from][&amp;to][&amp;limit]</code>
    </p>
    <script>
      const exerciseForm = document.getElementById('exercise-form');
      exerciseForm.addEventListener('submit', () => {
        const userId = document.getElementById('uid').value;
        exerciseForm.action = `/api/users/${encodeURIComponent(userId)}/exercises`;
      });
    </script>
  </body>
</html>
"""
