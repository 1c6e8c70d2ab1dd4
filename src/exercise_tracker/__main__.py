"""Run the exercise tracker API with uvicorn."""

import uvicorn

from exercise_tracker.config import Settings


def main() -> None:
    """Serve the ASGI app on the configured port."""
    settings = Settings()
    uvicorn.run("exercise_tracker.api.asgi:app", host="0.0.0.0", port=settings.port)


if __name__ == "__main__":
    main()
