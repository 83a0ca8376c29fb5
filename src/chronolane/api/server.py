"""
ASGI Entry Point for the Chronolane API.

This module exposes the `app` object required by ASGI servers (Uvicorn/Gunicorn).
Environment variables are loaded from `.env` before the factory runs so that
settings read at import time see them.

Usage
-----
Run via the module entry point:
    $ python -m chronolane.api.server

Or via uvicorn directly:
    $ uvicorn chronolane.api.server:app --reload
"""

from pathlib import Path

import uvicorn
from dotenv import load_dotenv

load_dotenv(dotenv_path=Path(".env"))

from chronolane.api.app import create_app  # noqa: E402

app = create_app()


def main() -> None:
    """Run the API server locally for development."""
    uvicorn.run(
        "chronolane.api.server:app",
        host="0.0.0.0",
        port=8000,
        reload=True,
        log_level="info",
    )


if __name__ == "__main__":
    main()
