"""Helper for running the keymask ASGI application."""

from __future__ import annotations

import os
from typing import Optional

import uvicorn

from keymask.config import get_settings


def serve(host: Optional[str] = None, port: Optional[int] = None, reload: bool = False) -> None:
    """Run the API with uvicorn, defaulting to the configured bind address."""

    settings = get_settings()
    uvicorn.run(
        "keymask.server.app:app",
        host=host or settings.server_host,
        port=port or settings.server_port,
        reload=reload,
    )


def main() -> None:
    """Entry point used by `keymask-server`."""

    serve(reload=os.environ.get("RELOAD") == "1")


if __name__ == "__main__":
    main()
