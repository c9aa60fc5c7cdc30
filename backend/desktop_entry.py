from __future__ import annotations

import os
from typing import Any

import uvicorn

DEFAULT_HOST = "127.0.0.1"
DEFAULT_PORT = 18080


def _env_port(default: int) -> int:
    try:
        port = int(os.getenv("REPLYDESK_BACKEND_PORT", str(default)))
    except (TypeError, ValueError):
        return default
    if not 1 <= port <= 65535:
        return default
    return port


def run_options() -> dict[str, Any]:
    return {
        "host": os.getenv("REPLYDESK_BACKEND_HOST", DEFAULT_HOST),
        "port": _env_port(DEFAULT_PORT),
        "log_level": os.getenv("REPLYDESK_BACKEND_LOG_LEVEL", "info").lower(),
    }


def main() -> None:
    from replydesk.main import app as fastapi_app

    uvicorn.run(fastapi_app, **run_options())


if __name__ == "__main__":
    main()
