from __future__ import annotations

import argparse
import os

import uvicorn

from users_api.config import get_settings


def main() -> None:
    settings = get_settings()
    parser = argparse.ArgumentParser(description="In-memory Users API server")
    parser.add_argument("--host", default=settings.host, help="Interface to bind")
    parser.add_argument("--port", type=int, default=settings.port, help="Port to listen on")
    parser.add_argument("--log-level", default=settings.log_level, help="Root log level (DEBUG, INFO, ...)")
    parser.add_argument("--reload", action="store_true", help="Restart on code changes (development only)")
    args = parser.parse_args()

    # The app reads its level from settings at startup (also in reload workers).
    os.environ["LOG_LEVEL"] = args.log_level
    get_settings.cache_clear()

    uvicorn.run(
        "users_api.main:app",
        host=args.host,
        port=args.port,
        reload=bool(args.reload),
        log_level=args.log_level.lower(),
    )


if __name__ == "__main__":
    main()
