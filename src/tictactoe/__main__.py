"""Entry point for running the game server via ``python -m tictactoe``."""

from __future__ import annotations

import logging
import os

import uvicorn


def _logging_level(name: str) -> int:
    """Stdlib level for a uvicorn level name; ``trace`` and unknowns map to DEBUG."""

    level = logging.getLevelName(name.upper())
    return level if isinstance(level, int) else logging.DEBUG


def main() -> None:
    """Start the FastAPI-powered tic-tac-toe server."""

    host = os.environ.get("TICTACTOE_HOST", "0.0.0.0")
    port = int(os.environ.get("TICTACTOE_PORT", "8000"))
    log_level = os.environ.get("TICTACTOE_LOG_LEVEL", "info").lower()
    logging.basicConfig(
        level=_logging_level(log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    uvicorn.run("tictactoe.ui:app", host=host, port=port, reload=False, log_level=log_level)


if __name__ == "__main__":
    main()
