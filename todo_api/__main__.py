"""Entry point for the todo API server.

Run with:
  python -m todo_api          # serve on TODO_API_HOST:TODO_API_PORT

Reads TODO_DB_PATH, TODO_API_HOST and TODO_API_PORT, also from a .env file
in the working directory.
"""

from __future__ import annotations

import logging

from dotenv import load_dotenv

from todo_core.config import TodoConfig

from .db import connection
from .rest_server import run_server
from .store import DuckDBTodoStore

logger = logging.getLogger(__name__)


def main() -> None:
    """Load configuration, open the store and serve."""
    load_dotenv()

    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    config = TodoConfig.from_env()
    logger.info(f"Database: {config.store.path}")

    with connection(config.store.path) as conn:
        run_server(DuckDBTodoStore(conn), config.server)


if __name__ == "__main__":
    main()
