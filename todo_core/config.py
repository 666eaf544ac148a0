"""Todo service configuration.

Externalizes the settings the store, server and client need at runtime:
database location, bind address, API base URL.

Configuration can be loaded from:
- Environment variables (TODO_*), optionally via a .env file
- Programmatic construction

This module defines the schema. It performs no I/O beyond reading the
environment mapping it is given.
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass, field

DEFAULT_DB_PATH = ".todos/tododb.duckdb"
DEFAULT_PORT = 4567


@dataclass
class StoreConfig:
    """Storage configuration."""

    path: str = DEFAULT_DB_PATH
    """DuckDB file path, or ":memory:" for a throwaway database."""


@dataclass
class ServerConfig:
    """REST server configuration."""

    host: str = "0.0.0.0"
    port: int = DEFAULT_PORT


@dataclass
class ClientConfig:
    """HTTP client configuration."""

    api_url: str = f"http://localhost:{DEFAULT_PORT}/api/"
    """Base URL of the API; the client appends "todos"."""


@dataclass
class TodoConfig:
    """Top-level configuration.

    Load from the environment:
        config = TodoConfig.from_env()

    Or construct programmatically:
        config = TodoConfig(store=StoreConfig(path=":memory:"))
    """

    store: StoreConfig = field(default_factory=StoreConfig)
    server: ServerConfig = field(default_factory=ServerConfig)
    client: ClientConfig = field(default_factory=ClientConfig)

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> TodoConfig:
        """Build a config from TODO_* environment variables.

        Recognised variables: TODO_DB_PATH, TODO_API_HOST, TODO_API_PORT,
        TODO_API_URL. Unset variables keep their defaults.

        Raises:
            ValueError: If TODO_API_PORT is not an integer.
        """
        env = os.environ if environ is None else environ
        return cls(
            store=StoreConfig(path=env.get("TODO_DB_PATH", DEFAULT_DB_PATH)),
            server=ServerConfig(
                host=env.get("TODO_API_HOST", ServerConfig.host),
                port=int(env.get("TODO_API_PORT", DEFAULT_PORT)),
            ),
            client=ClientConfig(api_url=env.get("TODO_API_URL", ClientConfig.api_url)),
        )
