"""Todo API: DuckDB store, aiohttp REST server and HTTP client."""

__version__ = "0.1.0"
