"""REST API server for the todo collection.

Endpoints:
    GET    /api/todos         list, filtered by owner/status/body/category,
                              ordered by sortby/sortorder
    GET    /api/todos/{id}    one todo
    POST   /api/todos         create; JSON body, responds {"id": ...}
    DELETE /api/todos/{id}    delete
    GET    /api/health        liveness plus record count
"""

from __future__ import annotations

import logging
from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from typing import Any

from aiohttp import web

from todo_core.adapters.store import TodoStore
from todo_core.config import ServerConfig
from todo_core.errors import StoreUnavailable, TodoError
from todo_core.lifecycle import TodoLifecycle
from todo_core.queries import TodoQueries
from todo_core.types import TodoFilters

logger = logging.getLogger(__name__)

API_TODOS = "/api/todos"
API_TODO_BY_ID = "/api/todos/{id}"
API_HEALTH = "/api/health"

STORE_UNAVAILABLE_MESSAGE = "The todo store is unavailable"

STORE_KEY = web.AppKey("store", TodoStore)

Handler = Callable[[web.Request], Awaitable[web.StreamResponse]]


@dataclass(frozen=True)
class Route:
    """One entry of a controller's route table."""

    method: str
    path: str
    handler: Handler


@web.middleware
async def error_middleware(request: web.Request, handler: Any) -> web.StreamResponse:
    """Turn todo domain errors into JSON error responses.

    Args:
        request: The aiohttp request object.
        handler: The request handler.

    Returns:
        Response from handler, or {"error": message} with the error's status.
    """
    try:
        return await handler(request)
    except StoreUnavailable as e:
        logger.error(f"{request.method} {request.path} failed: store unavailable")
        return web.json_response({"error": STORE_UNAVAILABLE_MESSAGE}, status=e.status)
    except TodoError as e:
        return web.json_response({"error": e.message}, status=e.status)


class TodoController:
    """Request handlers for the todo endpoints.

    The handlers only translate between HTTP and the core operations; the
    filtering, ordering and validation all live in TodoQueries and
    TodoLifecycle.
    """

    def __init__(self, queries: TodoQueries, lifecycle: TodoLifecycle) -> None:
        self._queries = queries
        self._lifecycle = lifecycle

    async def get_todo(self, request: web.Request) -> web.Response:
        """GET /api/todos/{id} - One todo by id."""
        todo = self._lifecycle.get_todo(request.match_info["id"])
        return web.json_response(todo.to_dict())

    async def get_todos(self, request: web.Request) -> web.Response:
        """GET /api/todos - Todos matching the query parameters."""
        filters = TodoFilters.from_query(request.query)
        todos = self._queries.list_todos(filters)
        return web.json_response([t.to_dict() for t in todos])

    async def add_new_todo(self, request: web.Request) -> web.Response:
        """POST /api/todos - Create a todo from the JSON body."""
        try:
            body = await request.json()
        except Exception:
            return web.json_response({"error": "invalid JSON in request body"}, status=400)

        if not isinstance(body, dict):
            return web.json_response(
                {"error": "request body must be a JSON object"}, status=400
            )

        new_id = self._lifecycle.add_todo(body)
        return web.json_response({"id": new_id}, status=201)

    async def delete_todo(self, request: web.Request) -> web.Response:
        """DELETE /api/todos/{id} - Remove one todo."""
        self._lifecycle.delete_todo(request.match_info["id"])
        return web.Response(status=200)

    def routes(self) -> list[Route]:
        """The route table the hosting HTTP layer registers."""
        return [
            Route("GET", API_TODO_BY_ID, self.get_todo),
            Route("GET", API_TODOS, self.get_todos),
            Route("DELETE", API_TODO_BY_ID, self.delete_todo),
            Route("POST", API_TODOS, self.add_new_todo),
        ]


async def handle_health(request: web.Request) -> web.Response:
    """GET /api/health - Health check with record count."""
    count = request.app[STORE_KEY].count()
    return web.json_response({"status": "ok", "todos": count})


def add_routes(app: web.Application, routes: list[Route]) -> None:
    """Register a route table on an aiohttp application."""
    for route in routes:
        app.router.add_route(route.method, route.path, route.handler)


def create_app(store: TodoStore) -> web.Application:
    """Create and configure the aiohttp application.

    Args:
        store: The store every handler reads from and writes to.

    Returns:
        Configured aiohttp Application instance.
    """
    app = web.Application(middlewares=[error_middleware])
    app[STORE_KEY] = store

    controller = TodoController(TodoQueries(store), TodoLifecycle(store))
    app.router.add_get(API_HEALTH, handle_health)
    add_routes(app, controller.routes())

    return app


def run_server(store: TodoStore, config: ServerConfig | None = None) -> None:
    """Run the REST API server until interrupted.

    Args:
        store: Backing store.
        config: Bind address; defaults to ServerConfig().
    """
    config = config or ServerConfig()
    app = create_app(store)
    logger.info(f"Todo API: http://{config.host}:{config.port}{API_TODOS}")
    web.run_app(app, host=config.host, port=config.port)
