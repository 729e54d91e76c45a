"""FastAPI application serving the todo API and its browser UI."""

import asyncio
import logging
from contextlib import asynccontextmanager
from pathlib import Path
from typing import AsyncIterator, List, Optional

from asyncpg.exceptions import InterfaceError, PostgresError
from fastapi import Depends, FastAPI, Request, Response
from fastapi.exception_handlers import http_exception_handler
from fastapi.responses import FileResponse, JSONResponse
from fastapi.staticfiles import StaticFiles
from starlette.exceptions import HTTPException as StarletteHTTPException

from todolist import __version__
from todolist.config import DatabaseSettings
from todolist.database import TodoPool, create_pool
from todolist.models import Todo, TodoCreate, TodoUpdate
from todolist.repository import TodoRepository

logger = logging.getLogger(__name__)

STATIC_DIR = Path(__file__).parent / "static"

DATABASE_ERRORS = (PostgresError, InterfaceError, OSError, asyncio.TimeoutError)


def get_repository(request: Request) -> TodoRepository:
    """Bind a repository to the pool owned by the running application."""
    return TodoRepository(request.app.state.pool)


async def method_not_allowed_handler(request: Request, exc: StarletteHTTPException) -> Response:
    """Answer method mismatches with a bare 405; defer everything else to FastAPI."""
    if exc.status_code == 405:
        return Response(status_code=405, headers=exc.headers)
    return await http_exception_handler(request, exc)


async def database_error_handler(request: Request, exc: Exception) -> JSONResponse:
    """Log a database fault and return a generic server error."""
    logger.error(f"Database error on {request.method} {request.url.path}: {exc!r}")
    return JSONResponse(status_code=500, content={"detail": "Internal Server Error"})


def create_app(
    pool: Optional[TodoPool] = None,
    settings: Optional[DatabaseSettings] = None,
) -> FastAPI:
    """
    Build the todo application.

    Args:
        pool: Pool to run queries on. The caller keeps ownership and the
            application never closes it.
        settings: Used to create and own a pool for the application's
            lifetime when no pool is given. Defaults to the environment.

    Returns:
        Configured FastAPI application
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        if pool is not None:
            yield
            return
        app.state.pool = await create_pool(settings or DatabaseSettings.from_env())
        try:
            yield
        finally:
            logger.info("Closing database pool")
            await app.state.pool.close()
            app.state.pool = None

    app = FastAPI(title="Todo List", version=__version__, lifespan=lifespan)
    app.state.pool = pool

    app.add_exception_handler(StarletteHTTPException, method_not_allowed_handler)
    for error_class in DATABASE_ERRORS:
        app.add_exception_handler(error_class, database_error_handler)

    app.mount("/static", StaticFiles(directory=STATIC_DIR), name="static")

    @app.get("/", include_in_schema=False)
    async def index() -> FileResponse:
        """Serve the single-page UI."""
        return FileResponse(STATIC_DIR / "index.html")

    @app.get("/health")
    async def health_check():
        """Health check endpoint."""
        return {"status": "healthy"}

    @app.get("/todos", response_model=List[Todo])
    async def list_todos(repo: TodoRepository = Depends(get_repository)):
        """Get all todos."""
        return await repo.list_todos()

    @app.post("/todos", status_code=201)
    async def create_todo(todo: TodoCreate, repo: TodoRepository = Depends(get_repository)):
        """Create a new todo."""
        await repo.create_todo(todo.text)
        return Response(status_code=201)

    @app.put("/todos/{todo_id}")
    async def update_todo(
        todo_id: int, update: TodoUpdate, repo: TodoRepository = Depends(get_repository)
    ):
        """Set the completed flag of a todo."""
        await repo.set_completed(todo_id, update.completed)
        return Response(status_code=200)

    @app.delete("/todos/{todo_id}")
    async def delete_todo(todo_id: int, repo: TodoRepository = Depends(get_repository)):
        """Delete a todo by ID."""
        await repo.delete_todo(todo_id)
        return Response(status_code=200)

    return app
