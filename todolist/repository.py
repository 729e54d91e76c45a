"""SQL access to the todos table."""

import logging
from typing import List

from todolist.database import MAX_ID, MIN_ID, TodoPool
from todolist.models import Todo

logger = logging.getLogger(__name__)


def affected_rows(status: str) -> int:
    """
    Extract the row count from a command status tag.

    asyncpg returns tags such as "UPDATE 1" or "DELETE 0".
    """
    try:
        return int(status.rsplit(" ", 1)[-1])
    except (AttributeError, ValueError):
        return 0


class TodoRepository:
    """Runs parameterized statements against the todos table."""

    def __init__(self, pool: TodoPool):
        self.pool = pool

    async def list_todos(self) -> List[Todo]:
        """Return every todo; row order is whatever the table yields."""
        rows = await self.pool.fetch("SELECT id, text, completed FROM todos")
        logger.debug(f"Fetched {len(rows)} todos")
        return [
            Todo(id=row["id"], text=row["text"], completed=row["completed"])
            for row in rows
        ]

    async def create_todo(self, text: str) -> None:
        """Insert a todo; the database assigns the id and completed=false."""
        await self.pool.execute("INSERT INTO todos (text) VALUES ($1)", text)
        logger.debug(f"Inserted todo with text {text!r}")

    async def set_completed(self, todo_id: int, completed: bool) -> int:
        """Set the completed flag; returns the number of rows changed."""
        if not MIN_ID <= todo_id <= MAX_ID:
            logger.debug(f"Update skipped, id {todo_id} is outside the id column range")
            return 0
        status = await self.pool.execute(
            "UPDATE todos SET completed = $1 WHERE id = $2", completed, todo_id
        )
        count = affected_rows(status)
        if count == 0:
            logger.debug(f"Update matched no todo with id {todo_id}")
        return count

    async def delete_todo(self, todo_id: int) -> int:
        """Delete a todo; returns the number of rows removed."""
        if not MIN_ID <= todo_id <= MAX_ID:
            logger.debug(f"Delete skipped, id {todo_id} is outside the id column range")
            return 0
        status = await self.pool.execute("DELETE FROM todos WHERE id = $1", todo_id)
        count = affected_rows(status)
        if count == 0:
            logger.debug(f"Delete matched no todo with id {todo_id}")
        return count
