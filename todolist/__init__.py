"""
Todolist - A minimal todo web application backed by a PostgreSQL connection pool.
"""

__version__ = "0.1.0"

from todolist.config import Config, DatabaseSettings
from todolist.database import SCHEMA, create_pool
from todolist.models import Todo, TodoCreate, TodoUpdate
from todolist.repository import TodoRepository
from todolist.app import create_app

__all__ = [
    "Config",
    "DatabaseSettings",
    "SCHEMA",
    "create_pool",
    "Todo",
    "TodoCreate",
    "TodoUpdate",
    "TodoRepository",
    "create_app",
]
