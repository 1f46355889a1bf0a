from todolist.infrastructure.persistence.sqlalchemy.repositories.todo.todo_repository import (  # NOQA: E501
    TodoRepositorySQLAlchemy,
)

__all__ = ["TodoRepositorySQLAlchemy"]
