from todolist.infrastructure.persistence.sqlalchemy.models.todo.todo_model import (
    TodoModel,
)

__all__ = ["TodoModel"]
