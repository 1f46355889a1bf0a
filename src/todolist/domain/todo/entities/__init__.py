from todolist.domain.todo.entities.todo import (
    MAX_CONTENT_LENGTH,
    MAX_TITLE_LENGTH,
    Todo,
)

__all__ = ["MAX_CONTENT_LENGTH", "MAX_TITLE_LENGTH", "Todo"]
