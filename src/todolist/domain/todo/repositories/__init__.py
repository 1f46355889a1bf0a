from todolist.domain.todo.repositories.todo_repository import TodoRepository

__all__ = ["TodoRepository"]
