from todolist.application.queries.todo.get_todo_query import GetTodoQuery
from todolist.application.queries.todo.list_todos_query import ListTodosQuery

__all__ = ["GetTodoQuery", "ListTodosQuery"]
