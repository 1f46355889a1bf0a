from todolist.application.commands.todo.create_todo_command import CreateTodoCommand
from todolist.application.commands.todo.delete_todo_command import DeleteTodoCommand
from todolist.application.commands.todo.update_todo_command import UpdateTodoCommand

__all__ = ["CreateTodoCommand", "DeleteTodoCommand", "UpdateTodoCommand"]
