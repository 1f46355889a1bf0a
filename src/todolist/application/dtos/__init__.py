"""Data Transfer Objects for the presentation layer.

DTOs decouple the presentation layer from domain models. In particular
``UserDTO`` is the only shape in which a user leaves the application
layer, so the password hash can never reach a response.
"""

from todolist.application.dtos.todo_dto import TodoDTO
from todolist.application.dtos.user_dto import LoginResultDTO, UserDTO

__all__ = ["LoginResultDTO", "TodoDTO", "UserDTO"]
