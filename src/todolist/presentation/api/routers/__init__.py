from todolist.presentation.api.routers.todos import router as todos_router
from todolist.presentation.api.routers.users import router as users_router

__all__ = ["todos_router", "users_router"]
