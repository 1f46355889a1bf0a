from todolist.application.queries.user.get_user_profile_query import (
    GetUserProfileQuery,
)

__all__ = ["GetUserProfileQuery"]
