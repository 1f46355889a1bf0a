"""Users router: registration, login and self-service profile management."""

from uuid import UUID

from fastapi import APIRouter, status

from todolist.application.commands.user import (
    ChangeEmailCommand,
    ChangePasswordCommand,
    DeleteUserCommand,
    UpdateUserCommand,
)
from todolist.application.queries.user import GetUserProfileQuery
from todolist.presentation.api.dependencies import (
    AuthService,
    DBSession,
    PasswordService,
    RepoFactory,
)
from todolist.presentation.api.schemas import (
    ChangeEmailRequest,
    ChangePasswordRequest,
    DataResponse,
    ErrorResponse,
    LoginRequest,
    LoginResponse,
    MessageDataResponse,
    MessageResponse,
    RegisteredUserResponse,
    RegisterRequest,
    UpdateUserRequest,
    UserResponse,
)

router = APIRouter()


@router.post(
    "/register",
    status_code=status.HTTP_201_CREATED,
    summary="Register a new user",
    responses={
        201: {"description": "User registered successfully"},
        400: {"model": ErrorResponse, "description": "Invalid input or email taken"},
    },
)
async def register(
    request: RegisterRequest,
    auth_service: AuthService,
    session: DBSession,
) -> MessageDataResponse[RegisteredUserResponse]:
    """
    Create a new account with email, password and name.

    The email is stored lower-cased and trimmed.
    """
    try:
        user = await auth_service.register(
            email=request.email,
            password=request.password,
            name=request.name,
        )
        await session.commit()
    except Exception:
        await session.rollback()
        raise

    return MessageDataResponse(
        message="User registered successfully",
        data=RegisteredUserResponse.from_dto(user),
    )


@router.post(
    "/login",
    summary="Authenticate user",
    responses={
        200: {"description": "Login successful"},
        400: {"model": ErrorResponse, "description": "Missing or malformed fields"},
        401: {"model": ErrorResponse, "description": "Invalid credentials"},
    },
)
async def login(
    request: LoginRequest,
    auth_service: AuthService,
    session: DBSession,
) -> MessageDataResponse[LoginResponse]:
    """
    Authenticate with email and password.

    Unknown email and wrong password produce the same response.
    """
    try:
        result = await auth_service.login(
            email=request.email,
            password=request.password,
        )
        # Persist an upgraded password hash, if any
        await session.commit()
    except Exception:
        await session.rollback()
        raise

    return MessageDataResponse(
        message="Login successful",
        data=LoginResponse.from_dto(result),
    )


@router.get(
    "/profile",
    summary="Get own profile",
    responses={401: {"model": ErrorResponse}},
)
async def get_profile(factory: RepoFactory) -> DataResponse[UserResponse]:
    query = GetUserProfileQuery.from_factory(factory)
    user = await query.execute()
    return DataResponse(data=UserResponse.from_dto(user))


@router.get(
    "/{user_id}",
    summary="Get user by id",
    responses={
        401: {"model": ErrorResponse, "description": "Not your profile"},
        404: {"model": ErrorResponse},
    },
)
async def get_user(user_id: UUID, factory: RepoFactory) -> DataResponse[UserResponse]:
    """Users can only read their own record."""
    query = GetUserProfileQuery.from_factory(factory)
    user = await query.execute(user_id)
    return DataResponse(data=UserResponse.from_dto(user))


@router.put(
    "/{user_id}",
    summary="Update profile",
    responses={
        400: {"model": ErrorResponse},
        401: {"model": ErrorResponse},
        404: {"model": ErrorResponse},
    },
)
async def update_user(
    user_id: UUID,
    request: UpdateUserRequest,
    factory: RepoFactory,
    password_service: PasswordService,
) -> MessageDataResponse[UserResponse]:
    command = UpdateUserCommand.from_factory(factory, password_service)
    try:
        user = await command.execute(
            user_id=user_id,
            email=request.email,
            name=request.name,
            password=request.password,
        )
        await factory.session.commit()
    except Exception:
        await factory.session.rollback()
        raise

    return MessageDataResponse(
        message="User updated successfully",
        data=UserResponse.from_dto(user),
    )


@router.put(
    "/{user_id}/password",
    summary="Change password",
    responses={
        400: {"model": ErrorResponse},
        401: {"model": ErrorResponse, "description": "Current password is incorrect"},
        404: {"model": ErrorResponse},
    },
)
async def change_password(
    user_id: UUID,
    request: ChangePasswordRequest,
    factory: RepoFactory,
    password_service: PasswordService,
) -> MessageResponse:
    command = ChangePasswordCommand.from_factory(factory, password_service)
    try:
        message = await command.execute(
            user_id=user_id,
            current_password=request.current_password,
            new_password=request.password,
        )
        await factory.session.commit()
    except Exception:
        await factory.session.rollback()
        raise

    return MessageResponse(message=message)


@router.put(
    "/{user_id}/email",
    summary="Change email",
    responses={
        400: {"model": ErrorResponse},
        401: {"model": ErrorResponse, "description": "Current password is incorrect"},
        404: {"model": ErrorResponse},
    },
)
async def change_email(
    user_id: UUID,
    request: ChangeEmailRequest,
    factory: RepoFactory,
    password_service: PasswordService,
) -> MessageDataResponse[UserResponse]:
    command = ChangeEmailCommand.from_factory(factory, password_service)
    try:
        user = await command.execute(
            user_id=user_id,
            new_email=request.new_email,
            current_password=request.current_password,
        )
        await factory.session.commit()
    except Exception:
        await factory.session.rollback()
        raise

    return MessageDataResponse(
        message="Email updated successfully",
        data=UserResponse.from_dto(user),
    )


@router.delete(
    "/{user_id}",
    summary="Delete account",
    responses={
        401: {"model": ErrorResponse},
        404: {"model": ErrorResponse},
    },
)
async def delete_user(user_id: UUID, factory: RepoFactory) -> MessageResponse:
    """Delete the account and all of its todos."""
    command = DeleteUserCommand.from_factory(factory)
    try:
        message = await command.execute(user_id)
        await factory.session.commit()
    except Exception:
        await factory.session.rollback()
        raise

    return MessageResponse(message=message)
