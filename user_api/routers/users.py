"""User management API router.

Every ``/users/{username}`` route addresses a user by username, never by the
numeric id.
"""

from typing import Any, NoReturn

from fastapi import APIRouter, Depends, Query, Request, Response, status
from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from user_api.config import settings
from user_api.deps import Store
from user_api.logger import get_logger, log_exception
from user_api.schemas import (
    ErrorResponse,
    LoginResponse,
    MessageResponse,
    UserCreate,
    UserCreatedResponse,
    UserResponse,
    UserUpdate,
)
from user_api.security import hash_password
from user_api.utils.exceptions import raise_conflict, raise_internal_error, raise_not_found

router = APIRouter(prefix="/users", tags=["users"])
logger = get_logger(__name__)

NOT_FOUND = {status.HTTP_404_NOT_FOUND: {"model": MessageResponse}}
FAULT = {status.HTTP_500_INTERNAL_SERVER_ERROR: {"model": ErrorResponse}}
CONFLICT = {status.HTTP_409_CONFLICT: {"model": ErrorResponse}}


def _not_found_message(username: str) -> str:
    return f"User with username {username} not found"


def _hash_or_fail(password: str) -> str:
    try:
        return hash_password(password)
    except (ValueError, TypeError) as exc:
        log_exception(logger, exc, "Password hashing failed", include_traceback=False)
        raise_internal_error(str(exc), cause=exc)


def _raise_storage_error(
    exc: SQLAlchemyError,
    context: str,
    *,
    taken: str | None = None,
    **log_context: object,
) -> NoReturn:
    """Translate a storage fault into a 409 (username taken) or a 500."""
    if taken is not None and isinstance(exc, IntegrityError):
        log_exception(logger, exc, context, level="warning", include_traceback=False, **log_context)
        raise_conflict(f"User with username {taken} already exists", cause=exc)

    log_exception(logger, exc, context, **log_context)
    orig = getattr(exc, "orig", None)
    raise_internal_error(str(orig) if orig is not None else str(exc), cause=exc)


async def _claimed_username(request: Request) -> Any:
    """Read ``username`` from a login body for logging. Any body shape is accepted."""
    try:
        payload = await request.json()
    except ValueError:
        return None
    return payload.get("username") if isinstance(payload, dict) else None


async def hash_signup_password(user_data: UserCreate) -> UserCreate:
    """Replace the plaintext credential with its bcrypt hash before signup."""
    return user_data.model_copy(update={"password": _hash_or_fail(user_data.password)})


@router.post(
    "/signup",
    response_model=UserCreatedResponse,
    status_code=status.HTTP_201_CREATED,
    responses={**CONFLICT, **FAULT},
)
async def signup(
    store: Store,
    user_data: UserCreate = Depends(hash_signup_password),
) -> UserCreatedResponse:
    """Create a new user. The response never includes the password."""
    try:
        user = await store.create(
            username=user_data.username,
            email=user_data.email,
            password=user_data.password,
        )
    except SQLAlchemyError as exc:
        _raise_storage_error(
            exc, "Failed to create user", username=user_data.username, taken=user_data.username
        )

    logger.info("User created", user_id=user.id, username=user.username)
    return UserCreatedResponse.model_validate(user)


@router.post("/login", response_model=LoginResponse, response_model_exclude_none=True)
async def login(request: Request) -> LoginResponse:
    """Login placeholder.

    Any body is accepted. Nothing is validated or checked against storage,
    and ``authenticated`` is always false. User data attached to the request by
    an upstream component is echoed back as ``userData``.
    """
    logger.warning(
        "Login stub called; no authentication performed",
        username=await _claimed_username(request),
    )
    return LoginResponse(
        message="Login successful",
        authenticated=False,
        user_data=getattr(request.state, "user_data", None),
    )


@router.get("/", response_model=list[UserResponse], responses=FAULT)
async def list_users(
    response: Response,
    store: Store,
    limit: int = Query(
        settings.default_page_size,
        ge=1,
        le=settings.max_page_size,
        description="Maximum items to return",
    ),
    offset: int = Query(0, ge=0, description="Number of items to skip"),
    all_rows: bool = Query(False, alias="all", description="Return every user, unpaginated"),
) -> list[UserResponse]:
    """List users ordered by id, one page at a time unless ``all=true``."""
    try:
        total = await store.count()
        if all_rows:
            users = await store.find_all()
        else:
            users = await store.find_all(limit=limit, offset=offset)
    except SQLAlchemyError as exc:
        _raise_storage_error(exc, "Failed to list users")

    response.headers["X-Total-Count"] = str(total)
    return [UserResponse.model_validate(user) for user in users]


@router.get("/{username}", response_model=UserResponse, responses={**NOT_FOUND, **FAULT})
async def get_user(username: str, store: Store) -> UserResponse:
    """Get a user by username."""
    try:
        user = await store.find_one(username)
    except SQLAlchemyError as exc:
        _raise_storage_error(exc, "Failed to fetch user", username=username)

    if user is None:
        raise_not_found(_not_found_message(username))

    return UserResponse.model_validate(user)


@router.put(
    "/{username}",
    response_model=UserResponse,
    responses={**NOT_FOUND, **CONFLICT, **FAULT},
)
async def update_user(username: str, user_data: UserUpdate, store: Store) -> UserResponse:
    """Update a user by username and return the stored result.

    A new ``password`` is hashed before it is written, once the user is known
    to exist. Renaming the user changes the key for every later request.
    """
    changes = user_data.changes()
    if "password" in changes:
        try:
            existing = await store.find_one(username)
        except SQLAlchemyError as exc:
            _raise_storage_error(exc, "Failed to fetch user", username=username)
        if existing is None:
            raise_not_found(_not_found_message(username))
        changes["password"] = _hash_or_fail(changes["password"])

    try:
        updated = await store.update(username, changes)
    except SQLAlchemyError as exc:
        _raise_storage_error(
            exc, "Failed to update user", username=username, taken=changes.get("username")
        )

    if not updated:
        raise_not_found(_not_found_message(username))

    current = changes.get("username", username)
    try:
        user = await store.find_one(current)
    except SQLAlchemyError as exc:
        _raise_storage_error(exc, "Failed to fetch updated user", username=current)

    if user is None:
        # Removed between the update and the re-fetch
        raise_not_found(_not_found_message(current))

    if changes:
        logger.info("User updated", user_id=user.id, username=username, fields=sorted(changes))
    return UserResponse.model_validate(user)


@router.delete(
    "/{username}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    responses={**NOT_FOUND, **FAULT},
)
async def delete_user(username: str, store: Store) -> Response:
    """Delete a user by username. Deletion is permanent."""
    try:
        deleted = await store.destroy(username)
    except SQLAlchemyError as exc:
        _raise_storage_error(exc, "Failed to delete user", username=username)

    if not deleted:
        raise_not_found(_not_found_message(username))

    logger.info("User deleted", username=username)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
