"""Auth session state machine.

``reduce_auth`` is a pure transition function over :class:`AuthState`.
:class:`AuthSession` drives it: it talks to the auth service, persists the
token and user snapshot, and tells subscribers about every new state.

States::

    anonymous --AuthStart--> loading --AuthSuccess--> authenticated
                                     --AuthFailure--> error --ClearError--> anonymous
    any --Logout--> anonymous

Each request takes a sequence number when it starts. When it finishes, its
result is only applied if no newer request (or logout) began in the meantime.
"""

import logging
from collections.abc import Callable, Mapping
from datetime import datetime, timezone
from enum import StrEnum
from typing import Any

from pydantic import BaseModel, ValidationError

from farmwork import constants
from farmwork.config import settings
from farmwork.errors import AuthError
from farmwork.models.user import User
from farmwork.schemas.auth import LoginCredentials, ProfileUpdate, RegisterData
from farmwork.services import validators
from farmwork.services.auth_client import AuthService, HttpAuthService
from farmwork.services.forms import validate_login_form, validate_registration_form
from farmwork.services.storage import JsonFileStore, KeyValueStore

logger = logging.getLogger(__name__)

SERVER_ERROR = "Server error. Please try again later."


class AuthStatus(StrEnum):
    ANONYMOUS = "anonymous"
    LOADING = "loading"
    AUTHENTICATED = "authenticated"
    ERROR = "error"


class AuthState(BaseModel):
    model_config = {"frozen": True}

    user: User | None = None
    token: str | None = None
    is_authenticated: bool = False
    is_loading: bool = False
    error: str | None = None

    @property
    def status(self) -> AuthStatus:
        if self.is_loading:
            return AuthStatus.LOADING
        if self.is_authenticated:
            return AuthStatus.AUTHENTICATED
        if self.error:
            return AuthStatus.ERROR
        return AuthStatus.ANONYMOUS


INITIAL_STATE = AuthState()


class AuthStart(BaseModel):
    model_config = {"frozen": True}


class AuthSuccess(BaseModel):
    model_config = {"frozen": True}

    user: User
    token: str


class AuthFailure(BaseModel):
    model_config = {"frozen": True}

    message: str


class Logout(BaseModel):
    model_config = {"frozen": True}


class UpdateUser(BaseModel):
    model_config = {"frozen": True}

    changes: dict[str, Any]


class ClearError(BaseModel):
    model_config = {"frozen": True}


AuthAction = AuthStart | AuthSuccess | AuthFailure | Logout | UpdateUser | ClearError


def reduce_auth(state: AuthState, action: AuthAction) -> AuthState:
    """Return the state after ``action``.

    Actions that are not legal in the current state leave it unchanged.
    """
    if isinstance(action, AuthStart):
        return state.model_copy(update={"is_loading": True, "error": None})

    if isinstance(action, Logout):
        return INITIAL_STATE

    if isinstance(action, AuthSuccess):
        if state.status != AuthStatus.LOADING:
            return state
        return AuthState(user=action.user, token=action.token, is_authenticated=True)

    if isinstance(action, AuthFailure):
        if state.status != AuthStatus.LOADING:
            return state
        return AuthState(error=action.message)

    if isinstance(action, UpdateUser):
        if state.status != AuthStatus.AUTHENTICATED or state.user is None:
            return state
        return state.model_copy(update={"user": state.user.model_copy(update=action.changes)})

    if isinstance(action, ClearError):
        if state.status != AuthStatus.ERROR:
            return state
        return INITIAL_STATE

    raise TypeError(f"Unknown auth action: {action!r}")


Listener = Callable[[AuthState], None]


class AuthSession:
    def __init__(self, service: AuthService, store: KeyValueStore):
        self._service = service
        self._store = store
        self._state = INITIAL_STATE
        self._listeners: list[Listener] = []
        self._sequence = 0

    @property
    def state(self) -> AuthState:
        return self._state

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Call ``listener`` with every new state. Returns an unsubscribe callable."""
        self._listeners.append(listener)

        def unsubscribe():
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def dispatch(self, action: AuthAction) -> AuthState:
        new_state = reduce_auth(self._state, action)
        if new_state == self._state:
            return self._state
        self._state = new_state
        for listener in list(self._listeners):
            try:
                listener(new_state)
            except Exception:
                logger.exception("Auth state listener failed")
        return new_state

    def _begin_request(self) -> int:
        self._sequence += 1
        return self._sequence

    def _is_current(self, sequence: int) -> bool:
        if sequence != self._sequence:
            logger.debug("Discarding result of superseded auth request #%d", sequence)
            return False
        return True

    async def _persist(self, user: User, token: str, refresh_token: str | None = None):
        await self._store.set(constants.AUTH_TOKEN_KEY, token)
        await self._store.set(constants.USER_DATA_KEY, user.model_dump_json())
        if refresh_token:
            await self._store.set(constants.REFRESH_TOKEN_KEY, refresh_token)

    async def _clear_store(self):
        for key in (constants.AUTH_TOKEN_KEY, constants.REFRESH_TOKEN_KEY, constants.USER_DATA_KEY):
            await self._store.remove(key)

    def _fail(self, sequence: int, message: str):
        if self._is_current(sequence):
            self.dispatch(AuthFailure(message=message))

    async def initialize(self) -> AuthState:
        """Restore the stored session and re-validate its token.

        A token the service no longer accepts signs the user out silently.
        """
        token = await self._store.get(constants.AUTH_TOKEN_KEY)
        user_data = await self._store.get(constants.USER_DATA_KEY)
        if not token or not user_data:
            return self._state

        try:
            user = User.model_validate_json(user_data)
        except ValidationError:
            logger.warning("Stored user snapshot is invalid, clearing session")
            await self._clear_store()
            return self._state

        sequence = self._begin_request()
        self.dispatch(AuthStart())
        self.dispatch(AuthSuccess(user=user, token=token))

        try:
            current_user = await self._service.get_current_user(token)
        except Exception:
            if self._is_current(sequence):
                logger.info("Stored session was rejected, signing out", exc_info=True)
                await self._clear_store()
                self.dispatch(Logout())
            return self._state

        if self._is_current(sequence):
            await self._persist(current_user, token)
            self.dispatch(UpdateUser(changes=current_user.model_dump()))
        return self._state

    async def login(self, credentials: LoginCredentials) -> AuthState:
        sequence = self._begin_request()
        self.dispatch(AuthStart())

        validation = validate_login_form(credentials)
        if not validation.is_valid:
            self._fail(sequence, validation.errors[0])
            raise AuthError(validation.errors[0])

        try:
            result = await self._service.login(credentials)
        except AuthError as e:
            self._fail(sequence, str(e))
            raise
        except Exception as e:
            logger.exception("Login failed unexpectedly")
            self._fail(sequence, SERVER_ERROR)
            raise AuthError(SERVER_ERROR) from e

        if self._is_current(sequence):
            await self._persist(result.user, result.token, result.refresh_token)
            self.dispatch(AuthSuccess(user=result.user, token=result.token))
            logger.info("User %s logged in", result.user.id)
        return self._state

    async def register(self, data: RegisterData) -> AuthState:
        sequence = self._begin_request()
        self.dispatch(AuthStart())

        validation = validate_registration_form(data)
        if not validation.is_valid:
            self._fail(sequence, validation.errors[0])
            raise AuthError(validation.errors[0])

        try:
            result = await self._service.register(data)
        except AuthError as e:
            self._fail(sequence, str(e))
            raise
        except Exception as e:
            logger.exception("Registration failed unexpectedly")
            self._fail(sequence, "Registration failed")
            raise AuthError("Registration failed") from e

        if self._is_current(sequence):
            await self._persist(result.user, result.token, result.refresh_token)
            self.dispatch(AuthSuccess(user=result.user, token=result.token))
            logger.info("User %s registered", result.user.id)
        return self._state

    async def logout(self) -> AuthState:
        """Sign out locally. Service errors are logged, never raised."""
        self._begin_request()
        token = self._state.token
        try:
            await self._service.logout(token)
        except Exception:
            logger.warning("Logout call to auth service failed", exc_info=True)
        finally:
            await self._clear_store()
            await self._store.remove(constants.SEARCH_FILTERS_KEY)
            self.dispatch(Logout())
        return self._state

    async def update_profile(self, changes: ProfileUpdate | Mapping[str, Any]) -> AuthState:
        if not self._state.is_authenticated or self._state.user is None:
            raise AuthError("User not authenticated")

        # Only profile fields can change; unknown keys are dropped
        if not isinstance(changes, ProfileUpdate):
            try:
                changes = ProfileUpdate.model_validate(changes)
            except ValidationError as e:
                raise AuthError("Invalid profile data") from e
        changes = {k: v for k, v in changes.model_dump(exclude_unset=True).items() if v is not None}

        checks = {
            "first_name": lambda value: validators.validate_name(value, "First name"),
            "last_name": lambda value: validators.validate_name(value, "Last name"),
            "phone_number": validators.validate_phone_number,
            "location": validators.validate_location,
            "bio": validators.validate_bio,
            "skills": validators.validate_skills,
        }
        for field, check in checks.items():
            if field in changes:
                result = check(changes[field])
                if not result.is_valid:
                    raise AuthError(result.error)

        changes["updated_at"] = datetime.now(timezone.utc)
        try:
            updated = User.model_validate({**self._state.user.model_dump(), **changes})
        except ValidationError as e:
            raise AuthError("Invalid profile data") from e
        await self._store.set(constants.USER_DATA_KEY, updated.model_dump_json())
        return self.dispatch(UpdateUser(changes=updated.model_dump()))

    async def refresh_user(self) -> AuthState:
        token = self._state.token
        if not token:
            raise AuthError("No authentication token found")

        sequence = self._begin_request()
        try:
            user = await self._service.get_current_user(token)
        except AuthError:
            raise
        except Exception as e:
            raise AuthError("Failed to refresh user data") from e

        if self._is_current(sequence):
            await self._persist(user, token)
            self.dispatch(UpdateUser(changes=user.model_dump()))
        return self._state

    async def forgot_password(self, email: str) -> None:
        result = validators.validate_email(email)
        if not result.is_valid:
            raise AuthError(result.error)
        try:
            await self._service.forgot_password(email)
        except AuthError:
            raise
        except Exception as e:
            raise AuthError("Failed to send reset email") from e

    async def reset_password(self, token: str, password: str) -> None:
        result = validators.validate_password(password)
        if not result.is_valid:
            raise AuthError(result.error)
        try:
            await self._service.reset_password(token, password)
        except AuthError:
            raise
        except Exception as e:
            raise AuthError("Failed to reset password") from e

    def clear_error(self) -> AuthState:
        return self.dispatch(ClearError())

    async def aclose(self):
        """Release the auth service connection."""
        await self._service.aclose()


def create_session() -> AuthSession:
    """Session backed by the configured auth API and on-disk store."""
    service = HttpAuthService(settings.auth_api_url, timeout=settings.auth_timeout_seconds)
    return AuthSession(service, JsonFileStore(settings.session_store_path))
