class FarmWorkError(Exception):
    """Base class for errors raised by the FarmWork core."""


class NotFoundError(FarmWorkError):
    pass


class InvalidStatusTransition(FarmWorkError):
    def __init__(self, current: str, requested: str):
        self.current = current
        self.requested = requested
        super().__init__(f"Cannot change status from {current} to {requested}")


class ApplicationRejected(FarmWorkError):
    """The job does not accept this application (closed job, duplicate, ...)."""


class AuthError(FarmWorkError):
    """A login, registration or session call failed.

    The message is safe to show to the user.
    """


class AuthServiceError(AuthError):
    """The remote auth service returned an error or could not be reached."""

    def __init__(self, message: str, status_code: int | None = None):
        self.status_code = status_code
        super().__init__(message)
