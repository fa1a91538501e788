"""
Service-layer exceptions.

Routes never catch these one by one: the handlers registered in ``app.main``
translate each kind into a status code and a ``{"message": ...}`` body.
"""


class WorkoutTrackerError(Exception):
    """Base class for expected domain failures."""

    status_code = 400

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class NotFoundError(WorkoutTrackerError):
    """Entity does not exist or belongs to another user.

    The two cases are reported identically so callers cannot probe for
    other users' data.
    """

    status_code = 404


class ConflictError(WorkoutTrackerError):
    """Request conflicts with the current state of the data."""

    status_code = 400


class AlreadyCompletedError(ConflictError):
    """Scheduled workout has already been marked as completed."""

    def __init__(self, message: str = "Workout is already marked as completed"):
        super().__init__(message)


class DuplicateEmailError(ConflictError):
    """Registration attempted with an email that is already taken."""

    def __init__(self, message: str = "Email already registered"):
        super().__init__(message)


class InvalidCredentialsError(WorkoutTrackerError):
    """Login with an unknown email or a wrong password.

    Both cases share one message so the response does not reveal which
    accounts exist.
    """

    status_code = 401

    def __init__(self, message: str = "Invalid email or password"):
        super().__init__(message)
