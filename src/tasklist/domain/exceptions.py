"""Domain exceptions for Tasklist.

Each exception carries the HTTP status it surfaces as, so the API layer
can map the whole family with a single handler.
"""


class TasklistError(Exception):
    """Base class for all domain errors."""

    status_code: int = 400
    error: str = "Bad request"

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class EmailAlreadyExistsError(TasklistError):
    """Raised when signing up with an email that is already registered."""

    status_code = 409
    error = "Conflict"

    def __init__(self, email: str) -> None:
        self.email = email
        super().__init__("Email already registered")


class InvalidCredentialsError(TasklistError):
    """Raised when a login attempt fails.

    Unknown email and wrong password raise the same error with the same
    message.
    """

    status_code = 401
    error = "Unauthorized"

    def __init__(self) -> None:
        super().__init__("Invalid credentials")


class TaskNotFoundError(TasklistError):
    """Raised when a task does not exist or is not owned by the caller."""

    status_code = 404
    error = "Not found"

    def __init__(self, task_id: int) -> None:
        self.task_id = task_id
        super().__init__(f"Task {task_id} not found")


class UserNotFoundError(TasklistError):
    """Raised when a user record cannot be found."""

    status_code = 404
    error = "Not found"

    def __init__(self, user_id: int) -> None:
        self.user_id = user_id
        super().__init__(f"User {user_id} not found")
