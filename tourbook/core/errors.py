"""Application error taxonomy.

Services raise these; the app-level handlers in ``tourbook.main`` turn them
into responses. ``message`` is always safe to show to the user.
"""


class AppError(Exception):
    status_code = 500
    default_message = "An unexpected error occurred. Please try again later."

    def __init__(self, message: str | None = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class ValidationError(AppError):
    status_code = 400
    default_message = "Invalid input."


class MissingField(ValidationError):
    default_message = "Please provide all required fields."


class CapacityExceeded(ValidationError):
    def __init__(self, limit: int):
        self.limit = limit
        super().__init__(f"Maximum {limit} participants allowed for this package.")


class InvalidRating(ValidationError):
    default_message = "Invalid rating value."


class NotFound(AppError):
    status_code = 404
    default_message = "Not found."


class NotFoundOrUnauthorized(NotFound):
    default_message = "Booking not found or unauthorized."


class Unauthorized(AppError):
    status_code = 401
    default_message = "Not authenticated."


class LoginRequired(Unauthorized):
    default_message = "Login required."


class Forbidden(AppError):
    status_code = 403
    default_message = "Forbidden."


class Conflict(AppError):
    status_code = 409
    default_message = "Conflict."


class DuplicateEmail(Conflict):
    default_message = "Email already registered"


class DuplicateReview(Conflict):
    default_message = "You have already reviewed this package."


class PersistenceError(AppError):
    status_code = 500
    default_message = "Database error."
