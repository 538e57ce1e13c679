"""
Domain errors raised by services and dependencies.

Each error carries the HTTP status and the user-visible message; the
handlers registered in ``listing_portal.main`` turn them into the standard
``{success: false, message, errors?}`` envelope.
"""
from typing import Any, List, Optional


class AppError(Exception):
    status_code = 500
    message = "Internal Server Error"

    def __init__(self, message: Optional[str] = None, errors: Optional[List[Any]] = None):
        self.message = message or self.message
        self.errors = errors
        super().__init__(self.message)


class ValidationFailed(AppError):
    status_code = 400
    message = "Validation failed"


class EmptyResponse(ValidationFailed):
    message = "Response message is required"


class NoPasswordProvided(ValidationFailed):
    message = "No password provided for comparison"


class DuplicateResource(AppError):
    status_code = 400
    message = "Resource already exists"


class DuplicatePhone(DuplicateResource):
    message = "User with this phone number already exists"


class DuplicateEmail(DuplicateResource):
    message = "User with this email already exists"


class NotAvailable(AppError):
    status_code = 400
    message = "Property is not available for inquiries"


class Unauthenticated(AppError):
    status_code = 401
    message = "Access denied. No token provided."


class InvalidCredentials(Unauthenticated):
    message = "Invalid phone number or password"


class AccountDeactivated(Unauthenticated):
    message = "Account is deactivated."


class TokenError(Unauthenticated):
    # Subclasses stay distinguishable in code and logs, the client sees one message
    message = "Invalid or expired token."


class TokenMalformed(TokenError):
    pass


class TokenExpired(TokenError):
    pass


class TokenInvalidSignature(TokenError):
    pass


class Forbidden(AppError):
    status_code = 403
    message = "Access denied."


class NotFound(AppError):
    status_code = 404
    message = "Not found"


class ServerError(AppError):
    status_code = 500
    message = "Internal Server Error"


class NoPasswordOnRecord(ServerError):
    message = "Password hash was not loaded for this user"
