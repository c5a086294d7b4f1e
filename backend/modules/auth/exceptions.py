"""
Authentication module exceptions.

Token failures keep their distinct kinds internally so they can be logged,
even though the middleware answers all of them the same way. Controller
failures carry the exact status and message the client expects.
"""

from shared.exceptions import (
    AuthenticationError,
    NotFoundError,
    StorefrontError,
    ValidationError,
)


class InvalidTokenError(AuthenticationError):
    """Raised when a JWT token is invalid or malformed."""

    def __init__(self, message: str = "Invalid authentication token"):
        super().__init__(message, code="INVALID_TOKEN")


class ExpiredTokenError(AuthenticationError):
    """Raised when a JWT token has expired."""

    def __init__(self, message: str = "Authentication token has expired"):
        super().__init__(message, code="TOKEN_EXPIRED")


class MissingTokenError(AuthenticationError):
    """Raised when no authentication token is provided."""

    def __init__(self, message: str = "Authentication required"):
        super().__init__(message, code="MISSING_TOKEN")


class FieldRequiredError(ValidationError):
    """A required request field is missing or blank."""

    def __init__(self, label: str, status_code: int = 400):
        super().__init__(
            f"{label} is required",
            code="FIELD_REQUIRED",
            details={"field": label},
            status_code=status_code,
        )


class AlreadyRegisteredError(StorefrontError):
    """Registration with an email that already has an account."""

    # Answered with 200 so existing clients render it as a notice
    status_code = 200

    def __init__(self, email: str):
        super().__init__(
            "Already registered, please login",
            code="ALREADY_REGISTERED",
            details={"email": email},
        )


class MissingCredentialsError(NotFoundError):
    """Login without an email or password."""

    def __init__(self):
        super().__init__("Invalid email or password", code="MISSING_CREDENTIALS")


class EmailNotRegisteredError(NotFoundError):
    """Login with an email that has no account."""

    def __init__(self, email: str):
        super().__init__(
            "Email is not registered",
            code="EMAIL_NOT_REGISTERED",
            details={"email": email},
        )


class InvalidPasswordError(AuthenticationError):
    """Login with the wrong password."""

    def __init__(self):
        super().__init__("Invalid password", code="INVALID_PASSWORD")


class WrongAnswerError(NotFoundError):
    """Password reset where email and secret answer do not match an account."""

    def __init__(self):
        super().__init__("Wrong email or answer", code="WRONG_ANSWER")


class PasswordTooShortError(ValidationError):
    """Profile update with a password under the minimum length."""

    # Message text is matched by the client, typo included
    MESSAGE = "Passsword is required and is 6 characters long"

    def __init__(self):
        super().__init__(self.MESSAGE, code="PASSWORD_TOO_SHORT")


class PasswordHashingError(RuntimeError):
    """
    The credential hasher returned no hash.

    Not a StorefrontError: it is an unexpected failure and is reported
    through each endpoint's generic error response.
    """

    def __init__(self):
        super().__init__("Password could not be hashed")
