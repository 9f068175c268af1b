from __future__ import annotations

"""Centralized, structured exception hierarchy for authcore.

Each exception carries a machine-readable `code` for programmatic error
handling and a human-readable `message` for logging and API responses.

Failures fall into two groups:
- Attacker-facing ambiguity: authentication failures carry deliberately
  generic messages so they do not reveal whether an account exists.
- Operational failures (`InternalError` and subclasses) are surfaced loudly
  because they need operator attention.
"""

from typing import Final

__all__: Final = [
    "AuthcoreError",
    "AuthenticationError",
    "TokenVerificationError",
    "UserNotFoundError",
    "InternalError",
    "EmailServiceError",
    "TemplateRenderError",
    "DatabaseError",
]


class AuthcoreError(Exception):
    """Base exception class for all custom errors in authcore.

    Attributes:
        message (str): A human-readable error message, suitable for logging.
        code (str): A unique, machine-readable error code.
    """

    message: str
    code: str = "generic_error"

    def __init__(self, message: str, code: str = "generic_error"):
        self.message = message
        self.code = code
        Exception.__init__(self, self.message)

    def __str__(self) -> str:
        return self.message


# ---------------------------------------------------------------------------
# Auth-related errors (map to 401 Unauthorized)
# ---------------------------------------------------------------------------


class AuthenticationError(AuthcoreError):
    """Raised when an identity cannot be authorized.

    Token pair issuance for a user id that does not resolve raises this rather
    than `UserNotFoundError`: a missing user is treated as an authorization
    failure, not a resource lookup failure.
    """

    def __init__(self, message: str = "Unauthorized", code: str = "unauthorized"):
        super().__init__(message, code)


class TokenVerificationError(AuthenticationError):
    """Raised by token signers when a token cannot be decoded or validated.

    Covers malformed tokens, signature mismatches, expired tokens and missing
    claims alike.
    """

    def __init__(self, message: str = "Invalid token", code: str = "invalid_token"):
        super().__init__(message, code)


# ---------------------------------------------------------------------------
# Lookup errors (map to 404 Not Found)
# ---------------------------------------------------------------------------


class UserNotFoundError(AuthcoreError):
    """Raised when a requested user is not found in the user store."""

    def __init__(self, message: str = "User Not Found", code: str = "user_not_found"):
        super().__init__(message, code)


# ---------------------------------------------------------------------------
# Operational errors (map to 500 Internal Server Error)
# ---------------------------------------------------------------------------


class InternalError(AuthcoreError):
    """Base class for failures of external collaborators."""

    def __init__(self, message: str = "Internal server error", code: str = "internal_error"):
        super().__init__(message, code)


class EmailServiceError(InternalError):
    """Raised when the mail transport rejects or fails to deliver a message."""

    def __init__(self, message: str = "Failed to send OTP.", code: str = "email_service_error"):
        super().__init__(message, code)


class TemplateRenderError(EmailServiceError):
    """Raised when an email template is missing or fails to render."""

    def __init__(self, message: str, code: str = "template_render_error"):
        super().__init__(message, code)


class DatabaseError(InternalError):
    """Raised for low-level user store errors, wrapping driver exceptions."""

    def __init__(self, message: str, code: str = "database_error"):
        super().__init__(message, code)
