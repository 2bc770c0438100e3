"""
Error taxonomy for account use cases.

Every business-rule failure is raised as a subclass of ``AccountError`` with a
stable ``code``; transports map the code to their own error responses.
"""

from __future__ import annotations

from enum import Enum


class ErrorCode(str, Enum):
    EMAIL_TAKEN = "EMAIL_TAKEN"
    USERNAME_TAKEN = "USERNAME_TAKEN"
    INVALID_CREDENTIALS = "INVALID_CREDENTIALS"
    NO_PROJECT_SELECTED = "NO_PROJECT_SELECTED"
    NOT_MEMBER = "NOT_MEMBER"
    NOT_FOUND = "NOT_FOUND"


class AccountError(Exception):
    """Base class for account-related exceptions."""

    code: ErrorCode
    default_message = "Account error"

    def __init__(self, message: str | None = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class EmailTakenError(AccountError):
    code = ErrorCode.EMAIL_TAKEN
    default_message = "Email already taken"


class UsernameTakenError(AccountError):
    code = ErrorCode.USERNAME_TAKEN
    default_message = "Username already taken"


class InvalidCredentialsError(AccountError):
    code = ErrorCode.INVALID_CREDENTIALS
    default_message = "Invalid credentials"


class NoProjectSelectedError(AccountError):
    code = ErrorCode.NO_PROJECT_SELECTED
    default_message = "Switch to the project!"


class NotMemberError(AccountError):
    code = ErrorCode.NOT_MEMBER
    default_message = "Is not project member!"


class NotFoundError(AccountError):
    code = ErrorCode.NOT_FOUND
    default_message = "Record not found"

    def __init__(self, entity: str, key: str):
        super().__init__(f"{entity} '{key}' not found")
        self.entity = entity
        self.key = key
