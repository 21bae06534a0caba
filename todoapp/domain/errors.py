"""
Domain error codes and storage-level exceptions.

Routes translate results by comparing `Error.code` against these members,
never by inspecting messages.
"""

from enum import Enum


class ErrorCode(str, Enum):
    """Error kinds returned by use cases"""

    # ValidationError
    VALIDATION_ERROR = "VALIDATION_ERROR"

    # AuthError
    UNAUTHENTICATED = "UNAUTHENTICATED"
    INVALID_CREDENTIALS = "INVALID_CREDENTIALS"
    TOKEN_INVALID = "TOKEN_INVALID"
    TOKEN_EXPIRED = "TOKEN_EXPIRED"

    # NotFoundError
    USER_NOT_FOUND = "USER_NOT_FOUND"
    TODO_NOT_FOUND = "TODO_NOT_FOUND"

    # ConflictError
    EMAIL_ALREADY_EXISTS = "EMAIL_ALREADY_EXISTS"

    # InternalError
    SESSION_STORE_FAILURE = "SESSION_STORE_FAILURE"
    INTERNAL_ERROR = "INTERNAL_ERROR"


class DuplicateKeyError(Exception):
    """A unique constraint rejected an insert"""


class SessionStoreError(Exception):
    """The session store could not be read or written"""
