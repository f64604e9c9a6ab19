from enum import Enum

from config import INVALID_CREDENTIALS_STATUS


class Outcome(str, Enum):
    """Closed set of results the register/login handlers can return."""

    CREATED = "created"
    CONFLICT = "conflict"
    AUTHENTICATED = "authenticated"
    INVALID_CREDENTIALS = "invalid_credentials"
    INVALID_REQUEST = "invalid_request"
    STORAGE_ERROR = "storage_error"

    @property
    def ok(self) -> bool:
        return self in (Outcome.CREATED, Outcome.AUTHENTICATED)

    @property
    def status_code(self) -> int:
        return STATUS_CODES[self]

    @property
    def message(self) -> str:
        return MESSAGES[self]


STATUS_CODES = {
    Outcome.CREATED: 200,
    Outcome.CONFLICT: 409,
    Outcome.AUTHENTICATED: 200,
    Outcome.INVALID_CREDENTIALS: INVALID_CREDENTIALS_STATUS,
    Outcome.INVALID_REQUEST: 400,
    Outcome.STORAGE_ERROR: 500,
}

MESSAGES = {
    Outcome.CREATED: "Registration successful! You can now log in.",
    Outcome.CONFLICT: "Username already exists, please choose another.",
    Outcome.AUTHENTICATED: "Login successful.",
    Outcome.INVALID_CREDENTIALS: "Invalid username or password.",
    Outcome.INVALID_REQUEST: "Username and password are required.",
    Outcome.STORAGE_ERROR: "Storage is unavailable, please try again later.",
}
