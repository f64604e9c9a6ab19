"""
Registration and login request handling.

Handlers take the credential store as an argument and keep no state of
their own; any number of them may run concurrently against one store.
"""
from enum import Enum
from typing import Any, Optional, Tuple

from auth import hash_password, verify_password
from logger import get_logger
from outcomes import Outcome
from store import CreateStatus, CredentialStore, LookupStatus

log = get_logger("handlers")


class Operation(str, Enum):
    REGISTER = "register"
    LOGIN = "login"


def _clean_credentials(username: Any, password: Any) -> Optional[Tuple[str, str]]:
    """
    Return (username, password) if both are non-blank strings, else None.

    The username is trimmed; the password is kept exactly as typed. Strings
    that cannot be encoded as UTF-8 (lone surrogates) are rejected.
    """
    if not isinstance(username, str) or not isinstance(password, str):
        return None
    if not username.strip() or not password.strip():
        return None
    try:
        username.encode("utf-8")
        password.encode("utf-8")
    except UnicodeEncodeError:
        return None
    return username.strip(), password


def register(store: CredentialStore, username: Any, password: Any) -> Outcome:
    """
    Create a user if the name is free.

    The hash is computed before the insert and simply dropped if the insert
    is rejected, so a failed registration leaves nothing behind.
    """
    cleaned = _clean_credentials(username, password)
    if cleaned is None:
        return Outcome.INVALID_REQUEST
    username, password = cleaned

    try:
        password_hash = hash_password(password)
    except ValueError:
        log.info("Registration of %r rejected, password not hashable", username)
        return Outcome.INVALID_REQUEST

    status = store.try_create(username, password_hash)

    if status is CreateStatus.ALREADY_EXISTS:
        log.info("Registration rejected, %r already exists", username)
        return Outcome.CONFLICT
    if status is CreateStatus.STORAGE_ERROR:
        log.error("Registration of %r failed on storage", username)
        return Outcome.STORAGE_ERROR

    log.info("Registered %r", username)
    return Outcome.CREATED


def login(store: CredentialStore, username: Any, password: Any) -> Outcome:
    """Check a username/password pair. Unknown user and wrong password look the same."""
    cleaned = _clean_credentials(username, password)
    if cleaned is None:
        return Outcome.INVALID_REQUEST
    username, password = cleaned

    lookup = store.get(username)
    if lookup.status is LookupStatus.STORAGE_ERROR:
        log.error("Login of %r failed on storage", username)
        return Outcome.STORAGE_ERROR
    if lookup.status is LookupStatus.NOT_FOUND:
        log.info("Login rejected for %r", username)
        return Outcome.INVALID_CREDENTIALS

    try:
        matched = verify_password(password, lookup.record.password_hash)
    except (ValueError, TypeError):
        log.warning("Stored hash for %r could not be read", username)
        matched = False

    if not matched:
        log.info("Login rejected for %r", username)
        return Outcome.INVALID_CREDENTIALS

    return Outcome.AUTHENTICATED


HANDLERS = {
    Operation.REGISTER: register,
    Operation.LOGIN: login,
}


def dispatch(operation: Operation, store: CredentialStore, payload: Any) -> Outcome:
    """Route a decoded request body to the handler for ``operation``."""
    if not isinstance(payload, dict):
        return Outcome.INVALID_REQUEST
    handler = HANDLERS[operation]
    return handler(store, payload.get("username"), payload.get("password"))
