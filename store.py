from dataclasses import dataclass
from enum import Enum
from typing import Optional

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import sessionmaker

from database import SessionLocal
from logger import get_logger
from models import User

log = get_logger("store")


class CreateStatus(str, Enum):
    OK = "ok"
    ALREADY_EXISTS = "already_exists"
    STORAGE_ERROR = "storage_error"


class LookupStatus(str, Enum):
    FOUND = "found"
    NOT_FOUND = "not_found"
    STORAGE_ERROR = "storage_error"


@dataclass(frozen=True)
class UserRecord:
    """Detached copy of a stored user; never leaves the service."""

    username: str
    password_hash: str


@dataclass(frozen=True)
class Lookup:
    status: LookupStatus
    record: Optional[UserRecord] = None


class CredentialStore:
    """
    The only component that reads or writes user rows.

    Each call opens its own short-lived session from the factory, so one
    instance is safely shared by every concurrent request. Uniqueness relies
    on the primary-key constraint: ``try_create`` issues a single INSERT and
    lets the database reject duplicates atomically.
    """

    def __init__(self, session_factory: sessionmaker = SessionLocal):
        self._session_factory = session_factory

    def try_create(self, username: str, password_hash: str) -> CreateStatus:
        db = self._session_factory()
        try:
            db.add(User(username=username, password_hash=password_hash))
            db.commit()
        except IntegrityError:
            db.rollback()
            # Only a primary-key clash means the name is taken; any other
            # constraint failure leaves no row behind.
            if self._exists(db, username):
                return CreateStatus.ALREADY_EXISTS
            log.exception("Insert rejected for user %r", username)
            return CreateStatus.STORAGE_ERROR
        except SQLAlchemyError:
            db.rollback()
            log.exception("Insert failed for user %r", username)
            return CreateStatus.STORAGE_ERROR
        finally:
            db.close()
        return CreateStatus.OK

    @staticmethod
    def _exists(db, username: str) -> bool:
        try:
            return db.get(User, username) is not None
        except SQLAlchemyError:
            return False

    def get(self, username: str) -> Lookup:
        db = self._session_factory()
        try:
            user = db.get(User, username)
            if user is None:
                return Lookup(LookupStatus.NOT_FOUND)
            return Lookup(
                LookupStatus.FOUND,
                UserRecord(username=user.username, password_hash=user.password_hash),
            )
        except SQLAlchemyError:
            log.exception("Lookup failed for user %r", username)
            return Lookup(LookupStatus.STORAGE_ERROR)
        finally:
            db.close()
