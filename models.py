from sqlalchemy import Column, String, DateTime
from sqlalchemy.sql import func

from database import Base


class User(Base):
    """
    A registered user: the username and its salted password hash.

    The username is the primary key, so the database itself rejects a second
    row for the same name. Rows are written once and never updated.
    """

    __tablename__ = "users"

    username = Column(String(128), primary_key=True)
    password_hash = Column(String(256), nullable=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now())

    def __repr__(self) -> str:
        return f"<User {self.username!r}>"
