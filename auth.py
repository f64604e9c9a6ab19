from passlib.context import CryptContext

from config import BCRYPT_ROUNDS

# bcrypt embeds its salt and cost factor in the hash string, so every call to
# hash() draws a fresh salt and verify() re-derives the check value from the
# stored hash itself. bcrypt only reads the first 72 bytes of a secret; longer
# secrets are refused instead of silently truncated.
pwd_context = CryptContext(
    schemes=["bcrypt"],
    deprecated="auto",
    bcrypt__rounds=BCRYPT_ROUNDS,
    bcrypt__truncate_error=True,
)

MAX_PASSWORD_BYTES = pwd_context.handler("bcrypt").truncate_size


def hash_password(password: str) -> str:
    """
    Hash a plain-text password using bcrypt.

    Raises ValueError (passlib's PasswordValueError family) for secrets bcrypt
    cannot take: NUL bytes, or more than 72 bytes.
    """
    return pwd_context.hash(password)


def verify_password(plain_password: str, hashed: str) -> bool:
    """
    Verify a candidate password against a stored hash.

    Raises ValueError if ``hashed`` is not a recognizable bcrypt hash.
    """
    # hash() never accepted such a password, so it cannot match; checking
    # it would compare only its first 72 bytes.
    if len(plain_password.encode("utf-8")) > MAX_PASSWORD_BYTES:
        return False
    return pwd_context.verify(plain_password, hashed)
