import os
from pathlib import Path

# Base directory of the project
BASE_DIR = Path(__file__).resolve().parent

# Credential database location (SQLite file by default)
DATABASE_URL = os.getenv(
    "CREDENTIALS_DATABASE_URL",
    f"sqlite:///{BASE_DIR / 'credentials.db'}",
)

# Password hashing configuration (bcrypt cost factor)
BCRYPT_ROUNDS = int(os.getenv("CREDENTIALS_BCRYPT_ROUNDS", "10"))

# Status returned for unknown user / wrong password.
INVALID_CREDENTIALS_STATUS = int(
    os.getenv("CREDENTIALS_INVALID_CREDENTIALS_STATUS", "401")
)

LOG_LEVEL = os.getenv("CREDENTIALS_LOG_LEVEL", "INFO")
LOG_FILE = os.getenv("CREDENTIALS_LOG_FILE")
