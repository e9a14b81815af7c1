import os
from pathlib import Path

from .base import *  # noqa: F401,F403

DEBUG = False

_test_db_engine = os.getenv("TEST_DB_ENGINE", "sqlite").lower()

if _test_db_engine == "mysql":
    DATABASES = {
        "default": {
            "ENGINE": "django.db.backends.mysql",
            "NAME": os.getenv("DB_NAME", "grcledger"),
            "USER": os.getenv("DB_USER", "grcledger"),
            "PASSWORD": os.getenv("DB_PASSWORD", "grcledger"),
            "HOST": os.getenv("DB_HOST", "mariadb"),
            "PORT": os.getenv("DB_PORT", "3306"),
            "OPTIONS": {
                "charset": "utf8mb4",
            },
        }
    }
elif _test_db_engine == "sqlite":
    DATABASES = {
        "default": {
            "ENGINE": "django.db.backends.sqlite3",
            "NAME": str(Path(BASE_DIR) / "data" / "test.sqlite3"),
        }
    }
else:
    raise RuntimeError(f"Unsupported TEST_DB_ENGINE: {_test_db_engine}")

# Keep test execution predictable and faster in CI
PASSWORD_HASHERS = ["django.contrib.auth.hashers.MD5PasswordHasher"]
LOG_LEVEL = os.getenv("LOG_LEVEL", "WARNING").upper()
