import os
from pathlib import Path

from .base import *  # noqa: F401,F403

DEBUG = True

# Local ledger lives in a single SQLite file; override the path with DEV_DB_PATH.
_dev_db_path = Path(os.getenv("DEV_DB_PATH", str(Path(BASE_DIR) / "data" / "grcledger.sqlite3")))
_dev_db_path.parent.mkdir(parents=True, exist_ok=True)

DATABASES = {
    "default": {
        "ENGINE": "django.db.backends.sqlite3",
        "NAME": str(_dev_db_path),
    }
}
