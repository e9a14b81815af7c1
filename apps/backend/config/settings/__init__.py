import os

_env = os.getenv("DJANGO_ENV", "dev").lower()

if _env in {"dev", "development"}:
    from .dev import *  # noqa: F401,F403
elif _env in {"test", "testing"}:
    from .test import *  # noqa: F401,F403
elif _env in {"prod", "production", "staging"}:
    from .prod import *  # noqa: F401,F403
else:
    raise RuntimeError(f"Unsupported DJANGO_ENV: {_env}")
