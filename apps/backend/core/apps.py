from django.apps import AppConfig
from django.conf import settings


class CoreConfig(AppConfig):
    name = "core"
    verbose_name = "Core"

    def ready(self) -> None:
        from .logging_config import configure_logging

        configure_logging(level=getattr(settings, "LOG_LEVEL", "INFO"))
