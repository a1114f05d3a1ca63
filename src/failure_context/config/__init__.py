"""Settings and resolution of a ready-to-use data handler registry."""
from .logging_setup import configure_logging
from .models import DataHandlerSettings
from .resolver import build_registry

__all__ = ["DataHandlerSettings", "build_registry", "configure_logging"]
