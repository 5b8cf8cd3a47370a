"""Settings and logging services for the Unicorn HAT HD tools."""

from .config import AppConfig, load_config, save_config, to_transport_config
from .logging_setup import configure_logging, get_logger

__all__ = [
    "AppConfig",
    "configure_logging",
    "get_logger",
    "load_config",
    "save_config",
    "to_transport_config",
]
