from .config_loader import RunConfig, load_config, load_meta_config
from .logger import get_logger
from .colors import ANSI_RESET, colorize

__all__ = [
    "RunConfig",
    "load_config",
    "load_meta_config",
    "get_logger",
    "ANSI_RESET",
    "colorize",
]
