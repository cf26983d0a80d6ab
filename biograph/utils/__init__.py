from .logger import LOG_LEVELS, get_logger, setup_logging

__all__ = ["LOG_LEVELS", "get_logger", "setup_logging"]
