# 日志配置模块
"""
基于 structlog 的结构化日志系统
"""

import logging
import sys
from typing import Any, TextIO

import structlog

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

_configured: tuple[str, TextIO] | None = None


def setup_logging(log_level: str = "INFO", stream: TextIO | None = None) -> None:
    """配置结构化日志，级别或输出流变化时才重新配置

    Args:
        log_level: 标准日志级别名称
        stream: 日志输出流，默认 stdout
    """
    global _configured
    log_level = log_level.upper()
    if log_level not in LOG_LEVELS:
        raise ValueError(f"Unknown log level {log_level!r}, expected one of {', '.join(LOG_LEVELS)}")
    stream = stream or sys.stdout
    if _configured == (log_level, stream):
        return

    level = getattr(logging, log_level)

    logging.basicConfig(
        format="%(message)s",
        stream=stream,
        level=level,
        force=True,
    )

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.StackInfoRenderer(),
            structlog.dev.set_exc_info,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.dev.ConsoleRenderer(colors=stream.isatty()),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=stream),
        cache_logger_on_first_use=False,
    )

    _configured = (log_level, stream)


def get_logger(name: str = __name__) -> Any:
    """获取日志器，首次使用时按默认配置初始化"""
    if _configured is None:
        setup_logging()
    return structlog.get_logger(name)
