"""Logging configuration for TodoList using loguru."""
import sys
from pathlib import Path
from typing import Optional

from loguru import logger

from todolist.config.settings import DEFAULT_LOG_FILE, TodoListSettings, get_settings

DETAILED_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{extra[name]}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> | "
    "<level>{message}</level> | "
    "<level>{extra}</level>"
)

SIMPLE_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | "
    "<level>{level: <8}</level> | "
    "<level>{message}</level>"
)


def log_file_path(settings: TodoListSettings) -> Path:
    """Where the rotating log file lives; settings.LOG_FILE or the default log dir."""
    return Path(settings.LOG_FILE) if settings.LOG_FILE else DEFAULT_LOG_FILE


def setup_logging(settings: Optional[TodoListSettings] = None) -> Path:
    """
    Replace all loguru sinks with the TodoList console and file sinks.

    Args:
        settings: Settings to configure from, defaults to the cached settings

    Returns:
        Path of the log file
    """
    settings = settings or get_settings()
    log_format = DETAILED_FORMAT if settings.LOG_FORMAT == "detailed" else SIMPLE_FORMAT
    log_file = log_file_path(settings)
    log_file.parent.mkdir(parents=True, exist_ok=True)

    logger.remove()
    # Records not bound through get_logger still render {extra[name]}
    logger.configure(extra={"name": "todolist"})

    logger.add(
        sys.stderr,
        format=log_format,
        level=settings.LOG_LEVEL,
        colorize=True,
        backtrace=True,
        diagnose=False,
    )

    # JSON lines, rotated and zipped
    logger.add(
        log_file,
        format=log_format,
        level=settings.LOG_LEVEL,
        rotation=f"{settings.LOG_ROTATION_SIZE_MB} MB",
        retention=f"{settings.LOG_RETENTION_DAYS} days",
        compression="zip",
        serialize=True,
        backtrace=True,
        diagnose=False,
        enqueue=True,
    )
    return log_file


def get_logger(name: str):
    """Get a logger instance with the given name.

    Args:
        name: The name of the module/component requesting the logger.
            Should be the module's __name__ attribute.

    Returns:
        A logger instance bound with the given name.
    """
    if not name.startswith("todolist.") and name != "__main__":
        name = f"todolist.{name}"
    return logger.bind(name=name)


def log_context(**context):
    """
    Attach context (e.g. session_id, user_id) to every record logged inside the block.

    Usage:
        with log_context(session_id=sid):
            ...
    """
    return logger.contextualize(**context)


setup_logging()
