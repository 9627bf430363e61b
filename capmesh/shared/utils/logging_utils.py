"""Logging setup for the capmesh package logger and solver context loggers."""
import logging
import logging.handlers
from pathlib import Path
from typing import List, Optional

from ..configuration import get_config
from ..configuration.settings import LoggingSettings

PACKAGE_LOGGER = 'capmesh'

# Handlers attached by configure_logging; replaced on every call.
_installed_handlers: List[logging.Handler] = []


def configure_logging(settings: Optional[LoggingSettings] = None) -> logging.Logger:
    """Apply logging settings to the ``capmesh`` logger tree.

    The root logger and any handlers the host application installed are
    left alone; calling this again replaces only what the previous call
    attached, so handlers never stack up.

    Args:
        settings: Logging settings; defaults to the global configuration's
            ``logging`` section

    Returns:
        The ``capmesh`` package logger
    """
    if settings is None:
        settings = get_config().settings.logging

    package_logger = logging.getLogger(PACKAGE_LOGGER)
    package_logger.setLevel(settings.level.upper())

    while _installed_handlers:
        handler = _installed_handlers.pop()
        package_logger.removeHandler(handler)
        handler.close()

    handlers: List[logging.Handler] = []
    if settings.console_output:
        handlers.append(logging.StreamHandler())
    if settings.file_output:
        log_path = Path(settings.log_file)
        try:
            log_path.parent.mkdir(parents=True, exist_ok=True)
            handlers.append(logging.handlers.RotatingFileHandler(
                filename=log_path,
                maxBytes=settings.max_file_size_mb * 1024 * 1024,
                backupCount=settings.backup_count,
                encoding='utf-8'
            ))
        except OSError as e:
            package_logger.error(f"File logging disabled, cannot open {log_path}: {e}")

    formatter = logging.Formatter(fmt=settings.format_string, datefmt=settings.date_format)
    for handler in handlers:
        handler.setFormatter(formatter)
        package_logger.addHandler(handler)
        _installed_handlers.append(handler)

    for component, level in settings.component_levels.items():
        logging.getLogger(component).setLevel(level.upper())

    package_logger.debug(
        f"Logging configured: level={settings.level.upper()}, "
        f"{len(handlers)} handler(s), {len(settings.component_levels)} component override(s)"
    )
    return package_logger


class ContextLogger(logging.LoggerAdapter):
    """Prefix every message with the adapter's ``[key=value ...]`` context."""

    def process(self, msg, kwargs):
        if self.extra:
            context_str = " ".join(f"{k}={v}" for k, v in self.extra.items())
            msg = f"[{context_str}] {msg}"
        return msg, kwargs


def get_context_logger(name: str, **context) -> ContextLogger:
    """Get a logger that tags its messages with ``context``.

    Solvers use this with ``solver=<ClassName>`` so interleaved runs stay
    readable.
    """
    return ContextLogger(logging.getLogger(name), context)
