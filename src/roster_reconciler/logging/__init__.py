"""
Logging package for ``roster_reconciler``.

Use ``get_logger("<area>")`` in modules to inherit shared handlers and, when
file logging is enabled, write to an area-specific log file.
"""

from .logger import (
    configure_logging,
    enable_debug,
    get_logger,
    list_active_loggers,
    log_debug,
    log_error,
    log_info,
    log_warning,
)

__all__ = [
    "configure_logging",
    "enable_debug",
    "get_logger",
    "list_active_loggers",
    "log_debug",
    "log_error",
    "log_info",
    "log_warning",
]
