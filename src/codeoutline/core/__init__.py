"""Core module exports."""

from codeoutline.core.errors import (
    CodeOutlineError,
    ConfigError,
    ErrorCode,
    GrammarError,
    InternalError,
    SourceError,
)
from codeoutline.core.logging import (
    clear_operation_id,
    configure_logging,
    get_logger,
    get_operation_id,
    set_operation_id,
)

__all__ = [
    # Errors
    "CodeOutlineError",
    "ConfigError",
    "ErrorCode",
    "GrammarError",
    "InternalError",
    "SourceError",
    # Logging
    "clear_operation_id",
    "configure_logging",
    "get_logger",
    "get_operation_id",
    "set_operation_id",
]
