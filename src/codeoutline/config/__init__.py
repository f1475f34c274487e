"""Config module exports."""

from codeoutline.config.loader import load_config
from codeoutline.config.models import (
    CodeOutlineConfig,
    LimitsConfig,
    LoggingConfig,
    LogOutputConfig,
    OutlineConfig,
)

__all__ = [
    "load_config",
    "CodeOutlineConfig",
    "LimitsConfig",
    "LoggingConfig",
    "LogOutputConfig",
    "OutlineConfig",
]
