"""Config module exports."""

from covcomment.config.constants import ActionInput, Token
from covcomment.config.loader import load_config, read_action_inputs
from covcomment.config.models import ActionConfig, LoggingConfig, LogOutputConfig

__all__ = [
    "load_config",
    "read_action_inputs",
    "ActionConfig",
    "ActionInput",
    "LoggingConfig",
    "LogOutputConfig",
    "Token",
]
