"""
Runtime Configuration Module

Provides configuration loading and logging setup for msgdigest.
"""

from .runtime import (
    RuntimeConfig,
    HashingConfig,
    LoggingConfig,
    setup_logging,
    get_default_config,
    set_default_config,
)

__all__ = [
    "RuntimeConfig",
    "HashingConfig",
    "LoggingConfig",
    "setup_logging",
    "get_default_config",
    "set_default_config",
]
