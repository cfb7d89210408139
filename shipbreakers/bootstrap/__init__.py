"""
bootstrap/ - Configuration and entry points
"""

from .config import (
    LoggingConfig,
    LayoutConfig,
    ShipbreakersConfig,
    load_config,
)

from .entrypoints import (
    setup_logging,
    reset_logging,
    cli_main,
)

__all__ = [
    "LoggingConfig",
    "LayoutConfig",
    "ShipbreakersConfig",
    "load_config",
    "setup_logging",
    "reset_logging",
    "cli_main",
]
