"""Display management module."""

from .manager import DisplayManager, DisplayStatus
from .service import (
    DisplayConfigService,
    StaticDisplayConfig,
    validate_service,
    wait_for_startup,
)

__all__ = [
    "DisplayManager",
    "DisplayStatus",
    "DisplayConfigService",
    "StaticDisplayConfig",
    "validate_service",
    "wait_for_startup",
]
