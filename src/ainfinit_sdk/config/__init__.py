"""
Configuration module
"""

from ainfinit_sdk.config.ainfinit_config import (
    AinfinitConfig,
    DEFAULT_BASE_URL,
    ENV_VAR_MAPPING,
    ConfigDefaults,
)
from ainfinit_sdk.config.config_loader import ConfigLoader
from ainfinit_sdk.config.config_validator import (
    ConfigValidator,
    ValidationResult,
    ValidationErrorDetail,
)

__all__ = [
    "AinfinitConfig",
    "DEFAULT_BASE_URL",
    "ENV_VAR_MAPPING",
    "ConfigDefaults",
    "ConfigLoader",
    "ConfigValidator",
    "ValidationResult",
    "ValidationErrorDetail",
]
