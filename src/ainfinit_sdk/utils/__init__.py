"""
Utility modules
"""

from ainfinit_sdk.utils.logger import enable_debug_logging, get_logger

__all__ = [
    "enable_debug_logging",
    "get_logger",
]
