"""
Core module - configuration and logging shared by every service.
"""
from coursepath.core.config import Settings, get_settings
from coursepath.core.logging import setup_logger

__all__ = ["Settings", "get_settings", "setup_logger"]
