"""Configuration for the application."""

from .logging_config import build_logger
from .settings import Settings

__all__ = ["Settings", "build_logger"]
