"""
Logging configuration and utilities for the lesson modules.
"""
from .config import configure_logging, get_lesson_logger, get_logger

__all__ = ["configure_logging", "get_logger", "get_lesson_logger"]
