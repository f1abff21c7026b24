"""Utility helpers."""

from .logger import HarnessLogger, LogLevel, configure_logging, get_logger

__all__ = ["HarnessLogger", "LogLevel", "configure_logging", "get_logger"]
