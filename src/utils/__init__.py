"""Utility helpers (logging)."""

from .logger import ROOT_LOGGER_NAME, get_child_logger, setup_logger

__all__ = [
    "ROOT_LOGGER_NAME",
    "get_child_logger",
    "setup_logger",
]
