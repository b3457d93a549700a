"""
Logging module for the updater.
This module provides functionality to set up console and logfile logging and
to close every log resource before the process exits.
"""

from .setup import setup_logging, close_logging

__all__ = ["setup_logging", "close_logging"]
