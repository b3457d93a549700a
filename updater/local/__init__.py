"""
Local package for the MTE Updater.

This package provides application-level global configurations and variables
through the app_globals module.
"""

from .global_config import app_globals

__all__ = ["app_globals"]
