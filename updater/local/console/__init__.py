"""
This package holds the updater console: reading user input and executing
console commands. Commands live in `commands` and are imported by the entry
point, so the exit path can use user input without loading them.
"""

from . import user_input

__all__ = ["user_input"]
