"""
MTE Updater.

Process-control helpers for a self-updating application: launching programs,
polling and killing processes by PID, and coordinating a clean exit.
"""

__version__ = "1.0.0"
