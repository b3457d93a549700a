"""
The process package.
Starts, monitors and terminates external processes, and coordinates the
updater's own exit.
"""
from .process_utils import get_process_id, is_process_running
from .launcher import launch, start, start_in_console
from .termination import kill
from .cleanup import updater_cleanup
from .shutdown import exit, pause, wait

__all__ = [
    'start', 'start_in_console', 'launch',
    'is_process_running', 'get_process_id',
    'kill', 'updater_cleanup',
    'exit', 'pause', 'wait',
]
