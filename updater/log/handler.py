import sys
import logging
import threading
from pathlib import Path
from typing import List, Optional
from updater.local import app_globals


class LogFileHandler(logging.Handler):
    """
    A custom logging handler that appends logs to the updater logfile
    in batches using a background thread.
    """
    def __init__(self, file_path: Path):
        """
        Initializes the logfile handler.

        :param file_path: The path to the logfile. Parent directories are created.
        """
        super().__init__()
        self.file_path = Path(file_path)
        self.file_path.parent.mkdir(parents=True, exist_ok=True)
        self.log_buffer: List[str] = []
        self.buffer_lock = threading.Lock()
        self.flush_interval = app_globals.LOG_BUFFER_FLUSH_INTERVAL
        self.batch_size = app_globals.LOG_BUFFER_SIZE
        self.max_file_size_mb = app_globals.MAX_LOG_FILE_SIZE_MB
        self.stop_event = threading.Event()
        self.flush_thread: Optional[threading.Thread] = None
        self._check_file_size()
        self._start_flush_thread()

    def _start_flush_thread(self) -> None:
        """Starts the background thread that periodically flushes logs to the file."""
        self.flush_thread = threading.Thread(target=self._periodic_flush, daemon=True)
        self.flush_thread.name = "LogFileFlushThread"
        self.flush_thread.start()

    def _periodic_flush(self) -> None:
        """
        Periodically flushes the log buffer. This runs in a background thread.
        The final flush is called when the handler is closed.
        """
        while not self.stop_event.wait(self.flush_interval):
            self.flush()

    def emit(self, record: logging.LogRecord) -> None:
        """
        Formats a log record and adds it to the internal buffer.

        :param record: The log record to be processed.
        """
        try:
            # Subprocess output is written to the logfile exactly as printed
            if record.name.startswith('proc.'):
                line = record.getMessage()
            else:
                line = self.format(record)
            with self.buffer_lock:
                self.log_buffer.append(line)
                if len(self.log_buffer) >= self.batch_size:
                    self._flush_locked()
        except Exception:
            self.handleError(record)

    def _flush_locked(self) -> None:
        """
        Appends the buffered lines to the logfile. Assumes the buffer lock is held.
        """
        if not self.log_buffer:
            return

        lines = list(self.log_buffer)
        self.log_buffer.clear()
        try:
            with self.file_path.open("a", encoding="utf-8") as f:
                f.write("\n".join(lines) + "\n")
        except OSError as e:
            print(f"Error writing logs to '{self.file_path}': {e}. Log entries: {len(lines)}", file=sys.stderr)

    def flush(self) -> None:
        """Public method to trigger a manual flush of the log buffer."""
        with self.buffer_lock:
            self._flush_locked()

    def _check_file_size(self) -> None:
        """Logs a warning if the logfile exceeds the configured size limit."""
        logger = logging.getLogger(__name__)
        try:
            if not self.file_path.exists():
                return
            file_size_mb = self.file_path.stat().st_size / (1024 * 1024)
            if file_size_mb > self.max_file_size_mb:
                logger.warning(
                    f"Logfile '{self.file_path}' size ({file_size_mb:.2f} MB) "
                    f"exceeds configured limit ({self.max_file_size_mb} MB)."
                )
        except OSError as e:
            logger.error(f"Error checking logfile size for '{self.file_path}': {e}")

    def close(self) -> None:
        """
        Shuts down the handler, ensuring the flush thread is joined and the buffer is written.
        """
        self.stop_event.set()
        if self.flush_thread and self.flush_thread.is_alive():
            self.flush_thread.join(timeout=self.flush_interval + 2)
        # Final flush must be called after the thread is stopped
        self.flush()
        super().close()
