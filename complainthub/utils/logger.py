"""Centralized logging configuration for the client and the backend."""
import logging
import sys
import threading
from datetime import datetime
from pathlib import Path
from typing import Optional

from complainthub.config import LOG_DIR


class ServiceLogger:
    """Logger with structured fields and an in-memory buffer for the /logs endpoint."""

    def __init__(self, service_name: str, log_dir: str = LOG_DIR, console_level: str = "INFO"):
        self.service_name = service_name
        self.logger = logging.getLogger(service_name)
        self.logger.setLevel(logging.DEBUG)

        # Handlers are shared by every ServiceLogger with the same name
        if not self.logger.handlers:
            formatter = logging.Formatter(
                '%(asctime)s | %(name)s | %(levelname)s | %(message)s',
                datefmt='%Y-%m-%d %H:%M:%S'
            )

            console_handler = logging.StreamHandler(sys.stdout)
            console_handler.setLevel(console_level)
            console_handler.setFormatter(formatter)
            self.logger.addHandler(console_handler)

            log_path = Path(log_dir)
            log_path.mkdir(parents=True, exist_ok=True)
            file_handler = logging.FileHandler(log_path / f'{service_name}.log')
            file_handler.setLevel(logging.DEBUG)
            file_handler.setFormatter(formatter)
            self.logger.addHandler(file_handler)

        # Last 100 entries
        self.log_buffer = []
        self.max_buffer_size = 100
        self._buffer_lock = threading.Lock()

    def _add_to_buffer(self, level: str, message: str, extra: Optional[dict] = None):
        entry = {
            "timestamp": datetime.now().isoformat(),
            "level": level,
            "service": self.service_name,
            "message": message,
            "extra": extra or {}
        }
        with self._buffer_lock:
            self.log_buffer.append(entry)
            if len(self.log_buffer) > self.max_buffer_size:
                self.log_buffer.pop(0)

    def debug(self, message: str, **kwargs):
        self.logger.debug(message)
        self._add_to_buffer("DEBUG", message, kwargs)

    def info(self, message: str, **kwargs):
        self.logger.info(message)
        self._add_to_buffer("INFO", message, kwargs)

    def warning(self, message: str, **kwargs):
        self.logger.warning(message)
        self._add_to_buffer("WARNING", message, kwargs)

    def error(self, message: str, **kwargs):
        self.logger.error(message)
        self._add_to_buffer("ERROR", message, kwargs)

    def get_recent_logs(self, limit: int = 50):
        """Get recent log entries, oldest first."""
        if limit <= 0:
            return []
        with self._buffer_lock:
            return self.log_buffer[-limit:]

    def clear_logs(self):
        with self._buffer_lock:
            self.log_buffer = []
