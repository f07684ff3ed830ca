"""Application logging setup.

Records go through a QueueHandler on the root logger so that the UI
thread never blocks on file I/O; a QueueListener forwards them to a
rotating log file and to stderr.
"""

import logging
import logging.handlers
import os
import queue
import sys
import uuid
from typing import Optional

_SESSION_ID = uuid.uuid4().hex[:8]
_listener: Optional[logging.handlers.QueueListener] = None
_queue_handler: Optional[logging.handlers.QueueHandler] = None

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | sid=%(session_id)s | %(message)s"


class _SessionFilter(logging.Filter):
    def filter(self, record: logging.LogRecord) -> bool:
        if not hasattr(record, "session_id"):
            record.session_id = _SESSION_ID
        return True


def default_log_dir() -> str:
    """Return the per-user log directory, creating it if needed."""
    if sys.platform == "win32":
        base = os.getenv("LOCALAPPDATA") or os.path.expanduser("~\\AppData\\Local")
    else:
        base = os.getenv("XDG_STATE_HOME") or os.path.expanduser("~/.local/state")
    path = os.path.join(base, "PanZoomViewer", "logs")
    try:
        os.makedirs(path, exist_ok=True)
    except OSError:
        return os.getcwd()
    return path


def setup_logging(level: str = "INFO", log_dir: Optional[str] = None) -> None:
    """Initialize app-wide logging with a rotating file handler and a queue listener.

    Calling it again only updates the level.

    Args:
        level: Level name such as "DEBUG" or "INFO" (unknown names fall back to INFO)
        log_dir: Directory for ``app.log`` (defaults to default_log_dir())
    """
    global _listener, _queue_handler
    if _listener is not None:
        set_level(level)
        return

    lvl = getattr(logging, str(level).upper(), logging.INFO)
    q: "queue.Queue[logging.LogRecord]" = queue.Queue(maxsize=10000)
    qh = logging.handlers.QueueHandler(q)
    qh.addFilter(_SessionFilter())

    root = logging.getLogger()
    root.setLevel(lvl)
    root.addHandler(qh)
    _queue_handler = qh

    log_dir = log_dir or default_log_dir()
    os.makedirs(log_dir, exist_ok=True)
    fh = logging.handlers.RotatingFileHandler(
        os.path.join(log_dir, "app.log"), maxBytes=2 * 1024 * 1024, backupCount=5, encoding="utf-8"
    )
    fmt = logging.Formatter(LOG_FORMAT)
    fh.setFormatter(fmt)

    sh = logging.StreamHandler(stream=sys.stderr)
    sh.setLevel(lvl)
    sh.setFormatter(fmt)

    _listener = logging.handlers.QueueListener(q, fh, sh, respect_handler_level=True)
    _listener.start()


def shutdown_logging() -> None:
    """Flush and stop the queue listener and detach it from the root logger."""
    global _listener, _queue_handler
    if _queue_handler is not None:
        logging.getLogger().removeHandler(_queue_handler)
        _queue_handler = None
    if _listener is not None:
        _listener.stop()
        for handler in _listener.handlers:
            handler.close()
        _listener = None


def set_level(level: str) -> None:
    lvl = getattr(logging, str(level).upper(), logging.INFO)
    logging.getLogger().setLevel(lvl)


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)
