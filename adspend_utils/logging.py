"""
Logging for the allocation pipeline: one console handler plus rotating
app.log / errors.log files, every line tagged with instance, stage and size.

    import adspend_utils.logging as logging
    logging.setup(log_dir="logs", level="INFO")
    logger = logging.getLogger(__name__)
"""
from __future__ import annotations

from pathlib import Path
import logging as _stdlog
from logging.handlers import RotatingFileHandler

from adspend_utils.context import LogContextFilter

LOG_FORMAT = (
    "%(asctime)s | %(levelname)s | %(name)s | "
    "instance=%(instance_id)s stage=%(stage)s size=%(size)s | "
    "%(message)s"
)
_FLAG = "_adspend_logging_initialized"


def _tagged(handler: _stdlog.Handler, level: int) -> _stdlog.Handler:
    handler.setLevel(level)
    handler.setFormatter(_stdlog.Formatter(LOG_FORMAT))
    handler.addFilter(LogContextFilter())
    return handler


def setup(
    log_dir: str = "logs",
    level: str = "INFO",
    max_bytes: int = 5_000_000,
    backup_count: int = 5,
) -> _stdlog.Logger:
    """
    Attach the handlers to the root logger. Only the first call has an
    effect; later calls return the already configured root.
    """
    root = _stdlog.getLogger()
    if getattr(root, _FLAG, False):
        return root

    folder = Path(log_dir)
    folder.mkdir(parents=True, exist_ok=True)
    lvl = getattr(_stdlog, level.upper(), _stdlog.INFO)
    root.setLevel(lvl)

    def rotating(filename):
        return RotatingFileHandler(str(folder / filename), maxBytes=max_bytes,
                                   backupCount=backup_count, encoding="utf-8")

    root.addHandler(_tagged(_stdlog.StreamHandler(), lvl))
    root.addHandler(_tagged(rotating("app.log"), lvl))
    root.addHandler(_tagged(rotating("errors.log"), _stdlog.ERROR))

    setattr(root, _FLAG, True)
    return root


# Re-export stdlib logging API so you can use this module like logging
getLogger = _stdlog.getLogger
DEBUG = _stdlog.DEBUG
INFO = _stdlog.INFO
WARNING = _stdlog.WARNING
ERROR = _stdlog.ERROR
CRITICAL = _stdlog.CRITICAL
exception = _stdlog.exception
