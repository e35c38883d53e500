"""Logging for the fractalgen logger and for render pool workers.

The CLI runs each command inside `log_session`: console (and optionally a
rotating file) handlers on the `fractalgen` logger, plus a queue that pool
workers write to through `logging_initialiser`.
"""

import contextlib
import logging
import logging.handlers
import multiprocessing as mp
import os
from typing import Iterator, List, Optional

LOGGER_NAME = "fractalgen"
LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")
_FORMAT = "%(asctime)s %(processName)s %(levelname)s %(name)s - %(message)s"
_DATEFMT = "%H:%M:%S"


def get_logger() -> logging.Logger:
    return logging.getLogger(LOGGER_NAME)


def level_from_name(name: str) -> int:
    level = logging.getLevelName(name.strip().upper())
    if not isinstance(level, int):
        raise ValueError(f"Unknown log level: {name!r}")
    return level


def _detach(logger: logging.Logger) -> None:
    for h in list(logger.handlers):
        logger.removeHandler(h)
        h.close()


def _build_handlers(
    level: int, console: bool, log_file: Optional[str], rotate_bytes: int, rotate_count: int
) -> List[logging.Handler]:
    handlers: List[logging.Handler] = []
    if console:
        handlers.append(logging.StreamHandler())
    if log_file:
        os.makedirs(os.path.dirname(os.path.abspath(log_file)), exist_ok=True)
        handlers.append(logging.handlers.RotatingFileHandler(
            log_file, maxBytes=rotate_bytes, backupCount=rotate_count, encoding="utf-8"
        ))
    fmt = logging.Formatter(fmt=_FORMAT, datefmt=_DATEFMT)
    for h in handlers:
        h.setLevel(level)
        h.setFormatter(fmt)
    return handlers


def configure_root_logging(
    *,
    level: int = logging.INFO,
    console: bool = True,
    log_file: Optional[str] = None,
    rotate_bytes: int = 2 * 1024 * 1024,
    rotate_count: int = 3,
) -> logging.Logger:
    """Replace the handlers of the fractalgen logger; records do not reach the root logger."""
    logger = get_logger()
    _detach(logger)
    logger.setLevel(level)
    logger.propagate = False
    for h in _build_handlers(level, console, log_file, rotate_bytes, rotate_count):
        logger.addHandler(h)
    return logger


def create_log_queue() -> mp.Queue:
    return mp.Queue(-1)


def start_queue_listener(queue: mp.Queue, listener_logger: Optional[logging.Logger] = None) -> logging.handlers.QueueListener:
    handlers = list((listener_logger or get_logger()).handlers)
    listener = logging.handlers.QueueListener(queue, *handlers, respect_handler_level=True)
    listener.start()
    return listener


def logging_initialiser(queue: mp.Queue, level: int) -> None:
    """ProcessPoolExecutor initializer: worker records go to `queue` only."""
    logger = get_logger()
    _detach(logger)
    logger.setLevel(level)
    logger.propagate = False
    qh = logging.handlers.QueueHandler(queue)
    qh.setLevel(level)
    logger.addHandler(qh)


@contextlib.contextmanager
def log_session(*, level: int = logging.INFO, log_file: Optional[str] = None, console: bool = True) -> Iterator[mp.Queue]:
    """Configure logging for one command and yield the queue pool workers log through.

    On exit the listener drains the queue and the handlers are closed.
    """
    logger = configure_root_logging(level=level, console=console, log_file=log_file)
    queue = create_log_queue()
    listener = start_queue_listener(queue, logger)
    try:
        yield queue
    finally:
        listener.stop()
        _detach(logger)
