"""Utility functions for thumbswap."""
import logging
import os
import time
from typing import Optional

logger = logging.getLogger(__name__)

SIGNAL_PREFIX = "thumbs-finished"
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def rendezvous_token(now: Optional[float] = None, pid: Optional[int] = None) -> str:
    """
    Generate the tmux ``wait-for`` channel name for one run.

    Args:
        now: Unix timestamp, defaults to the current time
        pid: Process ID, defaults to this process

    Returns:
        Token unique to this second and process

    Example:
        >>> rendezvous_token(1700000000.7, 4242)
        'thumbs-finished-1700000000-4242'
    """
    if now is None:
        now = time.time()
    if pid is None:
        pid = os.getpid()
    return f"{SIGNAL_PREFIX}-{int(now)}-{pid}"


def setup_logging(level: Optional[str] = None, log_file: Optional[str] = None):
    """Configure logging for the application.

    Records go to stderr (stdout carries the clipboard escape sequence) and,
    when ``log_file`` is given, to that file as well.
    """
    if level is None:
        level = os.getenv('THUMBSWAP_LOG_LEVEL', 'WARNING')
    level = level.upper()

    handlers = [logging.StreamHandler()]
    if log_file:
        handlers.append(logging.FileHandler(os.path.expanduser(log_file)))

    logging.basicConfig(
        level=getattr(logging, level, logging.WARNING),
        format=LOG_FORMAT,
        handlers=handlers,
        force=True,
    )

    logging.getLogger('thumbswap').setLevel(getattr(logging, level, logging.WARNING))
