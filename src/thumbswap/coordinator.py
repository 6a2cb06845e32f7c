"""Pane swapping and rendezvous with the picker."""
import logging
from typing import Optional

from .errors import CommandTimeout, WaitTimeout
from .proc import Executor

logger = logging.getLogger(__name__)


def swap_panes(executor: Executor, active_id: str, picker_id: str):
    """Put the picker pane where the active pane is, keeping focus (-d)."""
    logger.debug(f"Swapping {active_id} with {picker_id}")
    executor.execute(["tmux", "swap-pane", "-d", "-s", active_id, "-t", picker_id])


def wait_for_completion(executor: Executor, signal: str, timeout: Optional[float] = None):
    """Block until the picker pipeline signals ``signal``.

    With no timeout this waits forever, a picker that dies without
    signalling leaves us blocked.
    """
    logger.debug(f"Waiting for {signal}")
    try:
        executor.execute(["tmux", "wait-for", signal], timeout=timeout)
    except CommandTimeout:
        raise WaitTimeout(signal, timeout) from None
    logger.debug(f"Received {signal}")
