"""Run the configured action against the selected text."""
import base64
import logging
import sys
import time
from typing import Optional, TextIO

from .models.selection import SelectionPayload
from .proc import Executor

logger = logging.getLogger(__name__)

PLACEHOLDER = "{}"
ESC = "\x1b"
OSC52_DELAY = 0.1


def osc52_sequence(text: str) -> str:
    """OSC 52 clipboard sequence wrapped for tmux passthrough."""
    encoded = base64.b64encode(text.encode("utf-8")).decode("ascii")
    osc = f"{ESC}]52;0;{encoded}\x07"
    return f"{ESC}Ptmux;{osc.replace(ESC, ESC + ESC)}{ESC}\\"


def emit_osc52(text: str, stream: Optional[TextIO] = None, delay: float = OSC52_DELAY):
    """Write the OSC 52 sequence for ``text`` to the terminal.

    tmux drops passthrough sequences that arrive while the pane still needs
    a redraw (the picker just left the alternate screen), so wait first.
    """
    if stream is None:
        stream = sys.stdout
    if delay > 0:
        time.sleep(delay)
    stream.write(osc52_sequence(text))
    stream.flush()


def render_command(template: str, text: str) -> str:
    return template.replace(PLACEHOLDER, text)


def dispatch(
    executor: Executor,
    payload: SelectionPayload,
    command: str,
    upcase_command: str,
    osc52: bool = False,
    shell: str = "bash",
    osc52_delay: float = OSC52_DELAY,
    stream: Optional[TextIO] = None,
) -> Optional[str]:
    """Execute the copy or paste command for the selection.

    Returns:
        The shell command that ran, or None when nothing was selected
    """
    if payload.empty:
        logger.info("Nothing selected")
        return None

    if osc52:
        emit_osc52(payload.text, stream=stream, delay=osc52_delay)

    template = upcase_command if payload.upcase else command
    final_command = render_command(template, payload.text)

    logger.debug(f"Executing: {final_command}")
    executor.execute([shell, "-c", final_command])
    return final_command
