"""Launch the picker in a hidden tmux window.

The picker runs inside a shell pipeline that captures the active pane,
feeds it to the picker, swaps the panes back and finally signals the
rendezvous token the orchestrator is waiting on.
"""
import logging
import shlex
from pathlib import Path
from typing import List, Optional, Sequence

from .models.option import ThumbsOption
from .models.pane import PaneDescriptor
from .proc import Executor

logger = logging.getLogger(__name__)

# %U is the upcase flag and %H the hint text, see SelectionPayload
RESULT_FORMAT = "%U:%H"
DEFAULT_WINDOW_NAME = "[thumbs]"


def read_thumbs_options(executor: Executor) -> List[ThumbsOption]:
    """Collect every ``@thumbs-*`` global option, in tmux order."""
    output = executor.execute(["tmux", "show", "-g"])

    options = []
    for line in output.split("\n"):
        option = ThumbsOption.parse(line)
        if option is not None:
            options.append(option)

    logger.debug(f"Found {len(options)} thumbs options")
    return options


def translate_options(options: Sequence[ThumbsOption]) -> List[str]:
    """Turn thumbs options into picker flags, dropping unknown ones."""
    flags = []
    for option in options:
        option_flags = option.to_flags()
        if not option_flags:
            logger.debug(f"Ignoring unknown thumbs option {option.name}")
        flags.extend(option_flags)
    return flags


def capture_command(pane: PaneDescriptor) -> str:
    """``capture-pane`` invocation for the pane, scroll range included."""
    cmd = ["tmux", "capture-pane", "-t", pane.id, "-p"]

    capture_range = pane.capture_range
    if capture_range is not None:
        start, end = capture_range
        cmd.extend(["-S", str(start), "-E", str(end)])

    return shlex.join(cmd)


def picker_path(working_dir, binary: str) -> Path:
    """Resolve the picker binary, relative paths are taken from ``working_dir``."""
    path = Path(binary).expanduser()
    if path.is_absolute():
        return path
    return Path(working_dir) / path


def build_pane_command(
    pane: PaneDescriptor,
    picker: Path,
    result_file: Path,
    flags: Sequence[str],
    signal: str,
) -> str:
    """Compose the shell pipeline run inside the hidden window."""
    picker_cmd = " ".join([
        shlex.quote(str(picker)),
        "-f", shlex.quote(RESULT_FORMAT),
        "-t", shlex.quote(str(result_file)),
        *flags,
    ])

    return "; ".join([
        f"{capture_command(pane)} | {picker_cmd}",
        shlex.join(["tmux", "swap-pane", "-t", pane.id]),
        shlex.join(["tmux", "wait-for", "-S", signal]),
    ])


def launch_picker(
    executor: Executor,
    pane: PaneDescriptor,
    working_dir,
    binary: str,
    result_file: Path,
    signal: str,
    window_name: Optional[str] = None,
) -> str:
    """Start the picker pipeline in a detached window.

    Returns:
        The pane ID of the new window's pane
    """
    flags = translate_options(read_thumbs_options(executor))
    pane_command = build_pane_command(
        pane,
        picker_path(working_dir, binary),
        result_file,
        flags,
        signal,
    )
    logger.debug(f"Picker pipeline: {pane_command}")

    picker_pane_id = executor.execute([
        "tmux", "new-window", "-P", "-F", "#{pane_id}", "-d",
        "-n", window_name or DEFAULT_WINDOW_NAME,
        pane_command,
    ])
    logger.info(f"Picker started in pane {picker_pane_id}")
    return picker_pane_id
