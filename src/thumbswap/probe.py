"""Active pane discovery."""
import logging
from typing import List

from .errors import MalformedPaneRow, NoActivePane
from .models.pane import PaneDescriptor
from .proc import Executor

logger = logging.getLogger(__name__)

PANE_FORMAT = "#{pane_id}:#{?pane_in_mode,1,0}:#{pane_height}:#{scroll_position}:#{?pane_active,active,nope}"
ACTIVE_MARKER = "active"
COPY_MODE_FLAG = "1"


def _split_row(line: str) -> List[str]:
    fields = line.split(":")
    if len(fields) != 5:
        raise MalformedPaneRow(line, f"expected 5 fields, got {len(fields)}")
    return fields


def parse_pane_row(line: str) -> PaneDescriptor:
    """Build a PaneDescriptor from one ``list-panes`` row.

    Height and scroll position are only read when the pane is in copy mode.
    """
    pane_id, copy_flag, height, scroll, marker = _split_row(line)
    in_copy_mode = copy_flag == COPY_MODE_FLAG

    pane_height = None
    scroll_position = None
    if in_copy_mode:
        try:
            pane_height = int(height)
        except ValueError:
            raise MalformedPaneRow(line, f"unable to retrieve pane height from {height!r}")
        try:
            scroll_position = int(scroll)
        except ValueError:
            raise MalformedPaneRow(line, f"unable to retrieve pane scroll from {scroll!r}")

    return PaneDescriptor(
        id=pane_id,
        in_copy_mode=in_copy_mode,
        height=pane_height,
        scroll_position=scroll_position,
        active=marker == ACTIVE_MARKER,
    )


def capture_active_pane(executor: Executor) -> PaneDescriptor:
    """Return the pane tmux reports as active."""
    output = executor.execute(["tmux", "list-panes", "-F", PANE_FORMAT])

    rows = [line for line in output.split("\n") if line.strip()]
    for row in rows:
        if _split_row(row)[4] == ACTIVE_MARKER:
            pane = parse_pane_row(row)
            logger.debug(f"Active pane: {pane}")
            return pane

    raise NoActivePane("Unable to find active pane")
