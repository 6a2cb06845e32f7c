"""Result file handling."""
import logging
from pathlib import Path

from .models.selection import SelectionPayload
from .proc import strip_newline

logger = logging.getLogger(__name__)


def retrieve_and_clear(path) -> SelectionPayload:
    """Read the picker's result file, delete it, and decode its payload.

    A missing or empty file decodes to an empty payload. Failing to delete
    the file is only logged.
    """
    path = Path(path)

    try:
        content = path.read_bytes().decode("utf-8", errors="replace")
    except FileNotFoundError:
        logger.debug(f"No result file at {path}")
        content = ""

    try:
        path.unlink(missing_ok=True)
    except OSError as e:
        logger.warning(f"Failed to remove result file {path}: {e}")

    return SelectionPayload.decode(strip_newline(content))
