"""Pane model for thumbswap."""
from typing import Optional, Tuple

from pydantic import BaseModel, Field


class PaneDescriptor(BaseModel):
    """A tmux pane as reported by ``list-panes``."""

    id: str = Field(..., description="Pane unique ID (%pane_id)")
    in_copy_mode: bool = Field(False, description="Is the pane showing scrollback")
    height: Optional[int] = Field(None, description="Visible rows, only known in copy mode")
    scroll_position: Optional[int] = Field(None, description="Offset from the bottom of scrollback, only known in copy mode")
    active: bool = Field(False, description="Is active pane")

    @property
    def capture_range(self) -> Optional[Tuple[int, int]]:
        """Start and end lines for ``capture-pane -S/-E``.

        None means the pane is live and the visible screen is captured.
        """
        if not self.in_copy_mode or self.height is None or self.scroll_position is None:
            return None
        return -self.scroll_position, self.height - self.scroll_position - 1
