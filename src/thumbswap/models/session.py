"""Per-invocation orchestration state."""
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from ..utils import rendezvous_token
from .pane import PaneDescriptor
from .selection import SelectionPayload


@dataclass
class SessionContext:
    """State built up stage by stage during one thumbswap run."""
    signal: str
    result_file: Path
    active_pane: Optional[PaneDescriptor] = None
    picker_pane_id: Optional[str] = None
    selection: Optional[SelectionPayload] = None

    @classmethod
    def create(cls, result_file, now: Optional[float] = None, pid: Optional[int] = None) -> "SessionContext":
        """Start a fresh context with a rendezvous token for this run."""
        return cls(signal=rendezvous_token(now=now, pid=pid), result_file=Path(result_file))
