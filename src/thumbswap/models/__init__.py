"""Data models for thumbswap."""
from .option import OptionKind, ThumbsOption
from .pane import PaneDescriptor
from .selection import SelectionPayload
from .session import SessionContext

__all__ = ["OptionKind", "PaneDescriptor", "SelectionPayload", "SessionContext", "ThumbsOption"]
