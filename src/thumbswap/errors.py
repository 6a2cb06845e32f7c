"""thumbswap exceptions.

PUBLIC API:
  - ThumbswapError: Base exception for every pipeline stage
  - InvalidLaunch: Launched without the plugin wrapper (no working directory)
  - NoActivePane: The pane listing had no active pane
  - MalformedPaneRow: A pane listing row did not match the expected format
  - ProcessSpawnFailed: An external command could not be started
  - CommandTimeout: An external command outlived its deadline
  - WaitTimeout: The picker never signalled the rendezvous token in time
"""


class ThumbswapError(Exception):
    """Base exception for all thumbswap operations."""

    pass


class InvalidLaunch(ThumbswapError):
    """Raised when thumbswap is executed without a working directory."""

    pass


class NoActivePane(ThumbswapError):
    """Raised when tmux reports no active pane."""

    pass


class MalformedPaneRow(ThumbswapError):
    """Raised when a pane listing row cannot be parsed."""

    def __init__(self, row: str, reason: str):
        self.row = row
        self.reason = reason
        super().__init__(f"Malformed pane row {row!r}: {reason}")


class ProcessSpawnFailed(ThumbswapError):
    """Raised when an external command cannot be started at all."""

    def __init__(self, cmd, cause: Exception):
        self.cmd = list(cmd)
        self.cause = cause
        super().__init__(f"Couldn't run {' '.join(self.cmd)}: {cause}")


class CommandTimeout(ThumbswapError):
    """Raised when an external command does not finish before its timeout."""

    def __init__(self, cmd, timeout: float):
        self.cmd = list(cmd)
        self.timeout = timeout
        super().__init__(f"Command timed out after {timeout}s: {' '.join(self.cmd)}")


class WaitTimeout(CommandTimeout):
    """Raised when the rendezvous signal is not received before the deadline."""

    def __init__(self, signal: str, timeout: float):
        self.signal = signal
        super().__init__(["tmux", "wait-for", signal], timeout)
