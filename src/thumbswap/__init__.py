"""Jump-to-text pane swapping for tmux."""
from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("thumbswap")
except PackageNotFoundError:
    __version__ = "0.0.0"

__all__ = ["__version__"]
