"""Thumbs options read from the tmux global option dump."""
import re
from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, Field

BOOLEAN_OPTIONS = ("reverse", "unique", "contrast")

STRING_OPTIONS = (
    "alphabet",
    "position",
    "fg-color",
    "bg-color",
    "hint-bg-color",
    "hint-fg-color",
    "select-fg-color",
    "select-bg-color",
)

# tmux quotes values holding spaces or special characters
OPTION_PATTERN = re.compile(r'^@thumbs-([\w\-]+)\s+(?:"((?:[^"\\]|\\.)*)"|\'([^\']*)\'|(\S+))\s*$')


class OptionKind(str, Enum):
    """How an option is passed on to the picker."""

    BOOLEAN = "boolean"
    STRING = "string"
    REGEXP = "regexp"


def _unescape(value: str) -> str:
    return re.sub(r"\\(.)", r"\1", value)


def shell_quote(value: str) -> str:
    """Wrap ``value`` in single quotes for the picker's shell pipeline."""
    return "'" + value.replace("'", "'\\''") + "'"


class ThumbsOption(BaseModel):
    """A ``@thumbs-<name> <value>`` global variable."""

    name: str = Field(..., description="Option name without the @thumbs- prefix")
    value: str = Field("", description="Raw option value")

    @classmethod
    def parse(cls, line: str) -> Optional["ThumbsOption"]:
        """Parse one ``show -g`` line, None if it isn't a thumbs option."""
        match = OPTION_PATTERN.match(line.strip())
        if not match:
            return None

        name, double_quoted, single_quoted, bare = match.groups()
        if double_quoted is not None:
            value = _unescape(double_quoted)
        elif single_quoted is not None:
            value = single_quoted
        else:
            value = bare
        return cls(name=name, value=value)

    @property
    def kind(self) -> Optional[OptionKind]:
        if self.name in BOOLEAN_OPTIONS:
            return OptionKind.BOOLEAN
        if self.name in STRING_OPTIONS:
            return OptionKind.STRING
        if self.name.startswith("regexp"):
            return OptionKind.REGEXP
        return None

    def to_flags(self) -> List[str]:
        """Picker command-line tokens for this option (empty if unknown)."""
        kind = self.kind
        if kind is OptionKind.BOOLEAN:
            return [f"--{self.name}"]
        if kind is OptionKind.STRING:
            return [f"--{self.name}", shell_quote(self.value)]
        if kind is OptionKind.REGEXP:
            return ["--regexp", shell_quote(self.value)]
        return []
