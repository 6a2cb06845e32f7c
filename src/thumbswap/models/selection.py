"""Selection payload written by the picker."""
from typing import Optional

from pydantic import BaseModel, Field

UPCASE_FLAG = "true"


class SelectionPayload(BaseModel):
    """The ``<flag>:<text>`` line the picker leaves in the result file."""

    flag: Optional[str] = Field(None, description="Upcase marker, 'true' selects the alternate action")
    text: Optional[str] = Field(None, description="Selected text, trailing whitespace trimmed")

    @classmethod
    def decode(cls, raw: Optional[str]) -> "SelectionPayload":
        """Split ``raw`` on its first colon.

        Missing content or a missing separator yields a payload without
        text, which means there is nothing to act on.
        """
        if not raw:
            return cls()

        flag, sep, text = raw.partition(":")
        if not sep:
            return cls(flag=flag)

        return cls(flag=flag, text=text.rstrip())

    @property
    def upcase(self) -> bool:
        return self.flag is not None and self.flag.rstrip() == UPCASE_FLAG

    @property
    def empty(self) -> bool:
        return self.text is None
