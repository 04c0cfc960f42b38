"""Line ending conversion for extracted license text."""

from __future__ import annotations

import os
import re
from enum import Enum
from typing import Union

_NEWLINE_PATTERN = re.compile(r"\r\n|\r|\n")


class LineEnding(str, Enum):
    """Supported line ending styles."""

    LF = "lf"
    CRLF = "crlf"
    CR = "cr"

    @property
    def sequence(self) -> str:
        return {"lf": "\n", "crlf": "\r\n", "cr": "\r"}[self.value]

    @classmethod
    def parse(cls, value: Union[str, "LineEnding"]) -> "LineEnding":
        """Accept a style in any letter case (``LF``, ``crlf``...)."""
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            choices = ", ".join(e.value for e in cls)
            raise ValueError(f"Unknown line ending '{value}'. Expected one of: {choices}")


def host_line_ending() -> LineEnding:
    """Return the line ending style of the host OS."""
    if os.linesep == "\r\n":
        return LineEnding.CRLF
    if os.linesep == "\r":
        return LineEnding.CR
    return LineEnding.LF


def normalize_newlines(text: str, style: Union[str, LineEnding] = LineEnding.LF) -> str:
    """Rewrite every ``\\r\\n``, ``\\r`` or ``\\n`` in ``text`` to ``style``."""
    return _NEWLINE_PATTERN.sub(LineEnding.parse(style).sequence, text)
