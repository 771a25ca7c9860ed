"""Line classification for control-file text.

Every physical line is one of:

* a field start, ``Name: value`` with the name at column 0,
* a continuation, starting with a space or tab,
* blank (empty or whitespace only), separating stanzas,
* malformed, anything else.

With ``comments=True`` two extra column-0 forms are recognised as
comments: ``# ...`` lines and ``--...-`` armor lines such as the
``-----BEGIN PGP SIGNED MESSAGE-----`` header of a clearsigned file.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto


# ---------------------------------------------------------------------------
# LineKind / Line
# ---------------------------------------------------------------------------

class LineKind(Enum):
    FIELD_START = auto()
    CONTINUATION = auto()
    BLANK = auto()
    MALFORMED = auto()
    COMMENT = auto()


_INDENT = " \t"


@dataclass(frozen=True, slots=True)
class Line:
    """A classified physical line.

    ``name`` is set for field starts only.  ``text`` holds the inline value
    of a field start, the de-indented text of a continuation, or the raw
    line for malformed lines.
    """
    kind: LineKind
    number: int = 0
    name: str | None = None
    text: str = ""


# ---------------------------------------------------------------------------
# Classification
# ---------------------------------------------------------------------------

def _is_comment(line: str) -> bool:
    if line.startswith("#"):
        return True
    return line.startswith("--") and line.rstrip().endswith("-")


def classify(line: str, number: int = 0, comments: bool = False) -> Line:
    """Classify one physical line (without its line terminator)."""
    if not line.strip():
        return Line(LineKind.BLANK, number)

    if line[0] in _INDENT:
        return Line(LineKind.CONTINUATION, number, text=line.lstrip(_INDENT))

    if comments and _is_comment(line):
        return Line(LineKind.COMMENT, number, text=line)

    name, colon, value = line.partition(":")
    name = name.strip()
    if not colon or not name:
        return Line(LineKind.MALFORMED, number, text=line)

    return Line(LineKind.FIELD_START, number, name=name, text=value.strip())


def classify_text(text: str, comments: bool = False) -> list[Line]:
    """Classify every line of *text*, numbering from 1.

    Lines are split on ``\\n``; a trailing ``\\r`` is dropped so CRLF input
    reads the same as LF input.  A final newline does not add a line.
    """
    if not text:
        return []
    raw_lines = text.split("\n")
    if raw_lines[-1] == "":
        raw_lines.pop()

    result: list[Line] = []
    for number, raw in enumerate(raw_lines, 1):
        if raw.endswith("\r"):
            raw = raw[:-1]
        result.append(classify(raw, number, comments))
    return result
