"""Reader layer: splits control text into stanzas and parses each one."""

from __future__ import annotations

from collections.abc import Iterable

from .errors import EmptyInput
from .lines import Line, LineKind, classify_text
from .model import Record
from .stanza import build


# ---------------------------------------------------------------------------
# Stanza splitting
# ---------------------------------------------------------------------------

def split_runs(lines: Iterable[Line]) -> list[list[Line]]:
    """Partition classified lines into blank-line separated runs.

    Consecutive blank lines collapse into one separator and empty runs are
    dropped.  Comment lines are removed before partitioning, so they never
    separate two stanzas.
    """
    runs: list[list[Line]] = []
    current: list[Line] = []
    for line in lines:
        if line.kind is LineKind.COMMENT:
            continue
        if line.kind is LineKind.BLANK:
            if current:
                runs.append(current)
                current = []
            continue
        current.append(line)
    if current:
        runs.append(current)
    return runs


# ---------------------------------------------------------------------------
# Entry points
# ---------------------------------------------------------------------------

def parse_multi(text: str, comments: bool = False) -> list[Record]:
    """Parse every stanza of *text* (e.g. a ``Packages`` index).

    The first failing stanza aborts the whole call.  Text without any
    stanza gives an empty list.
    """
    return [build(run) for run in split_runs(classify_text(text, comments))]


def parse_one(text: str, comments: bool = False) -> Record:
    """Parse the first stanza of *text* (e.g. ``dpkg -s <package>`` output).

    Anything after the first stanza is ignored.

    Raises:
        EmptyInput: *text* has no non-blank content.
    """
    runs = split_runs(classify_text(text, comments))
    if not runs:
        raise EmptyInput()
    return build(runs[0])
