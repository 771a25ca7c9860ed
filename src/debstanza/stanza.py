"""Stanza builder: classified lines of one stanza -> Record."""

from __future__ import annotations

from collections.abc import Iterable

from .errors import EmptyStanza, InvalidLine, OrphanContinuation
from .lines import Line, LineKind
from .model import Record, Value, fold


def build(lines: Iterable[Line]) -> Record:
    """Build one Record from the non-blank lines of a stanza.

    A field collects its inline value plus every continuation line that
    follows it; the buffer is folded into a Value when the next field
    starts or the lines run out.  A repeated field name overwrites the
    earlier value.

    Raises:
        InvalidLine: a malformed line.
        OrphanContinuation: a continuation before the first field.
        EmptyStanza: no field at all.
    """
    pairs: list[tuple[str, Value]] = []
    current: str | None = None
    buffer: list[str] = []
    first_number: int | None = None

    for line in lines:
        if first_number is None:
            first_number = line.number

        if line.kind is LineKind.FIELD_START:
            if current is not None:
                pairs.append((current, fold(buffer)))
            current = line.name
            buffer = [line.text]
        elif line.kind is LineKind.CONTINUATION:
            if current is None:
                raise OrphanContinuation(line.number)
            buffer.append(line.text)
        elif line.kind is LineKind.COMMENT:
            continue
        else:
            # BLANK lines never reach here from the splitter
            raise InvalidLine(line.number, line.text)

    if current is None:
        raise EmptyStanza(first_number)
    pairs.append((current, fold(buffer)))

    return Record.from_pairs(pairs)
