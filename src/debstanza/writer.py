"""Serialise records back to control-file text.

Only the logical values are reproduced: parsing the output again gives
equal Values, not necessarily the same bytes.
"""

from __future__ import annotations

from collections.abc import Iterable

from .model import BLANK_MARKER, Multiple, Record, Single, Value


_LINE_BREAKS = "\n\r"


def _check_name(name: str) -> None:
    if not name or name != name.strip() or ":" in name or any(c in name for c in _LINE_BREAKS):
        raise ValueError(f"invalid field name {name!r}")


def _check_inline(name: str, text: str) -> None:
    # the field line is trimmed on parse
    if text != text.strip() or any(c in text for c in _LINE_BREAKS):
        raise ValueError(f"field {name!r}: value {text!r} does not survive a re-parse")


def _check_continuation(name: str, line: str) -> None:
    if (
        any(c in line for c in _LINE_BREAKS)
        or line[:1] in (" ", "\t")
        or (line and not line.strip())
        or line.strip() == BLANK_MARKER
    ):
        raise ValueError(f"field {name!r}: line {line!r} does not survive a re-parse")


def _field_lines(name: str, value: Value) -> list[str]:
    _check_name(name)

    if isinstance(value, Single):
        _check_inline(name, value.value)
        return [f"{name}: {value.value}" if value.value else f"{name}:"]

    if isinstance(value, Multiple):
        if len(value.lines) < 2:
            raise ValueError(f"field {name!r}: multi-line value needs at least two lines")
        first, *rest = value.lines
        _check_inline(name, first)
        if first.strip() == BLANK_MARKER:
            raise ValueError(f"field {name!r}: line {first!r} does not survive a re-parse")
        out = [f"{name}: {first}" if first else f"{name}:"]
        for line in rest:
            _check_continuation(name, line)
            out.append(" " + (line or BLANK_MARKER))
        return out

    raise TypeError(f"field {name!r}: unsupported value {value!r}")


def dump_record(record: Record) -> str:
    """Render one stanza, newline terminated."""
    lines: list[str] = []
    for name, value in record.items():
        lines.extend(_field_lines(name, value))
    return "".join(line + "\n" for line in lines)


def dump_records(records: Iterable[Record]) -> str:
    """Render several stanzas separated by a blank line."""
    return "\n".join(dump_record(r) for r in records)
