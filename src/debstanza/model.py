"""Data model for parsed control stanzas: values and records."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Union


# ---------------------------------------------------------------------------
# Value types
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class Single:
    """A field whose value fits on the field line."""

    value: str

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True, slots=True)
class Multiple:
    """A field followed by continuation lines.

    ``lines[0]`` is the text after the colon (possibly empty), the rest are
    the continuation lines with their indentation removed.  A ``.`` line
    is stored as ``""``.
    """

    lines: tuple[str, ...]

    def __post_init__(self) -> None:
        if not isinstance(self.lines, tuple):
            object.__setattr__(self, "lines", tuple(self.lines))

    @property
    def text(self) -> str:
        return "\n".join(self.lines)

    def __str__(self) -> str:
        return self.text


Value = Union[Single, Multiple]


BLANK_MARKER = "."


def fold(buffer: list[str]) -> Value:
    """Turn a field's buffered lines into a Value.

    One line gives ``Single``; more give ``Multiple`` with every ``.``
    line replaced by an empty string.
    """
    if len(buffer) == 1:
        return Single(buffer[0])
    return Multiple(tuple("" if line.strip() == BLANK_MARKER else line for line in buffer))


# ---------------------------------------------------------------------------
# Record
# ---------------------------------------------------------------------------

@dataclass(frozen=True, eq=False, repr=False)
class Record(Mapping[str, Value]):
    """One stanza: field name -> Value, in first-occurrence order.

    Lookup is by exact (case-sensitive) name; ``get`` returns ``None`` for
    a missing field.  The fields are copied on construction and exposed
    read-only, so a record compares and hashes by content.
    """

    fields: Mapping[str, Value] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "fields", MappingProxyType(dict(self.fields)))

    def __getitem__(self, name: str) -> Value:
        return self.fields[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self.fields)

    def __len__(self) -> int:
        return len(self.fields)

    def __hash__(self) -> int:
        return hash(frozenset(self.fields.items()))

    def __repr__(self) -> str:
        return f"Record({dict(self.fields)!r})"

    def text(self, name: str, default: str | None = None) -> str | None:
        """Field value as plain text (Multiple lines joined by newlines)."""
        value = self.fields.get(name)
        if value is None:
            return default
        return str(value)

    @classmethod
    def from_pairs(cls, pairs: Iterable[tuple[str, Value]]) -> Record:
        """Build a record; a repeated name keeps its last value."""
        fields: dict[str, Value] = {}
        for name, value in pairs:
            fields[name] = value
        return cls(fields)
