"""Exceptions raised by the stanza parser."""

from __future__ import annotations


class StanzaError(ValueError):
    """Base class for every parse failure.

    ``line_number`` is 1-based over the whole input, or ``None`` when the
    failure has no single offending line.
    """

    def __init__(self, message: str, line_number: int | None = None) -> None:
        if line_number is not None:
            message = f"line {line_number}: {message}"
        super().__init__(message)
        self.line_number = line_number


class InvalidLine(StanzaError):
    """A non-blank, non-continuation line without a field name and colon."""

    def __init__(self, line_number: int, line: str = "") -> None:
        super().__init__(f"expected 'Name: value', got {line!r}", line_number)
        self.line = line


class OrphanContinuation(StanzaError):
    """A continuation line before any field of its stanza."""

    def __init__(self, line_number: int) -> None:
        super().__init__("continuation line without a preceding field", line_number)


class EmptyStanza(StanzaError):
    def __init__(self, line_number: int | None = None) -> None:
        super().__init__("stanza has no fields", line_number)


class EmptyInput(StanzaError):
    def __init__(self) -> None:
        super().__init__("input contains no stanza")
