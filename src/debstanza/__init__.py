"""debstanza: parser for Debian control-file stanzas."""

__version__ = "0.1.0"

from .errors import (
    EmptyInput,
    EmptyStanza,
    InvalidLine,
    OrphanContinuation,
    StanzaError,
)
from .lines import Line, LineKind, classify, classify_text
from .model import Multiple, Record, Single, Value, fold
from .reader import parse_multi, parse_one, split_runs
from .stanza import build
from .writer import dump_record, dump_records

__all__ = [
    "__version__",
    "parse_one",
    "parse_multi",
    "split_runs",
    "build",
    "classify",
    "classify_text",
    "Line",
    "LineKind",
    "Record",
    "Single",
    "Multiple",
    "Value",
    "fold",
    "dump_record",
    "dump_records",
    "StanzaError",
    "InvalidLine",
    "OrphanContinuation",
    "EmptyStanza",
    "EmptyInput",
]
