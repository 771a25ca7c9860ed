"""``debstanza`` command line front end.

Reads control-file text from files or stdin and prints the parsed records
as JSON or re-serialised control text::

    dpkg -s bash | debstanza --single
    debstanza --field Package --field Version /var/lib/apt/lists/*_Packages

Environment variables:
    DEBSTANZA_LOG_LEVEL   debug|info|warning|error (default: warning)
    DEBUG                 when set, forces debug logging
"""

from __future__ import annotations

import io
import json
import logging
import os
import sys
from argparse import ArgumentParser, Namespace
from typing import IO, NoReturn

from . import __version__
from .model import Multiple, Record
from .reader import parse_multi, parse_one
from .writer import dump_records

logger = logging.getLogger("debstanza")

_LOG_LEVELS = {
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "": logging.WARNING,
    "warn": logging.WARNING,
    "warning": logging.WARNING,
    "err": logging.ERROR,
    "error": logging.ERROR,
}


# ---------------------------------------------------------------------------
# Setup helpers
# ---------------------------------------------------------------------------

def _log_level() -> int:
    if "DEBUG" in os.environ:
        return logging.DEBUG
    level = os.getenv("DEBSTANZA_LOG_LEVEL", "").lower()
    return _LOG_LEVELS.get(level, logging.WARNING)


def _configure_logging() -> None:
    logging.basicConfig(
        format="%(asctime)s - [%(levelname)-7s] "
               "%(filename)s:%(lineno)d %(message)s",
        level=_log_level())


def _parse_args(argv: list[str] | None = None) -> Namespace:
    parser = ArgumentParser(
        prog="debstanza",
        description="Parse Debian control-file stanzas (dpkg status, Packages indexes).")
    parser.add_argument("-V", "--version", action="store_true", help="print version and exit")
    parser.add_argument("-1", "--single", action="store_true",
                        help="parse only the first stanza of each input")
    parser.add_argument("-c", "--comments", action="store_true",
                        help="skip '#' comment and '--...-' armor lines")
    parser.add_argument("-f", "--field", metavar="NAME", action="append", dest="fields",
                        help="only output this field (repeatable)")
    parser.add_argument("--format", choices=("json", "control"), default="json",
                        help="output format (default: json)")
    parser.add_argument("files", metavar="FILE", nargs="*",
                        help="input files; '-' or none reads stdin")
    return parser.parse_args(argv)


def fatal(msg: object) -> NoReturn:
    print("error: " + str(msg), file=sys.stderr)
    sys.exit(1)


# ---------------------------------------------------------------------------
# Input / output
# ---------------------------------------------------------------------------

def _read_source(path: str, stdin: IO[str]) -> str:
    if path == "-":
        return stdin.read()
    with open(path, encoding="utf-8") as fh:
        return fh.read()


def _select(record: Record, names: list[str] | None) -> Record:
    if not names:
        return record
    return Record({name: record[name] for name in names if name in record})


def _to_json(record: Record) -> dict[str, object]:
    return {
        name: list(value.lines) if isinstance(value, Multiple) else value.value
        for name, value in record.items()
    }


def run(args: Namespace, stdin: IO[str], dest: IO[str]) -> None:
    """Parse every source named in *args* and write the records to *dest*.

    Raises StanzaError, OSError or UnicodeDecodeError from the first failing
    source; nothing is written in that case.
    """
    records: list[Record] = []
    for path in args.files or ["-"]:
        logger.debug("reading %s", "<stdin>" if path == "-" else path)
        text = _read_source(path, stdin)
        if args.single:
            parsed = [parse_one(text, comments=args.comments)]
        else:
            parsed = parse_multi(text, comments=args.comments)
        logger.debug("parsed %d record(s)", len(parsed))
        records.extend(_select(r, args.fields) for r in parsed)

    if args.format == "control":
        dest.write(dump_records(records))
    else:
        json.dump([_to_json(r) for r in records], dest, indent=2, ensure_ascii=False)
        dest.write("\n")


# ---------------------------------------------------------------------------
# CLI entry point
# ---------------------------------------------------------------------------

def main(argv: list[str] | None = None) -> None:
    """``debstanza`` console script / ``python -m debstanza``."""
    args = _parse_args(argv)
    if args.version:
        print(__version__)
        return

    _configure_logging()
    if isinstance(sys.stdin, io.TextIOWrapper):
        sys.stdin.reconfigure(encoding="utf-8")
    try:
        run(args, sys.stdin, sys.stdout)
    except (ValueError, OSError) as exc:
        # StanzaError and UnicodeDecodeError are ValueErrors
        fatal(exc)


if __name__ == "__main__":
    main()
