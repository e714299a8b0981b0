"""CSV line parsing, token splitting and small console helpers."""

from __future__ import annotations

import re
import sys
from collections.abc import Iterable, Iterator
from typing import TextIO

MAX_FIELDS = 128
"""Size of the field table; a line yields at most ``MAX_FIELDS - 1`` fields."""

CLEAR_SCREEN = "\033[H\033[J"
KEY_PRESS_PROMPT = "Presione Enter para continuar..."

_LINE_END = re.compile(r"[\r\n]")


def parse_csv_line(line: str, separator: str = ",") -> list[str]:
    """Split one CSV line into fields.

    The line is cut at its first carriage return or newline. Fields may be
    wrapped in double quotes, in which case they may hold the separator and
    ``""`` stands for a literal quote. An empty trailing field is dropped.
    """
    line = _LINE_END.split(line, maxsplit=1)[0]
    fields: list[str] = []
    pos = 0
    end_of_line = len(line)

    while pos < end_of_line and len(fields) < MAX_FIELDS - 1:
        if line[pos] == '"':
            pos += 1
            chunk: list[str] = []
            while pos < end_of_line:
                if line.startswith('""', pos):
                    chunk.append('"')
                    pos += 2
                elif line[pos] == '"':
                    pos += 1
                    break
                else:
                    chunk.append(line[pos])
                    pos += 1
            fields.append("".join(chunk))
            if line.startswith(separator, pos):
                pos += len(separator)
        else:
            stop = line.find(separator, pos)
            if stop == -1:
                fields.append(line[pos:])
                pos = end_of_line
            else:
                fields.append(line[pos:stop])
                pos = stop + len(separator)

    return fields


def read_csv_rows(stream: Iterable[str], separator: str = ",") -> Iterator[list[str]]:
    """Yield the parsed fields of every line read from ``stream``."""
    for line in stream:
        yield parse_csv_line(line, separator)


def split_string(text: str, delimiters: str) -> list[str]:
    """Split ``text`` on any character of ``delimiters``.

    Empty tokens are skipped and spaces around each token are removed.
    """
    if delimiters:
        pieces = re.split("[" + re.escape(delimiters) + "]", text)
    else:
        pieces = [text]
    return [piece.strip(" ") for piece in pieces if piece]


def clear_screen(out: TextIO | None = None) -> None:
    """Write the terminal sequence that clears the screen."""
    target = out if out is not None else sys.stdout
    target.write(CLEAR_SCREEN)
    target.flush()


def wait_for_key_press(inp: TextIO | None = None, out: TextIO | None = None) -> None:
    """Prompt the user and consume input up to the next newline."""
    source = inp if inp is not None else sys.stdin
    target = out if out is not None else sys.stdout
    target.write(KEY_PRESS_PROMPT)
    target.flush()
    source.readline()