"""Input provider — yields one candidate per line until the end-of-input sentinel."""

from pathlib import Path
from typing import Iterator, TextIO

from pwcheck.exceptions import InputSourceError
from pwcheck.validators.reference_data import END_OF_INPUT_SENTINEL


class InputProvider:
    """Line-oriented candidate source.

    Only the line terminator is removed from each line. The exact line
    ``end`` stops iteration and is never yielded as a candidate.
    """

    def __init__(self, stream: TextIO, sentinel: str = END_OF_INPUT_SENTINEL):
        self.stream = stream
        self.sentinel = sentinel
        self.sentinel_found = False
        self.lines_read = 0

    @classmethod
    def open(cls, path: Path) -> "InputProvider":
        """Open a candidate file for reading.

        Raises:
            InputSourceError: the file does not exist or cannot be read
        """
        try:
            # Split on "\n" only; a lone "\r" stays inside the line
            stream = open(path, "r", encoding="utf-8", errors="replace", newline="\n")
        except OSError as e:
            raise InputSourceError(f"Cannot open input file '{path}': {e.strerror or e}") from e
        return cls(stream)

    def __iter__(self) -> Iterator[str]:
        for line in self.stream:
            self.lines_read += 1
            candidate = _strip_terminator(line)
            if candidate == self.sentinel:
                self.sentinel_found = True
                return
            yield candidate

    def close(self) -> None:
        self.stream.close()

    def __enter__(self) -> "InputProvider":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()


def _strip_terminator(line: str) -> str:
    """Drop a trailing newline, then at most one carriage return before it."""
    if line.endswith("\n"):
        line = line[:-1]
    if line.endswith("\r"):
        line = line[:-1]
    return line
