"""Line-oriented parsing of counts and domain lists from a text stream."""

from __future__ import annotations

from typing import TextIO

import structlog

from .errors import InputFormatError, InvalidDomainError
from .models import Domain

log = structlog.get_logger()


class InputReader:
    """Reads counts and domains one line at a time, tracking the line number."""

    def __init__(self, stream: TextIO) -> None:
        self._stream = stream
        self.line_no = 0

    def _next_line(self, expected: str) -> str:
        line = self._stream.readline()
        self.line_no += 1
        if not line:
            raise InputFormatError(f"unexpected end of input, expected {expected}", self.line_no)
        return line.strip()

    def read_count(self) -> int:
        text = self._next_line("a count")
        # ASCII digits only: int() would also take "1_0", "+3" and non-ASCII digits
        if not (text.isascii() and text.isdigit()):
            raise InputFormatError(f"expected a non-negative count, got {text!r}", self.line_no)
        return int(text)

    def read_domains(self, count: int) -> list[Domain]:
        domains = []
        for _ in range(count):
            text = self._next_line("a domain name")
            try:
                domains.append(Domain(text))
            except InvalidDomainError as exc:
                raise InputFormatError(str(exc), self.line_no) from exc
        log.debug("domains_read", count=count, last_line=self.line_no)
        return domains
