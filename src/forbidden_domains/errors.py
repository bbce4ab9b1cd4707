"""Exceptions raised by forbidden_domains."""


class DomainCheckerError(Exception):
    """Base class for all errors raised by this package."""


class InvalidDomainError(DomainCheckerError, ValueError):
    """A domain string is empty or contains an empty label."""


class InputFormatError(DomainCheckerError):
    """The line-oriented input does not follow the expected layout."""

    def __init__(self, message: str, line_no: int) -> None:
        super().__init__(f"line {line_no}: {message}")
        self.line_no = line_no
