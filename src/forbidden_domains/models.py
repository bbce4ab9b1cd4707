from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum
from string import ascii_lowercase, ascii_uppercase

from pydantic import BaseModel

from .errors import InvalidDomainError

LABEL_SEPARATOR = "."

_ASCII_LOWER = str.maketrans(ascii_uppercase, ascii_lowercase)


@dataclass(frozen=True, order=True)
class Domain:
    """A normalized domain name, compared and ordered by its root-first key.

    ``Domain("math.gdz.ru").key`` is ``"ru.gdz.math."``. Every label in the key
    is followed by the separator, so a key prefix always ends on a label
    boundary and ``"ru.gdz."`` is never a prefix of ``"ru.freegdz."``.
    """

    name: str = field(compare=False)
    key: str = field(init=False, repr=False)

    def __post_init__(self) -> None:
        name = self.name.strip().translate(_ASCII_LOWER)
        if not name:
            raise InvalidDomainError("empty domain name")
        labels = name.split(LABEL_SEPARATOR)
        if not all(labels):
            raise InvalidDomainError(f"empty label in domain name {self.name!r}")
        object.__setattr__(self, "name", name)
        object.__setattr__(
            self, "key", "".join(label + LABEL_SEPARATOR for label in reversed(labels))
        )

    def __str__(self) -> str:
        return self.name

    def is_subdomain_of(self, other: Domain) -> bool:
        """True if ``other`` is this domain or one of its ancestors."""
        return self.key.startswith(other.key)


class Verdict(StrEnum):
    BAD = "Bad"
    GOOD = "Good"

    @classmethod
    def of(cls, forbidden: bool) -> Verdict:
        return cls.BAD if forbidden else cls.GOOD


class RunStats(BaseModel):
    """Statistics for a single filtering run."""

    blocked_read: int = 0
    blocked_retained: int = 0
    queries_read: int = 0
    bad_count: int = 0
    good_count: int = 0
