from __future__ import annotations

from bisect import bisect_right
from collections.abc import Iterable

import structlog

from .models import Domain

log = structlog.get_logger()


def collapse_covered(domains: Iterable[Domain]) -> list[Domain]:
    """Sort domains root-first and drop every entry covered by an earlier one.

    After sorting, an ancestor comes right before the contiguous run of its
    descendants, so comparing against the last kept entry is enough.
    """
    kept: list[Domain] = []
    for domain in sorted(domains):
        if kept and domain.is_subdomain_of(kept[-1]):
            continue
        kept.append(domain)
    return kept


class DomainChecker:
    """Answers whether a domain equals or falls under a blocked domain."""

    def __init__(self, domains: Iterable[Domain]) -> None:
        domains = list(domains)
        self._blocked = tuple(collapse_covered(domains))
        self._keys = [d.key for d in self._blocked]
        log.info(
            "checker_built",
            blocked=len(domains),
            retained=len(self._blocked),
            collapsed=len(domains) - len(self._blocked),
        )
        log.debug("checker_blocked", domains=[str(d) for d in self.blocked])

    @property
    def blocked(self) -> tuple[Domain, ...]:
        """Retained block-list entries in root-first order."""
        return self._blocked

    def find_cover(self, domain: Domain) -> Domain | None:
        """Return the blocked entry that covers ``domain``, if any.

        Retained entries never cover each other, so the only candidate is the
        greatest entry not above ``domain``.
        """
        idx = bisect_right(self._keys, domain.key)
        if idx == 0:
            return None
        candidate = self._blocked[idx - 1]
        return candidate if domain.is_subdomain_of(candidate) else None

    def is_forbidden(self, domain: Domain) -> bool:
        return self.find_cover(domain) is not None

    def __len__(self) -> int:
        return len(self._blocked)
