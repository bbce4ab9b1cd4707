from __future__ import annotations

import sys
from abc import ABC, abstractmethod
from typing import TextIO

import structlog

from .models import Domain, RunStats, Verdict

log = structlog.get_logger()


class OutputHandler(ABC):
    @abstractmethod
    def emit_verdict(self, domain: Domain, verdict: Verdict) -> None: ...

    @abstractmethod
    def emit_summary(self, stats: RunStats) -> None: ...


class StdoutHandler(OutputHandler):
    """Writes one ``Bad``/``Good`` line per query; stdout carries nothing else."""

    def __init__(self, stream: TextIO | None = None) -> None:
        self.stream = stream if stream is not None else sys.stdout

    def emit_verdict(self, domain: Domain, verdict: Verdict) -> None:
        self.stream.write(f"{verdict}\n")
        log.debug("verdict", domain=str(domain), verdict=str(verdict))

    def emit_summary(self, stats: RunStats) -> None:
        self.stream.flush()
        log.info("run_complete", **stats.model_dump())
