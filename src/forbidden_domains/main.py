from __future__ import annotations

import sys
from typing import TextIO

import structlog

from .checker import DomainChecker
from .config import settings
from .errors import DomainCheckerError
from .logging_config import setup_logging
from .models import RunStats, Verdict
from .output import OutputHandler, StdoutHandler
from .reader import InputReader

log = structlog.get_logger()


def run(stdin: TextIO, stdout: TextIO) -> RunStats:
    """Read a block-list and queries from ``stdin``, write verdicts to ``stdout``."""
    stats = RunStats()
    handler: OutputHandler = StdoutHandler(stdout)
    reader = InputReader(stdin)

    # 1. Block-list
    blocked = reader.read_domains(reader.read_count())
    stats.blocked_read = len(blocked)
    checker = DomainChecker(blocked)
    stats.blocked_retained = len(checker)

    # 2. Queries, read in full so malformed input aborts before any output
    queries = reader.read_domains(reader.read_count())
    stats.queries_read = len(queries)

    # 3. Verdicts in input order
    for query in queries:
        verdict = Verdict.of(checker.is_forbidden(query))
        if verdict is Verdict.BAD:
            stats.bad_count += 1
        else:
            stats.good_count += 1
        handler.emit_verdict(query, verdict)

    handler.emit_summary(stats)
    return stats


def main() -> None:
    setup_logging(settings.log_level, settings.log_json)
    try:
        run(sys.stdin, sys.stdout)
    except DomainCheckerError as exc:
        log.error("input_rejected", error=str(exc))
        sys.exit(1)


if __name__ == "__main__":
    main()
