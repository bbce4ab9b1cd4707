import io

from structlog.testing import capture_logs

from forbidden_domains.models import Domain, RunStats, Verdict
from forbidden_domains.output import StdoutHandler


def test_emit_verdict_writes_literal_and_logs_domain() -> None:
    out = io.StringIO()
    handler = StdoutHandler(out)
    with capture_logs() as logs:
        handler.emit_verdict(Domain("gdz.ru"), Verdict.BAD)
        handler.emit_verdict(Domain("maps.ru"), Verdict.GOOD)
    assert out.getvalue() == "Bad\nGood\n"
    assert [(e["domain"], e["verdict"]) for e in logs if e["event"] == "verdict"] == [
        ("gdz.ru", "Bad"),
        ("maps.ru", "Good"),
    ]


def test_emit_summary_logs_stats_not_stdout() -> None:
    out = io.StringIO()
    with capture_logs() as logs:
        StdoutHandler(out).emit_summary(RunStats(queries_read=2, bad_count=1, good_count=1))
    assert out.getvalue() == ""
    summary = next(e for e in logs if e["event"] == "run_complete")
    assert summary["bad_count"] == 1
