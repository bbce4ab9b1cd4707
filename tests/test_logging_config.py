import pytest
import structlog

from forbidden_domains.logging_config import setup_logging


def test_console_output_filters_below_level(capsys: pytest.CaptureFixture) -> None:
    setup_logging("warning", json_output=False)
    log = structlog.get_logger()
    log.info("hidden_event")
    log.warning("shown_event", count=2)
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "shown_event" in captured.err
    assert "hidden_event" not in captured.err


def test_json_output_at_debug(capsys: pytest.CaptureFixture) -> None:
    setup_logging("debug", json_output=True)
    structlog.get_logger().debug("debug_event")
    err = capsys.readouterr().err
    assert '"event": "debug_event"' in err
    assert '"level": "debug"' in err
