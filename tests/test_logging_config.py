from __future__ import annotations

import json

from core.logging_config import configure_logging, get_logger


def test_json_logs_go_to_stderr(capsys):
    configure_logging("DEBUG", format_json=True)

    get_logger("tests.logging").debug("issue_pages_planned", remaining_pages=3)

    captured = capsys.readouterr()
    assert captured.out == ""
    record = json.loads(captured.err.strip().splitlines()[-1])
    assert record["event"] == "issue_pages_planned"
    assert record["remaining_pages"] == 3
    assert record["level"] == "debug"
    assert record["logger"] == "tests.logging"


def test_level_filters_debug(capsys):
    configure_logging("WARNING", format_json=True)

    get_logger("tests.logging").debug("hidden")
    get_logger("tests.logging").warning("shown")

    err = capsys.readouterr().err
    assert "hidden" not in err
    assert "shown" in err
