import io
from datetime import datetime

import pytest

from ontoenrich.log import Logger, LogLevel, get_logger, parse_level


@pytest.mark.parametrize(
    "name, expected",
    [
        ("debug", LogLevel.DEBUG),
        ("INFO", LogLevel.INFO),
        ("Warning", LogLevel.WARNING),
        ("error", LogLevel.ERROR),
        ("verbose", LogLevel.INFO),
        ("", LogLevel.INFO),
    ],
)
def test_parse_level(name, expected):
    assert parse_level(name) == expected


def test_level_ordering():
    assert (
        parse_level("debug")
        < parse_level("info")
        < parse_level("warning")
        < parse_level("error")
    )


def test_info_written_with_level_tag():
    out = io.StringIO()
    logger = Logger(stream=out)
    logger.info("hello %s", "world")
    assert out.getvalue().rstrip("\n").endswith("[INFO] hello world")


def test_messages_below_level_are_dropped():
    out = io.StringIO()
    logger = Logger(level=LogLevel.WARNING, stream=out)
    logger.info("quiet")
    logger.debug("quieter")
    logger.error("loud")
    text = out.getvalue()
    assert "quiet" not in text
    assert "[ERROR] loud" in text


def test_set_and_get_level():
    logger = Logger(stream=io.StringIO())
    logger.set_level(LogLevel.ERROR)
    assert logger.get_level() == LogLevel.ERROR


def test_debug_includes_caller_location():
    out = io.StringIO()
    logger = Logger(level=LogLevel.DEBUG, stream=out)
    logger.debug("details %d", 5)
    text = out.getvalue()
    assert "[DEBUG] test_log.py:" in text
    assert text.rstrip("\n").endswith("- details 5")


def test_go_style_verb_is_formatted():
    out = io.StringIO()
    logger = Logger(stream=out)
    logger.warning("failed: %v", ValueError("bad"))
    assert "[WARNING] failed: bad" in out.getvalue()


def test_message_without_args_left_untouched():
    out = io.StringIO()
    logger = Logger(stream=out)
    logger.info("100% done")
    assert "[INFO] 100% done" in out.getvalue()


def test_log_file_receives_records(tmp_path):
    log_dir = tmp_path / "logs"
    with Logger(stream=io.StringIO(), log_dir=log_dir) as logger:
        logger.info("to file")
    expected = log_dir / f"ontology_{datetime.now():%Y-%m-%d}.log"
    assert expected.exists()
    assert "[INFO] to file" in expected.read_text(encoding="utf-8")


def test_update_progress():
    out = io.StringIO()
    logger = Logger(stream=out)
    logger.update_progress(3, 10)
    assert out.getvalue() == "\rProgress: 3/10"


def test_get_logger_is_shared(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    first = get_logger()
    second = get_logger()
    assert first is second
    assert first.get_level() in set(LogLevel)