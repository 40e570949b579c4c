"""
Structured logger: level filtering, detail tree, bound categories.
"""

from tweenloop.models.enums import LogCategory, LogLevel
from tweenloop.utils.logger import Logger, configure_logger, get_category_logger, get_logger


def test_info_with_details(capsys):
    logger = Logger(min_level=LogLevel.DEBUG, use_colors=False)

    logger.info(LogCategory.ANIMATION, "Animation started", start=10, end=20)

    lines = capsys.readouterr().out.splitlines()
    assert "ANIMATION" in lines[0]
    assert "✓ Animation started" in lines[0]
    assert lines[1].strip() == "├─ start: 10"
    assert lines[2].strip() == "└─ end: 20"


def test_level_filtering(capsys):
    logger = Logger(min_level=LogLevel.WARN, use_colors=False)

    logger.debug(LogCategory.TICK, "hidden")
    logger.info(LogCategory.TICK, "hidden too")
    logger.warn(LogCategory.TICK, "shown")

    out = capsys.readouterr().out
    assert "hidden" not in out
    assert "⚠ shown" in out


def test_bound_logger_category(capsys):
    base = Logger(min_level=LogLevel.DEBUG, use_colors=False)
    log = base.for_category(LogCategory.CONFIG)

    log.error("Invalid preset 'x'")
    log.with_category(LogCategory.TASK).info("tracked")

    lines = capsys.readouterr().out.splitlines()
    assert "CONFIG" in lines[0] and "✗" in lines[0]
    assert "TASK" in lines[1]


def test_configure_keeps_singleton(capsys):
    before = get_logger()
    bound = get_category_logger(LogCategory.TASK)

    configure_logger(min_level=LogLevel.DEBUG, use_colors=False)
    bound.debug("now visible")

    assert get_logger() is before
    assert "now visible" in capsys.readouterr().out
