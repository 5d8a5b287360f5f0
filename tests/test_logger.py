import io

from asciifx.models.enums import LogCategory, LogLevel
from asciifx.utils.logger import Logger, configure_logger, get_logger


def make_logger(min_level=LogLevel.INFO):
    stream = io.StringIO()
    return Logger(min_level=min_level, use_colors=False, stream=stream), stream


def test_message_with_detail_tree():
    logger, stream = make_logger()

    logger.info(LogCategory.BATCH, "Batch finished", frames=3, errors=0)

    lines = stream.getvalue().splitlines()
    assert "BATCH" in lines[0]
    assert lines[0].endswith("Batch finished")
    assert lines[1].strip() == "├─ frames: 3"
    assert lines[2].strip() == "└─ errors: 0"


def test_level_filtering():
    logger, stream = make_logger(LogLevel.WARN)

    logger.info(LogCategory.EFFECT, "hidden")
    logger.warn(LogCategory.EFFECT, "shown")

    output = stream.getvalue()
    assert "hidden" not in output
    assert "shown" in output


def test_no_ansi_codes_without_colors():
    logger, stream = make_logger()

    logger.error(LogCategory.CONFIG, "failure")

    assert "\033[" not in stream.getvalue()


def test_bound_logger_uses_category():
    logger, stream = make_logger()
    bound = logger.for_category(LogCategory.GRADIENT)

    bound.info("filled")
    bound.log("moved", category=LogCategory.GEOMETRY)

    lines = stream.getvalue().splitlines()
    assert "GRADIENT" in lines[0]
    assert "GEOMETRY" in lines[1]


def test_configure_logger_mutates_singleton():
    logger = get_logger()
    level, colors = logger.min_level, logger.use_colors
    bound = logger.for_category(LogCategory.GENERAL)
    try:
        configure_logger(min_level=LogLevel.ERROR, use_colors=False)

        assert get_logger() is logger
        assert logger.min_level == LogLevel.ERROR
        assert bound._base is logger
    finally:
        configure_logger(min_level=level, use_colors=colors)
