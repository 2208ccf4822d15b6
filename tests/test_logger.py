import io

from blockbreaker.logger import get_logger


def test_logger_info_output():
    buf = io.StringIO()
    logger = get_logger("test")
    logger.stream = buf  # type: ignore
    logger.min_level = 10
    logger.info("Hello", "World")
    out = buf.getvalue()
    assert "INFO" in out and "test: Hello World" in out


def test_logger_respects_min_level():
    buf = io.StringIO()
    logger = get_logger("quiet")
    logger.stream = buf  # type: ignore
    logger.min_level = 30
    logger.debug("hidden")
    logger.info("hidden")
    logger.warn("shown")
    assert "hidden" not in buf.getvalue()
    assert "WARN" in buf.getvalue()
