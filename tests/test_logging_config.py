import logging

from osinfo_resolver.exceptions import (FactsParseError, InsufficientDataError,
                                        OsinfoResolverError, ReportGenerationError)
from osinfo_resolver.logging_config import ColoredFormatter, get_logger, setup_logging


def test_setup_logging_writes_debug_to_file(tmp_path):
    log_file = tmp_path / "resolver.log"
    logger = setup_logging(level="WARNING", log_file=str(log_file))
    assert logger.name == "osinfo_resolver"

    get_logger("tests").debug("resolved /dev/sda1")
    for handler in logger.handlers:
        handler.flush()
    assert "resolved /dev/sda1" in log_file.read_text(encoding="utf-8")


def test_colored_formatter_leaves_record_untouched():
    record = logging.LogRecord("osinfo_resolver", logging.ERROR, __file__, 1, "boom", None, None)
    formatted = ColoredFormatter("%(levelname)s %(message)s").format(record)
    assert "\033[31m" in formatted
    assert record.levelname == "ERROR"


def test_exception_messages():
    error = InsufficientDataError("build id is not available", field="build_id", root="/dev/sda2")
    assert isinstance(error, OsinfoResolverError)
    assert str(error) == "Insufficient data for root '/dev/sda2': build id is not available"

    parse_error = FactsParseError("bad", file_path="facts.json", entry_index=0)
    assert str(parse_error) == "Error parsing facts file 'facts.json': bad (entry 0)"

    report_error = ReportGenerationError("disk full", format_name="excel", output_path="r.xlsx")
    assert "format 'excel'" in str(report_error)
    assert "(output: r.xlsx)" in str(report_error)
