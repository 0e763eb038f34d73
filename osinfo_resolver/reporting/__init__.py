"""
Reporting Module

Contains report generators for the supported output formats (text, JSON, Excel).
"""

from .base import ReportGenerator
from .excel_reporter import ExcelReporter
from .json_reporter import JSONReporter
from .text_reporter import HumanReadableReporter

from ..config import OutputConfig


def get_reporter(format_name: str, output_config: OutputConfig = None) -> ReportGenerator:
    """
    Create the report generator for a format.

    Raises:
        ValueError: If the format is not supported
    """
    output_config = output_config or OutputConfig()
    if format_name == "json":
        return JSONReporter(include_metadata=output_config.include_metadata,
                            pretty_print=output_config.pretty_print)
    if format_name == "text":
        return HumanReadableReporter(use_colors=output_config.use_colors)
    if format_name == "excel":
        return ExcelReporter()
    raise ValueError(f"Unsupported report format: {format_name}")


__all__ = ['ReportGenerator', 'JSONReporter', 'HumanReadableReporter', 'ExcelReporter', 'get_reporter']
