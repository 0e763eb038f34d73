"""
Human-readable text report generator for osinfo resolution results.
"""

import os
import re
import sys
from typing import Any, Dict, List, Optional

from .base import ReportGenerator
from .json_reporter import JSONReporter
from ..exceptions import ReportGenerationError
from ..models import ResolutionReport


class HumanReadableReporter(ReportGenerator):
    """
    Human-readable text report generator for console output.
    Uses JSONReporter internally for data structuring.
    """

    # ANSI color codes
    COLORS = {
        'RED': '\033[91m',
        'GREEN': '\033[92m',
        'YELLOW': '\033[93m',
        'CYAN': '\033[96m',
        'BOLD': '\033[1m',
        'RESET': '\033[0m'
    }

    STATUS_COLORS = {
        'resolved': 'GREEN',
        'unknown': 'YELLOW',
        'insufficient_data': 'RED',
    }

    _ANSI_ESCAPE = re.compile(r'\x1B(?:[@-Z\\-_]|\[[0-?]*[ -/]*[@-~])')

    def __init__(self, use_colors: Optional[bool] = None, width: int = 80):
        """
        Initialize text reporter.

        Args:
            use_colors: Whether to use ANSI color codes. Auto-detects if None.
            width: Console width for formatting (default: 80)
        """
        self.use_colors = self._supports_color() if use_colors is None else use_colors
        self.width = width
        self.json_reporter = JSONReporter(include_metadata=True)

    def generate_report(self, report: ResolutionReport, output_path: Optional[str] = None) -> str:
        data = self.json_reporter.get_structured_data(report)
        text_content = self._build_text_report(data)

        if output_path:
            try:
                with open(output_path, 'w', encoding='utf-8') as f:
                    f.write(self._strip_colors(text_content))
            except OSError as e:
                raise ReportGenerationError(str(e), format_name=self.get_format_name(),
                                            output_path=output_path)

        return text_content

    def get_format_name(self) -> str:
        """Get the name of the report format."""
        return "text"

    def _supports_color(self) -> bool:
        if os.environ.get('NO_COLOR'):
            return False
        if not hasattr(sys.stdout, 'isatty') or not sys.stdout.isatty():
            return False
        term = os.environ.get('TERM', '').lower()
        return 'color' in term or term in ['xterm', 'screen']

    def _colorize(self, text: str, color: str) -> str:
        if not self.use_colors or color not in self.COLORS:
            return text
        return f"{self.COLORS[color]}{text}{self.COLORS['RESET']}"

    def _strip_colors(self, text: str) -> str:
        return self._ANSI_ESCAPE.sub('', text)

    def _build_text_report(self, data: Dict[str, Any]) -> str:
        sections = [
            self._build_header(data),
            self._build_summary_section(data["summary"]),
            self._build_results_section(data["results"]),
        ]
        if data["errors"]:
            sections.append(self._build_errors_section(data["errors"]))
        if "metadata" in data:
            sections.append(self._build_footer(data["metadata"]))
        return "\n\n".join(sections)

    def _build_header(self, data: Dict[str, Any]) -> str:
        summary = data["summary"]
        if summary["insufficient_data"]:
            status_text = self._colorize("INSUFFICIENT DATA", "RED")
        elif summary["unknown"]:
            status_text = self._colorize("UNKNOWN SYSTEMS", "YELLOW")
        else:
            status_text = self._colorize("ALL RESOLVED", "GREEN")

        title = f"OSINFO RESOLUTION REPORT - {status_text}"
        separator = "=" * len(self._strip_colors(title))
        lines = [self._colorize(separator, 'BOLD'), self._colorize(title, 'BOLD'),
                 self._colorize(separator, 'BOLD')]

        source_files = data.get("metadata", {}).get("source_files")
        if source_files:
            lines.append("")
            lines.append(f"Facts files: {', '.join(source_files)}")
        return "\n".join(lines)

    def _build_summary_section(self, summary: Dict[str, Any]) -> str:
        return "\n".join([
            self._colorize('SUMMARY', 'BOLD'),
            "",
            f"   Total fact sets:    {summary['total']}",
            f"   Resolved:           {self._colorize(str(summary['resolved']), 'GREEN')} "
            f"({summary['resolution_rate']}%)",
            f"   Unknown:            {self._colorize(str(summary['unknown']), 'YELLOW')}",
            f"   Insufficient data:  {self._colorize(str(summary['insufficient_data']), 'RED')}",
            f"   Processing time:    {summary['processing_time_seconds']}s",
        ])

    def _build_results_section(self, results: List[Dict[str, Any]]) -> str:
        lines = [self._colorize('RESULTS', 'BOLD'), ""]
        if not results:
            lines.append("   No fact sets were resolved.")
            return "\n".join(lines)

        root_width = min(max(len(str(r["root"])) for r in results), self.width // 3)
        for result in results:
            facts = result["facts"]
            described = f"{facts['type']}/{facts['distro']} {facts['major']}.{facts['minor']}"
            if result["status"] == "insufficient_data":
                outcome = f"missing {result['missing_field']}"
            else:
                outcome = result["osinfo_id"]
            color = self.STATUS_COLORS.get(result["status"], 'RESET')
            lines.append(f"   {str(result['root']):<{root_width}}  {self._colorize(outcome, color)}  ({described})")
        return "\n".join(lines)

    def _build_errors_section(self, errors: List[str]) -> str:
        lines = [self._colorize('ERRORS', 'BOLD'), ""]
        lines.extend(f"   - {error}" for error in errors)
        return "\n".join(lines)

    def _build_footer(self, metadata: Dict[str, Any]) -> str:
        return "-" * min(self.width, 40) + f"\nGenerated by {metadata['generator']} at {metadata['generated_at']}"
