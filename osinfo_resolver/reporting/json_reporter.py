"""
JSON report generator for osinfo resolution results.
"""

import json
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from .base import ReportGenerator
from ..exceptions import ReportGenerationError
from ..models import ResolutionReport, ResolutionResult, ResolutionStatus
from ..version import get_full_name_with_version


class JSONReporter(ReportGenerator):
    """
    JSON report generator that also supplies the data structure used by
    the other report formats.
    """

    def __init__(self, include_metadata: bool = True, pretty_print: bool = True):
        """
        Initialize JSON reporter.

        Args:
            include_metadata: Whether to include metadata like timestamps
            pretty_print: Whether to format JSON with indentation
        """
        self.include_metadata = include_metadata
        self.pretty_print = pretty_print

    def generate_report(self, report: ResolutionReport, output_path: Optional[str] = None) -> str:
        """
        Generate JSON report from resolution results.

        Args:
            report: ResolutionReport to generate report from
            output_path: Optional path to write report to file

        Returns:
            JSON report content as string
        """
        report_data = self.get_structured_data(report)

        if self.pretty_print:
            json_content = json.dumps(report_data, indent=2, ensure_ascii=False)
        else:
            json_content = json.dumps(report_data, ensure_ascii=False)

        if output_path:
            try:
                with open(output_path, 'w', encoding='utf-8') as f:
                    f.write(json_content)
            except OSError as e:
                raise ReportGenerationError(str(e), format_name=self.get_format_name(),
                                            output_path=output_path)

        return json_content

    def get_format_name(self) -> str:
        """Get the name of the report format."""
        return "json"

    def get_structured_data(self, report: ResolutionReport) -> Dict[str, Any]:
        """
        Get structured data without converting to JSON string.
        Used by other reporters that need the data structure.
        """
        data = {
            "summary": self._build_summary(report),
            "results": self._build_results_list(report.results),
            "statistics": self._build_statistics(report),
            "errors": list(report.errors),
        }

        if self.include_metadata:
            data["metadata"] = self._build_metadata(report)

        return data

    def _build_summary(self, report: ResolutionReport) -> Dict[str, Any]:
        total = report.total
        return {
            "total": total,
            "resolved": report.resolved_count,
            "unknown": report.unknown_count,
            "insufficient_data": report.insufficient_count,
            "resolution_rate": round((report.resolved_count / total * 100) if total > 0 else 0, 2),
            "has_issues": report.unknown_count > 0 or report.insufficient_count > 0,
            "processing_time_seconds": round(report.processing_time, 3),
        }

    def _build_results_list(self, results: List[ResolutionResult]) -> List[Dict[str, Any]]:
        results_data = []
        for result in results:
            facts = result.facts
            entry = {
                "root": facts.root,
                "status": result.status.value,
                "osinfo_id": result.osinfo_id,
                "facts": {
                    "type": facts.os_type,
                    "distro": facts.distro,
                    "major": facts.major,
                    "minor": facts.minor,
                },
            }
            # Windows-only facts are omitted when not collected
            for key in ("product_name", "product_variant", "build_id"):
                value = getattr(facts, key)
                if value is not None:
                    entry["facts"][key] = value
            if result.status == ResolutionStatus.INSUFFICIENT_DATA:
                entry["error"] = result.error
                entry["missing_field"] = result.missing_field
            results_data.append(entry)
        return results_data

    def _build_statistics(self, report: ResolutionReport) -> Dict[str, Any]:
        by_type: Dict[str, Dict[str, int]] = {}
        by_osinfo_id: Dict[str, int] = {}

        for result in report.results:
            type_key = result.facts.os_type or "(missing)"
            counts = by_type.setdefault(type_key, {status.value: 0 for status in ResolutionStatus})
            counts[result.status.value] += 1
            if result.status == ResolutionStatus.RESOLVED:
                by_osinfo_id[result.osinfo_id] = by_osinfo_id.get(result.osinfo_id, 0) + 1

        return {
            "by_type": {key: by_type[key] for key in sorted(by_type)},
            "by_osinfo_id": {key: by_osinfo_id[key] for key in sorted(by_osinfo_id)},
        }

    def _build_metadata(self, report: ResolutionReport) -> Dict[str, Any]:
        metadata = {
            "generated_at": datetime.now(timezone.utc).isoformat().replace("+00:00", "Z"),
            "generator": get_full_name_with_version(),
            "report_format": self.get_format_name(),
        }
        if report.source_files:
            metadata["source_files"] = list(report.source_files)
        return metadata
