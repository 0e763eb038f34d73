"""
Excel report generator for osinfo resolution results.
"""

import io
from typing import Any, Dict, Optional

from openpyxl import Workbook
from openpyxl.styles import Alignment, Border, Font, PatternFill, Side
from openpyxl.utils import get_column_letter

from .base import ReportGenerator
from .json_reporter import JSONReporter
from ..exceptions import ReportGenerationError
from ..models import ResolutionReport


class ExcelReporter(ReportGenerator):
    """
    Excel report generator producing a Summary and a Results sheet.
    Uses JSONReporter internally for data structuring.
    """

    RESULT_HEADERS = ["Root", "Status", "osinfo ID", "Type", "Distro", "Major", "Minor",
                      "Product Name", "Product Variant", "Build ID", "Error"]

    def __init__(self):
        self.json_reporter = JSONReporter(include_metadata=True)

        self.header_font = Font(bold=True, color="FFFFFF")
        self.header_fill = PatternFill(start_color="366092", end_color="366092", fill_type="solid")
        self.status_fills = {
            "resolved": PatternFill(start_color="C6EFCE", end_color="C6EFCE", fill_type="solid"),
            "unknown": PatternFill(start_color="FFEB9C", end_color="FFEB9C", fill_type="solid"),
            "insufficient_data": PatternFill(start_color="FFC7CE", end_color="FFC7CE", fill_type="solid"),
        }
        self.center_alignment = Alignment(horizontal="center", vertical="center")
        self.border = Border(
            left=Side(style="thin"),
            right=Side(style="thin"),
            top=Side(style="thin"),
            bottom=Side(style="thin")
        )

    def generate_report(self, report: ResolutionReport, output_path: Optional[str] = None) -> str:
        """
        Generate Excel report from resolution results.

        Returns:
            Description of where the workbook went (Excel content is binary)
        """
        data = self.json_reporter.get_structured_data(report)
        workbook = self.create_workbook(data)

        if output_path:
            try:
                workbook.save(output_path)
            except OSError as e:
                raise ReportGenerationError(str(e), format_name=self.get_format_name(),
                                            output_path=output_path)
            return f"Excel report saved to {output_path}"

        buffer = io.BytesIO()
        workbook.save(buffer)
        return f"Excel workbook generated ({len(buffer.getvalue())} bytes)"

    def get_format_name(self) -> str:
        """Get the name of the report format."""
        return "excel"

    def create_workbook(self, data: Dict[str, Any]) -> Workbook:
        wb = Workbook()
        wb.remove(wb.active)

        self._create_summary_sheet(wb, data)
        self._create_results_sheet(wb, data)

        wb.active = wb["Summary"]
        return wb

    def _write_header_row(self, ws, row: int, headers) -> None:
        for col, header in enumerate(headers, 1):
            cell = ws.cell(row=row, column=col, value=header)
            cell.font = self.header_font
            cell.fill = self.header_fill
            cell.alignment = self.center_alignment
            cell.border = self.border

    def _create_summary_sheet(self, workbook: Workbook, data: Dict[str, Any]) -> None:
        ws = workbook.create_sheet("Summary")

        ws["A1"] = "osinfo Resolution Summary"
        ws["A1"].font = Font(size=16, bold=True)
        ws.merge_cells("A1:C1")

        current_row = 3
        if "metadata" in data:
            metadata = data["metadata"]
            ws[f"A{current_row}"] = "Generated:"
            ws[f"B{current_row}"] = metadata["generated_at"]
            current_row += 1
            ws[f"A{current_row}"] = "Generator:"
            ws[f"B{current_row}"] = metadata["generator"]
            current_row += 1
            if metadata.get("source_files"):
                ws[f"A{current_row}"] = "Facts Files:"
                ws[f"B{current_row}"] = ", ".join(metadata["source_files"])
                current_row += 1
            current_row += 1

        summary = data["summary"]
        self._write_header_row(ws, current_row, ["Outcome", "Count", "Percentage"])
        current_row += 1

        total = summary["total"]
        rows = [
            ("Resolved", "resolved", summary["resolved"]),
            ("Unknown", "unknown", summary["unknown"]),
            ("Insufficient Data", "insufficient_data", summary["insufficient_data"]),
        ]
        for label, status, count in rows:
            percentage = f"{round(count / total * 100, 1) if total > 0 else 0}%"
            for col, value in enumerate((label, count, percentage), 1):
                cell = ws.cell(row=current_row, column=col, value=value)
                cell.border = self.border
                cell.fill = self.status_fills[status]
            current_row += 1

        ws.cell(row=current_row, column=1, value="Total").font = Font(bold=True)
        ws.cell(row=current_row, column=2, value=total).font = Font(bold=True)

        ws.column_dimensions["A"].width = 20
        ws.column_dimensions["B"].width = 30
        ws.column_dimensions["C"].width = 12

    def _create_results_sheet(self, workbook: Workbook, data: Dict[str, Any]) -> None:
        ws = workbook.create_sheet("Results")
        self._write_header_row(ws, 1, self.RESULT_HEADERS)

        for row, result in enumerate(data["results"], 2):
            facts = result["facts"]
            values = [
                result["root"], result["status"], result["osinfo_id"],
                facts["type"], facts["distro"], facts["major"], facts["minor"],
                facts.get("product_name"), facts.get("product_variant"), facts.get("build_id"),
                result.get("error"),
            ]
            for col, value in enumerate(values, 1):
                cell = ws.cell(row=row, column=col, value=value)
                cell.border = self.border
            ws.cell(row=row, column=2).fill = self.status_fills[result["status"]]

        for col, header in enumerate(self.RESULT_HEADERS, 1):
            column_values = [str(ws.cell(row=r, column=col).value or "") for r in range(1, ws.max_row + 1)]
            ws.column_dimensions[get_column_letter(col)].width = min(max(len(v) for v in column_values) + 2, 50)
        ws.freeze_panes = "A2"
