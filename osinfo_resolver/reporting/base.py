"""
Abstract base classes for report generation.
"""

from abc import ABC, abstractmethod
from typing import Optional

from ..models import ResolutionReport


class ReportGenerator(ABC):
    """Abstract base class for report generators."""

    @abstractmethod
    def generate_report(self, report: ResolutionReport, output_path: Optional[str] = None) -> str:
        """
        Generate a report from resolution results.

        Args:
            report: ResolutionReport to generate report from
            output_path: Optional path to write report to file

        Returns:
            Report content as string
        """
        pass

    @abstractmethod
    def get_format_name(self) -> str:
        """
        Get the name of the report format.

        Returns:
            String identifier for the report format (e.g., "json", "text")
        """
        pass
