"""
Batch resolution of many fact sets into a single report.
"""

import time
from typing import Iterable, List, Optional

from ..exceptions import InsufficientDataError
from ..logging_config import get_logger
from ..models import (OsFacts, ResolutionReport, ResolutionResult, ResolutionStatus,
                      UNKNOWN_OSINFO)
from .identifier import IdentifierResolver

logger = get_logger('resolver.batch')

ON_INSUFFICIENT_DATA_CHOICES = ('record', 'error')


class BatchResolver:
    """Resolves fact sets one by one and collects the outcomes."""

    def __init__(self, resolver: Optional[IdentifierResolver] = None,
                 on_insufficient_data: str = 'record'):
        """
        Initialize batch resolver.

        Args:
            resolver: Resolver to use, defaults to the built-in rule tables
            on_insufficient_data: ``record`` keeps going and notes the failure,
                ``error`` re-raises the first InsufficientDataError
        """
        if on_insufficient_data not in ON_INSUFFICIENT_DATA_CHOICES:
            raise ValueError(f"on_insufficient_data must be one of {ON_INSUFFICIENT_DATA_CHOICES}, "
                             f"got '{on_insufficient_data}'")
        self.resolver = resolver or IdentifierResolver()
        self.on_insufficient_data = on_insufficient_data

    def resolve_one(self, facts: OsFacts) -> ResolutionResult:
        try:
            osinfo_id = self.resolver.resolve(facts)
        except InsufficientDataError as e:
            if self.on_insufficient_data == 'error':
                raise
            logger.warning(str(e))
            return ResolutionResult(facts=facts, status=ResolutionStatus.INSUFFICIENT_DATA,
                                    error=str(e), missing_field=e.field)

        if osinfo_id == UNKNOWN_OSINFO:
            return ResolutionResult(facts=facts, status=ResolutionStatus.UNKNOWN, osinfo_id=osinfo_id)
        return ResolutionResult(facts=facts, status=ResolutionStatus.RESOLVED, osinfo_id=osinfo_id)

    def resolve_all(self, facts: Iterable[OsFacts],
                    source_files: Optional[List[str]] = None) -> ResolutionReport:
        """
        Resolve every fact set.

        Returns:
            ResolutionReport with one result per fact set, in input order
        """
        start_time = time.time()
        results = [self.resolve_one(item) for item in facts]

        errors = [f"{r.root}: {r.error}" for r in results
                  if r.status == ResolutionStatus.INSUFFICIENT_DATA]
        report = ResolutionReport(
            results=results,
            total=len(results),
            resolved_count=sum(1 for r in results if r.status == ResolutionStatus.RESOLVED),
            unknown_count=sum(1 for r in results if r.status == ResolutionStatus.UNKNOWN),
            insufficient_count=len(errors),
            processing_time=time.time() - start_time,
            errors=errors,
            source_files=list(source_files or []),
        )
        logger.info(f"Resolved {report.resolved_count}/{report.total} fact set(s), "
                    f"{report.unknown_count} unknown, {report.insufficient_count} with insufficient data")
        return report
