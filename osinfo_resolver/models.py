"""
Core data models for the osinfo resolver.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional

UNKNOWN_OSINFO = "unknown"


class OSType(Enum):
    """Operating system families the resolver knows how to classify."""
    LINUX = "linux"
    FREEBSD = "freebsd"
    NETBSD = "netbsd"
    OPENBSD = "openbsd"
    DOS = "dos"
    WINDOWS = "windows"

    @classmethod
    def from_value(cls, value: Optional[str]) -> Optional["OSType"]:
        """Return the matching family, or None for unrecognized types."""
        for member in cls:
            if member.value == value:
                return member
        return None

    @property
    def is_bsd(self) -> bool:
        return self in (OSType.FREEBSD, OSType.NETBSD, OSType.OPENBSD)


class ResolutionStatus(Enum):
    """Outcome of resolving a single set of facts."""
    RESOLVED = "resolved"
    UNKNOWN = "unknown"
    INSUFFICIENT_DATA = "insufficient_data"


@dataclass(frozen=True)
class OsFacts:
    """Facts discovered about one inspected installation.

    ``os_type`` and ``distro`` are kept as plain strings so that families
    the resolver does not recognize can still be represented.
    """
    os_type: Optional[str]
    distro: Optional[str]
    major: int = 0
    minor: int = 0
    product_name: Optional[str] = None     # Windows only
    product_variant: Optional[str] = None  # Windows only
    build_id: Optional[str] = None         # Windows only
    root: Optional[str] = None             # caller-side handle, opaque here


@dataclass
class ResolutionResult:
    """Result of resolving one set of facts."""
    facts: OsFacts
    status: ResolutionStatus
    osinfo_id: Optional[str] = None
    error: Optional[str] = None
    missing_field: Optional[str] = None

    @property
    def root(self) -> Optional[str]:
        return self.facts.root


@dataclass
class ResolutionReport:
    """Complete result for a batch of fact sets."""
    results: List[ResolutionResult]
    total: int
    resolved_count: int
    unknown_count: int
    insufficient_count: int
    processing_time: float
    errors: List[str] = field(default_factory=list)
    source_files: List[str] = field(default_factory=list)

    @property
    def has_insufficient_data(self) -> bool:
        return self.insufficient_count > 0
