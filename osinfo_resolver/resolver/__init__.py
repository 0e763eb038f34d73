"""
Resolver module for turning inspected OS facts into osinfo IDs.
"""

from .batch import BatchResolver
from .identifier import IdentifierResolver, parse_build_id, resolve_osinfo
from .rules import LINUX_RULES, WINDOWS_RULES, LinuxRule, WindowsRule

__all__ = ['BatchResolver', 'IdentifierResolver', 'parse_build_id', 'resolve_osinfo',
           'LINUX_RULES', 'WINDOWS_RULES', 'LinuxRule', 'WindowsRule']
