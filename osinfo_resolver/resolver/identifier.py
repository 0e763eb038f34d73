"""
Resolution of inspected OS facts into a canonical osinfo ID.
"""

import logging
import re
from typing import Callable, Optional, Tuple

from ..exceptions import InsufficientDataError
from ..models import OSType, OsFacts, UNKNOWN_OSINFO
from .rules import LINUX_RULES, WINDOWS_RULES, LinuxRule, WindowsRule

logger = logging.getLogger(__name__)

# First Windows 11 client build; earlier 10.0 client builds are Windows 10
WIN11_FIRST_BUILD = 22000
MSDOS_OSINFO = "msdos6.22"

_INT_MAX = 2 ** 31 - 1
_BUILD_ID_PATTERN = re.compile(r'\s*([+-]?[0-9]+)')


def parse_build_id(build_id: Optional[str], root: Optional[str] = None) -> int:
    """
    Parse a Windows build id as a non-negative integer.

    Leading whitespace and a sign are accepted, anything trailing the digits
    is not.

    Raises:
        InsufficientDataError: If the build id is absent, malformed, negative
            or out of range
    """
    if build_id is None:
        raise InsufficientDataError("build id is not available", field="build_id", root=root)

    match = _BUILD_ID_PATTERN.fullmatch(build_id)
    if not match:
        raise InsufficientDataError(f"cannot parse build id '{build_id}'", field="build_id", root=root)

    value = int(match.group(1))
    if value < 0:
        raise InsufficientDataError(f"build id '{build_id}' is negative", field="build_id", root=root)
    if value > _INT_MAX:
        raise InsufficientDataError(f"build id '{build_id}' is out of range", field="build_id", root=root)
    return value


class IdentifierResolver:
    """Turns OS facts into an osinfo ID using ordered rule tables.

    Instances hold no mutable state and can be shared between threads.
    """

    def __init__(self, linux_rules: Tuple[LinuxRule, ...] = LINUX_RULES,
                 windows_rules: Tuple[WindowsRule, ...] = WINDOWS_RULES):
        self.linux_rules = tuple(linux_rules)
        self.windows_rules = tuple(windows_rules)

    def resolve(self, facts: OsFacts) -> str:
        """
        Resolve a complete set of facts.

        Args:
            facts: Facts about one inspected installation

        Returns:
            The osinfo ID, or ``"unknown"`` when no rule applies

        Raises:
            InsufficientDataError: If a required fact is missing or unparsable
        """
        return self._resolve(facts.os_type, facts.distro, facts.major, facts.minor,
                             lambda name: getattr(facts, name), facts.root)

    def resolve_root(self, provider, root: str) -> str:
        """
        Resolve a root by querying a facts provider.

        Windows product name, variant and build id are only requested when
        the Windows path needs them.
        """
        os_type = provider.get_type(root)
        distro = provider.get_distro(root)
        if not os_type or not distro:
            # Raises before any version lookup
            return self._resolve(os_type, distro, 0, 0, None, root)

        getters = {
            'product_name': provider.get_product_name,
            'product_variant': provider.get_product_variant,
            'build_id': provider.get_build_id,
        }
        return self._resolve(os_type, distro,
                             provider.get_major_version(root) or 0,
                             provider.get_minor_version(root) or 0,
                             lambda name: getters[name](root), root)

    def _resolve(self, os_type: Optional[str], distro: Optional[str], major: int, minor: int,
                 lookup: Optional[Callable[[str], Optional[str]]], root: Optional[str]) -> str:
        if not os_type:
            raise InsufficientDataError("OS type is not available", field="os_type", root=root)
        if not distro:
            raise InsufficientDataError("distro is not available", field="distro", root=root)

        family = OSType.from_value(os_type)
        osinfo_id = None

        if family is OSType.LINUX:
            osinfo_id = self._resolve_linux(distro, major, minor)
        elif family is not None and family.is_bsd:
            osinfo_id = f"{distro}{major}.{minor}"
        elif family is OSType.DOS:
            if distro == "msdos":
                osinfo_id = MSDOS_OSINFO
        elif family is OSType.WINDOWS:
            osinfo_id = self._resolve_windows(major, minor, lookup, root)

        if osinfo_id is None:
            logger.debug(f"No osinfo ID for type={os_type} distro={distro} version={major}.{minor}")
            return UNKNOWN_OSINFO

        logger.debug(f"Resolved type={os_type} distro={distro} version={major}.{minor} to {osinfo_id}")
        return osinfo_id

    def _resolve_linux(self, distro: str, major: int, minor: int) -> Optional[str]:
        for rule in self.linux_rules:
            if rule.matches(distro, major):
                return rule.render(distro, major, minor)

        # SLE 15 dropped the trailing "s": sle15, sles12, sles11sp3
        if distro == "sles":
            base = "sle" if major >= 15 else "sles"
            if minor == 0:
                return f"{base}{major}"
            return f"{base}{major}sp{minor}"

        if distro != "unknown" and (major > 0 or minor > 0):
            return f"{distro}{major}.{minor}"

        return None

    def _resolve_windows(self, major: int, minor: int,
                         lookup: Callable[[str], Optional[str]], root: Optional[str]) -> Optional[str]:
        product_name = lookup('product_name')
        if product_name is None:
            raise InsufficientDataError("product name is not available", field="product_name", root=root)
        product_variant = lookup('product_variant')
        if product_variant is None:
            raise InsufficientDataError("product variant is not available", field="product_variant", root=root)

        for rule in self.windows_rules:
            if rule.matches(major, minor, product_name, product_variant):
                return rule.osinfo_id

        # Windows 10 and 11 clients both report NT 10.0; only the build tells them apart
        if major == 10 and minor == 0 and "Server" not in product_variant:
            build_id = parse_build_id(lookup('build_id'), root)
            return "win11" if build_id >= WIN11_FIRST_BUILD else "win10"

        return None


_default_resolver = IdentifierResolver()


def resolve_osinfo(facts: OsFacts) -> str:
    """Resolve facts with the built-in rule tables."""
    return _default_resolver.resolve(facts)
