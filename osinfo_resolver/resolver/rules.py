"""
Static classification rules for osinfo ID resolution.

Both tables are evaluated top to bottom and the first matching rule wins,
so a rule for a given key must appear before any broader rule for the same
key.
"""

from dataclasses import dataclass
from typing import List, Optional, Tuple


@dataclass(frozen=True)
class LinuxRule:
    """Maps a Linux distribution (optionally from a minimum major) to an id.

    ``template`` is a ``str.format`` pattern receiving ``distro``, ``major``
    and ``minor``; None means the distro name is used verbatim.
    ``min_major`` of None accepts any major version.
    """
    distro: str
    template: Optional[str] = None
    min_major: Optional[int] = None

    def matches(self, distro: str, major: int) -> bool:
        if distro != self.distro:
            return False
        return self.min_major is None or major >= self.min_major

    def render(self, distro: str, major: int, minor: int) -> str:
        if self.template is None:
            return distro
        return self.template.format(distro=distro, major=major, minor=minor)


@dataclass(frozen=True)
class WindowsRule:
    """Maps an exact Windows NT version plus optional substrings to an id."""
    major: int
    minor: int
    osinfo_id: str
    variant_contains: Optional[str] = None
    name_contains: Optional[str] = None

    @property
    def is_constrained(self) -> bool:
        return self.variant_contains is not None or self.name_contains is not None

    def matches(self, major: int, minor: int, product_name: str, product_variant: str) -> bool:
        if (major, minor) != (self.major, self.minor):
            return False
        if self.variant_contains is not None and self.variant_contains not in product_variant:
            return False
        if self.name_contains is not None and self.name_contains not in product_name:
            return False
        return True


LINUX_RULES: Tuple[LinuxRule, ...] = (
    LinuxRule("centos", "{distro}{major}", 8),
    LinuxRule("centos", "{distro}{major}.0", 7),
    LinuxRule("centos", "{distro}{major}.{minor}", 6),
    LinuxRule("circle", "{distro}{major}", 8),
    LinuxRule("rocky", "{distro}{major}", 8),
    LinuxRule("debian", "{distro}{major}", 4),
    LinuxRule("fedora", "{distro}{major}"),
    LinuxRule("mageia", "{distro}{major}"),
    LinuxRule("ubuntu", "{distro}{major}.{minor:02d}"),
    LinuxRule("archlinux"),
    LinuxRule("gentoo"),
    LinuxRule("voidlinux"),
    LinuxRule("altlinux", "{distro}{major}.{minor}", 8),
    LinuxRule("altlinux", "{distro}{major}.{minor}"),
)

# Server and product-name constrained rows precede the general row for the
# same NT version, otherwise e.g. a 6.0 server would resolve to winvista.
WINDOWS_RULES: Tuple[WindowsRule, ...] = (
    WindowsRule(5, 1, "winxp"),
    WindowsRule(5, 2, "winxp", name_contains="XP"),
    WindowsRule(5, 2, "win2k3r2", name_contains="R2"),
    WindowsRule(5, 2, "win2k3"),
    WindowsRule(6, 0, "win2k8", variant_contains="Server"),
    WindowsRule(6, 0, "winvista"),
    WindowsRule(6, 1, "win2k8r2", variant_contains="Server"),
    WindowsRule(6, 1, "win7"),
    WindowsRule(6, 2, "win2k12", variant_contains="Server"),
    WindowsRule(6, 2, "win8"),
    WindowsRule(6, 3, "win2k12r2", variant_contains="Server"),
    WindowsRule(6, 3, "win8.1"),
    WindowsRule(10, 0, "win2k25", variant_contains="Server", name_contains="2025"),
    WindowsRule(10, 0, "win2k22", variant_contains="Server", name_contains="2022"),
    WindowsRule(10, 0, "win2k19", variant_contains="Server", name_contains="2019"),
    WindowsRule(10, 0, "win2k16", variant_contains="Server"),
)


def validate_linux_rules(rules: Tuple[LinuxRule, ...] = LINUX_RULES) -> List[str]:
    """
    Check that no Linux rule is shadowed by an earlier, broader rule.

    Returns:
        List of human-readable problems, empty when the table is well ordered
    """
    problems = []
    for index, rule in enumerate(rules):
        for earlier in rules[:index]:
            if earlier.distro != rule.distro:
                continue
            if earlier.min_major is None or (
                    rule.min_major is not None and earlier.min_major <= rule.min_major):
                problems.append(
                    f"rule {index} ({rule.distro}, min_major={rule.min_major}) is shadowed "
                    f"by earlier rule (min_major={earlier.min_major})"
                )
                break
    return problems


def validate_windows_rules(rules: Tuple[WindowsRule, ...] = WINDOWS_RULES) -> List[str]:
    """
    Check that constrained Windows rules precede the general rule for their version.

    Returns:
        List of human-readable problems, empty when the table is well ordered
    """
    problems = []
    for index, rule in enumerate(rules):
        for earlier in rules[:index]:
            if (earlier.major, earlier.minor) != (rule.major, rule.minor):
                continue
            if not earlier.is_constrained:
                problems.append(
                    f"rule {index} ({rule.major}.{rule.minor} -> {rule.osinfo_id}) is shadowed "
                    f"by unconstrained rule for {earlier.osinfo_id}"
                )
                break
    return problems
