from osinfo_resolver.models import OsFacts
from osinfo_resolver.resolver import IdentifierResolver
from osinfo_resolver.resolver.rules import (LINUX_RULES, WINDOWS_RULES, LinuxRule, WindowsRule,
                                            validate_linux_rules, validate_windows_rules)


def test_builtin_tables_are_well_ordered():
    assert validate_linux_rules() == []
    assert validate_windows_rules() == []


def test_linux_validation_flags_broad_rule_first():
    rules = (LinuxRule("centos", "{distro}{major}.{minor}", 6), LinuxRule("centos", "{distro}{major}", 8))
    problems = validate_linux_rules(rules)
    assert len(problems) == 1
    assert "shadowed" in problems[0]


def test_linux_validation_flags_wildcard_first():
    rules = (LinuxRule("altlinux", "{distro}{major}.{minor}"), LinuxRule("altlinux", "{distro}{major}.{minor}", 8))
    assert len(validate_linux_rules(rules)) == 1


def test_windows_validation_flags_general_rule_first():
    rules = (WindowsRule(6, 0, "winvista"), WindowsRule(6, 0, "win2k8", variant_contains="Server"))
    problems = validate_windows_rules(rules)
    assert len(problems) == 1
    assert "win2k8" in problems[0]


def test_windows_table_covers_every_server_release():
    ids = [rule.osinfo_id for rule in WINDOWS_RULES]
    for osinfo_id in ("win2k3", "win2k3r2", "win2k8", "win2k8r2", "win2k12", "win2k12r2",
                      "win2k16", "win2k19", "win2k22", "win2k25"):
        assert osinfo_id in ids


def test_wildcards_are_none_not_sentinels():
    assert all(rule.min_major is None or rule.min_major >= 0 for rule in LINUX_RULES)
    assert all(rule.variant_contains != "" and rule.name_contains != "" for rule in WINDOWS_RULES)


def test_template_none_renders_distro():
    assert LinuxRule("gentoo").render("gentoo", 2, 1) == "gentoo"


def test_custom_tables_can_be_supplied():
    resolver = IdentifierResolver(linux_rules=(LinuxRule("nixos", "{distro}{major}.{minor:02d}"),),
                                  windows_rules=())
    assert resolver.resolve(OsFacts(os_type="linux", distro="nixos", major=23, minor=5)) == "nixos23.05"
    # the built-in table is not consulted
    assert resolver.resolve(OsFacts(os_type="linux", distro="fedora", major=38)) == "fedora38.0"
    windows = OsFacts(os_type="windows", distro="windows", major=6, minor=1,
                      product_name="Windows 7", product_variant="Client")
    assert resolver.resolve(windows) == "unknown"
