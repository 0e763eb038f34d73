import pytest

from osinfo_resolver.exceptions import FactsParseError
from osinfo_resolver.facts import FactsLoader, MappingFactsProvider
from osinfo_resolver.models import OsFacts


def test_single_mapping_json(write_facts):
    path = write_facts({"type": "linux", "distro": "fedora", "major": 38, "minor": 0})
    facts = FactsLoader().load(path)
    assert facts == [OsFacts(os_type="linux", distro="fedora", major=38, minor=0, root="root-0")]


def test_list_of_mappings_yaml(write_facts):
    path = write_facts([
        {"root": "/dev/sda1", "type": "linux", "distro": "ubuntu", "version": "20.04"},
        {"root": "/dev/sdb2", "type": "windows", "distro": "windows", "major": 10, "minor": 0,
         "product_name": "Windows 11 Pro", "product_variant": "Client", "build_id": 22631},
    ], name="facts.yaml")
    first, second = FactsLoader().load(path)
    assert (first.root, first.major, first.minor) == ("/dev/sda1", 20, 4)
    assert second.build_id == "22631"
    assert second.product_variant == "Client"


def test_roots_mapping(write_facts):
    path = write_facts({"roots": {
        "/dev/sda1": {"type": "freebsd", "distro": "freebsd", "version": "13.1"},
        "/dev/sda2": {"type": "dos", "distro": "msdos"},
    }}, name="facts.yml")
    facts = FactsLoader().load(path)
    assert [f.root for f in facts] == ["/dev/sda1", "/dev/sda2"]
    assert (facts[0].major, facts[0].minor) == (13, 1)
    assert (facts[1].major, facts[1].minor) == (0, 0)


def test_roots_list_gets_positional_roots(write_facts):
    path = write_facts({"roots": [{"type": "linux", "distro": "gentoo"},
                                  {"type": "linux", "distro": "archlinux"}]})
    assert [f.root for f in FactsLoader().load(path)] == ["root-0", "root-1"]


def test_explicit_major_minor_win_over_version(write_facts):
    path = write_facts({"type": "linux", "distro": "sles", "version": "15.4", "minor": 0})
    facts = FactsLoader().load(path)[0]
    assert (facts.major, facts.minor) == (15, 0)


def test_single_component_version(write_facts):
    facts = FactsLoader().load(write_facts({"type": "linux", "distro": "debian", "version": "12"}))[0]
    assert (facts.major, facts.minor) == (12, 0)


def test_missing_type_and_distro_are_kept_as_none(write_facts):
    facts = FactsLoader().load(write_facts({"major": 1}))[0]
    assert facts.os_type is None
    assert facts.distro is None


def test_string_major_is_accepted(write_facts):
    facts = FactsLoader().load(write_facts({"type": "linux", "distro": "fedora", "major": "39"}))[0]
    assert facts.major == 39


def test_unknown_keys_are_warned_about(write_facts, caplog):
    path = write_facts({"type": "linux", "distro": "fedora", "arch": "x86_64"})
    with caplog.at_level("WARNING", logger="osinfo_resolver"):
        FactsLoader().load(path)
    assert "arch" in caplog.text


@pytest.mark.parametrize("entry,message", [
    ({"type": "linux", "distro": 7}, "'distro' must be a string"),
    ({"type": ["linux"], "distro": "fedora"}, "'type' must be a string"),
    ({"type": "linux", "distro": "fedora", "major": -1}, "non-negative"),
    ({"type": "linux", "distro": "fedora", "major": "x"}, "non-negative"),
    ({"type": "linux", "distro": "fedora", "minor": True}, "must be an integer"),
    ({"type": "linux", "distro": "fedora", "version": "not a version"}, "Invalid version"),
    ({"type": "windows", "distro": "windows", "build_id": [1]}, "'build_id'"),
])
def test_invalid_entries(write_facts, entry, message):
    path = write_facts([{"type": "linux", "distro": "fedora"}, entry])
    with pytest.raises(FactsParseError, match=message) as excinfo:
        FactsLoader().load(path)
    assert excinfo.value.entry_index == 1
    assert excinfo.value.file_path == path


def test_invalid_json(tmp_path):
    path = tmp_path / "broken.json"
    path.write_text("{not json", encoding="utf-8")
    with pytest.raises(FactsParseError, match="Invalid JSON"):
        FactsLoader().load(str(path))


def test_invalid_yaml(tmp_path):
    path = tmp_path / "broken.yaml"
    path.write_text("type: [linux\n", encoding="utf-8")
    with pytest.raises(FactsParseError, match="Invalid YAML"):
        FactsLoader().load(str(path))


def test_unsupported_extension(tmp_path):
    path = tmp_path / "facts.txt"
    path.write_text("type=linux", encoding="utf-8")
    with pytest.raises(FactsParseError, match="Unsupported file extension"):
        FactsLoader().load(str(path))


def test_scalar_document_is_rejected(write_facts):
    with pytest.raises(FactsParseError, match="mapping or a list"):
        FactsLoader().load(write_facts("linux"))


def test_bad_roots_value(write_facts):
    with pytest.raises(FactsParseError, match="'roots' must be"):
        FactsLoader().load(write_facts({"roots": "sda1"}))


def test_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        FactsLoader().load(str(tmp_path / "missing.json"))


def test_mapping_provider_requires_root():
    with pytest.raises(ValueError):
        MappingFactsProvider([OsFacts(os_type="linux", distro="fedora")])


def test_mapping_provider_serves_loaded_facts(write_facts):
    path = write_facts({"roots": {"/dev/sda1": {"type": "linux", "distro": "fedora", "major": 38}}})
    provider = MappingFactsProvider(FactsLoader().load(path))
    assert provider.roots() == ["/dev/sda1"]
    assert provider.get_distro("/dev/sda1") == "fedora"
    assert provider.get_major_version("/dev/sda1") == 38
    assert provider.get_build_id("/dev/sda1") is None
