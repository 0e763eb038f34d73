import json

import pytest
from openpyxl import load_workbook

from osinfo_resolver.config import OutputConfig
from osinfo_resolver.reporting import (ExcelReporter, HumanReadableReporter, JSONReporter,
                                       get_reporter)
from osinfo_resolver.resolver import BatchResolver

from tests.utils_facts import linux, windows


@pytest.fixture
def report():
    facts = [
        linux("fedora", 38, 0, root="/dev/sda1"),
        linux("unknown", 0, 0, root="/dev/sda2"),
        windows(10, 0, "Windows 10 Pro", "Client", build_id=None, root="/dev/sdb1"),
        windows(6, 3, "Windows Server 2012 R2", "Server", root="/dev/sdb2"),
    ]
    return BatchResolver().resolve_all(facts, source_files=["facts.json"])


def test_json_report_structure(report):
    data = json.loads(JSONReporter().generate_report(report))
    assert set(data) == {"summary", "results", "statistics", "errors", "metadata"}
    assert data["summary"]["total"] == 4
    assert data["summary"]["resolved"] == 2
    assert data["summary"]["resolution_rate"] == 50.0
    assert data["summary"]["has_issues"] is True
    assert data["metadata"]["source_files"] == ["facts.json"]
    assert data["metadata"]["report_format"] == "json"


def test_json_results_carry_windows_facts_only_when_present(report):
    results = JSONReporter().get_structured_data(report)["results"]
    assert "product_name" not in results[0]["facts"]
    assert results[3]["facts"]["product_variant"] == "Server"
    assert results[3]["osinfo_id"] == "win2k12r2"
    assert results[2]["status"] == "insufficient_data"
    assert results[2]["missing_field"] == "build_id"


def test_json_statistics(report):
    stats = JSONReporter().get_structured_data(report)["statistics"]
    assert stats["by_type"]["linux"] == {"resolved": 1, "unknown": 1, "insufficient_data": 0}
    assert stats["by_type"]["windows"] == {"resolved": 1, "unknown": 0, "insufficient_data": 1}
    assert stats["by_osinfo_id"] == {"fedora38": 1, "win2k12r2": 1}


def test_json_without_metadata(report):
    data = json.loads(JSONReporter(include_metadata=False, pretty_print=False).generate_report(report))
    assert "metadata" not in data


def test_json_written_to_file(report, tmp_path):
    out = tmp_path / "report.json"
    content = JSONReporter().generate_report(report, str(out))
    assert out.read_text(encoding="utf-8") == content


def test_text_report(report):
    text = HumanReadableReporter(use_colors=False).generate_report(report)
    assert "OSINFO RESOLUTION REPORT - INSUFFICIENT DATA" in text
    assert "fedora38" in text
    assert "missing build_id" in text
    assert "\033[" not in text


def test_text_report_file_has_no_colors(report, tmp_path):
    out = tmp_path / "report.txt"
    text = HumanReadableReporter(use_colors=True).generate_report(report, str(out))
    assert "\033[" in text
    assert "\033[" not in out.read_text(encoding="utf-8")


def test_excel_report(report, tmp_path):
    out = tmp_path / "report.xlsx"
    message = ExcelReporter().generate_report(report, str(out))
    assert str(out) in message

    workbook = load_workbook(str(out))
    assert workbook.sheetnames == ["Summary", "Results"]
    results = workbook["Results"]
    assert results["A1"].value == "Root"
    assert results["C2"].value == "fedora38"
    assert results["B4"].value == "insufficient_data"


def test_excel_report_in_memory(report):
    assert "bytes" in ExcelReporter().generate_report(report)


def test_get_reporter():
    assert isinstance(get_reporter("json"), JSONReporter)
    assert isinstance(get_reporter("text", OutputConfig(use_colors=False)), HumanReadableReporter)
    assert isinstance(get_reporter("excel"), ExcelReporter)
    with pytest.raises(ValueError):
        get_reporter("pdf")
