"""Tests for the JUnit formatter."""

import xml.etree.ElementTree as ET
from datetime import timedelta

from runreport.formatters.junit import build_junit, write_junit_summary
from runreport.models import Error, Failed, FlatTest, Ignored, Passed, TestRunSummary, TestSummary


def _entry(name, result, seconds=0.0):
    return FlatTest(name), TestSummary(result, timedelta(seconds=seconds))


def _summary(*entries):
    return TestRunSummary.from_results(entries, timedelta(seconds=3))


def _testcases(root):
    return root.findall("./testsuite/testcase")


class TestBuildJunit:
    def test_structure(self):
        root = build_junit(_summary(_entry("a", Passed())), name="my-tests")
        assert root.tag == "testsuites"
        assert root.attrib == {}
        suites = root.findall("testsuite")
        assert len(suites) == 1
        assert suites[0].attrib == {"name": "my-tests"}

    def test_failed_case(self):
        summary = _summary(_entry("Add.adds two numbers", Failed("expected 1 but got 2"), 0.125))
        case = _testcases(build_junit(summary, name="s"))[0]
        assert case.get("name") == "Add.adds two numbers"
        assert case.get("time") == "0.125"
        failure = case.find("failure")
        assert failure.get("message") == "expected 1 but got 2"
        assert not failure.text

    def test_passed_case_has_no_children(self):
        case = _testcases(build_junit(_summary(_entry("ok", Passed(), 1.0)), name="s"))[0]
        assert case.attrib == {"name": "ok", "time": "1.000"}
        assert len(case) == 0

    def test_error_case(self):
        summary = _summary(_entry("boom", Error(KeyError("missing"), trace="Traceback\n  KeyError")))
        case = _testcases(build_junit(summary, name="s"))[0]
        error = case.find("error")
        assert error.get("message") == "'missing'"
        assert error.text == "Traceback\n  KeyError"

    def test_error_case_from_live_exception(self):
        try:
            raise ValueError("bad value")
        except ValueError as e:
            summary = _summary(_entry("live", Error(e)))
        error = _testcases(build_junit(summary, name="s"))[0].find("error")
        assert error.get("message") == "bad value"
        assert "ValueError: bad value" in error.text
        assert error.text.startswith("Traceback")

    def test_ignored_case(self):
        case = _testcases(build_junit(_summary(_entry("later", Ignored("skipped on CI"))), name="s"))[0]
        assert case.find("skipped").get("message") == "skipped on CI"
        assert case.get("time") == "0.000"

    def test_order_matches_nunit_convention(self):
        summary = _summary(
            _entry("ignored", Ignored("r"), 9.0),
            _entry("fast", Passed(), 0.1),
            _entry("slow", Passed(), 0.9),
            _entry("failed", Failed("m")),
            _entry("error", Error(ValueError("x"))),
        )
        names = [c.get("name") for c in _testcases(build_junit(summary, name="s"))]
        assert names == ["error", "failed", "slow", "fast", "ignored"]

    def test_case_count(self):
        summary = _summary(*[_entry(f"t{i}", Passed()) for i in range(7)])
        assert len(_testcases(build_junit(summary, name="s"))) == summary.total

    def test_no_run_totals(self):
        root = build_junit(_summary(_entry("f", Failed("m"))), name="s")
        suite = root.find("testsuite")
        for absent in ("tests", "failures", "errors", "time"):
            assert suite.get(absent) is None


class TestWriteJunitSummary:
    def test_writes_file(self, tmp_path):
        target = tmp_path / "ci" / "junit.xml"
        written = write_junit_summary(target, _summary(_entry("a", Passed())), name="suite")
        assert written == target
        root = ET.parse(target).getroot()
        assert root.tag == "testsuites"
        assert root.find("testsuite").get("name") == "suite"

    def test_default_name(self, tmp_path):
        target = tmp_path / "junit.xml"
        write_junit_summary(target, _summary(_entry("a", Passed())))
        assert ET.parse(target).getroot().find("testsuite").get("name")

    def test_control_characters_in_error(self, tmp_path):
        target = tmp_path / "junit.xml"
        summary = _summary(_entry("ctl", Error(RuntimeError("esc\x1b[31m"), trace="esc\x1b[31mred")))
        write_junit_summary(target, summary, name="s")
        assert b"esc\x1b[31mred" in target.read_bytes()
