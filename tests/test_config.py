"""Tests for runreport.config."""

import pytest

from runreport.config import ReportConfig, load_config
from runreport.loader import LoadError


def test_defaults():
    config = ReportConfig()
    assert config.name
    assert config.nunit_path is None
    assert config.junit_path is None


def test_load_config(tmp_path):
    p = tmp_path / "runreport.yaml"
    p.write_text("name: integration\nnunit_path: out/TestResult.xml\njunit_path: out/junit.xml\n")
    config = load_config(p)
    assert config == ReportConfig(
        name="integration", nunit_path="out/TestResult.xml", junit_path="out/junit.xml",
    )


def test_partial_config_keeps_default_name(tmp_path):
    p = tmp_path / "runreport.yaml"
    p.write_text("junit_path: junit.xml\n")
    config = load_config(p)
    assert config.name == ReportConfig().name
    assert config.junit_path == "junit.xml"


def test_null_name_uses_default(tmp_path):
    p = tmp_path / "runreport.yaml"
    p.write_text("name: null\n")
    assert load_config(p).name == ReportConfig().name


def test_unknown_key(tmp_path):
    p = tmp_path / "runreport.yaml"
    p.write_text("xunit_path: x.xml\n")
    with pytest.raises(LoadError, match="Unknown config keys: xunit_path"):
        load_config(p)


def test_wrong_type(tmp_path):
    p = tmp_path / "runreport.yaml"
    p.write_text("name: 42\n")
    with pytest.raises(LoadError, match="must be a string"):
        load_config(p)


def test_missing_file(tmp_path):
    with pytest.raises(LoadError, match="Config file not found"):
        load_config(tmp_path / "nope.yaml")
