"""Tests for the contentguard CLI."""

import json
import tempfile

import yaml
from click.testing import CliRunner

from contentguard import __version__
from contentguard.cli import main

MISSING = "/nonexistent/blocked_terms.yaml"


def _invoke(*args):
    return CliRunner().invoke(main, ["--log-level", "WARNING", *args])


def test_version():
    result = CliRunner().invoke(main, ["--version"])
    assert result.exit_code == 0
    assert __version__ in result.output


def test_check_json():
    result = _invoke("check", "kill yourself", "--json")
    assert result.exit_code == 0, result.output
    data = json.loads(result.output)
    assert data["decision"] == "BLOCK"
    assert data["severity"] == "CRITICAL"
    assert data["matched_terms"] == ["kill yourself"]
    assert data["ai_used"] is False


def test_check_json_with_reputation():
    text = "Anyone into bitcoin, crypto or forex?"
    assert json.loads(_invoke("check", text, "-r", "100", "--json").output)["decision"] == "APPROVE"
    assert json.loads(_invoke("check", text, "-r", "50", "--json").output)["decision"] == "FLAG"


def test_check_rejects_out_of_range_reputation():
    result = _invoke("check", "hello", "-r", "150")
    assert result.exit_code != 0


def test_check_table():
    result = _invoke("check", "This is a great book")
    assert result.exit_code == 0, result.output
    assert "Moderation Result" in result.output
    assert "APPROVE" in result.output
    assert "Content appears clean" in result.output


def test_check_warns_on_degraded_catalog():
    result = CliRunner().invoke(main, ["--log-level", "CRITICAL", "check", "hello", "--catalog", MISSING])
    assert result.exit_code == 0, result.output
    assert "fallback critical terms" in result.output


def test_quick_check():
    result = _invoke("quick-check", "kill yourself")
    assert result.exit_code == 0, result.output
    assert "Allowed: no" in result.output
    assert "Needs review: no" in result.output


def test_normalize():
    result = _invoke("normalize", "K 1 L L")
    assert result.exit_code == 0
    assert result.output.strip() == "kill"


def test_catalog_ok():
    result = _invoke("catalog")
    assert result.exit_code == 0, result.output
    assert "OK" in result.output
    assert "critical" in result.output


def test_catalog_degraded():
    result = CliRunner().invoke(main, ["--log-level", "CRITICAL", "catalog", "--catalog", MISSING])
    assert result.exit_code == 0, result.output
    assert "DEGRADED" in result.output


def test_catalog_custom_file():
    f = tempfile.NamedTemporaryFile(mode="w", suffix=".yaml", delete=False, encoding="utf-8")
    yaml.dump({"high": ["grumpus"], "medium": ["meanie", "jerk"]}, f)
    f.close()

    result = _invoke("catalog", "--catalog", f.name)
    assert result.exit_code == 0, result.output
    assert "OK" in result.output


def test_schema():
    result = _invoke("schema")
    assert result.exit_code == 0
    schema = json.loads(result.output)
    assert "critical" in schema["properties"]
    assert "spam_patterns" in schema["properties"]
