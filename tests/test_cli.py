"""
Tests for backend/dashboard/cli.py.
"""

import json

from typer.testing import CliRunner

from dashboard.cli import app
from dashboard.demo import DEMO_DAILY_UPDATES, DEMO_SHEET_SUMMARY, DEMO_TRANSCRIPT
from insights.engine import ALIGNMENT_ALERT_MESSAGE, LOW_DIVERSITY_MESSAGE

runner = CliRunner()


def _write(tmp_path, name, text):
    path = tmp_path / name
    path.write_text(text, encoding="utf-8")
    return str(path)


class TestAnalyzeCommand:

    def test_text_report(self, tmp_path):
        result = runner.invoke(app, [
            "analyze",
            "--search-links", _write(tmp_path, "links.txt", "keywords%3Asenior%20engineer"),
            "--daily-updates", _write(tmp_path, "eod.txt", DEMO_DAILY_UPDATES),
            "--transcript", _write(tmp_path, "hm.txt", DEMO_TRANSCRIPT),
            "--sheet", _write(tmp_path, "sheet.txt", DEMO_SHEET_SUMMARY),
        ])
        assert result.exit_code == 0, result.output
        assert "Approval  13% [critical] Approval Rate Alert" in result.output
        assert "Approved: 6, Rejected: 39" in result.output
        assert "Drift     DETECTED" in result.output
        assert ALIGNMENT_ALERT_MESSAGE in result.output

    def test_json_output(self, tmp_path):
        result = runner.invoke(app, [
            "analyze",
            "--sheet", _write(tmp_path, "sheet.txt", "Approval Rate: 35%"),
            "--json",
        ])
        assert result.exit_code == 0, result.output
        payload = json.loads(result.stdout)
        assert payload["summary"]["approval_rate"] == 35
        assert payload["summary"]["approved_count"] == 0
        assert payload["approval_status"] == "critical"
        assert payload["drift_detected"] is False
        assert payload["recommendations"] == [LOW_DIVERSITY_MESSAGE]
        assert payload["notice"] is None

    def test_no_inputs(self):
        result = runner.invoke(app, ["analyze", "--json"])
        assert result.exit_code == 0
        assert json.loads(result.stdout)["search"]["seniority_bias"] == "Mid-level"

    def test_unreadable_input(self, tmp_path):
        result = runner.invoke(app, ["analyze", "--sheet", str(tmp_path / "missing.txt")])
        assert result.exit_code == 1

    def test_missing_config(self, tmp_path):
        result = runner.invoke(app, ["analyze", "--config", str(tmp_path / "nope.yaml")])
        assert result.exit_code == 1

    def test_config_override(self, tmp_path):
        config = _write(tmp_path, "config.yaml", "thresholds:\n  min_ai_sourcing_mentions: 0\n")
        result = runner.invoke(app, ["analyze", "--config", config, "--json"])
        assert result.exit_code == 0, result.output
        assert json.loads(result.stdout)["recommendations"][0].startswith("✅")


class TestDemoCommand:

    def test_demo_text(self):
        result = runner.invoke(app, ["demo"])
        assert result.exit_code == 0
        assert "Critical Bottleneck in Technical Screening" in result.output

    def test_demo_json(self):
        result = runner.invoke(app, ["demo", "--json"])
        payload = json.loads(result.stdout)
        assert payload["approval"]["rate"] == 13
        assert len(payload["recommendations"]) == 4
