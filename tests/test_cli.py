"""Tests for the rwa-roi command-line entry point."""

import json

import pytest
import sys
import os

sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'src'))

from rwa_roi.cli import main

GOLDEN_ARGS = [
    "--aum", "1000",
    "--asset-class", "Digital Bonds",
    "--yield", "8.5",
    "--settlement-cycle", "2",
    "--frequency", "12",
]


class TestCli:
    """CLI smoke tests."""

    def test_json_output(self, capsys):
        assert main(GOLDEN_ARGS + ["--json"]) == 0
        data = json.loads(capsys.readouterr().out)
        assert data['totalAnnualBenefit'] == pytest.approx(210.5698020533881, rel=1e-9)

    def test_table_output(self, capsys):
        assert main(GOLDEN_ARGS) == 0
        out = capsys.readouterr().out
        assert "Total Annual Benefit" in out
        assert "$210.57" in out

    def test_input_file(self, tmp_path, capsys):
        path = tmp_path / "input.yaml"
        path.write_text(
            "aum: 1000\n"
            "currency: USD\n"
            "assetClasses: [Digital Bonds]\n"
            "currentYield: 8.5\n"
            "settlementCycle: 2\n"
            "annualTransactionFrequency: 12\n"
        )
        assert main(["--input", str(path), "--json"]) == 0
        data = json.loads(capsys.readouterr().out)
        assert data['differentiatedYield']['differentiatedAlpha'] == 6.5

    def test_invalid_input_exit_code(self, capsys):
        assert main(["--aum", "-1", "--asset-class", "Digital Bonds"]) == 2
        assert "Invalid input" in capsys.readouterr().err

    def test_warnings_on_stderr(self, capsys):
        args = GOLDEN_ARGS + ["--legacy-cost", "0.0001"]
        assert main(args) == 0
        assert "Operating cost reduction is negative" in capsys.readouterr().err

    def test_exports(self, tmp_path):
        csv_path = tmp_path / "out.csv"
        json_path = tmp_path / "out.json"
        assert main(GOLDEN_ARGS + ["--export-csv", str(csv_path), "--export-json", str(json_path)]) == 0
        assert csv_path.exists()
        assert json.loads(json_path.read_text())['input']['aum'] == 1000

    def test_html_export(self, tmp_path):
        html_path = tmp_path / "report.html"
        assert main(GOLDEN_ARGS + ["--export-html", str(html_path)]) == 0
        html = html_path.read_text(encoding="utf-8")
        assert "Total Annual Benefit: $210.57" in html

    def test_overflowing_metrics_reported(self, capsys):
        args = [
            "--aum", "1e306",
            "--asset-class", "Digital Bonds",
            "--yield", "8.5",
            "--settlement-cycle", "2",
            "--frequency", "1000",
        ]
        assert main(args) == 0
        captured = capsys.readouterr()
        assert "Infinity" in captured.out
        assert "Invalid metric value for annualLiquidityRelease" in captured.err

    def test_missing_input_file(self, tmp_path, capsys):
        assert main(["--input", str(tmp_path / "missing.yaml")]) == 2
        assert "Invalid input" in capsys.readouterr().err

    def test_missing_config_file(self, tmp_path, capsys):
        assert main(GOLDEN_ARGS + ["--config", str(tmp_path / "missing.yaml")]) == 2
        assert "Invalid config" in capsys.readouterr().err

    def test_incomplete_config_table(self, tmp_path, capsys):
        path = tmp_path / "config.yaml"
        path.write_text(
            "asset_classes:\n"
            "  Digital Bonds:\n"
            "    default_differentiated_alpha: 6.5\n"
        )
        assert main(GOLDEN_ARGS + ["--config", str(path)]) == 2
        assert "Invalid config" in capsys.readouterr().err
