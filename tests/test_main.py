"""Tests for the command line entry point."""

import json

import pytest

from dna_spectrum_engine.main import main


@pytest.fixture
def config_file(tmp_path):
    path = tmp_path / "settings.yaml"
    path.write_text(
        "storage:\n"
        f"  directory: {tmp_path / 'assessments'}\n"
        "report:\n"
        f"  directory: {tmp_path / 'reports'}\n"
        "  plotly_js: cdn\n",
        encoding="utf-8",
    )
    return path


@pytest.fixture
def responses_file(tmp_path, wire_responses):
    path = tmp_path / "responses.json"
    path.write_text(json.dumps(wire_responses), encoding="utf-8")
    return path


def test_scores_and_stores(tmp_path, config_file, responses_file, caplog):
    with caplog.at_level("INFO"):
        exit_code = main([str(responses_file), "--config", str(config_file), "--client-name", "Jane Doe"])

    assert exit_code == 0
    assert "Profile: Adaptive Driver" in caplog.text
    assert len(list((tmp_path / "assessments").glob("assessment_*.json"))) == 1


def test_writes_reports(tmp_path, config_file, responses_file):
    html_path = tmp_path / "custom" / "report.html"
    exit_code = main([
        str(responses_file),
        "--config", str(config_file),
        "--client-name", "Jane Doe",
        "--pdf",
        "--html", str(html_path),
    ])

    assert exit_code == 0
    assert (tmp_path / "reports" / "Jane_Doe_DNA_Spectrum.pdf").exists()
    assert html_path.exists()


def test_no_save(tmp_path, config_file, responses_file):
    assert main([str(responses_file), "--config", str(config_file), "--no-save"]) == 0
    assert not (tmp_path / "assessments").exists()


def test_accepts_mapping_and_request_body(tmp_path, config_file, wire_responses):
    mapping = tmp_path / "mapping.json"
    mapping.write_text(
        json.dumps({str(r["questionId"]): r["score"] for r in wire_responses}),
        encoding="utf-8",
    )
    body = tmp_path / "body.json"
    body.write_text(json.dumps({"responses": wire_responses}), encoding="utf-8")

    assert main([str(mapping), "--config", str(config_file), "--no-save"]) == 0
    assert main([str(body), "--config", str(config_file), "--no-save"]) == 0


def test_invalid_responses_fail(tmp_path, config_file, wire_responses):
    path = tmp_path / "short.json"
    path.write_text(json.dumps(wire_responses[:10]), encoding="utf-8")
    assert main([str(path), "--config", str(config_file)]) == 1


def test_missing_file_fails(tmp_path, config_file):
    assert main([str(tmp_path / "missing.json"), "--config", str(config_file)]) == 1


def test_bad_config_fails(tmp_path, responses_file):
    assert main([str(responses_file), "--config", str(tmp_path / "nope.yaml")]) == 1
