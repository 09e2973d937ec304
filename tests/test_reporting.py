"""Tests for the PDF and HTML reports."""

from datetime import date

import pytest

from dna_spectrum_engine.core.exceptions import ReportGenerationError
from dna_spectrum_engine.modules.reporting import (
    DUAL_STATE_HIGHLIGHT,
    AssessmentReportVisualizer,
    build_pdf,
    pdf_filename,
    save_pdf_report,
    summary_statement,
    to_latin1,
)
from dna_spectrum_engine.modules.reporting.visualizer import PLOTLY_CDN_URL


def test_pdf_is_generated(make_result):
    pdf = build_pdf(make_result(), generated_on=date(2026, 1, 15))
    assert pdf.startswith(b"%PDF")
    assert len(pdf) > 1000


def test_pdf_handles_non_latin1_text(make_result):
    pdf = build_pdf(make_result(client_name="Zoë Łukasz 李"))
    assert pdf.startswith(b"%PDF")


def test_pdf_for_anonymous_balanced_observer(make_result, uniform_responses):
    result = make_result(client_name=None, responses=uniform_responses(3))
    assert build_pdf(result).startswith(b"%PDF")


def test_pdf_wraps_layout_failures(make_result, monkeypatch):
    from dna_spectrum_engine.modules.reporting import pdf_report

    def broken(*args, **kwargs):
        raise RuntimeError("layout exploded")

    monkeypatch.setattr(pdf_report.PDFReport, "add_page", broken)
    with pytest.raises(ReportGenerationError):
        build_pdf(make_result())


def test_save_pdf_report(tmp_path, make_result):
    result = make_result()
    path = save_pdf_report(result, tmp_path / "reports")
    assert path.name == "Jane_Doe_DNA_Spectrum.pdf"
    assert path.read_bytes().startswith(b"%PDF")


def test_pdf_filename(make_result):
    assert pdf_filename(make_result(client_name="Jane Doe")) == "Jane_Doe_DNA_Spectrum.pdf"
    assert pdf_filename(make_result(client_name="O'Neil-Smith")) == "O_Neil_Smith_DNA_Spectrum.pdf"

    anonymous = make_result(client_name=None)
    assert pdf_filename(anonymous) == f"DNA_Spectrum_Assessment_{anonymous.id[:8]}.pdf"


def test_to_latin1():
    assert to_latin1("rhythm — cadence • “quoted”") == 'rhythm - cadence - "quoted"'
    assert to_latin1("Zoë") == "Zoë"
    assert to_latin1("李") == "?"


def test_summary_statement(make_result, uniform_responses):
    dual = make_result().profile
    assert summary_statement(dual).startswith(
        "You lead as adaptive driver — operating in balanced Dual State"
    )
    assert "Ram and Eagle and Antelope" in summary_statement(dual)

    balanced = make_result(responses=uniform_responses(3)).profile
    assert "balanced Dual State" not in summary_statement(balanced)
    assert "your blended archetypes" in summary_statement(balanced)


def test_html_report(make_result):
    html = AssessmentReportVisualizer(plotly_js="cdn").render_html(make_result())

    assert html.startswith("<!DOCTYPE html>")
    assert "Jane Doe&#x27;s Results" in html
    assert "Your Dual State: Adaptive Driver" in html
    assert DUAL_STATE_HIGHLIGHT in html
    assert "Slow your breath" in html
    assert 'id="archetype_chart"' in html
    assert 'id="state_map"' in html


def test_html_escapes_client_name(make_result):
    html = AssessmentReportVisualizer(plotly_js="cdn").render_html(
        make_result(client_name="<script>alert(1)</script>")
    )
    assert "<script>alert(1)</script>" not in html


def test_html_inline_plotly(make_result):
    html = AssessmentReportVisualizer(plotly_js="inline").render_html(make_result())
    assert f'<script src="{PLOTLY_CDN_URL}">' not in html
    assert len(html) > 1_000_000


def test_generate_report_writes_file(tmp_path, make_result):
    path = AssessmentReportVisualizer(plotly_js="cdn").generate_report(
        make_result(), tmp_path / "out" / "report.html"
    )
    assert path.exists()
    assert "Adaptive Driver" in path.read_text(encoding="utf-8")


def test_visualizer_rejects_unknown_plotly_mode():
    with pytest.raises(ValueError):
        AssessmentReportVisualizer(plotly_js="local")
