"""
Reporting module for the DNA Spectrum Engine.

PDF reports via fpdf2 and interactive HTML reports via plotly.
"""

from dna_spectrum_engine.modules.reporting.content import (
    DUAL_STATE_HIGHLIGHT,
    pdf_filename,
    summary_statement,
)
from dna_spectrum_engine.modules.reporting.pdf_report import (
    PDFReport,
    build_pdf,
    save_pdf_report,
    to_latin1,
)
from dna_spectrum_engine.modules.reporting.visualizer import AssessmentReportVisualizer

__all__ = [
    "DUAL_STATE_HIGHLIGHT",
    "AssessmentReportVisualizer",
    "PDFReport",
    "build_pdf",
    "pdf_filename",
    "save_pdf_report",
    "summary_statement",
    "to_latin1",
]
