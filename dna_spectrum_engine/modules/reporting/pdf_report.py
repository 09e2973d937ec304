"""
PDF Report Builder for the DNA Spectrum Engine.

Renders an assessment result as a four-page A4 report:
1. Results overview (archetype scores, dual-state scales)
2. Interpretation (profile, archetype bands, core instinct, signature)
3. Strengths and watch outs (plus the dual-state cue when present)
4. Leadership guidance and summary statement
"""

import logging
from datetime import date
from pathlib import Path

from fpdf import FPDF
from fpdf.enums import XPos, YPos

from dna_spectrum_engine.core.exceptions import ReportGenerationError
from dna_spectrum_engine.core.models import ArchetypeKey, AssessmentResult
from dna_spectrum_engine.modules.dual_state import adaptiveness_band, dominance_band
from dna_spectrum_engine.modules.reporting.content import (
    DUAL_STATE_HIGHLIGHT,
    pdf_filename,
    report_heading,
    summary_statement,
)

logger = logging.getLogger(__name__)

# RGB
COLORS = {
    "heading": (26, 26, 26),
    "subheading": (55, 65, 81),
    "text": (55, 65, 81),
    "muted": (156, 163, 175),
    "score": (37, 99, 235),
    "rule": (229, 231, 235),
    "dominance": (220, 38, 38),
    "adaptiveness": (22, 163, 74),
    "highlight_bg": (219, 234, 254),
    "highlight_text": (30, 64, 175),
    "summary_bg": (249, 250, 251),
}

# Core PDF fonts only cover Latin-1.
_LATIN1_FOLDS = {
    "—": "-",
    "–": "-",
    "•": "-",
    "‘": "'",
    "’": "'",
    "“": '"',
    "”": '"',
    "…": "...",
}


def to_latin1(text: str) -> str:
    """Fold typographic characters and replace anything else non-Latin-1."""
    for src, dst in _LATIN1_FOLDS.items():
        text = text.replace(src, dst)
    return text.encode("latin-1", "replace").decode("latin-1")


class PDFReport(FPDF):
    """FPDF document with the assessment's header, footer and text blocks."""

    def __init__(self, title: str, generated_on: date) -> None:
        super().__init__(orientation="P", unit="mm", format="A4")
        self.report_title = title
        self.generated_on = generated_on
        self.set_margins(18, 18, 18)
        self.set_auto_page_break(auto=True, margin=22)

    def footer(self):
        self.set_y(-15)
        self.set_draw_color(*COLORS["rule"])
        self.line(self.l_margin, self.get_y(), self.w - self.r_margin, self.get_y())
        self.set_font("Helvetica", "", 8)
        self.set_text_color(*COLORS["muted"])
        self.cell(
            0, 8,
            to_latin1(
                f"{self.report_title} Assessment - Page {self.page_no()} of {{nb}} - "
                f"Generated {self.generated_on.isoformat()}"
            ),
            align="C",
        )

    def page_title(self, text):
        self.set_font("Helvetica", "B", 20)
        self.set_text_color(*COLORS["heading"])
        self.cell(0, 11, to_latin1(text), new_x=XPos.LMARGIN, new_y=YPos.NEXT)
        self.ln(2)

    def subheading(self, text):
        self.set_font("Helvetica", "B", 15)
        self.set_text_color(*COLORS["subheading"])
        self.cell(0, 9, to_latin1(text), new_x=XPos.LMARGIN, new_y=YPos.NEXT)
        self.ln(2)

    def section_title(self, title):
        self.ln(2)
        self.set_font("Helvetica", "B", 12)
        self.set_text_color(*COLORS["heading"])
        self.cell(0, 8, to_latin1(title), new_x=XPos.LMARGIN, new_y=YPos.NEXT)

    def section_body(self, text):
        self.set_font("Helvetica", "", 10)
        self.set_text_color(*COLORS["text"])
        self.multi_cell(0, 5.5, to_latin1(text), new_x=XPos.LMARGIN, new_y=YPos.NEXT)
        self.ln(2)

    def bullet_list(self, items):
        self.set_font("Helvetica", "", 10)
        self.set_text_color(*COLORS["text"])
        for item in items:
            self.set_x(self.l_margin + 4)
            self.multi_cell(0, 5.5, to_latin1(f"- {item}"), new_x=XPos.LMARGIN, new_y=YPos.NEXT)
        self.ln(2)

    def score_row(self, label, value):
        self.set_font("Helvetica", "", 10)
        self.set_text_color(*COLORS["text"])
        self.cell(140, 7, to_latin1(label))
        self.set_font("Helvetica", "B", 10)
        self.set_text_color(*COLORS["score"])
        self.cell(0, 7, f"{value:.2f}", align="R", new_x=XPos.LMARGIN, new_y=YPos.NEXT)
        self.set_draw_color(*COLORS["rule"])
        self.line(self.l_margin, self.get_y(), self.w - self.r_margin, self.get_y())
        self.ln(1)

    def scale_bar(self, label, score, caption, color):
        """Draw a 0-10 scale as a filled bar with its caption underneath."""
        self.set_font("Helvetica", "B", 11)
        self.set_text_color(*COLORS["heading"])
        self.cell(0, 7, to_latin1(f"{label}: {score}/10"), new_x=XPos.LMARGIN, new_y=YPos.NEXT)

        width = self.w - self.l_margin - self.r_margin
        y = self.get_y()
        self.set_fill_color(*COLORS["rule"])
        self.rect(self.l_margin, y, width, 6, style="F")
        if score > 0:
            self.set_fill_color(*color)
            self.rect(self.l_margin, y, width * min(score, 10) / 10, 6, style="F")
        self.set_y(y + 7)

        self.set_font("Helvetica", "", 8)
        self.set_text_color(*COLORS["muted"])
        self.cell(0, 5, to_latin1(caption), new_x=XPos.LMARGIN, new_y=YPos.NEXT)
        self.ln(3)

    def highlight(self, title, text, italic=False):
        self.set_fill_color(*COLORS["highlight_bg"])
        self.set_text_color(*COLORS["highlight_text"])
        self.set_font("Helvetica", "B", 10)
        self.cell(0, 7, to_latin1(title), fill=True, new_x=XPos.LMARGIN, new_y=YPos.NEXT)
        self.set_font("Helvetica", "I" if italic else "", 10)
        self.multi_cell(0, 5.5, to_latin1(text), fill=True, new_x=XPos.LMARGIN, new_y=YPos.NEXT)
        self.ln(4)


def build_pdf(
    result: AssessmentResult,
    title: str = "H2 DNA Spectrum",
    generated_on: date | None = None,
) -> bytes:
    """Render an assessment result to PDF bytes.

    Args:
        result: The stored assessment result.
        title: Assessment title used in the subtitle and footer.
        generated_on: Date printed in the footer. Defaults to today.

    Returns:
        The PDF document.

    Raises:
        ReportGenerationError: If fpdf2 fails to lay out or encode the report.
    """
    profile = result.profile
    interpretation = result.interpretation

    try:
        pdf = PDFReport(title=title, generated_on=generated_on or date.today())

        # Page 1: results overview
        pdf.add_page()
        pdf.page_title(report_heading(result))
        pdf.section_body(f"{title}: Instinct Self-Assessment")
        pdf.ln(4)
        pdf.subheading("Your Instinct Distribution")
        for key in ArchetypeKey:
            pdf.score_row(f"{key.label} ({key.animal_label})", result.scores.get(key))
        pdf.ln(6)
        pdf.subheading("Dual State Profile")
        pdf.scale_bar(
            "Dominance Scale",
            profile.dominance_score,
            dominance_band(profile.dominance_score),
            COLORS["dominance"],
        )
        pdf.scale_bar(
            "Adaptiveness Scale",
            profile.adaptiveness_score,
            adaptiveness_band(profile.adaptiveness_score),
            COLORS["adaptiveness"],
        )
        if profile.is_dual_state:
            pdf.highlight("Dual State Balance", DUAL_STATE_HIGHLIGHT)

        # Page 2: interpretation
        pdf.add_page()
        pdf.page_title("Interpretation")
        pdf.subheading(f"Your Dual State: {profile.profile_name}")
        pdf.section_title("Primary Archetypes")
        pdf.section_body(", ".join(profile.primary_archetypes) or "None above 3.5")
        if profile.secondary_archetypes:
            pdf.section_title("Secondary Archetypes")
            pdf.section_body(", ".join(profile.secondary_archetypes))
        pdf.section_title("Core Instinct")
        pdf.section_body(interpretation.core_instinct)
        pdf.section_title("Behavioral Signature")
        pdf.bullet_list(interpretation.behavioral_signature)

        # Page 3: strengths and watch outs
        pdf.add_page()
        pdf.page_title("Strengths & Watch Outs")
        pdf.section_title("Strengths")
        pdf.bullet_list(interpretation.strengths)
        pdf.section_title("Watch Outs")
        pdf.bullet_list(interpretation.watch_outs)
        if interpretation.dual_state_cue:
            pdf.highlight("Dual State Cue", f'"{interpretation.dual_state_cue}"', italic=True)

        # Page 4: leadership guidance
        pdf.add_page()
        pdf.page_title("Leadership Guidance")
        pdf.section_title("To Lead Yourself")
        pdf.bullet_list(interpretation.to_lead_yourself)
        pdf.section_title("To Partner With Others")
        pdf.bullet_list(interpretation.to_partner_with_others)
        pdf.ln(4)
        pdf.set_fill_color(*COLORS["summary_bg"])
        pdf.set_font("Helvetica", "B", 11)
        pdf.set_text_color(*COLORS["heading"])
        pdf.cell(0, 8, "Summary Statement", fill=True, new_x=XPos.LMARGIN, new_y=YPos.NEXT)
        pdf.set_font("Helvetica", "", 10)
        pdf.set_text_color(*COLORS["text"])
        pdf.multi_cell(
            0, 5.5, to_latin1(summary_statement(profile)),
            fill=True, new_x=XPos.LMARGIN, new_y=YPos.NEXT,
        )

        return bytes(pdf.output())
    except Exception as e:
        logger.exception("PDF generation failed for assessment %s", result.id)
        raise ReportGenerationError(
            "Failed to generate PDF",
            details={"assessment_id": result.id, "error": str(e)}
        ) from e


def save_pdf_report(
    result: AssessmentResult,
    output_dir: Path,
    title: str = "H2 DNA Spectrum",
    filename: str | None = None,
) -> Path:
    """Render a result and write it under ``output_dir``.

    Returns:
        Path of the written PDF.
    """
    path = Path(output_dir) / (filename or pdf_filename(result))
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(build_pdf(result, title=title))
    logger.info("PDF report saved to %s", path)
    return path
