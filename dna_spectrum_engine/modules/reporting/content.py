"""
Report copy shared by the PDF and HTML renderers.
"""

import re

from dna_spectrum_engine.core.models import AssessmentResult, DualStateProfile

DUAL_STATE_HIGHLIGHT = (
    "You operate almost perfectly balanced between action and awareness. "
    "This is one of the rarest and most effective operating states."
)


def summary_statement(profile: DualStateProfile) -> str:
    """Closing paragraph of the report."""
    balance = (
        " in balanced Dual State between dominance and adaptiveness"
        if profile.is_dual_state else ""
    )
    strengths = " and ".join(profile.primary_archetypes) or "your blended archetypes"
    return (
        f"You lead as {profile.profile_name.lower()} — operating{balance}. "
        f"Your natural strengths in {strengths} make you effective in situations "
        "requiring both decisive action and empathic awareness."
    )


def report_heading(result: AssessmentResult) -> str:
    if result.client_name:
        return f"{result.client_name}'s Results"
    return "Assessment Results"


def pdf_filename(result: AssessmentResult) -> str:
    """Download name for a result's PDF.

    ``Jane Doe`` becomes ``Jane_Doe_DNA_Spectrum.pdf``; anonymous results
    use the first eight characters of the id.
    """
    if result.client_name:
        safe_name = re.sub(r"[^a-zA-Z0-9]", "_", result.client_name)
        return f"{safe_name}_DNA_Spectrum.pdf"
    return f"DNA_Spectrum_Assessment_{result.id[:8]}.pdf"
