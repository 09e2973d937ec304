"""
Assessment Report Visualizer for the DNA Spectrum Engine.

Generates a self-contained HTML report with:
1. Bar chart of the six archetype scores
2. Dual State map (dominance vs. adaptiveness) with the dual-state region
3. The interpretation sections
"""

import html
import logging
from pathlib import Path

import plotly.graph_objects as go
import plotly.offline

from dna_spectrum_engine.core.exceptions import ReportGenerationError
from dna_spectrum_engine.core.models import ArchetypeKey, AssessmentResult
from dna_spectrum_engine.modules.dual_state import adaptiveness_band, dominance_band
from dna_spectrum_engine.modules.ranking import PRIMARY_THRESHOLD, SECONDARY_THRESHOLD
from dna_spectrum_engine.modules.reporting.content import (
    DUAL_STATE_HIGHLIGHT,
    report_heading,
    summary_statement,
)

logger = logging.getLogger(__name__)

PLOTLY_CDN_URL = "https://cdn.plot.ly/plotly-2.35.2.min.js"

# Color palette
COLORS = {
    "primary": "#2563EB",      # Blue
    "secondary": "#93C5FD",    # Light blue
    "other": "#D1D5DB",        # Gray
    "dominance": "#DC2626",    # Red
    "adaptiveness": "#16A34A", # Green
    "dual_state": "rgba(37, 99, 235, 0.12)",
    "respondent": "#1E40AF",
}

# Dual-state region on the 0-10 display scale (axis 3.5 -> 6.25).
DUAL_STATE_DISPLAY_MIN = 6.25


class AssessmentReportVisualizer:
    """Generates visual HTML reports from assessment results.

    Attributes:
        plotly_js: "inline" embeds plotly.js in the page, "cdn" links it.
    """

    def __init__(self, plotly_js: str = "inline") -> None:
        if plotly_js not in ("inline", "cdn"):
            raise ValueError(f"plotly_js must be 'inline' or 'cdn', got {plotly_js!r}")
        self.plotly_js = plotly_js

    def generate_report(
        self,
        result: AssessmentResult,
        output_path: Path,
        title: str = "H2 DNA Spectrum",
    ) -> Path:
        """Render and save the HTML report.

        Args:
            result: The stored assessment result.
            output_path: Where to save the HTML report.
            title: Assessment title.

        Returns:
            Path to the generated HTML file.
        """
        content = self.render_html(result, title=title)

        output_path = Path(output_path)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        with open(output_path, "w", encoding="utf-8") as f:
            f.write(content)

        logger.info("Report saved to %s", output_path)
        return output_path

    def render_html(self, result: AssessmentResult, title: str = "H2 DNA Spectrum") -> str:
        """Render the complete HTML report.

        Raises:
            ReportGenerationError: If a figure cannot be built.
        """
        logger.info("Generating visual report for assessment %s", result.id)
        try:
            bar_chart = self._create_bar_chart(result)
            state_map = self._create_state_map(result)
        except Exception as e:
            logger.exception("Figure generation failed for assessment %s", result.id)
            raise ReportGenerationError(
                "Failed to generate HTML report",
                details={"assessment_id": result.id, "error": str(e)}
            ) from e

        return self._build_html_report(result, title, bar_chart, state_map)

    def _create_bar_chart(self, result: AssessmentResult) -> str:
        """Create horizontal bar chart of archetype scores.

        Bars are colored by rank band.
        """
        keys = list(ArchetypeKey)
        names = [f"{key.label}<br>({key.animal_label})" for key in keys]
        scores = [result.scores.get(key) for key in keys]

        colors = []
        for score in scores:
            if score >= PRIMARY_THRESHOLD:
                colors.append(COLORS["primary"])
            elif score >= SECONDARY_THRESHOLD:
                colors.append(COLORS["secondary"])
            else:
                colors.append(COLORS["other"])

        fig = go.Figure()
        fig.add_trace(go.Bar(
            y=names,
            x=scores,
            orientation="h",
            marker=dict(color=colors),
            text=[f"{s:.2f}" for s in scores],
            textposition="outside",
            hovertemplate="<b>%{y}</b><br>Score: %{x:.2f}<extra></extra>",
        ))

        fig.add_vline(x=PRIMARY_THRESHOLD, line_width=1, line_dash="dash", line_color=COLORS["primary"])
        fig.add_vline(x=SECONDARY_THRESHOLD, line_width=1, line_dash="dot", line_color="gray")

        fig.update_layout(
            title=dict(text="<b>Your Instinct Distribution</b>", x=0.5, font=dict(size=18)),
            xaxis=dict(title="Average score", range=[0, 5.5], gridcolor="#E0E0E0"),
            yaxis=dict(title="", autorange="reversed"),
            plot_bgcolor="#FAFAFA",
            paper_bgcolor="white",
            height=420,
            margin=dict(l=180, r=60, t=70, b=50),
        )

        return fig.to_html(include_plotlyjs=False, full_html=False, div_id="archetype_chart")

    def _create_state_map(self, result: AssessmentResult) -> str:
        """Plot the respondent on the dominance/adaptiveness plane."""
        profile = result.profile

        fig = go.Figure()
        fig.add_shape(
            type="rect",
            x0=DUAL_STATE_DISPLAY_MIN, x1=10,
            y0=DUAL_STATE_DISPLAY_MIN, y1=10,
            fillcolor=COLORS["dual_state"],
            line=dict(width=0),
            layer="below",
        )
        fig.add_shape(
            type="line", x0=0, y0=0, x1=10, y1=10,
            line=dict(color="gray", width=1, dash="dot"),
        )
        fig.add_trace(go.Scatter(
            x=[profile.dominance_score],
            y=[profile.adaptiveness_score],
            mode="markers+text",
            marker=dict(size=22, color=COLORS["respondent"], symbol="star", line=dict(color="white", width=2)),
            text=[profile.profile_name],
            textposition="top center",
            name=profile.profile_name,
            hovertemplate="Dominance: %{x}/10<br>Adaptiveness: %{y}/10<extra></extra>",
        ))

        fig.update_layout(
            title=dict(text="<b>Dual State Map</b>", x=0.5, font=dict(size=18)),
            xaxis=dict(
                title=f"Dominance ({dominance_band(profile.dominance_score)})",
                range=[0, 10.5], dtick=1, gridcolor="#E0E0E0",
            ),
            yaxis=dict(
                title=f"Adaptiveness ({adaptiveness_band(profile.adaptiveness_score)})",
                range=[0, 10.5], dtick=1, gridcolor="#E0E0E0",
            ),
            annotations=[dict(
                x=(DUAL_STATE_DISPLAY_MIN + 10) / 2, y=10.3,
                text="Dual State region", showarrow=False,
                font=dict(size=11, color=COLORS["primary"]),
            )],
            plot_bgcolor="#FAFAFA",
            paper_bgcolor="white",
            showlegend=False,
            height=500,
            margin=dict(l=70, r=40, t=70, b=60),
        )

        return fig.to_html(include_plotlyjs=False, full_html=False, div_id="state_map")

    def _plotly_script(self) -> str:
        if self.plotly_js == "cdn":
            return f'<script src="{PLOTLY_CDN_URL}"></script>'
        return f'<script type="text/javascript">{plotly.offline.get_plotlyjs()}</script>'

    def _build_html_report(
        self,
        result: AssessmentResult,
        title: str,
        bar_chart: str,
        state_map: str,
    ) -> str:
        """Assemble the page around the two figures."""
        profile = result.profile
        interpretation = result.interpretation

        def bullets(items):
            return "<ul>" + "".join(f"<li>{html.escape(item)}</li>" for item in items) + "</ul>"

        secondary = ""
        if profile.secondary_archetypes:
            secondary = (
                "<h3>Secondary Archetypes</h3>"
                f"<p>{html.escape(', '.join(profile.secondary_archetypes))}</p>"
            )

        dual_state = ""
        if profile.is_dual_state:
            dual_state = (
                f'<div class="highlight"><b>Dual State Balance:</b> {DUAL_STATE_HIGHLIGHT}</div>'
            )

        cue = ""
        if interpretation.dual_state_cue:
            cue = (
                '<div class="highlight"><b>Dual State Cue</b>'
                f"<p><i>&ldquo;{html.escape(interpretation.dual_state_cue)}&rdquo;</i></p></div>"
            )

        heading = html.escape(report_heading(result))
        safe_title = html.escape(title)

        return f"""<!DOCTYPE html>
<html>
<head>
    <meta charset="UTF-8">
    <title>{safe_title}: {heading}</title>
    {self._plotly_script()}
    <style>
        * {{ box-sizing: border-box; margin: 0; padding: 0; }}
        body {{ font-family: -apple-system, BlinkMacSystemFont, 'Segoe UI', Roboto, sans-serif; background: #f5f5f5; color: #374151; }}
        .header {{ background: linear-gradient(135deg, #1a1a2e 0%, #16213e 100%); color: white; padding: 30px; text-align: center; }}
        .header h1 {{ font-size: 28px; margin-bottom: 8px; }}
        .header .subtitle {{ opacity: 0.8; font-size: 14px; }}
        .container {{ max-width: 1100px; margin: 0 auto; padding: 20px; }}
        .card {{ background: white; padding: 20px; border-radius: 8px; box-shadow: 0 2px 4px rgba(0,0,0,0.1); margin-bottom: 20px; }}
        .card h2 {{ font-size: 20px; margin-bottom: 12px; color: #1f2937; }}
        .card h3 {{ font-size: 15px; margin: 14px 0 6px; color: #1f2937; }}
        .card ul {{ margin-left: 20px; }}
        .card li {{ margin-bottom: 4px; }}
        .scales {{ display: flex; gap: 40px; font-size: 14px; margin-top: 10px; }}
        .highlight {{ background: #dbeafe; border-left: 3px solid #2563eb; color: #1e40af; padding: 12px; margin-top: 14px; font-size: 14px; }}
    </style>
</head>
<body>
    <div class="header">
        <h1>{heading}</h1>
        <div class="subtitle">{safe_title}: Instinct Self-Assessment</div>
    </div>

    <div class="container">
        <div class="card">{bar_chart}</div>

        <div class="card">
            {state_map}
            <div class="scales">
                <div><b>Dominance Scale:</b> {profile.dominance_score}/10 ({dominance_band(profile.dominance_score)})</div>
                <div><b>Adaptiveness Scale:</b> {profile.adaptiveness_score}/10 ({adaptiveness_band(profile.adaptiveness_score)})</div>
            </div>
            {dual_state}
        </div>

        <div class="card">
            <h2>Your Dual State: {html.escape(profile.profile_name)}</h2>
            <h3>Primary Archetypes</h3>
            <p>{html.escape(', '.join(profile.primary_archetypes)) or 'None above 3.5'}</p>
            {secondary}
            <h3>Core Instinct</h3>
            <p>{html.escape(interpretation.core_instinct)}</p>
            <h3>Behavioral Signature</h3>
            {bullets(interpretation.behavioral_signature)}
        </div>

        <div class="card">
            <h2>Strengths &amp; Watch Outs</h2>
            <h3>Strengths</h3>
            {bullets(interpretation.strengths)}
            <h3>Watch Outs</h3>
            {bullets(interpretation.watch_outs)}
            {cue}
        </div>

        <div class="card">
            <h2>Leadership Guidance</h2>
            <h3>To Lead Yourself</h3>
            {bullets(interpretation.to_lead_yourself)}
            <h3>To Partner With Others</h3>
            {bullets(interpretation.to_partner_with_others)}
            <h3>Summary Statement</h3>
            <p>{html.escape(summary_statement(profile))}</p>
        </div>
    </div>
</body>
</html>"""
