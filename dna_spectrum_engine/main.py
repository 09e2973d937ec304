"""
DNA Spectrum Engine - Command Line Entry Point

Scores a responses file, stores the result and optionally writes the PDF
and HTML reports.

Usage:
    dna-spectrum responses.json --client-name "Jane Doe" --pdf --html
"""

import argparse
import json
import logging
import sys
from pathlib import Path

from dna_spectrum_engine.core.config_loader import load_settings
from dna_spectrum_engine.core.exceptions import DNASpectrumError
from dna_spectrum_engine.core.orchestrator import Orchestrator, parse_responses
from dna_spectrum_engine.modules.dual_state import adaptiveness_band, dominance_band
from dna_spectrum_engine.modules.reporting import (
    AssessmentReportVisualizer,
    pdf_filename,
    save_pdf_report,
)

# Sentinel for "--pdf"/"--html" given without a path.
DEFAULT_REPORT_PATH = "default"


def setup_logging(level: str = "INFO") -> None:
    """Configure logging for the application.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR).
    """
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="dna-spectrum",
        description="Score an H2 DNA Spectrum assessment.",
    )
    parser.add_argument(
        "responses",
        type=Path,
        help="JSON file with a list of {questionId, score} or a {questionId: score} object",
    )
    parser.add_argument("--client-name", help="Respondent name")
    parser.add_argument("--client-email", help="Respondent email")
    parser.add_argument("--config", type=Path, help="Path to settings.yaml")
    parser.add_argument(
        "--pdf", nargs="?", const=DEFAULT_REPORT_PATH, metavar="PATH",
        help="Write a PDF report (defaults to the report directory)",
    )
    parser.add_argument(
        "--html", nargs="?", const=DEFAULT_REPORT_PATH, metavar="PATH",
        help="Write an HTML report (defaults to the report directory)",
    )
    parser.add_argument(
        "--no-save", action="store_true",
        help="Do not write the result to the storage directory",
    )
    return parser


def load_responses_file(path: Path):
    """Read the raw JSON payload of a responses file."""
    with open(path, "r", encoding="utf-8") as f:
        payload = json.load(f)
    # Accept the submit request body shape as well.
    if isinstance(payload, dict) and "responses" in payload:
        payload = payload["responses"]
    return payload


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the DNA Spectrum Engine CLI.

    Returns:
        Exit code (0 for success, 1 for failure).
    """
    args = build_parser().parse_args(argv)

    setup_logging()
    logger = logging.getLogger(__name__)

    try:
        logger.info("Loading configuration...")
        settings = load_settings(args.config)
        logging.getLogger().setLevel(settings.logging.level)

        if args.no_save:
            settings.storage.enabled = False

        responses = parse_responses(load_responses_file(args.responses))
        orchestrator = Orchestrator(settings)
        submission = orchestrator.submit(
            responses,
            client_name=args.client_name,
            client_email=args.client_email,
        )
        result = submission.result
        profile = result.profile

        logger.info("=" * 60)
        logger.info("ASSESSMENT COMPLETE")
        logger.info("=" * 60)
        logger.info("Assessment id: %s", result.id)
        logger.info("Profile: %s", profile.profile_name)
        logger.info(
            "Dominance: %d/10 (%s)",
            profile.dominance_score, dominance_band(profile.dominance_score),
        )
        logger.info(
            "Adaptiveness: %d/10 (%s)",
            profile.adaptiveness_score, adaptiveness_band(profile.adaptiveness_score),
        )
        logger.info("Dual State: %s", "yes" if profile.is_dual_state else "no")
        logger.info("Primary archetypes: %s", ", ".join(profile.primary_archetypes) or "-")
        logger.info("Secondary archetypes: %s", ", ".join(profile.secondary_archetypes) or "-")
        for key, value in result.scores.items():
            logger.info("  %-24s %.2f", key.label, value)
        logger.info("Persisted: %s", submission.persisted)

        title = settings.assessment.title
        report_dir = Path(settings.report.directory)

        if args.pdf:
            if args.pdf == DEFAULT_REPORT_PATH:
                pdf_path = save_pdf_report(result, report_dir, title=title)
            else:
                target = Path(args.pdf)
                pdf_path = save_pdf_report(
                    result, target.parent, title=title,
                    filename=target.name or pdf_filename(result),
                )
            logger.info("PDF report saved to: %s", pdf_path)

        if args.html:
            html_path = (
                report_dir / f"assessment_{result.id}.html"
                if args.html == DEFAULT_REPORT_PATH else Path(args.html)
            )
            visualizer = AssessmentReportVisualizer(plotly_js=settings.report.plotly_js)
            visualizer.generate_report(result, html_path, title=title)
            logger.info("HTML report saved to: %s", html_path)

        return 0

    except DNASpectrumError as e:
        logger.error("Assessment failed: %s", e)
        return 1
    except (OSError, json.JSONDecodeError) as e:
        logger.error("Could not read responses file: %s", e)
        return 1
    except Exception as e:
        logger.exception("Fatal error: %s", e)
        return 1


if __name__ == "__main__":
    sys.exit(main())
