#!/usr/bin/env python3
"""Command-line interface for the treatment recommendation protocol.

Usage:
    python -m treatment_protocol.cli --help
    python -m treatment_protocol.cli evaluate --dob 2010-05-01 --dass21 40 --cats 25 --whodas 30 --risk Severe
    python -m treatment_protocol.cli evaluate --dass21 40 --suicidal-ideation --json
    python -m treatment_protocol.cli export --dob 1999-01-01 --dass21 40 --output-dir exports
"""
import argparse
import json
import logging
import os
import sys
from typing import List, Optional

logger = logging.getLogger(__name__)


def _add_form_arguments(parser: argparse.ArgumentParser) -> None:
    """Form fields shared by every command. Values are passed through as text."""
    parser.add_argument("--name", dest="patient_name", default="", help="Patient name")
    parser.add_argument("--dob", default="", help="Date of birth (YYYY-MM-DD)")
    parser.add_argument("--dass21", dest="dass21_score", default="", help="DASS-21 score (0-63)")
    parser.add_argument("--cats", dest="cats_score", default="",
                        help="CATS score (0-60, youth 13-17 only)")
    parser.add_argument("--whodas", dest="whodas_score", default="", help="WHODAS 2.0 score (0-60)")
    parser.add_argument(
        "--risk", dest="clinical_interview_risk", default="",
        choices=["", "Mild", "Moderate", "Severe"],
        help="Clinical interview risk level"
    )
    parser.add_argument("--brainspan", dest="brainspan_outcome", default=None,
                        nargs="?", const="",
                        choices=["", "Yes", "No"],
                        help="BrainSpan test was run; optional outcome")
    parser.add_argument("--neurotransmitter", dest="neurotransmitter_outcome", default=None,
                        nargs="?", const="",
                        choices=["", "Yes", "No"],
                        help="Neurotransmitter panel was run; optional outcome")
    parser.add_argument("--suicidal-ideation", dest="cssrs_suicidal_ideation",
                        action="store_true",
                        help="C-SSRS: recent suicidal plan/intent (override)")
    parser.add_argument("--qeeg", dest="qeeg_indicators", action="store_true",
                        help="QEEG: severe dissociation/psychosis indicators (override)")


def setup_parser() -> argparse.ArgumentParser:
    """Set up argument parser."""
    parser = argparse.ArgumentParser(
        description="Treatment Recommendation Protocol CLI",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("--log-level", default="WARNING",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
                        help="Logging level")

    subparsers = parser.add_subparsers(dest="command", help="Commands")

    evaluate_parser = subparsers.add_parser("evaluate", help="Score an assessment")
    _add_form_arguments(evaluate_parser)
    evaluate_parser.add_argument("--json", action="store_true",
                                 help="Print the result as JSON")

    export_parser = subparsers.add_parser("export", help="Score and export a PDF summary")
    _add_form_arguments(export_parser)
    export_parser.add_argument(
        "--output-dir", default=os.getenv("EXPORT_OUTPUT_DIR", "exports"),
        help="Directory for the PDF summary"
    )
    export_parser.add_argument(
        "--share-dir", default=os.getenv("SHARE_OUTBOX_DIR"),
        help="Outbox directory to share the summary into"
    )

    return parser


def build_form(args):
    """Fill an intake form from parsed arguments."""
    from treatment_protocol.services.intake import AssessmentForm

    form = AssessmentForm()
    form.update(
        patient_name=args.patient_name,
        dob=args.dob,
        dass21_score=args.dass21_score,
        cats_score=args.cats_score,
        whodas_score=args.whodas_score,
        clinical_interview_risk=args.clinical_interview_risk,
        brainspan_run=args.brainspan_outcome is not None,
        brainspan_outcome=args.brainspan_outcome or "",
        neurotransmitter_run=args.neurotransmitter_outcome is not None,
        neurotransmitter_outcome=args.neurotransmitter_outcome or "",
        cssrs_suicidal_ideation=args.cssrs_suicidal_ideation,
        qeeg_indicators=args.qeeg_indicators,
    )
    return form


def print_result(result, age: Optional[int]) -> None:
    """Print a human-readable recommendation."""
    from treatment_protocol.services.recommendation_engine import score_breakdown

    print("=" * 60)
    print("TREATMENT RECOMMENDATION")
    print("=" * 60)
    if age is not None:
        print(f"Age: {age}")
    print(f"Composite Score: {result.composite_score:.2f}")
    print(f"Recommended Treatment: {result.recommendation_label}")
    if result.override_triggered:
        print("⚠️ Hard override: score bands not applied")

    print("\nWeighted Contributions:")
    for name, value in score_breakdown(result):
        print(f"  {name}: {value:.2f}")

    print("\nClinical Notes:")
    for note in result.clinical_notes:
        print(f"  - {note}")
    print("=" * 60)


def cmd_evaluate(args) -> int:
    """Evaluate command."""
    form = build_form(args)
    if args.json:
        payload = form.result.to_dict()
        payload["age"] = form.age
        print(json.dumps(payload, indent=2))
    else:
        print_result(form.result, form.age)
    return 0


def cmd_export(args) -> int:
    """Export command."""
    from treatment_protocol.services.export_service import (
        ExportConfig,
        ExportError,
        SummaryExporter,
    )

    form = build_form(args)
    exporter = SummaryExporter(
        config=ExportConfig(output_dir=args.output_dir, share_outbox_dir=args.share_dir)
    )

    try:
        outcome = exporter.export(form.result)
    except ExportError as e:
        logger.error("CLI_EXPORT_FAILED", extra={"error": str(e), "error_type": type(e).__name__})
        print(f"❌ Export failed: {e}", file=sys.stderr)
        return 1

    print_result(form.result, form.age)
    print(f"Summary written to: {outcome.artifact_path}")
    if outcome.shared:
        print(f"Shared to: {outcome.shared_to}")
    if outcome.notice:
        print(f"Notice: {outcome.notice}")
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    parser = setup_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    if args.command == "evaluate":
        return cmd_evaluate(args)
    elif args.command == "export":
        return cmd_export(args)
    else:
        parser.print_help()
        return 0


if __name__ == "__main__":
    sys.exit(main())
