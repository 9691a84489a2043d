"""Command line interface for policy-evidence."""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path
from typing import List, Optional

from policy_evidence import __version__
from policy_evidence.config import load_config
from policy_evidence.domain.errors import ConfigError, PolicyEvidenceError
from policy_evidence.domain.models import Location
from policy_evidence.evidence.matcher import match_claim_to_quote
from policy_evidence.evidence.splitter import split_into_claims
from policy_evidence.logging import configure_logging, get_logger, get_run_id
from policy_evidence.services import verification_service
from policy_evidence.services.report_render import render_markdown


logger = get_logger(__name__)


def _print_json(payload: dict) -> None:
    print(json.dumps(payload, indent=2, ensure_ascii=False))


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Check AI summary claims against source citations")
    parser.add_argument("--version", action="version", version=f"policy-evidence {__version__}")
    parser.add_argument("--config", type=Path, help="Path to a YAML config file")
    subparsers = parser.add_subparsers(dest="command")

    split_parser = subparsers.add_parser("split", help="Split summary text into claims")
    split_parser.add_argument("text", help="Summary text")
    split_parser.set_defaults(func=_split_handler)

    match_parser = subparsers.add_parser("match", help="Score one claim against one quote")
    match_parser.add_argument("claim", help="Claim text")
    match_parser.add_argument("quote", help="Citation quote")
    match_parser.set_defaults(func=_match_handler)

    verify_parser = subparsers.add_parser("verify", help="Verify a summary JSON document")
    verify_parser.add_argument("path", type=Path, help="Summary JSON file with tldr/whatItDoes/... and citations")
    verify_parser.add_argument("--threshold", type=float, help="Minimum score for a supported claim")
    verify_parser.add_argument(
        "--section",
        action="append",
        choices=[loc.value for loc in Location],
        help="Section to verify (repeatable; default from config)",
    )
    verify_parser.add_argument("--format", choices=["json", "markdown"], default="json", dest="output_format")
    verify_parser.set_defaults(func=_verify_handler)

    config_parser = subparsers.add_parser("config", help="Show effective settings")
    config_parser.set_defaults(func=_config_handler)

    return parser


def main(argv: Optional[List[str]] = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)
    if not hasattr(args, "func"):
        parser.print_help()
        return

    try:
        config = load_config(args.config)
        configure_logging(config.logging.level, config.logging.json_output, run_id=get_run_id())
        logger.info("Starting CLI", extra={"command": args.command, "env": config.app.environment})
        args.func(args, config)
    except PolicyEvidenceError as exc:
        _print_json({"error": str(exc)})
        sys.exit(1)


def _split_handler(args: argparse.Namespace, config) -> None:
    claims = split_into_claims(args.text, config.evidence.to_heuristics())
    _print_json({"claims": claims})


def _match_handler(args: argparse.Namespace, config) -> None:
    match = match_claim_to_quote(args.claim, args.quote, config.evidence.to_heuristics())
    _print_json(match.to_dict())


def _threshold_from(value: Optional[float]) -> Optional[float]:
    if value is None:
        return None
    if not 0.0 <= value <= 1.0:
        raise ConfigError(f"--threshold must be between 0 and 1, got {value}")
    return value


def _verify_handler(args: argparse.Namespace, config) -> None:
    threshold = _threshold_from(args.threshold)
    summary = verification_service.load_summary(args.path)
    report = verification_service.verify_summary(
        summary,
        threshold=threshold,
        sections=args.section,
        config=config,
    )
    if args.output_format == "markdown":
        print(render_markdown(report, config.evidence.max_quote_chars))
        return
    _print_json(report.to_dict())


def _config_handler(args: argparse.Namespace, config) -> None:
    _print_json(config.model_dump())


if __name__ == "__main__":
    main()
