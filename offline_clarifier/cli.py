from __future__ import annotations

import argparse
import json
import logging
import sys
from dataclasses import asdict
from pathlib import Path
from typing import List, Optional, Sequence

from .keypoints import extract_key_points
from .pdf_utils import DocumentLoadError, load_document
from .pipeline import ClarifyError, ClarifyOptions, clarify, result_to_dict, run_pipeline
from .readability import compute_readability
from .tiers import ComplexityTier, Domain


logger = logging.getLogger(__name__)


def _add_text_args(p: argparse.ArgumentParser) -> None:
    p.add_argument("text", nargs="?", help="Text to process (default: read stdin).")
    p.add_argument("--file", type=Path, help="Read text from a .txt/.md/.pdf file instead.")


def _add_level_args(p: argparse.ArgumentParser) -> None:
    p.add_argument("--domain", choices=[d.value for d in Domain], default=Domain.AUTO.value)
    p.add_argument("--level", choices=[t.value for t in ComplexityTier], default=ComplexityTier.STANDARD.value)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="offline-clarifier",
        description="Rule-based plain-language rewriting, key points and readability (offline).",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging.")
    sub = parser.add_subparsers(dest="command", required=True)

    p_simplify = sub.add_parser("simplify", help="Rewrite text for a reading level.")
    _add_text_args(p_simplify)
    _add_level_args(p_simplify)
    p_simplify.add_argument("--key-points", action="store_true", help="Also print key points.")
    p_simplify.add_argument("--json", action="store_true", help="Print the full result as JSON.")

    p_read = sub.add_parser("readability", help="Grade-level metrics for text.")
    _add_text_args(p_read)
    p_read.add_argument("--json", action="store_true")

    p_kp = sub.add_parser("keypoints", help="Extract up to five key sentences.")
    _add_text_args(p_kp)

    p_run = sub.add_parser("run", help="Clarify a document and write outputs to a directory.")
    p_run.add_argument("input", type=Path)
    p_run.add_argument("out_dir", type=Path)
    _add_level_args(p_run)
    p_run.add_argument("--max-pages", type=int, default=0, help="PDF page limit (0 = all).")

    return parser


def _read_text(args: argparse.Namespace) -> str:
    if args.file is not None:
        return load_document(args.file)
    if args.text is not None:
        return args.text
    return sys.stdin.read()


def _print_points(points: List[str]) -> None:
    for p in points:
        print(f"- {p}")


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        if args.command == "simplify":
            opts = ClarifyOptions(domain=args.domain, tier=args.level, include_key_points=args.key_points or args.json)
            result = clarify(_read_text(args), opts)
            if args.json:
                print(json.dumps(result_to_dict(result), ensure_ascii=False, indent=2))
                return 0
            print(result.clarified)
            if args.key_points and result.key_points:
                print()
                _print_points(result.key_points)
            return 0

        if args.command == "readability":
            metrics = compute_readability(_read_text(args))
            if args.json:
                print(json.dumps(asdict(metrics), indent=2))
            else:
                print(f"Grade level: {metrics.grade_level} ({metrics.complexity_label})")
                print(f"Reading age: {metrics.reading_age}")
                print(f"Sentences: {metrics.sentence_count}  Words: {metrics.word_count}  Syllables: {metrics.syllable_count}")
            return 0

        if args.command == "keypoints":
            _print_points(extract_key_points(_read_text(args)))
            return 0

        if args.command == "run":
            outputs = run_pipeline(
                args.input,
                args.out_dir,
                ClarifyOptions(domain=args.domain, tier=args.level),
                max_pages=(args.max_pages or None),
            )
            print(outputs.clarified_path)
            print(outputs.key_points_path)
            print(outputs.analysis_json_path)
            return 0
    except (ClarifyError, DocumentLoadError, FileNotFoundError) as e:
        logger.error("%s", e)
        return 2

    return 1
