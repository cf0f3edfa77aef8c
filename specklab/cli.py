"""Command line entry points.

``speck-tool``      encrypt / decrypt hex strings or files
``speck-selftest``  known-answer, roundtrip and avalanche checks
"""
from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from specklab.cipher.builder import build_cipher
from specklab.cipher.errors import SpeckError
from specklab.cipher.variants import Mode, Padding, Variant, list_variants
from specklab.config import load_settings
from specklab.evaluation.avalanche import compute_avalanche
from specklab.evaluation.report import EvaluationReport
from specklab.evaluation.roundtrip import run_all_variants
from specklab.evaluation.vectors import run_known_answer_tests
from specklab.utils.repro import make_report_dir, set_global_seed, write_json

logger = logging.getLogger(__name__)


def _configure_logging(verbose: bool, default_level: str) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else getattr(logging, default_level, logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )


def _cli_progress(message: str, current: int, total: int) -> None:
    """Print progress to stderr."""
    pct = (current / total * 100) if total > 0 else 0
    print(f"  [{current + 1}/{total}] ({pct:.0f}%) {message}", file=sys.stderr)


def _parse_hex(value: str, what: str) -> bytes:
    try:
        return bytes.fromhex(value.replace(" ", ""))
    except ValueError as exc:
        raise SpeckError(f"{what} is not valid hex: {exc}") from exc


def build_tool_parser() -> argparse.ArgumentParser:
    settings = load_settings()
    parser = argparse.ArgumentParser(
        description="Encrypt or decrypt data with a Speck block cipher",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Examples:\n"
            "  speck-tool encrypt --key 000102030405060708090a0b0c0d0e0f --hex 206d616465206974206571756976616c --padding none\n"
            "  speck-tool decrypt --variant speck64_96 --key 0001020308090a0b10111213 --in secret.bin --out plain.txt\n"
        ),
    )
    parser.add_argument("command", choices=["encrypt", "decrypt"])
    parser.add_argument(
        "--variant", default=settings.default_variant.value,
        choices=[v.value for v in list_variants()],
        help=f"Speck variant (default: {settings.default_variant.value})",
    )
    parser.add_argument(
        "--mode", default=settings.default_mode.value,
        choices=[m.value for m in Mode],
        help=f"Chaining mode (default: {settings.default_mode.value})",
    )
    parser.add_argument(
        "--padding", default=settings.default_padding.value,
        choices=[p.value for p in Padding],
        help=f"Padding scheme (default: {settings.default_padding.value})",
    )
    parser.add_argument("--key", required=True, help="Key as hex")
    source = parser.add_mutually_exclusive_group(required=True)
    source.add_argument("--hex", dest="hex_input", help="Input as hex")
    source.add_argument("--in", dest="in_file", help="Read raw input bytes from file")
    parser.add_argument("--out", dest="out_file", help="Write raw output bytes to file instead of hex to stdout")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable verbose logging")
    return parser


def tool_main(argv: Optional[List[str]] = None) -> int:
    settings = load_settings()
    args = build_tool_parser().parse_args(argv)
    _configure_logging(args.verbose, settings.log_level)

    try:
        key = _parse_hex(args.key, "key")
        if args.hex_input is not None:
            data = _parse_hex(args.hex_input, "input")
        else:
            data = Path(args.in_file).read_bytes()

        cipher = build_cipher(Variant(args.variant), key)
        if args.command == "encrypt":
            result = cipher.encrypt(data, args.mode, args.padding)
        else:
            result = cipher.decrypt(data, args.mode, args.padding)

        logger.info("%sed %d bytes -> %d bytes", args.command.capitalize(), len(data), len(result))
        if args.out_file:
            Path(args.out_file).write_bytes(result)
        else:
            print(result.hex())
    except (SpeckError, OSError) as exc:
        print(f"ERROR: {exc}", file=sys.stderr)
        return 1
    return 0


def build_selftest_parser() -> argparse.ArgumentParser:
    settings = load_settings()
    parser = argparse.ArgumentParser(description="Speck self-test: NSA vectors, roundtrip and avalanche")
    parser.add_argument(
        "--roundtrip-vectors", type=int, default=settings.roundtrip_vectors,
        help=f"Roundtrip vectors per configuration (default: {settings.roundtrip_vectors})",
    )
    parser.add_argument(
        "--avalanche-trials", type=int, default=settings.avalanche_trials,
        help=f"Avalanche trials per variant and input (default: {settings.avalanche_trials})",
    )
    parser.add_argument(
        "--seed", type=int, default=settings.global_seed,
        help=f"Base random seed (default: {settings.global_seed})",
    )
    parser.add_argument(
        "--output-dir", type=str, default=settings.reports_dir,
        help=f"Output directory (default: {settings.reports_dir})",
    )
    parser.add_argument("--no-save", action="store_true", help="Do not write report.json")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable verbose logging")
    return parser


def selftest_main(argv: Optional[List[str]] = None) -> int:
    settings = load_settings()
    args = build_selftest_parser().parse_args(argv)
    _configure_logging(args.verbose, settings.log_level)
    set_global_seed(args.seed)

    report = EvaluationReport()
    report.known_answer_results = run_known_answer_tests()
    report.roundtrip_results = run_all_variants(
        num_vectors=args.roundtrip_vectors,
        seed=args.seed,
        progress_callback=_cli_progress,
    )
    for variant in list_variants():
        for input_type in ("plaintext", "key"):
            report.avalanche_results.append(compute_avalanche(
                variant, input_type=input_type, trials=args.avalanche_trials, seed=args.seed,
            ))

    print(report.to_summary())

    if not args.no_save:
        out_dir = make_report_dir(args.output_dir)
        write_json(out_dir / "report.json", report.to_dict())
        print(f"\nReport saved to: {out_dir / 'report.json'}")

    if not report.all_pass:
        logger.error("Self-test failed: %s", ", ".join(report.failing()))
        return 1
    return 0
