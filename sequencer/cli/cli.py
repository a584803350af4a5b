"""Sequencer command-line interface."""

from __future__ import annotations

import argparse
import logging
from pathlib import Path
from typing import Any

from sequencer.core.fragment import Fragment
from sequencer.core.results import AssemblyResults
from sequencer.engine import Assembler
from sequencer.utils.config import SCAN_MODES, TIE_BREAKS, AssemblerConfig, load_config
from sequencer.utils.logging import set_verbosity
from sequencer.utils.validation import ensure_fragments, load_fragments

_LOGGER = logging.getLogger(__name__)

DEMO_FRAGMENT = "GCATT"
DEMO_PROBE = "GCATTGACAT"
DEMO_COPIES = 5


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Greedy overlap assembly of DNA fragments")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log every merge")
    subparsers = parser.add_subparsers(dest="command")

    # SUPPRESS keeps a subcommand from resetting a top-level -v
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument(
        "-v", "--verbose", action="store_true", default=argparse.SUPPRESS, help="Log every merge"
    )

    asm_parser = subparsers.add_parser(
        "assemble", parents=[common], help="Assemble fragments into contigs"
    )
    asm_parser.add_argument("fragments", nargs="*", help="Fragments over G, C, A, T")
    asm_parser.add_argument(
        "-i", "--input", type=Path, help="Text file with one fragment per line, or FASTA"
    )
    asm_parser.add_argument("-c", "--config", type=Path, help="YAML/JSON assembler config")
    asm_parser.add_argument("--tie-break", choices=sorted(TIE_BREAKS), default=None)
    asm_parser.add_argument("--min-overlap", type=int, default=None)
    asm_parser.add_argument("--scan-mode", choices=sorted(SCAN_MODES), default=None)
    asm_parser.add_argument("--workers", type=int, default=None, help="Workers for pooled scans")
    asm_parser.add_argument("--max-merges", type=int, default=None)
    asm_parser.add_argument(
        "-o", "--output", type=Path, help="Write results to a .json or .csv file"
    )

    subparsers.add_parser("demo", parents=[common], help="Assemble five copies of GCATT")

    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    set_verbosity(args.verbose)

    if args.command == "assemble":
        try:
            return _run_assemble(args)
        except (ValueError, OSError) as exc:
            _LOGGER.error("%s", exc)
            return 2
    elif args.command == "demo":
        return _run_demo()

    parser.print_help()
    return 0


def _run_assemble(args: argparse.Namespace) -> int:
    config = _build_config(args)
    fragments = ensure_fragments(args.fragments)
    if args.input is not None:
        fragments.extend(load_fragments(args.input))
    if not fragments:
        raise ValueError("No fragments given; pass them as arguments or with --input")

    _LOGGER.info("Assembling %d fragments", len(fragments))
    results = Assembler(fragments, config=config).assemble_all()
    _print_results(results)

    if args.output is not None:
        if args.output.suffix.lower() == ".csv":
            target = results.export_csv(args.output)
        else:
            target = results.export_json(args.output)
        _LOGGER.info("Wrote results to %s", target)
    return 0


def _build_config(args: argparse.Namespace) -> AssemblerConfig:
    data: dict[str, Any] = {}
    if args.config is not None:
        data.update(load_config(args.config))
    overrides = {
        "tie_break": args.tie_break,
        "min_overlap": args.min_overlap,
        "scan_mode": args.scan_mode,
        "num_workers": args.workers,
        "max_merges": args.max_merges,
    }
    data.update({key: value for key, value in overrides.items() if value is not None})
    return AssemblerConfig.from_mapping(data)


def _print_results(results: AssemblyResults) -> None:
    for fragment in results.fragments:
        print(fragment)
    print(f"state: {results.state.value} ({len(results.fragments)} fragment(s))")


def _run_demo() -> int:
    pool: list[Fragment] = []
    probe = Fragment(DEMO_PROBE)
    for _ in range(DEMO_COPIES):
        fragment = Fragment(DEMO_FRAGMENT)
        print(fragment.overlap_with(probe))
        pool.append(fragment)

    results = Assembler(pool).assemble_all()
    _print_results(results)
    print("done")
    return 0
