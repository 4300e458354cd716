#!/usr/bin/env python3
import argparse
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional

from config_loader import load_effective_config
from logging_helper import log_debug, log_error, log_info, log_warn, set_log_level
from perf_metrics import RunMetrics, measure
from piece_io import read_pieces, save_sequence
from sequence_ops import AssemblyResult, assemble


def _build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        description=(
            "Order overlapping 6-digit pieces into one chain (last two digits of a piece "
            "equal the first two of the next) and merge them into a single number. "
            "Options default to config.default.yaml / config.yaml in --config-dir."
        )
    )
    ap.add_argument("--input", default=None, help="Path to the .txt piece list (one 6-digit piece per line)")
    ap.add_argument("--output", default=None, help="Where to write the sorted pieces when the result is valid")
    ap.add_argument("--config-dir", default=None, help="Directory holding config.default.yaml / config.yaml (default: cwd)")
    ap.add_argument("--no-metrics", action="store_true", help="Do not report time, CPU and memory usage")
    ap.add_argument("--debug", action="store_true", help="Enable debug logging")
    ap.add_argument("--trace", action="store_true", help="Enable trace logging (each new longest path and every repair splice)")
    return ap


def _resolve_level(cfg: Dict[str, Any], args: argparse.Namespace) -> str:
    level = "info"
    if isinstance(cfg.get("logging"), dict):
        level = str(cfg["logging"].get("level") or "info").strip().lower()
    if args.debug:
        level = "debug"
    if args.trace:
        level = "trace"
    return level


def _metrics_enabled(cfg: Dict[str, Any], args: argparse.Namespace) -> bool:
    if args.no_metrics:
        return False
    section = cfg.get("metrics")
    if isinstance(section, dict):
        return bool(section.get("enabled", True))
    return True


def report(result: AssemblyResult, metrics: Optional[RunMetrics] = None) -> None:
    sequence = result.sequence
    valid, error_index = result.report

    log_info(f"Total pieces: {len(sequence)}")
    log_info(f"Sequence is valid: {valid}")
    if not valid:
        log_warn(f"Error at index {error_index}: {sequence[error_index]} -> {sequence[error_index + 1]}")
    else:
        log_info("The sequence is fully valid.")
    if result.dropped:
        log_info(f"Pieces left out: {len(result.dropped)}")
    log_info(f"Final sequence: {result.merged}")

    if metrics is not None:
        log_info(f"Execution time: {metrics.elapsed_ms:.2f} ms")
        log_info(f"CPU time used: {metrics.cpu_seconds:.3f} seconds")
        log_info(f"Memory used: {metrics.memory_mb:.2f} MB")


def main(argv: Optional[List[str]] = None) -> int:
    args = _build_parser().parse_args(argv)

    config_dir = Path(args.config_dir) if args.config_dir else Path.cwd()
    try:
        cfg, has_local = load_effective_config(config_dir)
    except (ValueError, OSError) as e:
        log_error(f"Config error: {e}")
        return 1

    set_log_level(_resolve_level(cfg, args))
    log_debug(f"Config dir: {config_dir} | local override: {has_local}")

    input_path = Path(args.input or cfg.get("input_path") or "source.txt")
    output_path = Path(args.output or cfg.get("output_path") or "sortedlist.txt")
    with_metrics = _metrics_enabled(cfg, args)

    try:
        with measure() as metrics:
            pieces = read_pieces(input_path)
            result = assemble(pieces)
    except (ValueError, OSError) as e:
        log_error(str(e))
        return 1

    report(result, metrics if with_metrics else None)

    if result.report.valid:
        try:
            save_sequence(result.sequence, output_path)
        except OSError as e:
            log_error(f"Could not save sequence: {e}")
            return 1
    else:
        log_warn("The sequence is invalid. Not saving to file.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
