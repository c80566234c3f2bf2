#!/usr/bin/env python3
"""
Tile a DNA query with exact substrings of a reference, forward or reverse complement.

The reference and query may be given as arguments; otherwise they are read
interactively from stdin, one line each.

Examples:
  - python align_dna.py ACGTTGCA TGCAAC
  - python align_dna.py --json --no-color ACGTACGT CGTA
  - printf "ACGTTGCA\\nTGCAAC\\n" | python align_dna.py -v
"""

# --- Standard Library Imports ---
from __future__ import annotations
import argparse
import json
import logging
import sys
from typing import Any, Dict, Optional, TextIO

# --- Local Application Imports ---
from dna_tiler.aligner import AlignmentResult, run_alignment
from dna_tiler.config import AlignerConfig, AlignerConfigLoader
from dna_tiler.errors import AlignError, InvalidSymbolError
from dna_tiler.utils.logging_utils import DEFAULT_LOG_DIR, PACKAGE_LOGGER, set_log_level, setup_logger
from dna_tiler.utils.nucleotide_utils import DNA_ALPHABET, find_invalid_symbol

# Set up module logger
logger = logging.getLogger(__name__)

# ANSI color constants
COL_BOLD_BLUE = "\033[1;34m"
COL_BOLD_GREEN = "\033[1;32m"
COL_BOLD_CYAN = "\033[1;36m"
COL_BOLD_MAGENTA = "\033[1;95m"
COL_GREY = "\033[90m"
COL_MAGENTA = "\033[35m"
COL_YELLOW = "\033[33m"
COL_CYAN = "\033[36m"
COL_GREEN = "\033[32m"
COL_RED = "\033[31m"
COL_RESET = "\033[0m"


# --------------------------
# Logging Configuration
# --------------------------
def setup_cli_logging(verbose_level: int, log_file: Optional[str] = None, quiet: bool = False) -> None:
    """
    Configures the package logger from command-line arguments.

    Log records go to stderr (and optionally a file); stdout is reserved for
    the report or the JSON document.

    Parameters
    ----------
    verbose_level : int
        The verbosity level: 0 for WARNING, 1 for INFO, 2 for DEBUG.
    log_file : Optional[str]
        The path to a specific log file. If not provided, a default timestamped
        log file is created in the `var/log/` directory when verbosity is > 0.
    quiet : bool
        Silence log records below CRITICAL; errors are still reported once
        by the CLI itself.
    """
    level_map = {
        0: logging.WARNING,
        1: logging.INFO,
        2: logging.DEBUG,
    }
    log_level = level_map.get(verbose_level, logging.DEBUG)

    should_log_to_file = (verbose_level > 0) or (log_file is not None)

    package_logger = setup_logger(
        PACKAGE_LOGGER,
        level=log_level,
        stream=sys.stderr,
        log_file=log_file,
        enable_file_logging=should_log_to_file,
    )
    if quiet:
        set_log_level(package_logger, logging.CRITICAL)

    if should_log_to_file and log_file is None:
        logger.info(f"Logs will be saved to: {DEFAULT_LOG_DIR.resolve()}")


# --------------------------
# Helpers
# --------------------------
def validate_and_normalize_seq(raw_sequence: str, name: str, auto_uppercase: bool = True) -> str:
    """
    Validates and normalizes a DNA sequence read from the user.

    Surrounding whitespace is stripped and, when `auto_uppercase` is set, the
    sequence is uppercased before the alphabet check.

    Parameters
    ----------
    raw_sequence : str
        The raw input line.
    name : str
        Human-readable sequence name used in messages ("Reference sequence").
    auto_uppercase : bool, optional
        Uppercase the input before validation, by default True.

    Returns
    -------
    str
        The validated uppercase sequence.

    Raises
    ------
    ValueError
        If the sequence is empty.
    InvalidSymbolError
        If a character outside A/C/G/T remains. Lowercase forms of valid
        bases get a hint about automatic conversion.
    """
    logger.debug(f"Validating {name}: {raw_sequence[:50]}{'...' if len(raw_sequence) > 50 else ''}")
    normalized_sequence = raw_sequence.strip()
    if auto_uppercase:
        normalized_sequence = normalized_sequence.upper()

    if not normalized_sequence:
        logger.debug(f"{name} is empty")
        raise ValueError(f"{name} cannot be empty.")

    violation = find_invalid_symbol(normalized_sequence)
    if violation is not None:
        pos, invalid_char = violation
        hint = f"{name}; only A/T/C/G allowed"
        if invalid_char.islower() and invalid_char.upper() in DNA_ALPHABET:
            hint += "; detected lowercase, rerun without --strict-case to auto-convert to uppercase"
        logger.debug(f"{name}: invalid character at position {pos}: '{invalid_char}'")
        raise InvalidSymbolError(invalid_char, position=pos, hint=hint)

    logger.info(f"{name} validated: length={len(normalized_sequence)}")
    return normalized_sequence


def prompt_sequence(step: int, label: str, stream: TextIO, out: TextIO, color: bool) -> str:
    """
    Writes a step banner to `out` and reads one line from `stream`.

    Raises
    ------
    EOFError
        If the stream is exhausted before a line is read.
    """
    print(f"\n{_paint(f'>>> Step {step}/2: Enter {label}', COL_BOLD_GREEN, color)}", file=out)
    print("Enter sequence (A/T/C/G only): ", end="", file=out, flush=True)

    line = stream.readline()
    if not line:
        raise EOFError("Failed to read input")
    return line


def load_config(config_path: Optional[str]) -> AlignerConfig:
    """Loads the YAML configuration, or the bundled defaults when no path is given."""
    logger.info(f"Loading configuration from: {config_path or 'package defaults'}")
    return AlignerConfigLoader().load(yaml_path=config_path)


def _paint(text: str, col: str, color: bool) -> str:
    return f"{col}{text}{COL_RESET}" if color else text


def format_report(result: AlignmentResult, color: bool = True) -> str:
    """
    Renders an alignment as a human-readable, optionally ANSI-colored report.

    Parameters
    ----------
    result : AlignmentResult
        The completed alignment.
    color : bool, optional
        Emit ANSI color codes, by default True.

    Returns
    -------
    str
        The report text, one block per segment.
    """
    lines = [
        _paint("======== Alignment Results ========", COL_BOLD_BLUE, color),
        f"Reference length: {_paint(f'{len(result.reference)} bp', COL_YELLOW, color)}",
        f"Query length: {_paint(f'{len(result.query)} bp', COL_YELLOW, color)}",
        _paint(f"Matched segments: {result.segment_count}", COL_BOLD_CYAN, color),
        "",
    ]

    for seg_num, seg in enumerate(result.segments, start=1):
        matched = seg.matched_sequence(result.reference)
        strand = "Reverse complement" if seg.is_reverse_complement else "Forward"
        ref_range = f"[{_paint(str(seg.ref_start), COL_MAGENTA, color)}-{_paint(str(seg.ref_end), COL_MAGENTA, color)}]"
        query_range = f"[{_paint(str(seg.query_start), COL_MAGENTA, color)}-{_paint(str(seg.query_end), COL_MAGENTA, color)}]"
        lines.extend([
            _paint(f"Segment {seg_num}:", COL_BOLD_MAGENTA, color),
            f"  {_paint('Ref position:', COL_GREY, color)} {ref_range}",
            f"  {_paint('Query position:', COL_GREY, color)} {query_range}",
            f"  {_paint('Strand:', COL_GREY, color)} {_paint(strand, COL_YELLOW, color)}",
            f"  {_paint('Matched sequence:', COL_GREY, color)} {_paint(matched, COL_CYAN, color)}",
            f"  {_paint('Length:', COL_GREY, color)} {_paint(f'{len(matched)} bp', COL_GREEN, color)}",
            "",
        ])

    lines.append(_paint("==========================", COL_BOLD_BLUE, color))
    return "\n".join(lines)


def result_to_json(result: AlignmentResult) -> Dict[str, Any]:
    """Builds the JSON document emitted by ``--json``."""
    segments = []
    for seg in result.segments:
        entry = seg.as_dict()
        entry["matched_sequence"] = seg.matched_sequence(result.reference)
        entry["length"] = seg.length
        segments.append(entry)

    return {
        "reference_length": len(result.reference),
        "query_length": len(result.query),
        "segment_count": result.segment_count,
        "segments": segments,
    }


def _report_error(message: str, as_json: bool, color: bool) -> None:
    if as_json:
        print(json.dumps({"error": message}))
    else:
        print(_paint(f"Error: {message}", COL_RED, color), file=sys.stderr)


# --------------------------
# Command-Line Interface
# --------------------------
def main(argv=None, stdin: Optional[TextIO] = None) -> int:
    """
    Parses command-line arguments, reads and validates both sequences, and prints the alignment.
    """
    # --- Argument Parsing ---
    parser = argparse.ArgumentParser(
        description="Tile a DNA query with the fewest exact reference substrings (forward or reverse complement)."
    )
    parser.add_argument("reference", nargs="?", default=None,
                        help="Reference sequence (A/C/G/T). Read from stdin if omitted.")
    parser.add_argument("query", nargs="?", default=None,
                        help="Query sequence (A/C/G/T). Read from stdin if omitted.")
    parser.add_argument("--config", default=None,
                        help="Path to a YAML config (defaults to package data).")
    parser.add_argument("--json", action="store_true",
                        help="Emit JSON instead of the human-readable report.")
    parser.add_argument("--no-color", action="store_true",
                        help="Disable ANSI colors in the report.")
    parser.add_argument("--strict-case", action="store_true",
                        help="Reject lowercase bases instead of converting them to uppercase.")
    parser.add_argument("--progress", action="store_true",
                        help="Show progress bars while indexing and tiling.")

    # Logging arguments
    parser.add_argument("-v", "--verbose", action="count", default=0,
                        help="Increase verbosity (-v=INFO, -vv=DEBUG)")
    parser.add_argument("--log-file", default=None,
                        help="Path to log file (default: var/log/dna_tiler_TIMESTAMP.log if verbose)")
    parser.add_argument("--quiet", action="store_true",
                        help="Suppress log output; only the result or error is printed")

    cli_args = parser.parse_args(argv)

    # --- Setup ---
    verbose_level = 0 if cli_args.quiet else cli_args.verbose
    setup_cli_logging(verbose_level, cli_args.log_file, quiet=cli_args.quiet)

    try:
        config = load_config(cli_args.config)
    except (OSError, ValueError) as e:
        logger.debug(f"Failed to load config: {e}", exc_info=True)
        _report_error(f"Failed to load config: {e}", cli_args.json, color=False)
        return 2

    if cli_args.no_color or cli_args.json:
        config.color = False
    if cli_args.strict_case:
        config.auto_uppercase = False
    if cli_args.progress:
        config.show_progress = True
    color = config.color

    # --- Input ---
    stream = stdin if stdin is not None else sys.stdin
    # stdout carries only the JSON document in --json mode.
    prompt_out = sys.stderr if cli_args.json else sys.stdout
    try:
        raw_reference = cli_args.reference
        raw_query = cli_args.query
        if raw_reference is None or raw_query is None:
            print(_paint("\n======== DNA Sequence Alignment Tool ========", COL_BOLD_BLUE, color), file=prompt_out)

        if raw_reference is None:
            raw_reference = prompt_sequence(1, "Reference Sequence (long)", stream, prompt_out, color)

        if raw_query is None:
            raw_query = prompt_sequence(2, "Query Sequence (short)", stream, prompt_out, color)

        reference = validate_and_normalize_seq(raw_reference, "Reference sequence", config.auto_uppercase)
        query = validate_and_normalize_seq(raw_query, "Query sequence", config.auto_uppercase)
    except (EOFError, ValueError) as e:
        logger.info(f"Input rejected: {e}")
        _report_error(str(e), cli_args.json, color)
        return 2

    # --- Alignment ---
    try:
        result = run_alignment(reference, query, config)
    except AlignError as e:
        logger.info(f"Alignment failed: {e}")
        _report_error(str(e), cli_args.json, color)
        return 1

    # --- Output ---
    if cli_args.json:
        print(json.dumps(result_to_json(result), indent=2))
    else:
        print()
        print(format_report(result, color=color))

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
