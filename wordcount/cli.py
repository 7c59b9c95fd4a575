import argparse
import json
import sys
from pathlib import Path
from typing import Dict, List, Optional, Tuple

from wordcount.config import OUTPUT_FORMATS, load_config
from wordcount.log import setup_logger
from wordcount.processor import CountOption, DecodingError, count

MODES = ["chars", "words", "lines"]


def sort_table(freqs: Dict[str, int], top: int = 0) -> List[Tuple[str, int]]:
    """Most frequent first, ties broken by token. `top` > 0 truncates."""
    rows = sorted(freqs.items(), key=lambda kv: (-kv[1], kv[0]))
    if top > 0:
        rows = rows[:top]
    return rows


def render(rows: List[Tuple[str, int]], output_format: str = "text") -> str:
    if output_format == "json":
        return json.dumps(dict(rows), ensure_ascii=False, indent=2)
    return "\n".join(f"{n}\t{token}" for token, n in rows)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="wordcount",
        description="Count how often each char, word, or line occurs in UTF-8 text.",
    )
    parser.add_argument(
        "--file",
        type=Path,
        help="Path to the input text file. Reads standard input when omitted.",
    )
    parser.add_argument(
        "--mode",
        choices=MODES,
        help="Counting mode: chars, words, or lines (default: words).",
    )
    parser.add_argument(
        "--top",
        type=int,
        help="Only print the N most frequent tokens (0 prints all).",
    )
    parser.add_argument(
        "--format",
        dest="output_format",
        choices=OUTPUT_FORMATS,
        help="Output format: text or json.",
    )
    parser.add_argument(
        "--log-level",
        help="Logging level (DEBUG, INFO, WARNING, ERROR).",
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.top is not None and args.top < 0:
        parser.error(f"--top must be >= 0, got {args.top}")
    logger = setup_logger("wordcount", level=args.log_level or "WARNING")

    try:
        cfg = load_config()
    except ValueError as exc:
        logger.error(f"Invalid configuration: {exc}")
        return 1

    if args.mode:
        cfg.mode = args.mode
    if args.top is not None:
        cfg.top = args.top
    if args.output_format:
        cfg.output_format = args.output_format
    if args.log_level:
        cfg.log_level = args.log_level
    logger = setup_logger("wordcount", level=cfg.log_level)

    option = cfg.count_option()
    logger.debug(f"mode={option.value} top={cfg.top} format={cfg.output_format}")

    try:
        if args.file is None:
            freqs = count(sys.stdin.buffer, option)
        else:
            if not args.file.is_file():
                logger.error(f"File not found: {args.file}")
                return 1
            # binary mode: decoding and line splitting are left to count()
            with args.file.open("rb") as f:
                freqs = count(f, option)
    except DecodingError as exc:
        logger.error(f"{args.file or '<stdin>'}: {exc}")
        return 1
    except OSError as exc:
        logger.error(f"Error reading file: {exc}")
        return 1

    rows = sort_table(freqs, cfg.top)
    if rows or cfg.output_format == "json":
        print(render(rows, cfg.output_format))
    logger.info(f"{len(freqs)} distinct tokens")
    return 0
