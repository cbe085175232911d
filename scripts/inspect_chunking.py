#!/usr/bin/env python3
"""
Ad-hoc CLI to inspect chunk boundaries for the different split modes.

Example:
    python scripts/inspect_chunking.py --text-file sample.txt --mode words --size 120 --strategy hard
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import List, Optional

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.append(str(ROOT))

from textchunker.chunkers import TextChunker
from textchunker.core.config import ChunkerConfig


LOGGER = logging.getLogger("inspect_chunking")


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Inspect chunking output for a document.")
    parser.add_argument("--text-file", required=True, help="Path to a UTF-8 text file.")
    parser.add_argument("--mode", choices=["words", "chars", "lines"], default="words")
    parser.add_argument("--size", type=int, default=300, help="Words, characters or lines per chunk.")
    parser.add_argument("--strategy", choices=["soft", "hard"], help="Override TEXTCHUNKER_STRATEGY.")
    parser.add_argument("--locale", help="Override TEXTCHUNKER_LOCALE.")
    parser.add_argument("--min-chunk-size", type=int, default=1)
    parser.add_argument("--collapse-whitespace", action="store_true", help="Collapse internal whitespace runs.")
    parser.add_argument("--ignore-sentences", action="store_true", help="Plain fixed-size slicing.")
    parser.add_argument("--keep-empty-lines", action="store_true", help="Line mode: keep blank lines.")
    parser.add_argument("--no-spacy", action="store_true", help="Force the regex sentence detector.")
    parser.add_argument("--debug", action="store_true", help="Log chunk summaries at DEBUG level, overriding LOG_LEVEL.")
    return parser.parse_args(argv)


def build_config(args: argparse.Namespace) -> ChunkerConfig:
    cfg = ChunkerConfig.from_environment()
    if args.strategy:
        cfg.default_strategy = args.strategy
    if args.locale:
        cfg.default_locale = args.locale
    if args.no_spacy:
        cfg.use_locale_segmenter = False
    if args.debug:
        cfg.debug_chunking = True
    return cfg


def resolve_log_level(name: str) -> int:
    level = logging.getLevelName(str(name).strip().upper())
    return level if isinstance(level, int) else logging.INFO


def run_chunker(chunker: TextChunker, text: str, args: argparse.Namespace) -> List[str]:
    if args.mode == "lines":
        return chunker.split_by_lines(text, args.size, preserve_empty_lines=args.keep_empty_lines)
    options = {
        "preserve_whitespace": not args.collapse_whitespace,
        "min_chunk_size": args.min_chunk_size,
        "respect_sentence_boundaries": not args.ignore_sentences,
    }
    if args.mode == "chars":
        return chunker.split_by_characters(text, args.size, **options)
    return chunker.split_by_words(text, args.size, **options)


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    cfg = build_config(args)
    level = logging.DEBUG if args.debug else resolve_log_level(cfg.log_level)
    logging.basicConfig(level=level, format="%(levelname)s: %(message)s")
    # basicConfig is a no-op once the root logger has handlers.
    logging.getLogger().setLevel(level)
    text = Path(args.text_file).read_text(encoding="utf-8")
    chunker = TextChunker(cfg=cfg)
    chunks = run_chunker(chunker, text, args)

    print(f"Mode: {args.mode} | Size: {args.size} | Strategy: {cfg.default_strategy} | "
          f"Locale: {chunker.locale} | Segmenter: {chunker.detector.segmenter.name}")
    if args.mode == "words":
        stats = chunker.get_chunking_stats(
            text,
            args.size,
            preserve_whitespace=not args.collapse_whitespace,
            min_chunk_size=args.min_chunk_size,
            respect_sentence_boundaries=not args.ignore_sentences,
        )
        print(f"Stats: {json.dumps(stats.to_dict())}")
    else:
        print(f"Chunks: {len(chunks)}")
    print("-" * 80)
    for idx, chunk in enumerate(chunks):
        snippet = chunk[:80].replace("\n", " ")
        print(f"[{idx:02}] chars={len(chunk)} words={len(chunk.split())}")
        print(f"      {snippet}...")
    LOGGER.debug("Inspected %d chunks from %s", len(chunks), args.text_file)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
