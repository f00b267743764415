# apps/cli/random_word.py
"""
CLI: fetch random answer words.

This script:
  1) Builds a dictionary gateway (WordsAPI from the environment, or an
     offline word list with --wordlist).
  2) Acquires --count normalized words of --length letters, with a live
     progress indicator.
  3) Prints them, or writes them one per line to --out.

Usage:
    python -m apps.cli.random_word --length 5 --count 20 --out words_5.txt
    python -m apps.cli.random_word --wordlist allowed_5.txt --seed 7
"""

from __future__ import annotations

import argparse
import logging
import sys
import time
from typing import List, Optional

from tqdm import tqdm

from woordle.config import DictionaryConfig
from woordle.datasets import write_words
from woordle.dictionary import DEFAULT_WORD_LENGTH, WordListDictionary, WordsApiDictionary, acquire_random_word
from woordle.errors import WoordleError


def build_gateway(args, config: DictionaryConfig):
    if args.wordlist:
        return WordListDictionary.from_file(args.wordlist, seed=args.seed)
    return WordsApiDictionary(config)


def main(argv: Optional[List[str]] = None) -> int:
    ap = argparse.ArgumentParser(description="woordle — fetch random answer words")
    ap.add_argument("--length", type=int, default=DEFAULT_WORD_LENGTH, help="word length (1-15)")
    ap.add_argument("--count", type=int, default=1, help="how many words to fetch")
    ap.add_argument("--wordlist", help="offline word list (one per line) instead of WordsAPI")
    ap.add_argument("--seed", type=int, help="RNG seed for --wordlist picks")
    ap.add_argument("--timeout", type=float, help="overall seconds allowed per word")
    ap.add_argument("--out", help="write words to this file instead of stdout")
    ap.add_argument(
        "--progress",
        choices=["auto", "bar", "plain", "off"],
        default="auto",
        help="Show run progress (auto=bar on a terminal, else plain text)."
    )
    ap.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    args = ap.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    config = DictionaryConfig.from_env()
    try:
        gateway = build_gateway(args, config)
    except (ValueError, FileNotFoundError) as e:
        print(f"error: {e}", file=sys.stderr)
        return 2

    mode = args.progress
    if mode == "auto":
        mode = "bar" if sys.stderr.isatty() else "plain"
    if args.count <= 1:
        mode = "off"

    iterator = range(1, args.count + 1)
    if mode == "bar":
        iterator = tqdm(iterator, ncols=80, desc="Fetching", unit="word")

    words: List[str] = []
    start = time.time()
    for idx in iterator:
        try:
            words.append(acquire_random_word(gateway, args.length,
                                             max_attempts=config.max_attempts,
                                             timeout=args.timeout))
        except WoordleError as e:
            if mode == "plain":
                sys.stderr.write("\n")
            print(f"error [{e.kind.value}]: {e.message}", file=sys.stderr)
            return 1

        if mode == "plain":
            elapsed = time.time() - start
            sys.stderr.write(f"\r[{idx}/{args.count}] elapsed {elapsed:6.1f}s")
            sys.stderr.flush()

    if mode == "plain":
        sys.stderr.write("\n"); sys.stderr.flush()

    if args.out:
        print(f"Wrote {len(words)} word(s) -> {write_words(words, args.out)}")
    else:
        for w in words:
            print(w)
    return 0


if __name__ == "__main__":
    sys.exit(main())
