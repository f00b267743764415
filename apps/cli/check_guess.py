# apps/cli/check_guess.py
"""
CLI: score one guess against an answer.

Prints the feedback pattern (C = correct, P = present, A = absent) and a
solved flag. Errors print their kind and exit with status 1.

Usage:
    python -m apps.cli.check_guess allee --answer apple --wordlist allowed_5.txt
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional

from woordle.config import DictionaryConfig
from woordle.dictionary import WordListDictionary, WordsApiDictionary
from woordle.engine import is_solved, pattern
from woordle.service import WordService


def main(argv: Optional[List[str]] = None) -> int:
    ap = argparse.ArgumentParser(description="woordle — score a guess against an answer")
    ap.add_argument("guess", help="the guessed word")
    ap.add_argument("--answer", required=True, help="the secret answer word")
    ap.add_argument("--wordlist", help="offline word list (one per line) instead of WordsAPI")
    ap.add_argument("--timeout", type=float, help="seconds allowed for the dictionary lookup")
    ap.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    args = ap.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    config = DictionaryConfig.from_env()
    try:
        if args.wordlist:
            gateway = WordListDictionary.from_file(args.wordlist)
        else:
            gateway = WordsApiDictionary(config)
    except (ValueError, FileNotFoundError) as e:
        print(f"error: {e}", file=sys.stderr)
        return 2

    svc = WordService(gateway, config)
    res = svc.handle_guess(list(args.guess), args.answer, timeout=args.timeout)
    if not res.ok:
        print(f"error [{res.kind.value}]: {res.message}", file=sys.stderr)
        return 1

    print(f"{pattern(res.value)} solved={is_solved(res.value)}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
