"""
Word Solver – list the dictionary words that can be spelled from a set of letters.

Run:
    python word_solver.py --dictionary Dic.txt --input input.txt --output output.txt
The input file's first line holds the available letters (spaces are ignored).
The output file gets the match count followed by one word per line.
"""

import argparse
import re
import sys

from trie import Trie, letter_counts

WORD_PATTERN = re.compile(r"[a-z]+")


def build_tree_from_list(trie: Trie, path: str) -> int:
    """
    Insert every whitespace-separated token of a dictionary file, in file order.

    Tokens that are not plain lowercase a-z words are skipped with a warning.

    Returns the number of tokens inserted.
    """
    inserted = 0
    with open(path, "r", encoding="utf-8") as f:
        for lineno, line in enumerate(f, start=1):
            for token in line.split():
                if not WORD_PATTERN.fullmatch(token):
                    print(f"[WARN] {path}:{lineno}: skipping {token!r}", file=sys.stderr)
                    continue
                trie.insert(token)
                inserted += 1
    return inserted


def read_letters(path: str) -> str:
    """Return the first line of the input file, or "" if it is empty."""
    with open(path, "r", encoding="utf-8") as f:
        return f.readline().rstrip("\r\n")


def format_results(words: list[str]) -> str:
    # count line, then one word per line with no newline after the last
    return f"{len(words)}\n" + "\n".join(words)


def solve(trie: Trie, input_path: str, output_path: str) -> list[str]:
    """Read the letters, find every buildable word and write the report."""
    counts = letter_counts(read_letters(input_path))
    words = trie.words_from_letters(counts)
    with open(output_path, "w", encoding="utf-8") as f:
        f.write(format_results(words))
    return words


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Find dictionary words buildable from a set of letters")
    parser.add_argument("--dictionary", "-d", default="Dic.txt", help="Dictionary file (default: Dic.txt)")
    parser.add_argument("--input", "-i", default="input.txt", help="File whose first line holds the letters (default: input.txt)")
    parser.add_argument("--output", "-o", default="output.txt", help="File to write results to (default: output.txt)")
    return parser.parse_args(argv)


def main(argv=None) -> int:
    args = parse_args(argv)
    trie = Trie()
    try:
        loaded = build_tree_from_list(trie, args.dictionary)
        print(f"[INFO] Loaded {loaded} words from {args.dictionary}")
        words = solve(trie, args.input, args.output)
    except (OSError, ValueError) as e:
        print(f"[ERROR] {e}", file=sys.stderr)
        return 1
    print(f"[INFO] Wrote {len(words)} matches to {args.output}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
