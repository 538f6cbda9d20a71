"""
Download a word list and write a clean copy.

What it does:
- Downloads the URL (plain text, or an HTML page whose visible text lists words).
- Keeps lowercase a–z words of exact length N, in page order, without repeats.
- Writes one word per line.

Keep the page order unless you mean to change every future daily word:
the selector indexes into the list as written.

Usage:
    python -m script.fetch_wordlist --url https://example.org/words.txt --out data/words_5.txt
"""

import argparse

from packages.datasets import fetch_words, write_words


def main():
    ap = argparse.ArgumentParser(description="Fetch a word list for dailyword")
    ap.add_argument("--url", required=True)
    ap.add_argument("--out", default="data/words_5.txt")
    ap.add_argument("--N", type=int, default=5, help="word length")
    ap.add_argument("--timeout", type=float, default=30.0)
    args = ap.parse_args()

    words = fetch_words(args.url, args.N, timeout=args.timeout)
    write_words(words, args.out)
    print(f"Wrote {len(words)} words -> {args.out}")


if __name__ == "__main__":
    main()
