"""Generate files of random numbers or random lowercase words for benchmarking."""

from __future__ import annotations

import argparse
import random
import string
import sys
from pathlib import Path
from typing import Optional, Sequence, Union

PathLike = Union[str, Path]

DEFAULT_COUNT = 2_000_000
DEFAULT_MAX_VALUE = 2_000_000
DEFAULT_MAX_WORD_LENGTH = 20
MIN_WORD_LENGTH = 3
WORD_BUFFER = 100

NUMBERS_FILE = "data_angka.txt"
WORDS_FILE = "data_kata.txt"


def random_word(length: int, rng: Optional[random.Random] = None) -> str:
    """Return ``length`` random lowercase ASCII letters."""
    rng = rng or random.Random()
    return "".join(rng.choice(string.ascii_lowercase) for _ in range(length))


def generate_numbers(
    path: PathLike, count: int, max_value: int, rng: Optional[random.Random] = None
) -> None:
    """Write ``count`` integers in ``[0, max_value)``, one per line."""
    if max_value <= 0:
        raise ValueError("max_value must be positive")
    rng = rng or random.Random()
    with open(path, "w", encoding="ascii") as fh:
        fh.writelines(f"{rng.randrange(max_value)}\n" for _ in range(count))


def generate_words(
    path: PathLike, count: int, max_word_length: int, rng: Optional[random.Random] = None
) -> None:
    """Write ``count`` words whose length lies in ``[3, max_word_length)``."""
    if max_word_length <= MIN_WORD_LENGTH:
        raise ValueError(f"max_word_length must exceed {MIN_WORD_LENGTH}")
    if max_word_length > WORD_BUFFER:
        raise ValueError(f"max_word_length must not exceed {WORD_BUFFER}")
    rng = rng or random.Random()
    span = max_word_length - MIN_WORD_LENGTH
    with open(path, "w", encoding="ascii") as fh:
        fh.writelines(
            f"{random_word(rng.randrange(span) + MIN_WORD_LENGTH, rng)}\n"
            for _ in range(count)
        )


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Generate random benchmark data.")
    parser.add_argument("kind", choices=("angka", "kata"), help="numbers or words")
    parser.add_argument("--output", type=Path, default=None)
    parser.add_argument("--count", type=int, default=DEFAULT_COUNT)
    parser.add_argument("--max", dest="maximum", type=int, default=None)
    parser.add_argument("--seed", type=int, default=None)
    args = parser.parse_args(argv)

    rng = random.Random(args.seed)
    try:
        if args.kind == "angka":
            generate_numbers(
                args.output or Path(NUMBERS_FILE),
                args.count,
                args.maximum if args.maximum is not None else DEFAULT_MAX_VALUE,
                rng,
            )
        else:
            generate_words(
                args.output or Path(WORDS_FILE),
                args.count,
                args.maximum if args.maximum is not None else DEFAULT_MAX_WORD_LENGTH,
                rng,
            )
    except OSError as exc:
        print(f"File tidak dapat dibuka: {exc.strerror}", file=sys.stderr)
        return 1
    except ValueError as exc:
        print(str(exc), file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())