"""Load benchmark data, run every sorting algorithm and report time and memory."""

from __future__ import annotations

import argparse
import re
import time
import tracemalloc
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Callable, Iterable, Iterator, List, Optional, Sequence, Union

from sortbench.sorting import (
    WordSum,
    bubble_sort,
    insertion_sort,
    merge_sort,
    quick_sort,
    selection_sort,
    shell_sort,
)

WORD_SUM_SIZE = 16
SAMPLE_SIZES = (10_000, 50_000, 100_000, 250_000, 500_000, 1_000_000, 1_500_000, 2_000_000)

SortFunc = Callable[[List[WordSum]], None]

ALGORITHMS = (
    ("Merge Sort", merge_sort),
    ("Quick Sort", quick_sort),
    ("Shell Sort", shell_sort),
    ("Insertion Sort", insertion_sort),
    ("Bubble Sort", bubble_sort),
    ("Selection Sort", selection_sort),
)

_INTEGER = re.compile(r"[+-]?\d+")


class DataKind(Enum):
    """Kind of data file to load."""

    NUMBERS = 1
    WORDS = 2

    @property
    def filename(self) -> str:
        return "data_kata.txt" if self is DataKind.WORDS else "data_angka.txt"


@dataclass(frozen=True)
class Measurement:
    """Timing and memory figures of one sorting run."""

    name: str
    seconds: float
    memory_bytes: int
    theoretical_bytes: int


def _tokens(lines: Iterable[str]) -> Iterator[str]:
    for line in lines:
        yield from line.split()


def load_data(path: Union[str, Path], kind: DataKind, count: int) -> List[WordSum]:
    """Read up to ``count`` whitespace-separated records; stop at the first bad number."""
    items: List[WordSum] = []
    if count <= 0:
        return items
    with open(path, encoding="utf-8") as fh:
        for token in _tokens(fh):
            if kind is DataKind.WORDS:
                items.append(WordSum.from_word(token))
            else:
                match = _INTEGER.match(token)
                if match is None:
                    break
                items.append(WordSum.from_number(int(match.group())))
                if match.end() != len(token):
                    break
            if len(items) >= count:
                break
    return items


def theoretical_memory(name: str, n: int) -> int:
    """Bytes for ``n`` records, doubled for merge sort's auxiliary arrays."""
    memory = n * WORD_SUM_SIZE
    if name == "Merge Sort":
        memory += n * WORD_SUM_SIZE
    return memory


def measure(name: str, sort_func: SortFunc, items: Sequence[WordSum]) -> Measurement:
    """Sort a copy of ``items`` and record CPU time and net traced memory."""
    work = list(items)
    started_here = not tracemalloc.is_tracing()
    if started_here:
        tracemalloc.start()
    try:
        before, _ = tracemalloc.get_traced_memory()
        start = time.process_time()
        sort_func(work)
        end = time.process_time()
        after, _ = tracemalloc.get_traced_memory()
    finally:
        if started_here:
            tracemalloc.stop()
    return Measurement(name, end - start, after - before, theoretical_memory(name, len(work)))


def run_all(items: Sequence[WordSum]) -> Iterator[Measurement]:
    """Measure every algorithm in turn, each on its own copy of ``items``."""
    for name, sort_func in ALGORITHMS:
        yield measure(name, sort_func, items)


def format_measurement(measurement: Measurement) -> str:
    """One report line for a measurement."""
    return (
        f"{measurement.name:<15} | Waktu: {measurement.seconds:.4f} s | "
        f"Memori: {measurement.memory_bytes} bytes | "
        f"Memori Teoretis: {measurement.theoretical_bytes} bytes"
    )


def _ask(prompt: str) -> int:
    try:
        return int(input(prompt).strip())
    except EOFError as exc:
        raise ValueError("no input") from exc


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Compare sorting algorithms.")
    parser.add_argument("--kind", type=int, choices=(1, 2))
    parser.add_argument("--size", type=int, choices=range(1, len(SAMPLE_SIZES) + 1))
    parser.add_argument("--data-dir", type=Path, default=Path("."))
    args = parser.parse_args(argv)

    try:
        choice = args.kind if args.kind is not None else _ask(
            "Pilih jenis data:\n1. Angka\n2. Kata\nPilihan: "
        )
        size = args.size if args.size is not None else _ask(
            "\nPilih jumlah data:\n1. 10.000\n2. 50.000\n3. 100.000\n4. 250.000\n"
            "5. 500.000\n6. 1.000.000\n7. 1.500.000\n8. 2.000.000\nPilihan: "
        )
    except ValueError:
        print("Pilihan tidak valid")
        return 1
    if not 1 <= size <= len(SAMPLE_SIZES):
        print("Pilihan tidak valid")
        return 1

    n = SAMPLE_SIZES[size - 1]
    kind = DataKind.WORDS if choice == 2 else DataKind.NUMBERS
    try:
        items = load_data(args.data_dir / kind.filename, kind, n)
    except FileNotFoundError:
        print("File tidak ditemukan!")
        return 1

    print(f"\n=== HASIL EKSPERIMEN SORTING ({n} data) ===")
    print(f"{'Algoritma':<15} | {'Waktu (s)':<12} | {'Memori (bytes)':<18} | "
          f"{'Memori Teoretis (bytes)':<20}")
    print("-" * 60)
    for measurement in run_all(items):
        print(format_measurement(measurement))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())