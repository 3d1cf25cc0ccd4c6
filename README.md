# sortbench

sortbench measures six classic sorting algorithms on the same data. The
algorithms are merge sort, quick sort, shell sort, insertion sort, bubble sort
and selection sort. For each one it reports the CPU time and the memory
allocated during the sort.

The data is either integers or lowercase words. Every item is a `WordSum`
record, and all comparisons use its `sum` field. A word's `sum` is weighted: the
code of each character is multiplied by the character's 1-based position, and
the results are added together.

## Installation

```
pip install .
```

To run the test suite, install the `test` extra:

```
pip install ".[test]"
pytest
```

## Generating data

`sortbench-generate` writes one data file per run. Its positional argument
chooses the kind of data.

```
sortbench-generate angka
sortbench-generate kata
```

- `angka` writes `data_angka.txt`. The file holds random integers in `[0, max)`, one per line. The default `max` is 2,000,000.
- `kata` writes `data_kata.txt`. The file holds random lowercase words, one per line. Each word is between 3 and `max - 1` letters long. The default `max` is 20, and `max` must be greater than 3 and no more than 100.

Options:

- `--count N`: how many lines to write. The default is 2,000,000.
- `--max N`: the upper bound described above.
- `--output PATH`: write to another file instead of the default name.
- `--seed N`: seed the random generator so that the output can be reproduced.

If the file cannot be opened, or an option value is invalid, the command prints
an error and exits with status 1.

## Running the benchmark

```
sortbench
```

The command asks two questions:

- the kind of data: `1` for numbers, `2` for words;
- the number of items, as a menu choice from 1 to 8. The choices stand for 10,000, 50,000, 100,000, 250,000, 500,000, 1,000,000, 1,500,000 and 2,000,000 items.

The same choices can be given as options, in which case the command does not
ask for them:

```
sortbench --kind 2 --size 1 --data-dir path/to/data
```

The command reads `data_angka.txt` or `data_kata.txt` from `--data-dir`, which
defaults to the current directory. It reads up to the chosen number of items.
For numbers, reading stops at the first token that is not an integer.

Each algorithm sorts its own copy of the data. For each one the command prints
three figures:

- the CPU time;
- the net memory allocated during the sort, as traced by `tracemalloc`;
- a theoretical figure of 16 bytes per item, doubled for merge sort.

A missing data file or an invalid menu choice ends the command with status 1.
Bubble, selection and insertion sort are quadratic, so on the larger sizes they
take a very long time.

## Library use

```python
from sortbench.sorting import WordSum, merge_sort, format_items
from sortbench.benchmark import run_all, format_measurement

items = [WordSum.from_word(w) for w in ["pear", "fig", "apple"]]

for result in run_all(items):
    print(format_measurement(result))

merge_sort(items)
print(format_items(items))
```

Each sorting function (`bubble_sort`, `selection_sort`, `insertion_sort`,
`merge_sort`, `quick_sort`, `shell_sort`) sorts the list it is given in place
and returns `None`.

The `sortbench.benchmark` module also provides:

- `load_data(path, kind, count)`, which reads a data file, with `kind` a `DataKind` value;
- `measure(name, sort_func, items)`, which sorts a copy of `items` and returns a `Measurement`;
- `theoretical_memory(name, n)`, which computes the theoretical memory figure.