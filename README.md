# katas

Small, self-contained solutions to classic programming exercises, written as
an ordinary Python library. It has no dependencies beyond the standard
library.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Modules

| Module | Contents |
| --- | --- |
| `katas.words` | `accumulate`, `abbreviate`, `hey`, `transform`, `hello_world`, `is_isogram`, `is_pangram`, `proverb`, `raindrops`, `reverse`, `scrabble_score`, `share_with` |
| `katas.sequences` | `hamming_distance`, `luhn_valid`, `brackets_balanced`, `all_series`, `unsafe_first`, `first`, `to_rna`, `from_codon`, `from_rna`, `largest_series_product`, `handshake`, and the exceptions `StopCodon` and `InvalidCodonError` |
| `katas.numbers` | `collatz_steps`, `square_of_sum`, `sum_of_squares`, `difference`, `grains_square`, `grains_total`, `is_leap_year`, `sieve`, `sum_multiples`, `is_square`, `pythagorean_range`, `pythagorean_sum`, `kind_from_sides`, `age`, and the enums `TriangleKind` and `Planet` |
| `katas.clock` | `Clock`, a time of day with minute precision that wraps around midnight, and `add_gigasecond` for `datetime` values |
| `katas.crypto` | Diffie-Hellman helpers (`private_key`, `public_key`, `secret_key`, `new_pair`) and the square code cipher (`prepare_string`, `find_rect_size`, `encode`) |
| `katas.linked_list` | `LinkedList`, a doubly linked list with push and pop at both ends, in-place `reverse` and iteration; its `Node` objects; `EmptyListError` |
| `katas.search_tree` | `SearchTree`, a binary search tree of integers that iterates in ascending order, with `map_string` and `map_int` |
| `katas.tree_building` | `Record`, `Node` and `build`, which turns `(id, parent)` records into a tree |
| `katas.tournament` | `tally`, which reads match results from a text stream and writes a league table, and `TeamStats` |
| `katas.robots` | `Robot`, `NamePool` and `NameExhaustedError`: robots get random names of the form `AB123`, never handed out twice by the same pool |
| `katas.concurrency` | `add_range`, `add_concurrent` (sums a range in chunks on a thread pool), the generator pipeline `generate` / `square` / `consume`, and `frequency` / `concurrent_frequency` for character counts |

## Examples

```python
from katas.words import abbreviate, hey
from katas.numbers import sieve
from katas.clock import Clock

abbreviate("Portable Network Graphics")   # "PNG"
hey("WHAT THE HELL WERE YOU THINKING?")   # "Calm down, I know what I'm doing!"
sieve(10)                                 # [2, 3, 5, 7]
str(Clock(10, 30).add(30))                # "11:00"
Clock(24, 0) == Clock(0, 0)               # True
```

A tournament table is read from one text stream and written to another.
Blank lines and lines starting with `#` are skipped:

```python
import io
from katas.tournament import tally

out = io.StringIO()
tally(io.StringIO("Alpha;Beta;win\n"), out)
print(out.getvalue())
```

Robots share one name pool unless they are given their own; a seeded pool
gives repeatable names:

```python
from katas.robots import NamePool, Robot

pool = NamePool(seed=1)
robot = Robot(pool)
robot.name()    # e.g. "QK482"; stays the same until robot.reset()
```

## Errors

Errors are raised as exceptions:

- `hamming_distance` raises `ValueError` for strands of different lengths.
- `largest_series_product`, `collatz_steps`, `grains_square` and
  `tree_building.build` raise `ValueError` for invalid input; so does
  `tournament.tally` for a malformed line, before anything is written.
- `from_codon` raises `StopCodon` for a stop codon and `InvalidCodonError`
  for an unknown one; `from_rna` stops at a stop codon and raises
  `InvalidCodonError`, carrying the proteins read so far in `translated`.
- `LinkedList.pop_front` and `pop_back` raise `EmptyListError` on an empty list.
- `NamePool.draw` raises `NameExhaustedError` once all 676,000 names are used.

## What it does not do

This is a library only: there is no command-line program. The
Diffie-Hellman helpers are exercises, not a vetted cryptographic
implementation.