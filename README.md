# algokit

A small collection of classic sorting and string algorithms written in plain
Python, with no third-party dependencies. It is a library only: there is no
command-line tool.

## Installation

```
pip install .
```

## Sorting

Most sorting functions sort a mutable sequence (such as a list) in place and
return `None`. `gnome_sort` and `bucket_sort` instead return a new sorted
list and leave their input alone.

```python
from algokit.sorting.checks import is_sorted
from algokit.sorting.exchange import gnome_sort
from algokit.sorting.selection import heap_sort

data = [6, 5, 4, 3, 2, 1]
heap_sort(data)
assert is_sorted(data)

assert gnome_sort([6, 5, -8, 3, 2, 3]) == [-8, 2, 3, 3, 5, 6]
```

Modules and functions:

- `algokit.sorting.checks`: `is_sorted(arr)` returns `True` when no element
  is greater than the one after it.
- `algokit.sorting.exchange`: `bubble_sort`, `cocktail_shaker_sort`,
  `comb_sort` (gap shrink factor 1.3), `gnome_sort` (returns a new list),
  `odd_even_sort`, `stooge_sort`.
- `algokit.sorting.insertion`: `insertion_sort`, `shell_sort` (the gap
  starts at half the length and is halved each round).
- `algokit.sorting.selection`: `selection_sort`, `heap_sort`.
- `algokit.sorting.distribution`:
  - `bucket_sort(arr)` returns a new sorted list of non-negative integers.
    A non-empty input whose largest value is zero raises
    `ZeroDivisionError`.
  - `counting_sort(arr, maxval)` sorts integers in `0..maxval` in place;
    a value outside that range raises `ValueError`.
  - `generic_counting_sort(arr, maxval)` does the same for any objects
    usable as integers (`int`, `bool`, or types with `__index__`), keeping
    the elements themselves.
  - `radix_sort(arr)` sorts non-negative integers in place with a radix of
    the smallest power of two not below `len(arr)`; negative values raise
    `ValueError`.
- `algokit.sorting.merging`:
  - `merge_sort(arr)` and `quick_sort(arr)` sort in place.
  - `partition(arr, lo, hi)` partitions `arr[lo:hi + 1]` around the pivot
    `arr[hi]` and returns the pivot's final index.
  - `tim_sort(arr, n)` sorts the first `n` elements of `arr` in place;
    `n` outside `0..len(arr)` raises `ValueError`.

## Strings

```python
from algokit.strings.aho_corasick import AhoCorasick
from algokit.strings.matching import knuth_morris_pratt, rabin_karp, rolling_hash
from algokit.strings.palindrome import manacher
from algokit.strings.transforms import (
    burrows_wheeler_transform,
    inv_burrows_wheeler_transform,
    reverse,
)

assert knuth_morris_pratt("abababa", "ab") == [0, 2, 4]
assert rabin_karp("aaa", "a") == [0, 1, 2]

ac = AhoCorasick(["abc", "xyz"])
assert ac.search("abcxyz") == ["abc", "xyz"]

encoded, index = burrows_wheeler_transform("CARROT")
assert inv_burrows_wheeler_transform(encoded, index) == "CARROT"

assert manacher("babad") == "aba"
assert reverse("stressed") == "desserts"
```

Modules and functions:

- `algokit.strings.matching`:
  - `knuth_morris_pratt(text, pattern)` and `rabin_karp(target, pattern)`
    return the start index of every occurrence, overlapping ones included.
    An empty text or pattern gives no matches.
  - `rolling_hash(s)` is the modulo-101 hash used by `rabin_karp`; an
    empty string raises `ValueError`.
- `algokit.strings.aho_corasick`: `AhoCorasick(words)` builds an automaton
  over a set of words; `search(text)` returns every matched word, ordered
  by where it ends in `text`.
- `algokit.strings.transforms`:
  - `burrows_wheeler_transform(text)` returns the encoded string and the
    row index of `text`; rotations are ordered case-insensitively.
  - `inv_burrows_wheeler_transform(encoded, index)` recovers the original.
  - `reverse(text)` returns the characters in reverse order.
- `algokit.strings.palindrome`: `manacher(s)` returns the longest
  palindromic substring; among equally long ones the rightmost wins.

## Running the tests

```
pip install .[test]
pytest
```