# contestsolvers

Solvers for a set of contest problems, usable both as Python functions and
as command-line programs. The package has no dependencies beyond the
standard library.

Each command reads whitespace-separated integers and words from standard
input and prints the answer. Every `main(argv=None)` function can also be
called from Python with a list of those tokens instead of reading stdin.

## Installation

```
pip install .
```

For running the test suite:

```
pip install ".[test]"
pytest
```

## Problems

| Command          | Module                          | Function(s)                                     |
|------------------|---------------------------------|-------------------------------------------------|
| `zero-one-tree`  | `contestsolvers.zero_one_tree`  | `inversions_by_union`, `inversions_by_merging`  |
| `three-letter`   | `contestsolvers.three_letter`   | `min_operations`                                |
| `forty-two`      | `contestsolvers.forty_two`      | `longest_chain`                                 |
| `bishtar-as-k`   | `contestsolvers.bishtar_as_k`   | `count_orders`                                  |
| `go-home`        | `contestsolvers.go_home`        | `total_distance`                                |
| `modulo-pairing` | `contestsolvers.modulo_pairing` | `min_max_ugliness`                              |
| `blue-red-tree`  | `contestsolvers.blue_red_tree`  | `can_transform`                                 |
| `cigar-box`      | `contestsolvers.cigar_box`      | `count_sequences`                               |
| `abc-strings`    | `contestsolvers.abc_strings`    | `count_strings`                                 |

### zero_one_tree

The minimum number of inversions in the 0/1 sequence obtained by listing
the vertices of a rooted tree so that every vertex comes after its parent.
`parents` holds the 1-based parent of vertices 2..n and `values` the labels.
Two independent strategies give the same answer: `inversions_by_union`
(greedy merging of groups into their parents, lowest ones/zeros ratio first)
and `inversions_by_merging` (small-to-large merging of ordered blocks).
Malformed trees raise `ValueError`.

Input: `n`, then `n - 1` parents, then `n` labels. The command uses
`inversions_by_union`.

### three_letter

`min_operations(s, t)` returns the minimum total cyclic shifting needed to
turn a string over `A`, `B`, `C` into another of the same length. Unequal
lengths or other letters raise `ValueError`.

Input: `n`, `s`, `t`.

### forty_two

`longest_chain(values)` shifts every value down by 42 and returns the
largest chain length reachable with a nonnegative state.

Input: `n`, then `n` values.

### bishtar_as_k

`count_orders(values, k)` counts the distinct orders of the values under
the pairing rule relative to `k`, modulo 998244353.

Input: `n k`, then `n` values.

### go_home

`total_distance(start, positions, people)` returns the distance the bus
travels from `start` when the residents of the apartments at `positions`
(strictly increasing) vote on the direction. Mismatched or empty inputs
raise `ValueError`.

Input: `n s`, then `n` pairs `x p`.

### modulo_pairing

`min_max_ugliness(modulus, values)` returns the smallest possible maximum
of `(x + y) mod modulus` over a perfect pairing of the values. An odd
number of values raises `ValueError`.

Input: `N M`, then `2N` values.

### blue_red_tree

`can_transform(n, blue_edges, red_edges)` returns whether the blue tree on
vertices `1..n` can be rebuilt into the red tree by path swaps. Edges are
pairs of vertices; invalid trees raise `ValueError`. The command prints
`YES` or `NO`.

Input: `n`, then `n - 1` blue edges, then `n - 1` red edges.

### cigar_box

`count_sequences(values, moves)` counts, modulo 998244353, the sequences
of `moves` moves (each taking one element to the front or the back) that
turn the identity permutation into `values`. A negative number of moves
raises `ValueError`.

Input: `n m`, then the permutation.

### abc_strings

`count_strings(a, b, c)` counts, modulo 998244353, the strings with `a`
A's, `b` B's and `c` C's that contain none of `ABC`, `BCA`, `CAB` as a
substring. Negative counts raise `ValueError`.

Input: `A B C`.

## Examples

From the command line:

```
echo "3 ABC BCA" | three-letter
echo "1 1 1" | abc-strings
```

From Python:

```python
from contestsolvers.three_letter import min_operations
from contestsolvers.modulo_pairing import min_max_ugliness

print(min_operations("ABC", "BCA"))
print(min_max_ugliness(10, [0, 2, 3, 4, 5, 9]))
```