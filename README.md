# contestlib

A pure-Python collection of algorithms and data structures of the kind used in
competitive programming. It depends on nothing beyond the standard library.

## Installation

```
pip install contestlib
```

To run the test suite:

```
pip install "contestlib[test]"
pytest
```

## What is inside

| Module | Contents |
| --- | --- |
| `contestlib.modnum` | `ModNum` modular integers (`modnum_type(mod)`), `PairNum`, `ModConstraint` (congruence merge with `&`), `extended_gcd`, `mod_inv`, `mod_inv_in_range`, `power` |
| `contestlib.bm` | `berlekamp_massey` and `linear_rec` for linear recurrences |
| `contestlib.jacobi` | `is_qr_jacobi` (Jacobi symbol test) |
| `contestlib.nimber` | `NimProduct` and `nim_prod` for nim multiplication of 64-bit values |
| `contestlib.lattice_cnt` | `lattice_cnt`, `mod_count`, `mod_count_range` |
| `contestlib.comparators` | `reverse_comparator` |
| `contestlib.cnt_min` | `CntMin` (minimum with multiplicity) and `cnt_max` |
| `contestlib.alphabetic_huffman_code` | Garsia–Wachs optimal alphabetic code depths, `binary_code_depths_to_lca_depths` |
| `contestlib.bit` | `BinaryIndexedTree` with prefix/suffix index walks |
| `contestlib.cartesian_tree` | `CartesianTree.build_min_tree` / `build_max_tree` |
| `contestlib.manacher` | `manacher`, `manacher_odd` palindrome lengths and radii |
| `contestlib.rmq` | `RangeMinQuery`, `RangeMaxQuery` |
| `contestlib.suffix_array` | `SuffixArray` (prefix-doubling construction) with LCP queries, `PrefixArray` |
| `contestlib.perm_tree` | `PermTree`, `PermTreeNode`, `NodeType` |
| `contestlib.level_ancestor` | `LevelAncestor` with `get_ancestor`, `lca`, `dist` |
| `contestlib.make_st_dag` | `make_st_dag`: a topological order with a single source and sink |
| `contestlib.char_poly` | `char_poly` over a field, `char_poly_f2` over GF(2) |
| `contestlib.fft` | NTT, floating and split-modulus convolution (`fft_multiply`, `fft_double_multiply`, `fft_mod_multiply`, their `_square` and `_inverse` forms), `series_inverse` |
| `contestlib.power_series` | `PowerSeries` (inverse, log, exp, pow, Newton sums, Euler transform), `OnlineMultiplier`, `OnlineSquarer` |
| `contestlib.point` | 2D `Point` and vector helpers (`dot`, `cross`, `cmul`, `angle_less`, ...) |
| `contestlib.quaternion` | `HurwitzQuaternion`, `right_div`, `right_gcd` |
| `contestlib.tensor` | `Tensor` and `TensorView` multi-dimensional arrays |

## Examples

Modular arithmetic and linear recurrences:

```python
from contestlib.modnum import modnum_type
from contestlib.bm import berlekamp_massey, linear_rec

Mod = modnum_type(10**9 + 7)
fib = [Mod(v) for v in (0, 1, 1, 2, 3, 5, 8, 13)]
tr = berlekamp_massey(fib)
print([int(x) for x in tr])         # [1, 1]
print(linear_rec(fib, tr, 1000))    # 517691607
```

Combining congruences:

```python
from contestlib.modnum import ModConstraint

r = ModConstraint(2, 3) & ModConstraint(3, 5)
print(r.v, r.mod)  # 8 15
```

Range minimum queries (inclusive bounds):

```python
from contestlib.rmq import RangeMinQuery

rmq = RangeMinQuery([5, 2, 7, 1, 9])
print(rmq.query(0, 2))  # 2
```

Suffix arrays and longest common prefixes:

```python
from contestlib.suffix_array import SuffixArray

sa = SuffixArray.sort_and_construct("banana")
print(sa.sa)              # [6, 5, 3, 1, 0, 4, 2]; the empty suffix comes first
print(sa.get_lcp(1, 3))   # 3 ("ana")
```

Ancestors in a rooted forest given by a parent array:

```python
from contestlib.level_ancestor import LevelAncestor

la = LevelAncestor([-1, 0, 0, 1, 1])
print(la.get_ancestor(3, 2))  # 0
print(la.lca(3, 4))           # 1
print(la.dist(3, 2))          # 3
```

Polynomial convolution modulo 998244353:

```python
from contestlib.fft import fft_multiply
from contestlib.modnum import modnum_type

M = modnum_type(998244353)
print([int(x) for x in fft_multiply([M(1), M(2)], [M(3), M(4)])])  # [3, 10, 8]
```

## Conventions

Ranges are half-open unless a function says otherwise; `RangeMinQuery.query`
uses inclusive bounds. Where an input breaks a precondition, such as a
non-invertible value or an out-of-range index, the functions raise
`ValueError` or `IndexError`.

## What it does not include

contestlib is a library only; it has no command-line tool. It offers no
network-flow or min-cost-flow solvers, no segment tree layouts, no 3D
geometry and no link-cut trees.