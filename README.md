# algozoo

A compact collection of textbook algorithms written in plain Python, with no
third-party dependencies. It is meant for reading, experimenting and teaching.

## What is inside

| Module             | Contents                                                        |
|--------------------|-----------------------------------------------------------------|
| `algozoo.numbers`  | `is_prime`, `factorial`, `fibonacci`, `gcd`, `lcm`              |
| `algozoo.rsa`      | `modpow`, `private_exponent`, `generate_keypair`, `KeyPair`     |
| `algozoo.numeric`  | `dft_magnitudes`, `euler`, `runge_kutta`, `newton`, `gauss`     |
| `algozoo.dynamic`  | `knapsack`, `lcs_length`, `subset_sum`                          |
| `algozoo.graph`    | `a_star_path`, `mark_path`, `dijkstra`                          |
| `algozoo.search`   | `bfs_distance`, `dfs_distance`, `binary_search`, `linear_search`|
| `algozoo.sorting`  | `bubble_sort`, `counting_sort`, `insertion_sort`, `merge_sort`, `quick_sort`, `selection_sort` |
| `algozoo.cli`      | `main`, the entry point of the `algozoo` command                |

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Using the library

```python
import math

from algozoo.numbers import gcd, is_prime
from algozoo.dynamic import knapsack, subset_sum
from algozoo.graph import a_star_path, dijkstra, mark_path
from algozoo.rsa import generate_keypair
from algozoo.sorting import merge_sort

is_prime(7919)                               # True
gcd(12, 18)                                  # 6

knapsack(5, [2, 2, 3, 1], [3, 2, 4, 2])      # 7
subset_sum([3, 21, 4, 13, 5, 1, 2], 9)       # True

INF = math.inf
graph = [
    [0, 10, INF, INF, 5],
    [INF, 0, 1, INF, 2],
    [INF, INF, 0, 4, INF],
    [7, INF, 6, 0, INF],
    [INF, 3, 9, 2, 0],
]
dijkstra(graph, 0)                           # [0, 8, 9, 7, 5]

keys = generate_keypair(7919, 1009, 5)
keys.decrypt(keys.encrypt(123))              # 123

merge_sort([9, 1, 8, 2, 7, 3, 6, 4, 5])      # [1, 2, 3, 4, 5, 6, 7, 8, 9]
```

Some behaviour worth knowing:

- The sorting functions accept any iterable and return a new list; the input
  is left untouched. `counting_sort` takes integers only.
- `binary_search`, `linear_search`, `bfs_distance` and `dfs_distance` return
  `None` when there is nothing to find.
- In `dijkstra`, `math.inf` marks a missing edge, and unreachable vertices get
  `math.inf` as their distance.
- Grid searches (`bfs_distance`, `dfs_distance`, `a_star_path`) take a maze as
  a list of strings, with `S` for the start, `G` for the goal and `#` for
  walls. Moves go up, down, left and right. `a_star_path` returns the cells of
  the path from start to goal (empty if the goal cannot be reached), and
  `mark_path` returns a copy of the grid with the `.` cells of that path drawn
  as `*`. `dfs_distance` tries every simple path and suits small grids only.
- `euler` and `runge_kutta` integrate `dy/dx = f(x, y)`; by default from
  `x = 0`, `y = 1` to `x = 1` with step `0.001`.
- `newton` stops once a step moves less than `tolerance` or after `max_iter`
  steps. `gauss` solves a square linear system with partial pivoting and
  raises `ValueError` on a singular matrix.

## Command line

Installing the package provides an `algozoo` command:

```
algozoo prime 7919              # prime
algozoo factorial 10            # 3628800
algozoo fibonacci 20            # 6765
algozoo gcd 12 18               # 6
algozoo lcm 4 6                 # 12
algozoo dft 1 0 0 0             # one magnitude per line
algozoo lcs abcde ace           # 3
algozoo binary-search 7         # 6
algozoo linear-search 7         # 4
```

`binary-search` looks in `1 2 3 4 5 6 7 8 9` and `linear-search` in
`9 1 8 2 7 3 6 4 5` unless other integers are given with `--items`; both print
`-1` when the target is absent. Invalid input, such as a negative factorial or
the lcm of two zeros, is reported on standard error with exit status 1.

List everything the command offers with:

```
algozoo --help
```

## What the command does not do

The command covers the number routines, the DFT, the longest common
subsequence and the two list searches. Sorting, graph and grid searches,
knapsack, subset sum, RSA, the ODE integrators, Newton's method and Gaussian
elimination are available from Python only. The command takes its input from
its arguments and does not read standard input.