# contestkit

A small collection of algorithms and data structures of the kind that come up
again and again in programming contests. It has no runtime dependencies and
needs Python 3.10 or later.

## Installation

```
pip install .
```

For the test suite:

```
pip install ".[test]"
pytest
```

## What is inside

| Module | Contents |
| --- | --- |
| `contestkit.binary_search` | `lower_bound`, `upper_bound` on sorted sequences |
| `contestkit.fenwick` | `FenwickTree`: point additions and prefix sums in O(log n) |
| `contestkit.union_find` | `UnionFind`: disjoint sets with path compression and union by size |
| `contestkit.dijkstra` | `Edge`, `dijkstra`, `INF`: single-source shortest paths |
| `contestkit.topological_sort` | `topological_sort`: the lexicographically smallest topological order |
| `contestkit.prime` | `is_prime`, `prime_factorize`, `Eratosthenes` sieve |
| `contestkit.run_length` | `run_length_encoding`, `run_length_decoding` |
| `contestkit.grid` | `rotate90`: rotate a 2-D grid a quarter turn clockwise |
| `contestkit.formatting` | `display`: join items with single spaces |
| `contestkit.annealing` | `SimulatedAnnealing` with linear and exponential cooling schedules |

The package is a library only; it installs no command-line programs.

## Examples

### Binary search

```python
from contestkit.binary_search import lower_bound, upper_bound

data = [1, 2, 3, 3, 3, 4, 5]
lower_bound(data, 3)  # 2, first index not less than 3
upper_bound(data, 3)  # 5, first index greater than 3
```

### Fenwick tree

Positions are numbered from 1 to `n`. `sum(i)` is the sum of positions 1 to
`i`; `sum_range(start, end)` covers `start` to `end - 1`. Positions out of
range raise `IndexError`.

```python
from contestkit.fenwick import FenwickTree

tree = FenwickTree(5)
tree.add(2, 3)
tree.add(4, 5)
tree.sum(3)           # 3
tree.sum(5)           # 8
tree.sum_range(3, 5)  # 5
len(tree)             # 5
```

### Union-find

```python
from contestkit.union_find import UnionFind

uf = UnionFind(4)
uf.merge(0, 1)
uf.merge(1, 2)
uf.same(0, 2)      # True
uf.size(0)         # 3
uf.make_groups()   # [[0, 1, 2], [3]]
```

Elements outside `0 .. size - 1` raise `IndexError`.

### Shortest paths

```python
from contestkit.dijkstra import Edge, dijkstra

graph = [[] for _ in range(3)]
graph[0].append(Edge(1, 4))
graph[0].append(Edge(2, 1))
graph[2].append(Edge(1, 2))
dijkstra(graph, 0)  # [0, 3, 1]
```

Vertices that cannot be reached get the distance `INF` (`1 << 60`).

### Topological sort

`topological_sort(graph, in_degree)` takes adjacency lists and the in-degree
of every vertex, and always emits the smallest vertex that is ready. The
`in_degree` argument is not modified. Vertices on a cycle never become ready
and are left out of the result.

```python
from contestkit.topological_sort import topological_sort

graph = [[2], [2], []]
topological_sort(graph, [0, 0, 2])  # [0, 1, 2]
```

### Primes

```python
from contestkit.prime import Eratosthenes, is_prime, prime_factorize

is_prime(7)                          # True
prime_factorize(360)                 # [(2, 3), (3, 2), (5, 1)]
sieve = Eratosthenes(20)
sieve.is_prime(17)                   # True
sieve.get_primes(10, 20)             # [11, 13, 17, 19]
```

`Eratosthenes(n)` needs `n >= 1` (otherwise `ValueError`), and asking it
about a number outside `0 .. n` raises `IndexError`.

### Run-length encoding

```python
from contestkit.run_length import run_length_encoding, run_length_decoding

run_length_encoding("aaabcc")              # [('a', 3), ('b', 1), ('c', 2)]
run_length_decoding([("x", 2), ("y", 1)])  # 'xxy'
```

### Grids and output

```python
from contestkit.formatting import display
from contestkit.grid import rotate90

rotate90([[1, 2, 3], [4, 5, 6]])  # [[4, 1], [5, 2], [6, 3]]
display([1, 2, 3, 4])             # '1 2 3 4'
```

`rotate90` raises `ValueError` if the rows differ in length.

### Simulated annealing

Describe a problem by subclassing `State` with a `score()` method, a
`neighbor(rng)` method that returns a new state, and a class attribute
`IS_MAXIMIZING`. Then build a `SimulatedAnnealing` with one of the
constructors:

- `with_linear_schedule(max_iterations, start_temp, end_temp)`
- `with_linear_schedule_and_time_limit(max_iterations, time_limit_ms, start_temp, end_temp)`
- `with_exponential_schedule(max_iterations, start_temp, decay_rate)`
- `with_exponential_schedule_and_time_limit(max_iterations, time_limit_ms, start_temp, decay_rate)`

or directly from an `AnnealingConfig` and a `LinearSchedule`,
`ExponentialSchedule` or your own `TemperatureSchedule`.

```python
import random
from contestkit.annealing import SimulatedAnnealing, State

class Square(State):
    IS_MAXIMIZING = False

    def __init__(self, value):
        self.value = value

    def score(self):
        return self.value * self.value

    def neighbor(self, rng):
        return Square(max(-100, min(100, self.value + rng.randint(-5, 5))))

annealer = SimulatedAnnealing.with_linear_schedule_and_time_limit(1_000_000, 100, 10.0, 0.1)
result = annealer.run(Square(50), random.Random())
print(result.best_score, result.iterations, result.elapsed_ms)
```

`run` returns an `AnnealingResult` holding `best_state`, `best_score`,
`iterations` and `elapsed_ms`. Better or equal neighbours are always accepted;
worse ones are accepted with probability `exp(-delta / temperature)`, and
never at temperature zero.