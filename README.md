# tsplibreader

Reads travelling salesman instances in the TSPLIB format and turns them into
full distance matrices. It has no dependencies outside the standard library.

## Supported edge weight types

- `EXPLICIT`, with the formats `FULL_MATRIX`, `UPPER_ROW`, `LOWER_ROW`,
  `UPPER_DIAG_ROW`, `LOWER_DIAG_ROW`, `UPPER_COL`, `LOWER_COL`,
  `UPPER_DIAG_COL` and `LOWER_DIAG_COL`
- `EUC_2D`, where Euclidean distances are rounded to the nearest integer
- `CEIL_2D`, where Euclidean distances are rounded up
- `GEO`, geographical distances in kilometres, from `DDD.MM` coordinates
- `ATT`, the pseudo-Euclidean distance; coordinates are truncated to whole
  numbers

Any other edge weight type, or any other `EDGE_WEIGHT_FORMAT` (such as
`FUNCTION`), raises `tsplibreader.instance.UnsupportedFormatError`, a subclass
of `ValueError`. Malformed data (a missing section, a bad dimension, a
non-numeric value, or text that ends too soon) raises `ValueError`.

On the diagonal of every matrix the distance from a city to itself is `0`,
whatever the file says there.

## Installation

```
pip install .
```

## Command line

```
tsplibreader path/to/berlin52.tsp
```

The same command can be run as `python -m tsplibreader.cli`. It takes the
instance path and accepts up to two further arguments, which it ignores; more
than that is an error. It prints:

```
Dimension: <n>
DistanceMatrix: 
<the matrix, one row per line>
Exemplo de Solucao s = 1 -> 2 -> ... -> n -> 1
Custo de S: <cost of that tour>
```

With no arguments, too many arguments, a missing file, or an instance it
cannot read, it prints a message and exits with status 1.

## Library

```python
from tsplibreader.instance import read_instance, instance_name, parse
from tsplibreader.cli import tour_cost

inst = read_instance("berlin52.tsp")
print(inst.dimension)
print(inst.name)                            # same as instance_name(inst.path)
print(instance_name("data/berlin52.tsp"))   # "berlin52"
print(inst.distance(1, 2))                  # cities are numbered from 1
print(inst.x(1), inst.y(1))                 # coordinates, for coordinate-based types
print(inst.format_matrix())
print(tour_cost(inst, [1, 2, 3]))           # includes the edge back to the start
```

`read_instance(path)` reads a file; `parse(text, path)` does the same for text
already in memory. An `Instance` holds `path`, `dimension`, `matrix` (a list of
rows), `coordinates` (a list of `(x, y)` pairs, empty for `EXPLICIT`
instances) and `explicit_coord`, which is true when the instance was built
from node coordinates. Node numbers outside `1..dimension` raise `IndexError`.

`instance_name` returns the last path component without its extension, and an
empty string for a path with no `.` in it at all.

The distance functions are available on their own in `tsplibreader.distances`:
`euclidean`, `pseudo_euclidean`, `to_radians` and `geo_distance`.

## What it does not do

This package only reads instances and evaluates tours. It does not search for
good tours: there is no heuristic or solver, and the command only prints the
cost of the tour that visits the cities in numbered order.

## Tests

```
pip install .[test]
pytest
```