"""Reading TSPLIB instances into a distance matrix."""

from __future__ import annotations

from dataclasses import dataclass, field
from collections.abc import Callable, Iterator

from .distances import euclidean, geo_distance, pseudo_euclidean, to_radians

_DIAGONAL_COST = 0.0


class UnsupportedFormatError(ValueError):
    """The instance uses an edge weight type or format that is not handled."""


@dataclass
class Instance:
    """A TSP instance: node count, distance matrix and optional coordinates."""

    path: str
    dimension: int
    matrix: list[list[float]]
    coordinates: list[tuple[float, float]] = field(default_factory=list)
    explicit_coord: bool = False

    @property
    def name(self) -> str:
        return instance_name(self.path)

    def _index(self, i: int) -> int:
        if not 1 <= i <= self.dimension:
            raise IndexError(f"node {i} is outside 1..{self.dimension}")
        return i - 1

    def distance(self, i: int, j: int) -> float:
        """Distance between nodes i and j, numbered from 1."""
        return self.matrix[self._index(i)][self._index(j)]

    def x(self, i: int) -> float:
        """X coordinate of node i, numbered from 1."""
        return self.coordinates[self._index(i)][0]

    def y(self, i: int) -> float:
        """Y coordinate of node i, numbered from 1."""
        return self.coordinates[self._index(i)][1]

    def format_matrix(self) -> str:
        """The distance matrix as text, one row per line."""
        return "".join("".join(f"{value:g} " for value in row) + "\n" for row in self.matrix)


def instance_name(path: str) -> str:
    """Base name of an instance file without its extension; empty if it has none."""
    dot = path.rfind(".")
    start = path.rfind("/") + 1
    if dot == -1:
        return ""
    if dot < start:
        return path[start:]
    return path[start:dot]


class _Tokens:
    def __init__(self, text: str) -> None:
        self._tokens = iter(text.split())

    def next(self) -> str:
        try:
            return next(self._tokens)
        except StopIteration:
            raise ValueError("unexpected end of instance data") from None

    def seek(self, *keywords: str) -> str:
        while True:
            token = self.next()
            if token in keywords:
                return token

    def header(self, key: str) -> str:
        if self.seek(key, key + ":") == key:
            self.next()
        return self.next()

    def number(self) -> float:
        token = self.next()
        try:
            return float(token)
        except ValueError:
            raise ValueError(f"expected a number, got {token!r}") from None


_CELL_ORDERS: dict[str, Callable[[int], Iterator[tuple[int, int]]]] = {
    "FULL_MATRIX": lambda n: ((i, j) for i in range(n) for j in range(n)),
    "UPPER_ROW": lambda n: ((i, j) for i in range(n) for j in range(i + 1, n)),
    "LOWER_ROW": lambda n: ((i, j) for i in range(1, n) for j in range(i)),
    "UPPER_DIAG_ROW": lambda n: ((i, j) for i in range(n) for j in range(i, n)),
    "LOWER_DIAG_ROW": lambda n: ((i, j) for i in range(n) for j in range(i + 1)),
    "UPPER_COL": lambda n: ((i, j) for j in range(1, n) for i in range(j)),
    "LOWER_COL": lambda n: ((i, j) for j in range(n) for i in range(j + 1, n)),
    "UPPER_DIAG_COL": lambda n: ((i, j) for j in range(n) for i in range(j + 1)),
    "LOWER_DIAG_COL": lambda n: ((i, j) for j in range(n) for i in range(j, n)),
}


def _read_explicit(tokens: _Tokens, n: int) -> list[list[float]]:
    weight_format = tokens.header("EDGE_WEIGHT_FORMAT")
    order = _CELL_ORDERS.get(weight_format)
    if order is None:
        raise UnsupportedFormatError(f"{weight_format} is not supported")
    tokens.seek("EDGE_WEIGHT_SECTION")
    full = weight_format == "FULL_MATRIX"
    matrix = [[0.0] * n for _ in range(n)]
    for i, j in order(n):
        value = tokens.number()
        matrix[i][j] = value
        if not full:
            matrix[j][i] = value
    for i in range(n):
        matrix[i][i] = _DIAGONAL_COST
    return matrix


def _read_coordinates(tokens: _Tokens, n: int, whole: bool = False) -> list[tuple[float, float]]:
    tokens.seek("NODE_COORD_SECTION")
    coordinates = []
    for _ in range(n):
        tokens.next()
        x, y = tokens.number(), tokens.number()
        if whole:
            x, y = float(int(x)), float(int(y))
        coordinates.append((x, y))
    return coordinates


def _matrix_from(points: list[tuple[float, float]], metric: Callable) -> list[list[float]]:
    return [
        [_DIAGONAL_COST if i == j else metric(a, b) for j, b in enumerate(points)]
        for i, a in enumerate(points)
    ]


def parse(text: str, path: str = "") -> Instance:
    """Parse the text of a TSPLIB instance."""
    tokens = _Tokens(text)
    raw_dimension = tokens.header("DIMENSION")
    try:
        dimension = int(raw_dimension)
    except ValueError:
        raise ValueError(f"invalid dimension {raw_dimension!r}") from None
    if dimension < 0:
        raise ValueError(f"invalid dimension {dimension}")
    weight_type = tokens.header("EDGE_WEIGHT_TYPE")

    if weight_type == "EXPLICIT":
        return Instance(path, dimension, _read_explicit(tokens, dimension))

    if weight_type == "EUC_2D":
        coords = _read_coordinates(tokens, dimension)
        matrix = _matrix_from(coords, lambda a, b: float(int(euclidean(a, b) + 0.5)))
    elif weight_type == "CEIL_2D":
        coords = _read_coordinates(tokens, dimension)
        matrix = _matrix_from(coords, lambda a, b: float(-int(-euclidean(a, b) // 1)))
    elif weight_type == "GEO":
        coords = _read_coordinates(tokens, dimension)
        radians = [(to_radians(x), to_radians(y)) for x, y in coords]
        matrix = _matrix_from(radians, geo_distance)
    elif weight_type == "ATT":
        coords = _read_coordinates(tokens, dimension, whole=True)
        matrix = _matrix_from(coords, pseudo_euclidean)
    else:
        raise UnsupportedFormatError(f"{weight_type} is not supported")
    return Instance(path, dimension, matrix, coords, explicit_coord=True)


def read_instance(path: str) -> Instance:
    """Read a TSPLIB instance file."""
    with open(path, encoding="utf-8") as handle:
        return parse(handle.read(), path)