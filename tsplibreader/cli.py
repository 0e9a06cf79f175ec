"""Command that loads an instance and prints its matrix and a sample tour."""

from __future__ import annotations

import sys
from collections.abc import Sequence

from .instance import Instance, UnsupportedFormatError, read_instance


def tour_cost(instance: Instance, tour: Sequence[int]) -> float:
    """Cost of a closed tour over nodes numbered from 1."""
    if not tour:
        return 0.0
    legs = zip(tour, [*tour[1:], tour[0]])
    return sum((instance.distance(a, b) for a, b in legs), 0.0)


def main(argv: Sequence[str] | None = None) -> int:
    args = list(sys.argv[1:] if argv is None else argv)
    if not args:
        print("Missing parameters")
        print(" tsplibreader [Instance]")
        return 1
    if len(args) > 3:
        print("Too many parameters")
        print(" tsplibreader [Instance] [Upper Bound] [Search method]")
        return 1

    try:
        instance = read_instance(args[0])
    except FileNotFoundError:
        print("File not found")
        return 1
    except ValueError as error:
        print(error)
        return 1

    n = instance.dimension
    print(f"Dimension: {n}")
    print("DistanceMatrix: ")
    print(instance.format_matrix(), end="")

    tour = list(range(1, n + 1))
    shown = " -> ".join(str(node) for node in [*tour, tour[0]]) if tour else ""
    print(f"Exemplo de Solucao s = {shown}")
    print(f"Custo de S: {tour_cost(instance, tour):g}")
    return 0


__all__ = ["main", "tour_cost", "UnsupportedFormatError"]


if __name__ == "__main__":
    raise SystemExit(main())