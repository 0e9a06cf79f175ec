"""Read TSPLIB travelling salesman instances, build their distance matrices and cost tours."""

__version__ = "0.1.0"