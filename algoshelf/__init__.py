"""Classic data structures and algorithms in plain Python: lists, queues, stacks,
heaps, search trees, union-find, graphs, tries, suffix arrays and dynamic programming."""

__version__ = "0.1.0"

__all__ = ["__version__"]