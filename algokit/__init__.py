"""Classic algorithms and small data structures: linked lists, trees, search,
containers, arrays, stacks, hashing and prefix sums."""

__version__ = "0.1.0"