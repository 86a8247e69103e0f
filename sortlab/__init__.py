"""Classic sorting algorithms, a max-heap, an indexed max-heap and helpers for timing them."""

__version__ = "0.1.0"

__all__ = [
    "benchmark",
    "elementary",
    "heap",
    "heapsort",
    "helpers",
    "index_heap",
    "merge",
    "quick",
    "student",
]