"""Random data generation and time and memory comparison of classic sorting algorithms."""

__version__ = "0.1.0"
__all__ = ["sorting", "generate", "benchmark"]