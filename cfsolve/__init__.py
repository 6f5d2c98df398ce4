"""Solvers for classic programming-contest puzzles, with a small command line."""

__version__ = "0.1.0"
__all__ = ["numbers", "primes", "strings", "sequences", "registry", "cli"]